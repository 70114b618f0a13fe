"""
Corpus archive reader.

Walks a mirrored Gutenberg tree for zip archives and reads the book text
out of each one.

Dependencies: zipfile (stdlib), bookchunker.configs
System role: Raw text source for the ingestion service
"""

import logging
import zipfile
from pathlib import Path
from typing import Iterator

from bookchunker.configs import IngestionSettings, get_settings
from bookchunker.core.exceptions import ArchiveError
from bookchunker.models.document import ArchiveEntry

logger = logging.getLogger(__name__)


class ArchiveReader:
    """Locate corpus archives and read their text entry."""

    def __init__(self, settings: IngestionSettings | None = None) -> None:
        """
        Initialize reader.

        Args:
            settings: Ingestion settings (uses application settings if None)
        """
        self._settings = settings or get_settings().ingestion

    def is_candidate(self, path: Path) -> bool:
        """Whether a file name looks like a primary book archive."""
        name = path.name
        if not name.endswith(self._settings.archive_suffix):
            return False
        return not any(name.endswith(suffix) for suffix in self._settings.skip_suffixes)

    def iter_archives(self, root: str | Path) -> Iterator[Path]:
        """
        Yield candidate archives under a directory tree in path order.

        Args:
            root: Corpus root directory

        Yields:
            Path: Archive file paths

        Raises:
            ArchiveError: Root does not exist or is not a directory
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise ArchiveError("Corpus root is not a directory", path=str(root_path))

        for path in sorted(root_path.rglob(f"*{self._settings.archive_suffix}")):
            if path.is_file() and self.is_candidate(path):
                yield path

    def read_first_text_entry(self, path: str | Path) -> ArchiveEntry | None:
        """
        Read the book text from an archive.

        Only the archive's first entry is ever ingested, and only when it
        is a text file. Non-text entries are logged and skipped.

        Args:
            path: Archive path

        Returns:
            ArchiveEntry | None: Decoded first entry, None if it is not text

        Raises:
            ArchiveError: Archive is corrupt or unreadable
        """
        try:
            with zipfile.ZipFile(path) as archive:
                for index, info in enumerate(archive.infolist()):
                    if not info.filename.endswith(self._settings.entry_suffix):
                        logger.info(
                            f"{__name__}:read_first_text_entry - Skipping {info.filename}",
                            extra={"archive_path": str(path)},
                        )
                        continue
                    if index > 0:
                        break

                    raw = archive.read(info)
                    return ArchiveEntry(
                        archive_path=str(path),
                        filename=info.filename,
                        content=raw.decode(self._settings.encoding, errors="replace"),
                    )
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveError(
                f"Could not read archive: {type(e).__name__}: {e}",
                path=str(path),
            ) from e

        return None
