"""
Corpus ingestion service.

Reads book archives from a mirrored corpus and stores each text as a
document, named after the title found in its preamble.

Dependencies: sqlalchemy, bookchunker.boundary, bookchunker.core
System role: Populates the document store before chunking
"""

import logging
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from bookchunker.boundary.archive.zip_reader import ArchiveReader
from bookchunker.boundary.db.connection import get_session_factory
from bookchunker.boundary.db.CRUD.document_crud import document_crud
from bookchunker.configs import IngestionSettings, get_settings
from bookchunker.core.exceptions import ArchiveError, StoreError
from bookchunker.core.metadata import extract_title_author
from bookchunker.models.document import ArchiveEntry
from bookchunker.models.results import IngestionResult
from bookchunker.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)


class IngestionService:
    """Store corpus archives as documents."""

    def __init__(
        self,
        session_factory: sessionmaker | None = None,
        settings: IngestionSettings | None = None,
        reader: ArchiveReader | None = None,
    ) -> None:
        """
        Initialize ingestion service.

        Args:
            session_factory: Session factory for the store (created from settings if None)
            settings: Ingestion settings (uses application settings if None)
            reader: Archive reader (built from settings if None)
        """
        self._session_factory = session_factory
        self._settings = settings or get_settings().ingestion
        self._reader = reader or ArchiveReader(self._settings)

    @property
    def session_factory(self) -> sessionmaker:
        """Lazy-load session factory to avoid connecting before first use."""
        if self._session_factory is None:
            self._session_factory = get_session_factory()
        return self._session_factory

    def store_entry(self, entry: ArchiveEntry) -> int:
        """
        Store one archive entry as a document in its own transaction.

        Args:
            entry: Decoded archive entry

        Returns:
            int: Store-assigned document id

        Raises:
            StoreError: Insert or commit failed
        """
        title, author = extract_title_author(entry.content)

        try:
            with self.session_factory() as session, session.begin():
                document = document_crud.create(
                    session,
                    name=title or entry.filename,
                    author=author,
                    filename=entry.filename,
                    content=entry.content,
                )
                document_id = document.id
        except SQLAlchemyError as e:
            raise StoreError(
                f"Could not store {entry.filename}: {e}",
                operation="insert_document",
            ) from e

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:store_entry - Stored {entry.filename}",
            document_id=document_id,
            title=title,
            author=author,
        )
        return document_id

    def ingest_directory(self, root: str | Path | None = None) -> IngestionResult:
        """
        Ingest every candidate archive under a corpus root.

        Unreadable archives are logged and recorded, and the walk continues.
        Store failures abort the run.

        Args:
            root: Corpus root (uses configured corpus_root if None)

        Returns:
            IngestionResult: Counts of archives read and documents stored

        Raises:
            ArchiveError: Root is not a directory
            StoreError: A document insert failed
        """
        root = root or self._settings.corpus_root
        result = IngestionResult()

        for path in self._reader.iter_archives(root):
            result.archives_scanned += 1
            try:
                entry = self._reader.read_first_text_entry(path)
            except ArchiveError as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:ingest_directory - Skipping unreadable archive",
                    e,
                    archive_path=str(path),
                )
                result.failed_archives.append(str(path))
                continue

            if entry is None:
                result.archives_without_text += 1
                continue

            self.store_entry(entry)
            result.documents_created += 1

        logger.info(
            f"{__name__}:ingest_directory - Ingested {result.documents_created} documents "
            f"from {result.archives_scanned} archives"
        )
        return result
