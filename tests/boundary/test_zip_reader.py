"""
Test suite for ArchiveReader.

Builds small zip archives in a temporary corpus tree.

System role: Verification of corpus archive discovery and reading
"""

import zipfile
from pathlib import Path

import pytest

from bookchunker.boundary.archive.zip_reader import ArchiveReader
from bookchunker.configs import IngestionSettings
from bookchunker.core.exceptions import ArchiveError


def write_zip(path: Path, entries: list[tuple[str, bytes]]) -> Path:
    """Write a zip archive with the given (name, data) entries."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as archive:
        for name, data in entries:
            archive.writestr(name, data)
    return path


@pytest.fixture
def reader() -> ArchiveReader:
    """Provide ArchiveReader with default ingestion settings."""
    return ArchiveReader(IngestionSettings())


class TestIterArchives:
    """Test suite for ArchiveReader.iter_archives()."""

    def test_should_find_nested_archives_and_skip_encoding_duplicates(
        self, reader: ArchiveReader, tmp_path: Path
    ) -> None:
        """Test -8.zip and -0.zip variants and non-zip files are skipped."""
        # Arrange
        keep_a = write_zip(tmp_path / "1" / "2" / "1234.zip", [("1234.txt", b"a")])
        keep_b = write_zip(tmp_path / "9" / "98.zip", [("98.txt", b"b")])
        write_zip(tmp_path / "1" / "2" / "1234-8.zip", [("1234-8.txt", b"a")])
        write_zip(tmp_path / "1" / "2" / "1234-0.zip", [("1234-0.txt", b"a")])
        (tmp_path / "readme.txt").write_text("not an archive")

        # Act
        archives = list(reader.iter_archives(tmp_path))

        # Assert
        assert archives == sorted([keep_a, keep_b])

    def test_should_raise_when_root_missing(self, reader: ArchiveReader, tmp_path: Path) -> None:
        """Test missing corpus root."""
        with pytest.raises(ArchiveError, match="not a directory"):
            list(reader.iter_archives(tmp_path / "missing"))


class TestReadFirstTextEntry:
    """Test suite for ArchiveReader.read_first_text_entry()."""

    def test_should_read_first_text_entry(self, reader: ArchiveReader, tmp_path: Path) -> None:
        """Test first .txt entry is decoded."""
        # Arrange
        path = write_zip(tmp_path / "11.zip", [("11.txt", "Alice’s text".encode("utf-8"))])

        # Act
        entry = reader.read_first_text_entry(path)

        # Assert
        assert entry is not None
        assert entry.filename == "11.txt"
        assert entry.content == "Alice’s text"
        assert entry.archive_path == str(path)

    def test_should_ignore_text_entries_after_the_first_entry(
        self, reader: ArchiveReader, tmp_path: Path
    ) -> None:
        """Test only entry index 0 can be ingested."""
        path = write_zip(tmp_path / "12.zip", [("12.htm", b"<html>"), ("12.txt", b"text")])

        assert reader.read_first_text_entry(path) is None

    def test_should_replace_undecodable_bytes(self, reader: ArchiveReader, tmp_path: Path) -> None:
        """Test invalid UTF-8 does not abort ingestion."""
        path = write_zip(tmp_path / "13.zip", [("13.txt", b"caf\xe9")])

        entry = reader.read_first_text_entry(path)

        assert entry is not None
        assert entry.content == "caf\ufffd"

    def test_should_raise_archive_error_for_corrupt_file(
        self, reader: ArchiveReader, tmp_path: Path
    ) -> None:
        """Test non-zip data is reported as ArchiveError."""
        path = tmp_path / "14.zip"
        path.write_bytes(b"not a zip")

        with pytest.raises(ArchiveError) as exc_info:
            reader.read_first_text_entry(path)

        assert exc_info.value.details["path"] == str(path)
