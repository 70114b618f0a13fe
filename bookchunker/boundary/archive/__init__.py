"""
Corpus archive access.

Exports: ArchiveReader
"""

from bookchunker.boundary.archive.zip_reader import ArchiveReader

__all__ = ["ArchiveReader"]
