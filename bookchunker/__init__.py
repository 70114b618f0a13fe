"""
bookchunker: Project Gutenberg corpus ingestion and paragraph chunking.

Strips legal header/footer boilerplate from e-book text, segments the body
into paragraph chunks above a minimum length, and persists them per document
inside a single transaction.
"""

__version__ = "0.1.0"
