"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite store, session factory, document factory,
sample Gutenberg texts
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

from typing import Callable

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bookchunker.boundary.db.base import Base
from bookchunker.boundary.db.connection import _enable_sqlite_foreign_keys
from bookchunker.boundary.db.models.document_model import DocumentModel

LONG_PARAGRAPH_LINES = [
    "Hello world this is a long enough paragraph that exceeds the three hundred",
    "character minimum threshold requirement for acceptance into the chunk store",
    "as a valid unit of text, and it keeps going with more words so that the",
    "accumulated string including every inserted newline is comfortably longer",
    "than the configured minimum length of three hundred characters in total.",
]


def _make_book(*paragraphs: list[str], header: str = "junk", footer: str = "license text") -> str:
    body = "\n\n".join("\n".join(lines) for lines in paragraphs)
    return f"{header}\n*** START OF THIS BOOK ***\n{body}\n\n*** END OF THIS BOOK ***\n{footer}\n"


@pytest.fixture
def make_book() -> Callable[..., str]:
    """Build a Gutenberg-style text from paragraphs given as line lists."""
    return _make_book


@pytest.fixture
def long_paragraph_lines() -> list[str]:
    """Lines of a paragraph well above the default threshold."""
    return list(LONG_PARAGRAPH_LINES)


@pytest.fixture
def long_paragraph_chunk() -> str:
    """Expected chunk text for the long paragraph."""
    return "".join(line + "\n" for line in LONG_PARAGRAPH_LINES)


@pytest.fixture
def test_engine():
    """
    Create in-memory SQLite engine with all tables.

    Yields:
        Engine: Engine shared by every session of one test
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> sessionmaker:
    """Session factory bound to the in-memory store."""
    return sessionmaker(bind=test_engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def add_document(session_factory: sessionmaker) -> Callable[..., int]:
    """
    Factory fixture storing a document and returning its id.

    Returns:
        Callable: add_document(content, id=None, name="", author="", filename="")
    """

    def _add(content: str, id: int | None = None, **fields) -> int:
        with session_factory() as session, session.begin():
            document = DocumentModel(id=id, content=content, **fields)
            session.add(document)
            session.flush()
            return document.id

    return _add
