"""
Command-line interface for bookchunker.

High-level flow:

    init-db → ingest ROOT → chunk (or enqueue for Celery workers)

Dependencies: typer, bookchunker.application, bookchunker.boundary
System role: Operator entry point
"""

from pathlib import Path
from typing import List, Optional

import typer

from bookchunker.application.batch_orchestrator import BatchChunkingOrchestrator
from bookchunker.application.services.ingestion_service import IngestionService
from bookchunker.boundary.db.create_tables import create_all_tables
from bookchunker.configs import get_settings
from bookchunker.core.exceptions import BookChunkerException
from bookchunker.observability.logger import configure_logging, get_logger

app = typer.Typer(help="Gutenberg corpus ingestion and paragraph chunking")
logger = get_logger(__name__)


def _fail(error: Exception) -> None:
    typer.echo(f"error: {error}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    settings = get_settings()
    configure_logging(settings.log_level, echo_sql=settings.database.echo_sql)


@app.command("init-db")
def init_db() -> None:
    """Create the documents and chunks tables."""
    create_all_tables()
    typer.echo("Tables created.")


@app.command("ingest")
def ingest(
    root: Optional[Path] = typer.Argument(
        None,
        help="Corpus root to scan for archives (defaults to INGESTION_CORPUS_ROOT).",
    ),
) -> None:
    """Store the text of every corpus archive as a document."""
    try:
        result = IngestionService().ingest_directory(root)
    except BookChunkerException as e:
        _fail(e)

    typer.echo(
        f"Scanned {result.archives_scanned} archives → stored {result.documents_created} documents "
        f"({len(result.failed_archives)} unreadable)."
    )


@app.command("chunk")
def chunk(
    document_ids: Optional[List[int]] = typer.Option(
        None,
        "--document-id",
        "-d",
        help="Document id to chunk; repeat for several. Defaults to all documents.",
    ),
    stop_on_error: bool = typer.Option(
        False,
        "--stop-on-error",
        help="Abort on the first failing document (also enabled by CHUNKING_STOP_ON_ERROR).",
    ),
) -> None:
    """Chunk documents, one transaction per document."""
    orchestrator = BatchChunkingOrchestrator(stop_on_error=stop_on_error or None)
    try:
        result = orchestrator.run(list(document_ids) if document_ids else None)
    except BookChunkerException as e:
        _fail(e)

    typer.echo(
        f"Chunked {result.succeeded} of {result.total} documents → {result.chunk_count} chunks."
    )
    for failure in result.failures:
        typer.echo(f"failed: document {failure.document_id}: {failure.message}", err=True)
    if result.failures:
        raise typer.Exit(code=1)


@app.command("enqueue")
def enqueue() -> None:
    """Dispatch one Celery chunking task per stored document."""
    from bookchunker.workers.tasks.document_chunking import enqueue_all_documents

    count = enqueue_all_documents()
    typer.echo(f"Dispatched {count} chunking tasks.")


if __name__ == "__main__":
    app()
