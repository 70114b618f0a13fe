"""
Gutenberg body chunking.

Exports:
  - iter_body_lines, Region: Header/footer boundary detection
  - ParagraphAccumulator, accumulate_paragraphs: Paragraph grouping
  - iter_chunks: Both stages composed over a document's content

Dependencies: bookchunker.core.exceptions
System role: Pure text segmentation, no I/O
"""

from typing import Iterator

from bookchunker.core.chunking.accumulator import (
    DEFAULT_MIN_CHUNK_LENGTH,
    ParagraphAccumulator,
    accumulate_paragraphs,
)
from bookchunker.core.chunking.boundary_detector import (
    END_MARKER,
    START_MARKER,
    Region,
    iter_body_lines,
    next_region,
)


def iter_chunks(
    content: str,
    min_length: int = DEFAULT_MIN_CHUNK_LENGTH,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> Iterator[str]:
    """
    Segment a raw document into paragraph chunks.

    Args:
        content: Full raw document text, boilerplate included
        min_length: Minimum chunk length in characters
        start_marker: Prefix that ends the header
        end_marker: Prefix that starts the footer

    Returns:
        Iterator[str]: Chunks in document order

    Raises:
        ValidationError: min_length is negative
    """
    return accumulate_paragraphs(
        iter_body_lines(content, start_marker, end_marker),
        min_length,
    )


__all__ = [
    "DEFAULT_MIN_CHUNK_LENGTH",
    "START_MARKER",
    "END_MARKER",
    "Region",
    "next_region",
    "iter_body_lines",
    "ParagraphAccumulator",
    "accumulate_paragraphs",
    "iter_chunks",
]
