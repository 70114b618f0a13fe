"""
Paragraph accumulation with a minimum length threshold.

Groups body lines into blank-line delimited paragraphs and keeps those long
enough to be useful chunks.

Dependencies: bookchunker.core.exceptions
System role: Second stage of the chunking algorithm
"""

from typing import Iterable, Iterator

from bookchunker.core.exceptions import ValidationError

DEFAULT_MIN_CHUNK_LENGTH = 300


class ParagraphAccumulator:
    """
    Accumulates lines of the current paragraph.

    Each non-blank line is appended followed by a newline. A blank line closes
    the paragraph: it is returned when its length reaches ``min_length`` and
    dropped otherwise. Content still pending when input ends is never returned.
    """

    def __init__(self, min_length: int = DEFAULT_MIN_CHUNK_LENGTH) -> None:
        """
        Initialize accumulator.

        Args:
            min_length: Minimum paragraph length in characters, newlines included

        Raises:
            ValidationError: min_length is negative
        """
        if min_length < 0:
            raise ValidationError(
                f"Minimum chunk length must be non-negative, got {min_length}",
                field="min_length",
            )
        self.min_length = min_length
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Text of the paragraph not yet closed by a blank line."""
        return self._buffer

    def feed(self, line: str) -> str | None:
        """
        Consume one line.

        Args:
            line: Body line

        Returns:
            str | None: Closed paragraph when it meets the threshold, else None
        """
        text = line.strip()
        if text:
            self._buffer += text + "\n"
            return None

        paragraph, self._buffer = self._buffer, ""
        if len(paragraph) < self.min_length:
            return None
        return paragraph


def accumulate_paragraphs(
    lines: Iterable[str],
    min_length: int = DEFAULT_MIN_CHUNK_LENGTH,
) -> Iterator[str]:
    """
    Turn body lines into threshold-filtered paragraph chunks.

    Validation happens on call, not on first iteration.

    Args:
        lines: Body lines in document order
        min_length: Minimum chunk length in characters

    Returns:
        Iterator[str]: Accepted paragraphs, each line followed by a newline

    Raises:
        ValidationError: min_length is negative
    """
    accumulator = ParagraphAccumulator(min_length)
    return _drain(accumulator, lines)


def _drain(accumulator: ParagraphAccumulator, lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        paragraph = accumulator.feed(line)
        if paragraph is not None:
            yield paragraph
