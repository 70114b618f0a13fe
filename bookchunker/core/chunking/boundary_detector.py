"""
Header/footer boundary detection for Gutenberg texts.

Classifies each line of a document as header, body or footer boilerplate
and yields only body lines. The region state lives inside one generator
call, so concurrent or repeated scans never share state.

Dependencies: None (pure domain layer)
System role: First stage of the chunking algorithm
"""

import enum
import io
from typing import Iterator

START_MARKER = "*** START"
END_MARKER = "*** END"


class Region(str, enum.Enum):
    """
    Scanner regions of a Gutenberg text.

    HEADER: Licence preamble before the start marker (initial)
    BODY: Book text between the markers
    FOOTER: Licence trailer from the end marker on (terminal)
    """

    HEADER = "header"
    BODY = "body"
    FOOTER = "footer"


def next_region(region: Region, line: str, start_marker: str, end_marker: str) -> Region:
    """
    Compute the region after reading one trimmed line.

    Args:
        region: Region before the line
        line: Trimmed line text
        start_marker: Prefix that ends the header
        end_marker: Prefix that starts the footer

    Returns:
        Region: Region the scanner is in once the line is consumed
    """
    if region is Region.HEADER and line.startswith(start_marker):
        return Region.BODY
    if region is Region.BODY and line.startswith(end_marker):
        return Region.FOOTER
    return region


def iter_body_lines(
    content: str,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> Iterator[str]:
    """
    Yield the trimmed body lines of a document.

    The start marker line is consumed without being yielded. The end marker
    line is yielded, then scanning stops. Blank body lines are yielded since
    they delimit paragraphs. A document without a start marker yields nothing.
    A second start marker inside the body is ordinary body text, unlike the
    Go tool this replaces, which dropped start-marker lines everywhere.

    Args:
        content: Full raw document text
        start_marker: Prefix that ends the header
        end_marker: Prefix that starts the footer

    Yields:
        str: Body lines in document order, stripped of surrounding whitespace
    """
    region = Region.HEADER
    for raw_line in io.StringIO(content):
        line = raw_line.strip()
        previous, region = region, next_region(region, line, start_marker, end_marker)

        if previous is Region.HEADER:
            continue

        yield line

        if region is Region.FOOTER:
            return
