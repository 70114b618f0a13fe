"""
Bibliographic metadata scraping.

Reads "Title:" and "Author:" lines from the preamble of a Gutenberg text.

Dependencies: None (pure domain layer)
System role: Document naming during ingestion
"""

import io

PREAMBLE_END_PREFIX = "***"


def _field_value(line: str) -> str | None:
    parts = line.split(":", 1)
    if len(parts) != 2:
        return None
    return parts[1].strip()


def extract_title_author(content: str) -> tuple[str, str]:
    """
    Extract title and author from a document preamble.

    Scanning stops once both are found or at the first line starting
    with "***" (the start marker). Later matches overwrite earlier ones.

    Args:
        content: Full raw document text

    Returns:
        tuple[str, str]: (title, author), empty strings when not found
    """
    title = ""
    author = ""

    for raw_line in io.StringIO(content):
        if title and author:
            break

        line = raw_line.strip()
        if line.startswith(PREAMBLE_END_PREFIX):
            break

        if line.startswith("Title"):
            value = _field_value(line)
            if value is not None:
                title = value

        if line.startswith("Author"):
            value = _field_value(line)
            if value is not None:
                author = value

    return title, author
