"""
Test suite for preamble metadata extraction.

System role: Verification of title/author scraping
"""

from bookchunker.core.metadata import extract_title_author


class TestExtractTitleAuthor:
    """Test suite for extract_title_author()."""

    def test_should_extract_title_and_author(self) -> None:
        """Test both fields read from the preamble."""
        # Arrange
        content = (
            "The Project Gutenberg EBook of Emma\n\n"
            "Title: Emma\n"
            "Author:   Jane Austen  \n"
            "*** START OF THIS PROJECT GUTENBERG EBOOK EMMA ***\n"
        )

        # Act
        title, author = extract_title_author(content)

        # Assert
        assert title == "Emma"
        assert author == "Jane Austen"

    def test_should_keep_text_after_first_colon(self) -> None:
        """Test colons inside the value are preserved."""
        title, _ = extract_title_author("Title: Dracula: A Mystery\n")

        assert title == "Dracula: A Mystery"

    def test_should_stop_at_start_marker(self) -> None:
        """Test lines after the *** marker are not scanned."""
        content = "Title: Real\n*** START\nAuthor: Character In Book\n"

        assert extract_title_author(content) == ("Real", "")

    def test_should_ignore_lines_without_colon(self) -> None:
        """Test 'Title' prefix without a separator gives nothing."""
        assert extract_title_author("Title page\nAuthorship unknown\n") == ("", "")

    def test_should_return_empty_strings_for_empty_content(self) -> None:
        """Test empty document."""
        assert extract_title_author("") == ("", "")

    def test_should_stop_once_both_found(self) -> None:
        """Test later duplicates are ignored once both fields are set."""
        content = "Title: First\nAuthor: One\nTitle: Second\n"

        assert extract_title_author(content) == ("First", "One")
