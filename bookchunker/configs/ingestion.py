"""
Corpus ingestion configuration settings.

Controls which archives under the corpus root are read and how their
text entries are decoded.

Dependencies: pydantic, pydantic_settings
System role: Archive ingestion configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from bookchunker.configs.base import BaseSettings


class IngestionSettings(BaseSettings):
    """Gutenberg mirror ingestion configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INGESTION_",
        case_sensitive=False,
        extra="ignore",
    )

    corpus_root: str = Field(
        default="./aleph.gutenberg.org",
        description="Root directory of the mirrored corpus",
    )
    archive_suffix: str = Field(default=".zip", description="Archive file suffix")
    # Gutenberg duplicates each book as -8.zip (8-bit, latin-1) and -0.zip (UTF-8)
    skip_suffixes: list[str] = Field(
        default=["-8.zip", "-0.zip"],
        description="Archive name suffixes to ignore",
    )
    entry_suffix: str = Field(default=".txt", description="Archive entry suffix to read")
    encoding: str = Field(default="utf-8", description="Text encoding of archive entries")
