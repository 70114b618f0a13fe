"""
Chunking configuration settings.

Boundary markers and the minimum accepted paragraph length used when
segmenting document bodies into chunks.

Dependencies: pydantic, pydantic_settings
System role: Chunking algorithm configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from bookchunker.configs.base import BaseSettings


class ChunkingSettings(BaseSettings):
    """Paragraph chunking configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHUNKING_",
        case_sensitive=False,
        extra="ignore",
    )

    min_chunk_length: int = Field(
        default=300,
        ge=0,
        description="Minimum chunk length in characters, newlines included",
    )
    start_marker: str = Field(
        default="*** START",
        description="Line prefix marking the end of the header boilerplate",
    )
    end_marker: str = Field(
        default="*** END",
        description="Line prefix marking the start of the footer boilerplate",
    )
    stop_on_error: bool = Field(
        default=False,
        description="Abort a batch run on the first failing document",
    )
