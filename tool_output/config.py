"""Formatter configuration.

Loads settings from environment variables with sensible defaults.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class OutputFormat(str, Enum):
    """Output formats for tool results.

    TABULAR suits chat contexts, JSON suits coding contexts.
    """

    TABULAR = "tabular"
    JSON = "json"


class Settings(BaseSettings):
    """Formatter settings loaded from environment variables."""

    output_format: OutputFormat = Field(
        default=OutputFormat.TABULAR,
        description="Default output format when a caller does not pass one",
    )
    max_depth: int = Field(
        default=100,
        ge=1,
        description="Deepest container nesting rendered before giving up",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }


settings = Settings()
