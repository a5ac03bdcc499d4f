"""Formatter exceptions.

Errors raised while turning tool results into text. Rendering itself is
total for well-formed values, so these only signal inputs outside the
supported value grammar or an unknown output format.
"""

from typing import Any


class FormatterError(Exception):
    """Base class for all formatter exceptions.

    Catch this at the tool layer to handle any formatting failure.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize formatter error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MaxDepthExceededError(FormatterError):
    """Raised when a value nests deeper than the configured maximum.

    Cyclic structures always end up here.
    """

    def __init__(self, max_depth: int) -> None:
        """Initialize max depth exceeded error.

        Args:
            max_depth: The depth limit that was exceeded.
        """
        super().__init__(
            f"Value nesting exceeds maximum depth of {max_depth} "
            "(cyclic structures are not supported)",
            details={"max_depth": max_depth},
        )
        self.max_depth = max_depth


class UnsupportedFormatError(FormatterError):
    """Raised when an unknown output format is requested."""

    def __init__(self, output_format: str, allowed_formats: list[str]) -> None:
        """Initialize unsupported format error.

        Args:
            output_format: The requested format.
            allowed_formats: Formats that are supported.
        """
        super().__init__(
            f"Unsupported output format '{output_format}'. "
            f"Allowed formats: {allowed_formats}",
            details={
                "output_format": output_format,
                "allowed_formats": allowed_formats,
            },
        )
