"""Tool Output Formatter.

Turns e-commerce tool results into text a language model can read cheaply.

This package provides:
- humanize_name - readable labels from camelCase, snake_case and kebab-case keys
- format_tool_output - tabular or JSON rendering of arbitrary nested data
- create_tool_response / create_error_response - MCP TextContent wrappers
"""

from tool_output.config import OutputFormat, Settings, settings
from tool_output.exceptions import (
    FormatterError,
    MaxDepthExceededError,
    UnsupportedFormatError,
)
from tool_output.formatter import format_tool_output
from tool_output.humanize import humanize_name
from tool_output.responses import create_error_response, create_tool_response
from tool_output.values import ABSENT, ValueKind

__version__ = "1.0.0"

__all__ = [
    "ABSENT",
    "FormatterError",
    "MaxDepthExceededError",
    "OutputFormat",
    "Settings",
    "UnsupportedFormatError",
    "ValueKind",
    "create_error_response",
    "create_tool_response",
    "format_tool_output",
    "humanize_name",
    "settings",
]
