"""MCP tool responses.

Wraps tool results and tool failures into the ``TextContent`` lists that
MCP ``call_tool`` handlers return.
"""

import json
from typing import Any

import structlog
from mcp.types import TextContent

from tool_output.config import OutputFormat
from tool_output.formatter import format_tool_output

logger = structlog.get_logger()


def create_tool_response(
    result: Any,
    title: str | None = None,
    output_format: OutputFormat | str | None = None,
) -> list[TextContent]:
    """Build the response for a successful tool call.

    String results are assumed to be formatted already and pass through
    untouched.

    Args:
        result: The tool's result.
        title: Optional title for the formatted output.
        output_format: Output format, see ``format_tool_output``.

    Returns:
        Single text content item.
    """
    if isinstance(result, str):
        text = result
    else:
        text = format_tool_output(result, title=title, output_format=output_format)

    return [TextContent(type="text", text=text)]


def _error_body(error: Exception) -> str:
    """Extract the most useful payload from an error."""
    if hasattr(error, "body"):
        return json.dumps(error.body, indent=2, default=str)
    details = getattr(error, "details", None)
    if details:
        return json.dumps(details, indent=2, default=str)
    return str(error)


def create_error_response(error: Exception, tool_name: str) -> list[TextContent]:
    """Build the response for a failed tool call.

    Args:
        error: The exception raised by the tool.
        tool_name: Name of the tool that failed.

    Returns:
        Single text content item describing the failure.
    """
    message = getattr(error, "message", None) or str(error)
    body = _error_body(error)

    logger.error(
        "Error executing tool",
        tool=tool_name,
        error_message=message,
        error_body=body,
    )

    return [
        TextContent(
            type="text",
            text=f"Error executing tool '{tool_name}': {message} - {body}",
        )
    ]
