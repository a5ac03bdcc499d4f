"""Tool output formatting.

Stringifies the result of a tool call into a format that is cheap for a
language model to read:

- tabular (default): indentation based key/value text with humanized keys,
  flat lists joined inline and absent values left out entirely
- json: compact JSON of the raw data, optionally wrapped under the title

Example tabular output for ``{"productName": "Widget", "tags": ["a", "b"]}``
with the title ``product``::

    PRODUCT
    Product Name: Widget
    Tags: a, b
"""

import json
import math
from typing import Any

import structlog

from tool_output.config import OutputFormat, settings
from tool_output.exceptions import MaxDepthExceededError, UnsupportedFormatError
from tool_output.humanize import humanize_name
from tool_output.values import (
    ValueKind,
    classify,
    coerce,
    format_number,
    is_flat_sequence,
    is_omitted,
)

logger = structlog.get_logger()

EMPTY_MAPPING = "no properties"
EMPTY_SEQUENCE = "none"
NULL_TEXT = "null"
EMPTY_STRING_TEXT = '""'
TAB = "\t"

# rendered values that always stay on the label's line
_INLINE_SENTINELS = (NULL_TEXT, EMPTY_SEQUENCE, EMPTY_MAPPING)


def format_title(title: str) -> str:
    """Humanize and upper-case a title for use as a header."""
    return humanize_name(title).upper()


def resolve_format(output_format: OutputFormat | str | None) -> OutputFormat:
    """Resolve a requested output format, falling back to settings.

    Raises:
        UnsupportedFormatError: If the format is not a known OutputFormat.
    """
    if output_format is None:
        return settings.output_format
    try:
        return OutputFormat(output_format)
    except ValueError:
        raise UnsupportedFormatError(
            str(output_format),
            [f.value for f in OutputFormat],
        ) from None


class TabularRenderer:
    """Recursive renderer for the tabular format.

    Mappings indent their own entries by one level. Sequences do not; the
    line that attaches a sequence to its label bumps the indent instead,
    so nested indices line up under the parent label.
    """

    def __init__(self, max_depth: int, tab: str = TAB) -> None:
        """Initialize renderer.

        Args:
            max_depth: Deepest container nesting allowed.
            tab: Indentation unit.
        """
        self.max_depth = max_depth
        self.tab = tab

    def render(self, value: Any, indent: int, depth: int = 0) -> str | None:
        """Render a value, or return None if it should be omitted.

        Args:
            value: Value to render.
            indent: Indentation level of lines emitted for nested entries.
            depth: Number of containers enclosing this value.

        Returns:
            Rendered text, or None for absent and unrenderable values.

        Raises:
            MaxDepthExceededError: If containers nest deeper than max_depth.
        """
        value = coerce(value)
        kind = classify(value)

        if kind.is_omitted:
            return None
        if kind is ValueKind.STRING:
            return value if value != "" else EMPTY_STRING_TEXT
        if kind is ValueKind.NUMBER:
            return format_number(value)
        if kind is ValueKind.BOOLEAN:
            return "Yes" if value else "No"
        if kind is ValueKind.NULL:
            return NULL_TEXT

        depth += 1
        if depth > self.max_depth:
            raise MaxDepthExceededError(self.max_depth)

        if kind is ValueKind.SEQUENCE:
            return self.render_sequence(list(value), indent, depth)
        return self.render_mapping(value, indent, depth)

    def render_sequence(self, items: list[Any], indent: int, depth: int) -> str:
        """Render a sequence.

        Flat sequences are joined inline with commas. Anything else gets
        one line per surviving element, labelled by its position among
        the surviving elements.
        """
        if not items:
            return EMPTY_SEQUENCE

        if is_flat_sequence(items):
            rendered = [
                text
                for text in (self.render(item, indent, depth) for item in items)
                if text is not None
            ]
            return ", ".join(rendered) if rendered else EMPTY_SEQUENCE

        surviving = [item for item in items if not is_omitted(item)]
        lines = [
            self.format_line(str(position), item, indent, depth)
            for position, item in enumerate(surviving)
        ]
        return "\n".join(lines) if lines else EMPTY_SEQUENCE

    def render_mapping(self, data: Any, indent: int, depth: int) -> str:
        """Render a mapping with one humanized key per line."""
        lines = [
            self.format_line(humanize_name(str(key)), value, indent + 1, depth)
            for key, value in data.items()
            if not is_omitted(value)
        ]
        return "\n".join(lines) if lines else EMPTY_MAPPING

    def format_line(self, label: str, value: Any, indent: int, depth: int) -> str:
        """Render a ``label: value`` entry.

        Scalars, empty containers and flat sequences stay on the label's
        line. Other containers start on the next line as an indented block.

        Returns:
            The entry, or an empty string if the value is omitted.
        """
        value = coerce(value)
        kind = classify(value)
        child_indent = indent + 1 if kind is ValueKind.SEQUENCE else indent

        rendered = self.render(value, child_indent, depth)
        if rendered is None:
            return ""

        line = f"{self.tab * indent}{label}:"
        if (
            not kind.is_container
            or rendered in _INLINE_SENTINELS
            or (kind is ValueKind.SEQUENCE and is_flat_sequence(value))
        ):
            return f"{line} {rendered}"
        return f"{line}\n{rendered}"


def prepare_json(value: Any, max_depth: int, depth: int = 0) -> Any:
    """Convert a value into something ``json.dumps`` accepts.

    Follows ``JSON.stringify`` conventions: omitted values are dropped from
    mappings and become null inside sequences, and non-finite floats
    become null.

    Raises:
        MaxDepthExceededError: If containers nest deeper than max_depth.
    """
    value = coerce(value)
    kind = classify(value)

    if kind.is_omitted:
        return None
    if kind is ValueKind.NUMBER and isinstance(value, float) and not math.isfinite(value):
        return None
    if not kind.is_container:
        return value

    depth += 1
    if depth > max_depth:
        raise MaxDepthExceededError(max_depth)

    if kind is ValueKind.MAPPING:
        return {
            str(key): prepare_json(item, max_depth, depth)
            for key, item in value.items()
            if not is_omitted(item)
        }
    return [
        None if is_omitted(item) else prepare_json(item, max_depth, depth)
        for item in value
    ]


def format_tool_output(
    data: Any,
    title: str | None = None,
    output_format: OutputFormat | str | None = None,
    max_depth: int | None = None,
) -> str:
    """Stringify a tool result into an LLM friendly format.

    Args:
        data: The tool's result, any nesting of scalars, sequences and
            mappings.
        title: Optional title giving the data context, rendered as an
            upper-cased header.
        output_format: "tabular" for chat contexts, "json" for coding
            contexts. Defaults to ``settings.output_format``.
        max_depth: Deepest container nesting allowed. Defaults to
            ``settings.max_depth``.

    Returns:
        The formatted text.

    Raises:
        UnsupportedFormatError: If output_format is unknown.
        MaxDepthExceededError: If data nests deeper than max_depth, or
            deeper than the interpreter stack allows.
    """
    resolved_format = resolve_format(output_format)
    depth_limit = max_depth if max_depth is not None else settings.max_depth
    header = format_title(title) if title else ""

    logger.debug(
        "Formatting tool output",
        output_format=resolved_format.value,
        has_title=bool(title),
    )

    if is_omitted(data):
        return f"{header}\n{EMPTY_MAPPING}" if title else EMPTY_MAPPING

    try:
        if resolved_format is OutputFormat.JSON:
            prepared = prepare_json(data, depth_limit)
            if title:
                prepared = {header: prepared}
            return json.dumps(prepared, ensure_ascii=False, separators=(",", ":"))

        # start one level up so top-level entries carry no indentation
        body = TabularRenderer(max_depth=depth_limit).render(data, indent=-1)
    except RecursionError as e:
        # the interpreter stack ran out before max_depth was reached
        raise MaxDepthExceededError(depth_limit) from e

    if body is None:
        body = EMPTY_MAPPING
    return f"{header}\n{body}" if title else body
