"""Value model for formatter input.

Tool results are arbitrary nested data. The formatter only understands a
closed grammar of scalars, sequences and mappings; ``classify`` maps any
Python object onto that grammar so the renderers can dispatch on an
explicit ``ValueKind`` instead of ad hoc type checks.
"""

import math
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic_core import PydanticUndefined, to_jsonable_python


class _Absent:
    """Marker type for a value that should be left out of the output."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


class ValueKind(str, Enum):
    """Kinds of values the formatter can render.

    ABSENT and UNRENDERABLE are omitted from output entirely.
    """

    ABSENT = "absent"
    UNRENDERABLE = "unrenderable"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"

    @property
    def is_omitted(self) -> bool:
        """Check if values of this kind are dropped from output."""
        return self in (ValueKind.ABSENT, ValueKind.UNRENDERABLE)

    @property
    def is_container(self) -> bool:
        """Check if values of this kind hold nested values."""
        return self in (ValueKind.SEQUENCE, ValueKind.MAPPING)


SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _classify_native(value: Any) -> ValueKind | None:
    """Classify values that already belong to the grammar."""
    if value is ABSENT or value is PydanticUndefined:
        return ValueKind.ABSENT
    if value is None:
        return ValueKind.NULL
    if isinstance(value, Enum):
        return None
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, SEQUENCE_TYPES):
        return ValueKind.SEQUENCE
    if callable(value):
        return ValueKind.UNRENDERABLE
    return None


def coerce(value: Any) -> Any:
    """Bring a value into the supported grammar.

    Pydantic models, dataclasses, datetimes, decimals, UUIDs, enums and
    similar objects are converted with pydantic's JSON-compatible
    conversion. Anything it does not know falls back to ``str()``.

    Args:
        value: Any Python object.

    Returns:
        The value itself if it is already supported, otherwise its
        JSON-compatible equivalent.
    """
    if _classify_native(value) is not None:
        return value
    return to_jsonable_python(value, fallback=str)


def classify(value: Any) -> ValueKind:
    """Return the kind of an already coerced value.

    Args:
        value: Value returned by ``coerce``.

    Returns:
        ValueKind of the value.
    """
    kind = _classify_native(value)
    if kind is None:
        kind = _classify_native(coerce(value))
    # to_jsonable_python always yields a native value, str fallback included
    return kind if kind is not None else ValueKind.STRING


def is_omitted(value: Any) -> bool:
    """Check if a value is absent or unrenderable."""
    return classify(value).is_omitted


def is_container(value: Any) -> bool:
    """Check if a value is a sequence or a mapping."""
    return classify(value).is_container


def is_flat_sequence(items: Any) -> bool:
    """Check that no element of a sequence is itself a sequence or mapping.

    An empty sequence is flat.
    """
    return not any(is_container(item) for item in items)


def format_number(value: int | float) -> str:
    """Render a number the way it reads in text output.

    Floats follow JavaScript's spelling, so prices decoded from JSON read
    the same as in the source payload: ``10.0`` renders as ``10``,
    ``1e-07`` as ``1e-7`` and ``1e-05`` as ``0.00001``. Non-finite floats
    use ``NaN`` / ``Infinity``.
    """
    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    text = repr(value)
    if "e" not in text:
        return text[:-2] if text.endswith(".0") else text

    mantissa, exponent = text.split("e")
    power = int(exponent)
    # positional notation between 1e-7 and 1e21
    if -7 < power < 21:
        return format(Decimal(text), "f")
    sign = "+" if power > 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"
