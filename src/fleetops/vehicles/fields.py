"""Field conversions for the persisted fleet format.

Floats are written with their shortest round-trip representation so a
saved value reads back exactly. Booleans are written as ``true``/``false``.
Parsers raise ValueError on malformed input; the loader treats that as a
bad row.
"""

import math


def format_float(value: float) -> str:
    """Format a float so that ``float(text) == value``."""
    return repr(float(value))


def format_int(value: int) -> str:
    return str(int(value))


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def parse_float(text: str, field_name: str) -> float:
    """Parse a finite float.

    Raises:
        ValueError: If text is not a finite number.
    """
    try:
        value = float(text.strip())
    except ValueError:
        raise ValueError(f"{field_name}: not a number: {text!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{field_name}: not a finite number: {text!r}")
    return value


def parse_int(text: str, field_name: str) -> int:
    """Parse an integer, accepting integral floats such as ``4.0``.

    Raises:
        ValueError: If text is not an integral number.
    """
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    value = parse_float(stripped, field_name)
    if not value.is_integer():
        raise ValueError(f"{field_name}: not a whole number: {text!r}")
    return int(value)


def parse_bool(text: str, field_name: str) -> bool:
    """Parse ``true``/``false`` (case-insensitive).

    Raises:
        ValueError: For any other value.
    """
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"{field_name}: expected true or false, got {text!r}")
