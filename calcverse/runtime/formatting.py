"""
Input coercion and output formatting for calculator widgets.

Number inputs follow parse-or-zero semantics: leading numeric text is
used, anything unparseable becomes 0. Outputs are formatted per their
declared format; unknown formats fall back to plain stringification.
"""

from __future__ import annotations

import math
import re
from typing import Any

from calcverse.domain.entities import InputSpec, OutputSpec

DEFAULT_DECIMAL_PRECISION = 2

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


# --- Input Coercion ---


def parse_number(raw: Any) -> int | float:
    """Parse a submitted value as a number, falling back to 0."""
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int | float):
        return 0 if isinstance(raw, float) and math.isnan(raw) else raw
    if raw is None:
        return 0

    match = _LEADING_NUMBER.match(str(raw).strip())
    if match is None:
        return 0
    value = float(match.group(0))
    if not math.isfinite(value):
        return 0
    return value


def coerce_input(spec: InputSpec, raw: Any) -> Any:
    """Convert a raw submitted value to the type the calculate fragment expects."""
    if spec.type == "number":
        return parse_number(raw)

    if spec.type == "select":
        for option in spec.options:
            if option.value == raw or _option_text(option.value) == _option_text(raw):
                return option.value
        return raw

    return "" if raw is None else str(raw)


def _option_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# --- Output Formatting ---


def _plain_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def format_currency(value: int | float) -> str:
    """Format as US dollars: 1234.5 -> '$1,234.50', -3 -> '-$3.00'."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_output(value: Any, spec: OutputSpec) -> str:
    """Render one result value for display."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if not isinstance(value, int | float):
        return str(value)

    if isinstance(value, float) and not math.isfinite(value):
        return _non_finite(value)

    if spec.format == "currency":
        return format_currency(value)
    if spec.format == "decimal":
        precision = (
            DEFAULT_DECIMAL_PRECISION if spec.precision is None else spec.precision
        )
        return f"{value:.{precision}f}"
    return _plain_number(value)
