"""
Source emission helpers shared by the synthesizers.

Literals are emitted with repr(), which is stable across runs, so a
generation pass over an unchanged store is byte-identical.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

INDENT = "    "


@dataclass(frozen=True)
class SourceUnit:
    """One generated source file."""

    identifier: str
    path: str  # relative to the generated package root, e.g. "components/X.py"
    source: str


def generated_header(origin: str) -> list[str]:
    return [f"# Generated by `calcverse generate` from {origin}. Do not edit.", ""]


def py_literal(value: Any) -> str:
    """Python source for a scalar or tuple of scalars."""
    if isinstance(value, tuple | list):
        if not value:
            return "()"
        inner = ", ".join(py_literal(v) for v in value)
        return f"({inner},)" if len(value) == 1 else f"({inner})"
    if isinstance(value, float) and not math.isfinite(value):
        # repr gives inf/nan, which are not names in generated modules
        return f"float({str(value)!r})"
    if value is None or isinstance(value, bool | int | float | str):
        return repr(value)
    raise TypeError(f"Cannot emit literal for {type(value).__name__}")


def model_call(name: str, model: BaseModel, *, nested: dict[str, str] | None = None) -> str:
    """
    Constructor call for a pydantic model, omitting fields left at their default.

    `nested` supplies pre-rendered source for non-scalar fields.
    """
    nested = nested or {}
    args: list[str] = []
    for field_name, info in type(model).model_fields.items():
        value = getattr(model, field_name)
        if field_name in nested:
            if value != info.default:
                args.append(f"{field_name}={nested[field_name]}")
        elif info.is_required() or value != info.default:
            args.append(f"{field_name}={py_literal(value)}")
    return f"{name}({', '.join(args)})"
