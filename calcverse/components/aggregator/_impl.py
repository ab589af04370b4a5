"""
Export Aggregator - barrel module over a set of generated units.

The barrel imports every unit under its identifier and exposes an explicit
identifier -> class dict. The runtime resolver looks components up in that
dict instead of probing module attributes by computed name.

Key behaviors:
- Every identifier is a named, independently importable binding
- Duplicate identifiers are fatal (the lookup must be injective)
- Order follows the input order, which follows store order
"""

from __future__ import annotations

from collections.abc import Sequence

from calcverse.core.services.source import INDENT, SourceUnit, generated_header
from calcverse.domain.errors import DuplicateIdentifierError

COMPONENT_MAP_NAME = "COMPONENTS"


def _module_name(unit: SourceUnit) -> str:
    return unit.path.rsplit("/", 1)[-1].removesuffix(".py")


def aggregate(
    units: Sequence[SourceUnit],
    *,
    package_dir: str,
    mapping_name: str = COMPONENT_MAP_NAME,
) -> SourceUnit:
    """Emit `<package_dir>/__init__.py` re-exporting every unit."""
    seen: dict[str, SourceUnit] = {}
    for unit in units:
        if unit.identifier in seen:
            raise DuplicateIdentifierError(
                unit.identifier, (seen[unit.identifier].path, unit.path)
            )
        seen[unit.identifier] = unit

    lines = generated_header(f"{len(units)} {package_dir} units")
    lines.extend(f"from .{_module_name(u)} import {u.identifier}" for u in units)
    lines.append("")

    lines.append("__all__ = [")
    lines.extend(f'{INDENT}"{u.identifier}",' for u in units)
    lines.append(f'{INDENT}"{mapping_name}",')
    lines.append("]")
    lines.append("")

    lines.append(f"{mapping_name} = {{")
    lines.extend(f'{INDENT}"{u.identifier}": {u.identifier},' for u in units)
    lines.append("}")
    lines.append("")

    return SourceUnit(
        identifier=mapping_name,
        path=f"{package_dir}/__init__.py",
        source="\n".join(lines),
    )
