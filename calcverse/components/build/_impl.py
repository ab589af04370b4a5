"""
Build - the all-or-nothing generation pass.

Renders the whole generated package in memory first, then swaps it onto
disk in one step. A failure anywhere leaves the previous tree untouched.

Generated package layout:
    __init__.py              STORE_DIGEST, CALCULATOR_COUNT
    components/<Id>.py       one CalculatorWidget subclass per calculator
    components/__init__.py   barrel + COMPONENTS map
    pages/<Id>.py            one CalculatorPage subclass per calculator
    pages/__init__.py        barrel + PAGES map
    routes.py                ROUTES table

Key behaviors:
- Byte-identical output for an unchanged store (no timestamps, stable order)
- Generated paths must not collide, even case-insensitively
- check_tree reports drift between the store and the tree on disk
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from calcverse.catalog.store import CalculatorStore
from calcverse.components.aggregator import aggregate
from calcverse.components.pages import (
    PAGE_MAP_NAME,
    PAGES_DIR,
    synthesize_page,
    synthesize_routes,
)
from calcverse.components.synthesizer import COMPONENTS_DIR, synthesize
from calcverse.core.services.source import SourceUnit, generated_header, py_literal
from calcverse.domain.errors import BuildError, DuplicateIdentifierError
from calcverse.site.models import SiteConfig

logger = logging.getLogger(__name__)

PACKAGE_INIT = "__init__.py"
GENERATED_MARKER = "# Generated by `calcverse generate`"
IGNORE_DIRS = {"__pycache__"}


def _package_init(store: CalculatorStore) -> SourceUnit:
    lines = generated_header("the calculator store")
    lines.append(f"STORE_DIGEST = {py_literal(store.digest)}")
    lines.append(f"CALCULATOR_COUNT = {len(store)}")
    lines.append("")
    return SourceUnit(identifier="STORE_DIGEST", path=PACKAGE_INIT, source="\n".join(lines))


def build_units(store: CalculatorStore, site: SiteConfig) -> list[SourceUnit]:
    """Every source unit of one generation pass, in emission order."""
    components = [synthesize(c) for c in store]
    pages = [synthesize_page(c, store, site) for c in store]

    return [
        _package_init(store),
        *components,
        aggregate(components, package_dir=COMPONENTS_DIR),
        *pages,
        aggregate(pages, package_dir=PAGES_DIR, mapping_name=PAGE_MAP_NAME),
        synthesize_routes(store),
    ]


def render_tree(store: CalculatorStore, site: SiteConfig) -> dict[str, str]:
    """Relative path -> file content for the whole generated package."""
    files: dict[str, str] = {}
    folded: dict[str, str] = {}

    for unit in build_units(store, site):
        key = unit.path.lower()
        if key in folded:
            raise DuplicateIdentifierError(unit.identifier, (folded[key], unit.path))
        folded[key] = unit.path
        _check_compiles(unit)
        files[unit.path] = unit.source

    return dict(sorted(files.items()))


def _check_compiles(unit: SourceUnit) -> None:
    try:
        compile(unit.source, unit.path, "exec")
    except SyntaxError as e:
        raise BuildError(f"Generated unit {unit.path} does not compile: {e}") from e


# --- Disk I/O ---


def _looks_generated(out_dir: Path) -> bool:
    init = out_dir / PACKAGE_INIT
    if not init.is_file():
        return False
    with open(init, encoding="utf-8") as f:
        return f.readline().startswith(GENERATED_MARKER)


def _write_files(root: Path, files: dict[str, str]) -> None:
    for rel_path, content in files.items():
        target = root / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)


def write_tree(out_dir: Path, files: dict[str, str]) -> None:
    """
    Replace out_dir with the rendered files.

    Files are written to a sibling staging directory which is then swapped
    in, so readers see either the old tree or the new one. Refuses to
    replace a non-empty directory that was not produced by a previous run.
    """
    if out_dir.exists() and any(out_dir.iterdir()) and not _looks_generated(out_dir):
        raise BuildError(
            f"Refusing to overwrite {out_dir}: it is not a generated calculator package"
        )

    staging = out_dir.with_name(f".{out_dir.name}.staging")
    previous = out_dir.with_name(f".{out_dir.name}.previous")
    for leftover in (staging, previous):
        if leftover.exists():
            shutil.rmtree(leftover)

    _write_files(staging, files)

    if out_dir.exists():
        out_dir.rename(previous)
    staging.rename(out_dir)
    if previous.exists():
        shutil.rmtree(previous)

    logger.info("Wrote %d files to %s", len(files), out_dir)


def _files_on_disk(out_dir: Path) -> set[str]:
    found: set[str] = set()
    for path in out_dir.rglob("*"):
        if path.is_dir() or any(part in IGNORE_DIRS for part in path.parts):
            continue
        if path.suffix == ".pyc":
            continue
        found.add(path.relative_to(out_dir).as_posix())
    return found


def check_tree(out_dir: Path, files: dict[str, str]) -> list[str]:
    """
    Compare the tree on disk with a fresh render.

    Returns human-readable drift entries; empty means up to date.
    """
    if not out_dir.is_dir():
        return [f"Generated package not found: {out_dir}"]

    problems: list[str] = []
    on_disk = _files_on_disk(out_dir)

    for rel_path, content in files.items():
        if rel_path not in on_disk:
            problems.append(f"Missing: {rel_path}")
            continue
        with open(out_dir / rel_path, encoding="utf-8", newline="") as f:
            if f.read() != content:
                problems.append(f"Stale: {rel_path}")

    for rel_path in sorted(on_disk - set(files)):
        problems.append(f"Unexpected: {rel_path}")

    return problems
