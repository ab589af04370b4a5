"""
Calculator store loader.

Reads the calculators document (YAML or JSON; JSON is valid YAML), validates
it against the pydantic schema, then enforces the cross-record invariants a
schema cannot express. Every violation is fatal for the build.

Key behaviors:
- id and slug are unique case-insensitively
- input ids and output ids are unique within a calculator
- metadata.total_calculators and categories[*].count match the calculators
- calculate_function parses and defines a top-level calculate()
- derived identifiers never collide across the store
"""

from __future__ import annotations

import ast
import logging
from collections import Counter
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from calcverse.catalog.store import CalculatorStore
from calcverse.core.services.identifiers import (
    COMPONENT_SUFFIX,
    code_identifier,
    validate_key,
)
from calcverse.domain.entities import CalculatorDescriptor, StoreDocument
from calcverse.domain.errors import (
    DuplicateIdentifierError,
    DuplicateKeyError,
    MalformedStoreError,
    StoreCountMismatchError,
)

logger = logging.getLogger(__name__)

CALCULATE_FUNCTION_NAME = "calculate"


def load_store(path: Path) -> CalculatorStore:
    """
    Load and validate the calculators document.
    Raises FileNotFoundError if file missing.
    Raises BuildError subclasses for any schema or invariant violation.
    """
    if not path.exists():
        raise FileNotFoundError(f"Calculator store not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise MalformedStoreError(f"invalid YAML/JSON syntax: {e}") from e

    store = parse_store(data)
    logger.info("Loaded %d calculators from %s", len(store), path)
    return store


def load_all(path: Path) -> list[CalculatorDescriptor]:
    """Ordered descriptors from the store at path."""
    return list(load_store(path).calculators)


def parse_store(data: Any) -> CalculatorStore:
    """Validate an already-parsed document and build the store."""
    if not isinstance(data, dict):
        raise MalformedStoreError("document root must be a mapping")

    try:
        document = StoreDocument.model_validate(data)
    except ValidationError as e:
        raise MalformedStoreError(f"schema validation failed:\n{e}") from e

    validate_document(document)
    return CalculatorStore(document)


def validate_document(document: StoreDocument) -> None:
    """Enforce invariants across records. Fails on the first violation."""
    calculators = document.calculators

    for calc in calculators:
        validate_key(calc.id)
        validate_key(calc.slug)

    _check_unique_keys("id", [c.id for c in calculators])
    _check_unique_keys("slug", [c.slug for c in calculators])

    for calc in calculators:
        _check_fields(calc)
        _check_calculate_function(calc)

    _check_counts(document)

    _check_unique_identifiers([c.slug for c in calculators])
    _check_unique_identifiers([c.id for c in calculators])


# --- Invariant checks ---


def _check_unique_keys(kind: str, values: list[str]) -> None:
    seen: set[str] = set()
    for value in values:
        folded = value.lower()
        if folded in seen:
            raise DuplicateKeyError(kind, value)
        seen.add(folded)


def _check_unique_identifiers(keys: list[str]) -> None:
    # Compared case-folded: generated module files must not clash on
    # case-insensitive filesystems either
    owners: dict[str, str] = {}
    for key in keys:
        identifier = code_identifier(key, COMPONENT_SUFFIX)
        folded = identifier.lower()
        if folded in owners:
            raise DuplicateIdentifierError(identifier, (owners[folded], key))
        owners[folded] = key


def _check_fields(calc: CalculatorDescriptor) -> None:
    for kind, ids in (
        ("input", [i.id for i in calc.inputs]),
        ("output", [o.id for o in calc.outputs]),
    ):
        dupes = sorted(k for k, n in Counter(ids).items() if n > 1)
        if dupes:
            raise MalformedStoreError(
                f"calculator '{calc.id}' has duplicate {kind} ids: {', '.join(dupes)}"
            )

    for spec in calc.inputs:
        if spec.type == "select" and not spec.options:
            raise MalformedStoreError(
                f"calculator '{calc.id}' select input '{spec.id}' has no options"
            )


def _check_calculate_function(calc: CalculatorDescriptor) -> None:
    try:
        tree = ast.parse(calc.calculate_function)
    except SyntaxError as e:
        raise MalformedStoreError(
            f"calculator '{calc.id}' calculate_function is not valid Python: "
            f"{e.msg} (line {e.lineno})"
        ) from e

    defined = any(
        isinstance(node, ast.FunctionDef) and node.name == CALCULATE_FUNCTION_NAME
        for node in tree.body
    )
    if not defined:
        raise MalformedStoreError(
            f"calculator '{calc.id}' calculate_function must define "
            f"a top-level {CALCULATE_FUNCTION_NAME}(inputs)"
        )


def _check_counts(document: StoreDocument) -> None:
    actual_total = len(document.calculators)
    declared_total = document.metadata.total_calculators
    if declared_total != actual_total:
        raise StoreCountMismatchError(
            "metadata.total_calculators", declared_total, actual_total
        )

    actual = Counter(c.category for c in document.calculators)
    for key, info in document.categories.items():
        if info.count != actual.get(key, 0):
            raise StoreCountMismatchError(
                f"categories.{key}.count", info.count, actual.get(key, 0)
            )

    # A category in use must be declared, otherwise its count is unchecked
    for key, count in actual.items():
        if key not in document.categories:
            raise StoreCountMismatchError(f"categories.{key}.count", 0, count)
