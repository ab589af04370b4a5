"""
CalculatorStore - validated, read-only view over the calculators document.

Lookups are exact on id and slug. Uniqueness is enforced case-insensitively
by the loader, so an exact lookup never has two candidates.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterator

from calcverse.domain.entities import CalculatorDescriptor, CategoryInfo, StoreDocument


class CalculatorStore:
    """Ordered calculator descriptors plus category and site metadata."""

    def __init__(self, document: StoreDocument) -> None:
        self.document = document
        self._by_id = {c.id: c for c in document.calculators}
        self._by_slug = {c.slug: c for c in document.calculators}

    @property
    def calculators(self) -> tuple[CalculatorDescriptor, ...]:
        return self.document.calculators

    @property
    def categories(self) -> dict[str, CategoryInfo]:
        return dict(self.document.categories)

    def __iter__(self) -> Iterator[CalculatorDescriptor]:
        return iter(self.document.calculators)

    def __len__(self) -> int:
        return len(self.document.calculators)

    def get_by_slug(self, slug: str) -> CalculatorDescriptor | None:
        return self._by_slug.get(slug)

    def get_by_id(self, calculator_id: str) -> CalculatorDescriptor | None:
        return self._by_id.get(calculator_id)

    def get(self, key: str) -> CalculatorDescriptor | None:
        """Look up by id first, then by slug (the forms `related` may use)."""
        return self._by_id.get(key) or self._by_slug.get(key)

    def in_category(self, category: str) -> list[CalculatorDescriptor]:
        return [c for c in self.document.calculators if c.category == category]

    @property
    def digest(self) -> str:
        return store_digest(self.document)


def store_digest(document: StoreDocument) -> str:
    """SHA256 over the canonical JSON form of the validated document."""
    canonical = json.dumps(
        document.model_dump(mode="json"),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
