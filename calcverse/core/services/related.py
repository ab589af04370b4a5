"""
Related-calculator resolution.

Shared by the page synthesizer (generation time) and the slug resolver
(request time), so both render the same list.

Policy:
1. explicit `related` entries, matched by id or slug, in list order
2. then same-category calculators in store order
3. self excluded, duplicates dropped, capped at `limit`
Dangling explicit references are skipped, never fatal.
"""

from __future__ import annotations

import logging

from calcverse.catalog.store import CalculatorStore
from calcverse.core.ports.site import RelatedLink
from calcverse.domain.entities import CalculatorDescriptor

logger = logging.getLogger(__name__)

DEFAULT_RELATED_LIMIT = 4


def resolve_related(
    calculator: CalculatorDescriptor,
    store: CalculatorStore,
    limit: int = DEFAULT_RELATED_LIMIT,
) -> tuple[RelatedLink, ...]:
    """Resolve the related-calculator links for one calculator."""
    if limit <= 0:
        return ()

    picked: list[CalculatorDescriptor] = []
    seen: set[str] = {calculator.id}

    def take(candidate: CalculatorDescriptor) -> None:
        if candidate.id not in seen and len(picked) < limit:
            seen.add(candidate.id)
            picked.append(candidate)

    for key in calculator.related:
        target = store.get(key)
        if target is None:
            logger.debug("Dropping dangling related reference %r on %s", key, calculator.id)
            continue
        take(target)

    for sibling in store.in_category(calculator.category):
        take(sibling)

    return tuple(RelatedLink(title=c.title, slug=c.slug) for c in picked)
