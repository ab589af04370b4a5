"""
Resolver component - slug -> generated calculator component.

Handles every navigation to /calculators/{slug}. All failure modes are
outcomes, not exceptions.
"""

from __future__ import annotations

from calcverse.catalog.store import CalculatorStore
from calcverse.site.models import SiteConfig

from ._impl import SlugResolver
from .models import Resolution, ResolveSlugInput
from .ports import ComponentLookupPort


def run_resolve(
    inp: ResolveSlugInput,
    *,
    store: CalculatorStore,
    components: ComponentLookupPort,
    site: SiteConfig | None = None,
) -> Resolution:
    """
    Resolve a slug to its component.

    Args:
        inp: Input containing the slug (may be None or empty).
        store: Loaded calculator store.
        components: Identifier -> component lookup (the generated barrel map).
        site: Site configuration for metadata; defaults apply when omitted.

    Returns:
        Resolution describing the outcome.
    """
    resolver = SlugResolver(store=store, components=components, site=site or SiteConfig())
    return resolver.resolve(inp.slug)
