"""
Page metadata and layout props for calculator pages.

Both the page synthesizer and the slug resolver build their metadata here,
so a generated page and a dynamically resolved page are indistinguishable.
"""

from __future__ import annotations

from calcverse.catalog.store import CalculatorStore
from calcverse.core.ports.site import LayoutProps, PageMeta
from calcverse.core.services.related import resolve_related
from calcverse.domain.entities import CalculatorDescriptor
from calcverse.site.models import SiteConfig

ROUTE_PREFIX = "/calculators"


def calculator_path(slug: str) -> str:
    """URL path of a calculator page."""
    return f"{ROUTE_PREFIX}/{slug}"


def build_page_meta(calculator: CalculatorDescriptor, site: SiteConfig) -> PageMeta:
    """Title, description, keywords and canonical URL for one calculator."""
    return PageMeta(
        title=f"{calculator.title}{site.site.title_suffix}",
        description=calculator.meta_description or calculator.description,
        canonical_url=f"{site.site.base_url}{calculator_path(calculator.slug)}",
        keywords=tuple(calculator.seo_keywords),
    )


def build_layout_props(
    calculator: CalculatorDescriptor,
    store: CalculatorStore,
    site: SiteConfig,
) -> LayoutProps:
    """Layout props including the resolved related-calculator links."""
    return LayoutProps(
        title=calculator.title,
        description=calculator.description,
        related_calculators=resolve_related(
            calculator, store, limit=site.calculator_pages.related_limit
        ),
    )
