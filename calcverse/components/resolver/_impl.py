"""
SlugResolver - request-time dispatch from URL slug to generated component.

Re-derives the component identifier from the slug with the same function
the generator used, then looks it up in the registry's explicit map.

Outcomes:
- MISSING_SLUG: no slug in the request -> not found
- UNKNOWN_SLUG: slug is not in the store -> not found
- COMPONENT_MISSING: slug known but no component under the derived
  identifier (generator not re-run) -> logged, not found
- RESOLVED: component + page metadata + layout props

Never raises to the page boundary.
"""

from __future__ import annotations

import logging

from calcverse.catalog.store import CalculatorStore
from calcverse.core.services.identifiers import component_identifier
from calcverse.core.services.page_meta import build_layout_props, build_page_meta
from calcverse.domain.errors import InvalidKeyError
from calcverse.site.models import SiteConfig

from .models import Resolution, ResolveOutcome
from .ports import ComponentLookupPort

logger = logging.getLogger(__name__)


class SlugResolver:
    """Resolves calculator slugs against the store and component registry."""

    def __init__(
        self,
        store: CalculatorStore,
        components: ComponentLookupPort,
        site: SiteConfig,
    ) -> None:
        self.store = store
        self.components = components
        self.site = site

    def resolve(self, slug: str | None) -> Resolution:
        if not slug:
            return Resolution(outcome=ResolveOutcome.MISSING_SLUG)

        calculator = self.store.get_by_slug(slug)
        if calculator is None:
            return Resolution(outcome=ResolveOutcome.UNKNOWN_SLUG, slug=slug)

        try:
            identifier = component_identifier(slug)
        except InvalidKeyError as e:
            # Validated stores never reach this
            logger.error("Calculator slug %r cannot be dispatched: %s", slug, e)
            return Resolution(
                outcome=ResolveOutcome.COMPONENT_MISSING, slug=slug, calculator=calculator
            )

        component = self.components.get(identifier)
        if component is None:
            logger.error(
                "Component not found: %s (slug %r). The generated package is out of "
                "date with the calculator store.",
                identifier,
                slug,
            )
            return Resolution(
                outcome=ResolveOutcome.COMPONENT_MISSING,
                slug=slug,
                identifier=identifier,
                calculator=calculator,
            )

        return Resolution(
            outcome=ResolveOutcome.RESOLVED,
            slug=slug,
            identifier=identifier,
            calculator=calculator,
            component=component,
            meta=build_page_meta(calculator, self.site),
            layout_props=build_layout_props(calculator, self.store, self.site),
        )
