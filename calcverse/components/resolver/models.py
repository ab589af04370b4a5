"""
Resolver component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from calcverse.core.ports.site import LayoutProps, PageMeta
from calcverse.domain.entities import CalculatorDescriptor
from calcverse.runtime.widget import CalculatorWidget


class ResolveOutcome(str, Enum):
    """Terminal states of one slug resolution."""

    MISSING_SLUG = "missing_slug"
    UNKNOWN_SLUG = "unknown_slug"
    COMPONENT_MISSING = "component_missing"
    RESOLVED = "resolved"


# --- Input Models ---


@dataclass(frozen=True)
class ResolveSlugInput:
    """Input for resolving a calculator URL slug."""

    slug: str | None


# --- Output Models ---


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a slug; only RESOLVED carries a component."""

    outcome: ResolveOutcome
    slug: str | None = None
    identifier: str | None = None
    calculator: CalculatorDescriptor | None = None
    component: type[CalculatorWidget] | None = None
    meta: PageMeta | None = None
    layout_props: LayoutProps | None = None

    @property
    def found(self) -> bool:
        return self.outcome is ResolveOutcome.RESOLVED
