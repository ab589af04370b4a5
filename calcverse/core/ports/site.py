"""
Site collaborator ports.

The metadata port is the only place calculator pages talk to SEO tooling;
the layout port owns breadcrumbs, chrome and the related-calculators block.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class PageMeta:
    """Per-page metadata handed to the metadata collaborator."""

    title: str
    description: str
    canonical_url: str
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class RelatedLink:
    """Link to a related calculator."""

    title: str
    slug: str


@dataclass(frozen=True)
class LayoutProps:
    """Props for the shared calculator layout."""

    title: str
    description: str = ""
    related_calculators: tuple[RelatedLink, ...] = field(default_factory=tuple)


class MetadataPort(Protocol):
    """Metadata collaborator interface."""

    def set_page_meta(self, meta: PageMeta) -> None:
        """Attach metadata to the page being rendered."""
        ...


class LayoutPort(Protocol):
    """Layout collaborator interface."""

    def render_calculator_layout(self, props: LayoutProps, children: str) -> str:
        """Wrap rendered calculator markup in the shared layout."""
        ...
