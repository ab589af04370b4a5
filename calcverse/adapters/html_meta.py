"""
HtmlMetaCollector - default metadata collaborator.

Collects the PageMeta a page sets and renders it as <head> content:
title, description, keywords, canonical link, OpenGraph and Twitter tags.
"""

from __future__ import annotations

import html
from dataclasses import dataclass

from calcverse.core.ports.site import PageMeta


@dataclass
class MetaTag:
    """HTML meta tag representation."""

    name: str | None = None
    property: str | None = None  # For OG tags
    content: str = ""


def meta_tags(meta: PageMeta) -> list[MetaTag]:
    """Meta tags for a calculator page."""
    tags = [
        MetaTag(name="description", content=meta.description),
    ]
    if meta.keywords:
        tags.append(MetaTag(name="keywords", content=", ".join(meta.keywords)))
    tags.extend(
        [
            MetaTag(property="og:title", content=meta.title),
            MetaTag(property="og:description", content=meta.description),
            MetaTag(property="og:type", content="website"),
            MetaTag(property="og:url", content=meta.canonical_url),
            MetaTag(name="twitter:card", content="summary"),
            MetaTag(name="twitter:title", content=meta.title),
            MetaTag(name="twitter:description", content=meta.description),
        ]
    )
    return tags


def render_meta_tags_html(meta: PageMeta) -> str:
    """Render PageMeta to an HTML head fragment."""
    html_parts: list[str] = [f"<title>{_e(meta.title)}</title>"]

    for tag in meta_tags(meta):
        if tag.property:
            html_parts.append(
                f'<meta property="{_e(tag.property)}" content="{_e(tag.content)}" />'
            )
        elif tag.name:
            html_parts.append(f'<meta name="{_e(tag.name)}" content="{_e(tag.content)}" />')

    html_parts.append(f'<link rel="canonical" href="{_e(meta.canonical_url)}" />')
    return "\n    ".join(html_parts)


class HtmlMetaCollector:
    """MetadataPort implementation for server-rendered pages."""

    def __init__(self) -> None:
        self.meta: PageMeta | None = None
        self.calls = 0

    def set_page_meta(self, meta: PageMeta) -> None:
        self.meta = meta
        self.calls += 1

    def render_head(self) -> str:
        if self.meta is None:
            return ""
        return render_meta_tags_html(self.meta)


def _e(text: str) -> str:
    return html.escape(text, quote=True)
