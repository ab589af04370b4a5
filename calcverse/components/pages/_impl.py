"""
Route/Page Synthesizer - page units and the static route table.

Each page unit binds per-calculator metadata, the resolved related links
and the synthesized component. The route table binds the literal path
"/calculators/<slug>" to each page unit, in store order.

Key behaviors:
- Page metadata and related links come from the same builders the slug
  resolver uses, so static and dynamic pages render identically
- A slug that fails the identifier precondition aborts the build; no
  calculator is silently dropped
"""

from __future__ import annotations

from calcverse.catalog.store import CalculatorStore
from calcverse.core.services.identifiers import component_identifier, page_identifier
from calcverse.core.services.page_meta import (
    build_layout_props,
    build_page_meta,
    calculator_path,
)
from calcverse.core.services.source import INDENT, SourceUnit, generated_header, py_literal
from calcverse.domain.entities import CalculatorDescriptor
from calcverse.site.models import SiteConfig

PAGES_DIR = "pages"
PAGE_MAP_NAME = "PAGES"
ROUTES_MODULE = "routes.py"


def synthesize_page(
    calculator: CalculatorDescriptor,
    store: CalculatorStore,
    site: SiteConfig,
) -> SourceUnit:
    """Emit the page module for one calculator."""
    identifier = page_identifier(calculator.slug)
    component = component_identifier(calculator.slug)
    meta = build_page_meta(calculator, site)
    props = build_layout_props(calculator, store, site)

    lines = generated_header(f"calculator '{calculator.id}'")
    lines.extend(
        [
            "from calcverse.runtime import CalculatorPage, LayoutProps, PageMeta, RelatedLink",
            "",
            f"from ..components import {component}",
            "",
            "",
            f"class {identifier}(CalculatorPage):",
            f"{INDENT}path = {py_literal(calculator_path(calculator.slug))}",
            f"{INDENT}component = {component}",
            f"{INDENT}meta = PageMeta(",
            f"{INDENT * 2}title={py_literal(meta.title)},",
            f"{INDENT * 2}description={py_literal(meta.description)},",
            f"{INDENT * 2}canonical_url={py_literal(meta.canonical_url)},",
            f"{INDENT * 2}keywords={py_literal(meta.keywords)},",
            f"{INDENT})",
            f"{INDENT}layout_props = LayoutProps(",
            f"{INDENT * 2}title={py_literal(props.title)},",
            f"{INDENT * 2}description={py_literal(props.description)},",
        ]
    )
    if props.related_calculators:
        lines.append(f"{INDENT * 2}related_calculators=(")
        lines.extend(
            f"{INDENT * 3}RelatedLink(title={py_literal(r.title)}, slug={py_literal(r.slug)}),"
            for r in props.related_calculators
        )
        lines.append(f"{INDENT * 2}),")
    lines.append(f"{INDENT})")
    lines.append("")

    return SourceUnit(
        identifier=identifier,
        path=f"{PAGES_DIR}/{identifier}.py",
        source="\n".join(lines),
    )


def synthesize_routes(store: CalculatorStore) -> SourceUnit:
    """Emit the static route table: (path, page class) per calculator."""
    pages = [page_identifier(c.slug) for c in store]

    lines = generated_header(f"{len(pages)} calculators")
    if pages:
        lines.append("from .pages import (")
        lines.extend(f"{INDENT}{p}," for p in pages)
        lines.append(")")
        lines.append("")

    lines.append("ROUTES = (")
    lines.extend(
        f"{INDENT}({py_literal(calculator_path(c.slug))}, {page}),"
        for c, page in zip(store, pages, strict=True)
    )
    lines.append(")")
    lines.append("")

    return SourceUnit(identifier="ROUTES", path=ROUTES_MODULE, source="\n".join(lines))
