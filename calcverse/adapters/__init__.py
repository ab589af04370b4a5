from calcverse.adapters.html_layout import (
    HtmlCalculatorLayout,
    render_document,
    render_not_found,
)
from calcverse.adapters.html_meta import HtmlMetaCollector, render_meta_tags_html

__all__ = [
    "HtmlCalculatorLayout",
    "HtmlMetaCollector",
    "render_document",
    "render_meta_tags_html",
    "render_not_found",
]
