"""
HTML layout collaborator and document shell.

HtmlCalculatorLayout renders the breadcrumb, the calculator body and the
related-calculators block. render_document wraps a body with <head>
content into a full page.
"""

from __future__ import annotations

import html

from calcverse.core.ports.site import LayoutProps
from calcverse.core.services.page_meta import calculator_path


class HtmlCalculatorLayout:
    """LayoutPort implementation for server-rendered pages."""

    def __init__(self, home_path: str = "/") -> None:
        self.home_path = home_path

    def render_calculator_layout(self, props: LayoutProps, children: str) -> str:
        related = ""
        if props.related_calculators:
            links = "\n".join(
                f'<li><a href="{_e(calculator_path(r.slug))}">{_e(r.title)}</a></li>'
                for r in props.related_calculators
            )
            related = f"""
<aside class="related-calculators">
<h3>Related Calculators</h3>
<ul>
{links}
</ul>
</aside>"""

        description = f"<p>{_e(props.description)}</p>" if props.description else ""
        return f"""<main class="calculator-layout">
<nav class="breadcrumb"><a href="{_e(self.home_path)}">Home</a> &rsaquo; <span>{_e(props.title)}</span></nav>
<h1>{_e(props.title)}</h1>
{description}
{children}{related}
</main>"""


def render_document(head: str, body: str) -> str:
    """Render a complete HTML page."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    {head}
</head>
<body>
    {body}
</body>
</html>"""


def render_not_found(site_name: str, home_path: str = "/") -> str:
    """Full not-found page."""
    head = f"<title>Page Not Found - {_e(site_name)}</title>"
    body = f"""<main class="not-found">
<h1>404 - Calculator Not Found</h1>
<p>The calculator you are looking for does not exist or has moved.</p>
<p><a href="{_e(home_path)}">Back to all calculators</a></p>
</main>"""
    return render_document(head, body)


def _e(text: str) -> str:
    return html.escape(text, quote=True)
