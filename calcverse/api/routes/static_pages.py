"""
Static calculator routes - one GET route per entry in the generated
route table (`routes.ROUTES`), each bound to its generated page class.

Mounted ahead of the dynamic slug route when CALCVERSE_STATIC_ROUTES is
set; calculators the table does not cover fall through to slug dispatch.
"""

from collections.abc import Callable

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from calcverse.adapters import HtmlCalculatorLayout, HtmlMetaCollector, render_document
from calcverse.runtime import CalculatorPage, ComponentRegistry


def _page_endpoint(page_cls: type[CalculatorPage]) -> Callable[[Request], HTMLResponse]:
    def endpoint(request: Request) -> HTMLResponse:
        metadata = HtmlMetaCollector()
        body = page_cls().render(
            metadata, HtmlCalculatorLayout(), inputs=dict(request.query_params)
        )
        return HTMLResponse(content=render_document(metadata.render_head(), body))

    endpoint.__name__ = f"page_{page_cls.__name__}"
    return endpoint


def create_static_router(registry: ComponentRegistry) -> APIRouter:
    router = APIRouter()
    for path, page_cls in registry.routes:
        router.add_api_route(
            path,
            _page_endpoint(page_cls),
            methods=["GET"],
            response_class=HTMLResponse,
        )
    return router
