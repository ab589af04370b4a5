"""
Calculator Routes - server-rendered calculator pages and JSON recompute.

GET /calculators/{slug} resolves the slug through SlugResolver and renders
the generated widget inside the HTML layout. Query parameters are replayed
as input values, so a submitted form renders with its results.

POST /api/calculators/{slug}/calculate runs the same widget and returns
formatted results as JSON.

Every non-resolved outcome is a 404; nothing raises to the client.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from calcverse.adapters import (
    HtmlCalculatorLayout,
    HtmlMetaCollector,
    render_document,
    render_not_found,
)
from calcverse.api.deps import get_resolver, get_site_config
from calcverse.api.schemas import CalculateRequest, CalculateResponse
from calcverse.components.resolver import Resolution, SlugResolver
from calcverse.runtime import render_calculator_page
from calcverse.site import SiteConfig

router = APIRouter()
api_router = APIRouter()


# --- Rendering ---


def render_resolution(resolution: Resolution, inputs: dict[str, Any]) -> str:
    """Full HTML document for a resolved calculator."""
    assert resolution.component is not None
    assert resolution.meta is not None
    assert resolution.layout_props is not None

    metadata = HtmlMetaCollector()
    body = render_calculator_page(
        resolution.component,
        resolution.meta,
        resolution.layout_props,
        metadata=metadata,
        layout=HtmlCalculatorLayout(),
        inputs=inputs,
    )
    return render_document(metadata.render_head(), body)


def not_found_response(site: SiteConfig) -> HTMLResponse:
    return HTMLResponse(content=render_not_found(site.site.name), status_code=404)


# --- SSR ---


@router.get("/calculators", response_class=HTMLResponse)
@router.get("/calculators/", response_class=HTMLResponse)
def calculator_without_slug(
    resolver: SlugResolver = Depends(get_resolver),
    site: SiteConfig = Depends(get_site_config),
) -> HTMLResponse:
    """A calculator URL without a slug is not found."""
    resolver.resolve(None)
    return not_found_response(site)


@router.get("/calculators/{slug}", response_class=HTMLResponse)
def calculator_page(
    slug: str,
    request: Request,
    resolver: SlugResolver = Depends(get_resolver),
    site: SiteConfig = Depends(get_site_config),
) -> HTMLResponse:
    resolution = resolver.resolve(slug)
    if not resolution.found:
        return not_found_response(site)

    inputs = dict(request.query_params)
    return HTMLResponse(content=render_resolution(resolution, inputs))


# --- JSON recompute ---


@api_router.post("/calculators/{slug}/calculate", response_model=CalculateResponse)
def calculate(
    slug: str,
    payload: CalculateRequest,
    resolver: SlugResolver = Depends(get_resolver),
) -> CalculateResponse:
    resolution = resolver.resolve(slug)
    if not resolution.found or resolution.component is None:
        raise HTTPException(status_code=404, detail="Calculator not found")

    widget = resolution.component()
    widget.apply_inputs(payload.inputs)

    error = widget.error
    return CalculateResponse(
        slug=slug,
        inputs=widget.values,
        results={} if error else widget.formatted_results(),
        error=error,
    )
