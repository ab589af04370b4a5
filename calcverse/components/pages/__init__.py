"""
Pages component - page units and the static route table.
"""

from ._impl import PAGE_MAP_NAME, PAGES_DIR, ROUTES_MODULE, synthesize_page, synthesize_routes

__all__ = [
    "PAGES_DIR",
    "PAGE_MAP_NAME",
    "ROUTES_MODULE",
    "synthesize_page",
    "synthesize_routes",
]
