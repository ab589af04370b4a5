"""
Runtime support imported by generated calculator code.

Generated modules depend only on the names re-exported here.
"""

from calcverse.core.ports.site import LayoutProps, PageMeta, RelatedLink
from calcverse.domain.entities import InputSpec, OutputSpec, SelectOption
from calcverse.runtime.page import CalculatorPage, render_calculator_page
from calcverse.runtime.registry import (
    EMPTY_REGISTRY,
    ComponentRegistry,
    check_registry_digest,
    load_registry,
)
from calcverse.runtime.widget import ERROR_KEY, ERROR_MESSAGE, CalculatorWidget

__all__ = [
    "CalculatorPage",
    "CalculatorWidget",
    "ComponentRegistry",
    "EMPTY_REGISTRY",
    "ERROR_KEY",
    "ERROR_MESSAGE",
    "InputSpec",
    "LayoutProps",
    "OutputSpec",
    "PageMeta",
    "RelatedLink",
    "SelectOption",
    "check_registry_digest",
    "load_registry",
    "render_calculator_page",
]
