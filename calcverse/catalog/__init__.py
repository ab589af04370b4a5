"""
Calculator descriptor store.

One record per calculator, loaded once per build or process start.
"""

from .loader import load_all, load_store, parse_store, validate_document
from .store import CalculatorStore, store_digest

__all__ = [
    "CalculatorStore",
    "load_all",
    "load_store",
    "parse_store",
    "store_digest",
    "validate_document",
]
