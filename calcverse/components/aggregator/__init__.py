"""
Aggregator component - barrel module over generated units.
"""

from ._impl import COMPONENT_MAP_NAME, aggregate

__all__ = [
    "COMPONENT_MAP_NAME",
    "aggregate",
]
