"""
Build component - generation pass, atomic write and drift check.
"""

from ._impl import (
    GENERATED_MARKER,
    build_units,
    check_tree,
    render_tree,
    write_tree,
)

__all__ = [
    "GENERATED_MARKER",
    "build_units",
    "check_tree",
    "render_tree",
    "write_tree",
]
