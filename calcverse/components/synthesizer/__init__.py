"""
Synthesizer component - calculator descriptor -> component source unit.
"""

from ._impl import COMPONENTS_DIR, synthesize

__all__ = [
    "COMPONENTS_DIR",
    "synthesize",
]
