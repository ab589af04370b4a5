"""
Resolver component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from calcverse.runtime.widget import CalculatorWidget


class ComponentLookupPort(Protocol):
    """Identifier -> generated component lookup."""

    def get(self, identifier: str) -> type[CalculatorWidget] | None:
        """Return the component registered under identifier, if any."""
        ...
