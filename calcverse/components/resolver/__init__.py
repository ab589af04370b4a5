"""
Resolver component - runtime slug dispatch.
"""

from ._impl import SlugResolver
from .component import run_resolve
from .models import Resolution, ResolveOutcome, ResolveSlugInput
from .ports import ComponentLookupPort

__all__ = [
    # Entry points
    "run_resolve",
    "SlugResolver",
    # Models
    "Resolution",
    "ResolveOutcome",
    "ResolveSlugInput",
    # Ports
    "ComponentLookupPort",
]
