"""
Error types for calculator generation and dispatch.

Build errors abort a generation pass. Runtime code never raises these to
the page boundary; it turns them into not-found outcomes instead.
"""

from __future__ import annotations


class CalcverseError(Exception):
    """Base calcverse error."""

    pass


class BuildError(CalcverseError):
    """Fatal error during store loading or generation."""

    pass


class MalformedStoreError(BuildError):
    """Descriptor store cannot be parsed as the expected schema."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed calculator store: {reason}")


class StoreCountMismatchError(MalformedStoreError):
    """A declared count disagrees with the calculators actually present."""

    def __init__(self, field: str, declared: int, actual: int) -> None:
        self.field = field
        self.declared = declared
        self.actual = actual
        super().__init__(f"{field} declares {declared} but store contains {actual}")


class DuplicateKeyError(BuildError):
    """Two descriptors share an id or slug (case-insensitive)."""

    def __init__(self, kind: str, value: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Duplicate calculator {kind}: '{value}'")


class DuplicateIdentifierError(BuildError):
    """Two keys derive to the same identifier."""

    def __init__(self, identifier: str, keys: tuple[str, ...] = ()) -> None:
        self.identifier = identifier
        self.keys = keys
        detail = f" (from {', '.join(repr(k) for k in keys)})" if keys else ""
        super().__init__(f"Duplicate derived identifier '{identifier}'{detail}")


class InvalidKeyError(BuildError):
    """Key cannot be turned into an identifier."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid key '{key}': {reason}")
