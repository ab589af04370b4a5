"""
Identifier derivation - the one slug -> identifier transformation.

Generation (file names, class names, barrel exports) and request-time
dispatch both call derive_identifier with the calculator's slug, so the
two sides can never drift apart.

Key behaviors:
- Words are split on "-" and joined in PascalCase
- Words starting with a digit get a leading underscore ("4-wheel" -> "_4Wheel")
- One trailing "Calculator" is dropped before the suffix is appended
- Deterministic and side-effect free
- Total over valid keys; code_identifier adds the class-name check used by
  generation and dispatch
"""

from __future__ import annotations

import keyword
import re

from calcverse.domain.errors import InvalidKeyError

COMPONENT_SUFFIX = "CalculatorComponent"
PAGE_SUFFIX = "CalculatorPage"

WORD_SEPARATOR = "-"
STRIPPED_TAIL = "Calculator"

_KEY_PATTERN = re.compile(r"[A-Za-z0-9-]+")


def validate_key(raw_key: str) -> None:
    """Raise InvalidKeyError unless raw_key is a non-empty [A-Za-z0-9-] string."""
    if not raw_key:
        raise InvalidKeyError(raw_key, "key is empty")
    if not _KEY_PATTERN.fullmatch(raw_key):
        bad = sorted({c for c in raw_key if not _KEY_PATTERN.fullmatch(c)})
        raise InvalidKeyError(
            raw_key, f"contains characters outside [A-Za-z0-9-]: {''.join(bad)!r}"
        )


def _transform_word(word: str) -> str:
    if word and word[0].isdigit():
        word = "_" + word
    return word[:1].upper() + word[1:]


def derive_identifier(raw_key: str, suffix: str) -> str:
    """
    Derive a code-safe identifier from a kebab-case key.

    Examples:
        derive_identifier("mortgage", COMPONENT_SUFFIX) -> "MortgageCalculatorComponent"
        derive_identifier("bmi-calculator", "Page") -> "BmiPage"
        derive_identifier("401k", COMPONENT_SUFFIX) -> "_401kCalculatorComponent"

    Raises:
        InvalidKeyError: raw_key is empty or has characters outside [A-Za-z0-9-].
    """
    validate_key(raw_key)

    joined = "".join(_transform_word(w) for w in raw_key.split(WORD_SEPARATOR))
    if joined.endswith(STRIPPED_TAIL):
        joined = joined[: -len(STRIPPED_TAIL)]

    return joined + suffix


def code_identifier(raw_key: str, suffix: str) -> str:
    """
    derive_identifier, restricted to results usable as a Python class name.

    Raises:
        InvalidKeyError: the key is invalid, or derives to a keyword or
            non-identifier (possible only with an empty or unusual suffix).
    """
    identifier = derive_identifier(raw_key, suffix)
    if not identifier.isidentifier() or keyword.iskeyword(identifier):
        raise InvalidKeyError(raw_key, f"derives to non-identifier {identifier!r}")
    return identifier


def component_identifier(slug: str) -> str:
    """Identifier of the generated component class for a slug."""
    return code_identifier(slug, COMPONENT_SUFFIX)


def page_identifier(slug: str) -> str:
    """Identifier of the generated page class for a slug."""
    return code_identifier(slug, PAGE_SUFFIX)
