"""
ComponentRegistry - explicit identifier -> component map, built once.

Loaded from the generated package's barrel (`components.COMPONENTS`) and
route table (`routes.ROUTES`). Lookup failure is an ordinary `None`, which
the slug resolver turns into a not-found outcome.
"""

from __future__ import annotations

import importlib
import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from calcverse.runtime.page import CalculatorPage
from calcverse.runtime.widget import CalculatorWidget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComponentRegistry:
    """Components, pages and routes from one generated package."""

    components: Mapping[str, type[CalculatorWidget]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    pages: Mapping[str, type[CalculatorPage]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    routes: tuple[tuple[str, type[CalculatorPage]], ...] = ()
    digest: str | None = None
    package: str | None = None

    def get(self, identifier: str) -> type[CalculatorWidget] | None:
        return self.components.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.components

    def __len__(self) -> int:
        return len(self.components)


EMPTY_REGISTRY = ComponentRegistry()


def _is_missing_package(error: ModuleNotFoundError, package_name: str) -> bool:
    missing = error.name or ""
    return missing == package_name or package_name.startswith(missing + ".")


def load_registry(package_name: str, search_path: Path | None = None) -> ComponentRegistry:
    """
    Import a generated package and build its registry.

    Returns an empty registry (with a warning) when the package has not
    been generated yet. Errors inside generated code propagate.
    """
    if search_path is not None:
        location = str(search_path.resolve())
        if location not in sys.path:
            sys.path.insert(0, location)

    try:
        package = importlib.import_module(package_name)
    except ModuleNotFoundError as e:
        if not _is_missing_package(e, package_name):
            raise
        logger.warning(
            "Generated package %r not found; every calculator will resolve as not found. "
            "Run `calcverse generate` first.",
            package_name,
        )
        return EMPTY_REGISTRY

    components = importlib.import_module(f"{package_name}.components")
    pages = importlib.import_module(f"{package_name}.pages")
    routes = importlib.import_module(f"{package_name}.routes")

    registry = ComponentRegistry(
        components=MappingProxyType(dict(components.COMPONENTS)),
        pages=MappingProxyType(dict(pages.PAGES)),
        routes=tuple(routes.ROUTES),
        digest=getattr(package, "STORE_DIGEST", None),
        package=package_name,
    )
    logger.info("Loaded %d calculator components from %s", len(registry), package_name)
    return registry


def check_registry_digest(registry: ComponentRegistry, store_digest: str) -> bool:
    """Warn when the generated package was built from a different store."""
    if registry.digest is None:
        return False
    if registry.digest != store_digest:
        logger.warning(
            "Generated package %s is stale (built from store %s, serving store %s). "
            "Re-run `calcverse generate`.",
            registry.package,
            registry.digest[:12],
            store_digest[:12],
        )
        return False
    return True
