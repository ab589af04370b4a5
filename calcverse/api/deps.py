import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from calcverse.catalog import CalculatorStore, load_store
from calcverse.components.resolver import SlugResolver
from calcverse.runtime import ComponentRegistry, load_registry
from calcverse.site import SiteConfig, load_site_config

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.store_path = Path(
            os.environ.get("CALCVERSE_STORE", self.base_dir / "data" / "calculators.yaml")
        )
        self.site_config_path = Path(
            os.environ.get("CALCVERSE_SITE_CONFIG", self.base_dir / "site.yaml")
        )
        # Overrides for generation.package / generation.output_dir in site.yaml
        self.generated_package = os.environ.get("CALCVERSE_GENERATED_PACKAGE")
        self.generated_search_path = Path(
            os.environ.get("CALCVERSE_GENERATED_DIR", self.base_dir)
        )
        self.static_routes = os.environ.get("CALCVERSE_STATIC_ROUTES", "").lower() in TRUTHY


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Site config + store ---
@lru_cache
def get_site_config() -> SiteConfig:
    settings = get_settings()
    if not settings.site_config_path.exists():
        logger.info("No site config at %s, using defaults", settings.site_config_path)
        return SiteConfig()
    return load_site_config(settings.site_config_path)


@lru_cache
def get_store() -> CalculatorStore:
    return load_store(get_settings().store_path)


# --- Generated components ---
@lru_cache
def get_registry() -> ComponentRegistry:
    settings = get_settings()
    package = settings.generated_package or get_site_config().generation.package
    return load_registry(package, search_path=settings.generated_search_path)


# --- Services ---
def get_resolver(
    store: CalculatorStore = Depends(get_store),
    registry: ComponentRegistry = Depends(get_registry),
    site: SiteConfig = Depends(get_site_config),
) -> SlugResolver:
    return SlugResolver(store=store, components=registry, site=site)
