import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from calcverse import __version__
from calcverse.api.deps import get_registry, get_settings, get_site_config, get_store
from calcverse.api.health import (
    GeneratedPackageCheck,
    StartupTracker,
    StoreCheck,
    create_health_router,
)
from calcverse.runtime import check_registry_digest

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load site config and store on startup (fail-fast)
    try:
        get_site_config()
        store = get_store()
        print(f"INFO: {len(store)} calculators loaded from {settings.store_path}")
    except Exception as e:
        print(f"CRITICAL: Calculator store load failed: {e}", file=sys.stderr)
        sys.exit(1)

    # A missing or stale generated package still serves; health reports it
    check_registry_digest(get_registry(), store.digest)

    StartupTracker.mark_started()
    yield


def create_app(static_routes: bool | None = None) -> FastAPI:
    """
    Build the application.

    With static routes enabled, the generated route table is mounted ahead
    of slug dispatch and the generated package is imported at build time.
    """
    settings = get_settings()
    if static_routes is None:
        static_routes = settings.static_routes

    app = FastAPI(
        title="CalcVerse",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # --- Routers ---
    from calcverse.api.routes import calculators, static_pages

    if static_routes:
        app.include_router(static_pages.create_static_router(get_registry()), tags=["Pages"])
    app.include_router(calculators.router, prefix="", tags=["SSR"])
    app.include_router(calculators.api_router, prefix="/api", tags=["Calculators"])
    app.include_router(
        create_health_router(
            version=__version__,
            checks=[StoreCheck(get_store), GeneratedPackageCheck(get_store, get_registry)],
        )
    )
    return app


app = create_app()
