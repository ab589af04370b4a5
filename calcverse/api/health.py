"""
Health endpoints.

Key behaviors:
- /health: overall status from all registered checks
- /health/live: liveness probe (process alive)
- store check: the calculator store loads
- generated package check: every calculator in the store has a generated
  component and the package was built from the store being served

A stale or partial generated package is DEGRADED (pages for new calculators
404 until `calcverse generate` is re-run); a missing store is UNHEALTHY.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from calcverse.catalog import CalculatorStore
from calcverse.core.services.identifiers import component_identifier
from calcverse.runtime import ComponentRegistry

# --- Types ---


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


@dataclass
class CheckResult:
    """Result of a single health check."""

    name: str
    status: HealthStatus
    message: str = ""
    latency_ms: float = 0.0
    details: dict[str, Any] = field(default_factory=dict)


class HealthCheck(Protocol):
    """Protocol for health checks."""

    name: str

    def check(self) -> CheckResult:
        """Run the health check and return result."""
        ...


# --- Startup Tracker ---


class StartupTracker:
    """Tracks application startup time for uptime calculation."""

    _start_time: float | None = None

    @classmethod
    def mark_started(cls) -> None:
        cls._start_time = time.time()

    @classmethod
    def get_uptime_seconds(cls) -> float:
        if cls._start_time is None:
            return 0.0
        return time.time() - cls._start_time


# --- Checks ---


class StoreCheck:
    """The calculator store loads and validates."""

    name = "store"

    def __init__(self, get_store: Callable[[], CalculatorStore]) -> None:
        self._get_store = get_store

    def check(self) -> CheckResult:
        start = time.time()
        try:
            store = self._get_store()
        except Exception as e:
            return CheckResult(
                name=self.name,
                status=HealthStatus.UNHEALTHY,
                message=f"Store error: {e!s}",
                latency_ms=(time.time() - start) * 1000,
            )
        return CheckResult(
            name=self.name,
            status=HealthStatus.HEALTHY,
            message=f"{len(store)} calculators loaded",
            latency_ms=(time.time() - start) * 1000,
            details={"calculators": len(store), "digest": store.digest},
        )


class GeneratedPackageCheck:
    """The generated package covers the store being served."""

    name = "generated_package"

    def __init__(
        self,
        get_store: Callable[[], CalculatorStore],
        get_registry: Callable[[], ComponentRegistry],
    ) -> None:
        self._get_store = get_store
        self._get_registry = get_registry

    def check(self) -> CheckResult:
        try:
            store = self._get_store()
        except Exception as e:
            return CheckResult(
                name=self.name,
                status=HealthStatus.UNHEALTHY,
                message=f"Store error: {e!s}",
            )

        registry = self._get_registry()
        if len(registry) == 0 and len(store) > 0:
            return CheckResult(
                name=self.name,
                status=HealthStatus.DEGRADED,
                message="Generated package not loaded",
            )

        missing = [
            calc.slug for calc in store if component_identifier(calc.slug) not in registry
        ]
        stale = registry.digest != store.digest
        if missing or stale:
            return CheckResult(
                name=self.name,
                status=HealthStatus.DEGRADED,
                message="Generated package is out of date with the store",
                details={"missing": missing, "stale": stale},
            )

        return CheckResult(
            name=self.name,
            status=HealthStatus.HEALTHY,
            message=f"{len(registry)} components from {registry.package}",
        )


# --- FastAPI Router ---


def overall_status(results: list[CheckResult]) -> HealthStatus:
    if all(r.status == HealthStatus.HEALTHY for r in results):
        return HealthStatus.HEALTHY
    if any(r.status == HealthStatus.UNHEALTHY for r in results):
        return HealthStatus.UNHEALTHY
    return HealthStatus.DEGRADED


def create_health_router(version: str, checks: list[HealthCheck]) -> APIRouter:
    """
    Create FastAPI router for health endpoints.

    Args:
        version: Application version string
        checks: Checks run on every /health request

    Returns:
        FastAPI router with health endpoints
    """
    router = APIRouter(tags=["health"])

    @router.get(
        "/health",
        response_model=None,
        responses={
            200: {"description": "Service is healthy or degraded"},
            503: {"description": "Service is unhealthy"},
        },
    )
    def health_check() -> JSONResponse:
        results = [c.check() for c in checks]
        overall = overall_status(results)

        response = {
            "status": overall.value,
            "version": version,
            "uptime_seconds": StartupTracker.get_uptime_seconds(),
            "checks": [
                {
                    "name": r.name,
                    "status": r.status.value,
                    "message": r.message,
                    "latency_ms": r.latency_ms,
                    "details": r.details,
                }
                for r in results
            ],
        }

        # Degraded still serves every calculator that has a component
        status_code = (
            status.HTTP_503_SERVICE_UNAVAILABLE
            if overall == HealthStatus.UNHEALTHY
            else status.HTTP_200_OK
        )
        return JSONResponse(content=response, status_code=status_code)

    @router.get("/health/live", response_model=None)
    def liveness_check() -> JSONResponse:
        return JSONResponse(
            content={"alive": True, "uptime_seconds": StartupTracker.get_uptime_seconds()},
            status_code=status.HTTP_200_OK,
        )

    return router
