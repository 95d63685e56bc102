"""
Health checks for the Showroom CMS.

A small registry of named checks, run by the /health/ and /readyz/ views.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from threading import Lock
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


# =============================================================================
# Health Checks
# =============================================================================

class HealthStatus(Enum):
    """Health check status."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass
class HealthCheckResult:
    """Result of a health check."""
    name: str
    status: HealthStatus
    message: str = ""
    details: Dict[str, Any] = field(default_factory=dict)
    duration_ms: float = 0
    timestamp: datetime = field(default_factory=datetime.utcnow)


class HealthChecker:
    """
    Health check registry and executor.
    """

    _instance = None
    _lock = Lock()

    def __new__(cls):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._checks = {}
        return cls._instance

    def register(self, name: str, check_fn: Callable[[], HealthCheckResult]) -> None:
        """
        Register a health check.

        Args:
            name: Unique check name.
            check_fn: Function that returns HealthCheckResult.
        """
        self._checks[name] = check_fn

    def check(self, name: str) -> HealthCheckResult:
        """Run a specific health check."""
        if name not in self._checks:
            return HealthCheckResult(
                name=name,
                status=HealthStatus.UNHEALTHY,
                message=f"Unknown check: {name}",
            )

        start = time.perf_counter()
        try:
            result = self._checks[name]()
            result.duration_ms = (time.perf_counter() - start) * 1000
            return result
        except Exception as e:
            logger.warning("Health check %s raised: %s", name, e)
            return HealthCheckResult(
                name=name,
                status=HealthStatus.UNHEALTHY,
                message=str(e),
                duration_ms=(time.perf_counter() - start) * 1000,
            )

    def check_all(self) -> Dict[str, Any]:
        """Run all health checks."""
        results = {}
        overall_status = HealthStatus.HEALTHY

        for name in self._checks:
            result = self.check(name)
            results[name] = {
                "status": result.status.value,
                "message": result.message,
                "details": result.details,
                "duration_ms": result.duration_ms,
            }

            if result.status == HealthStatus.UNHEALTHY:
                overall_status = HealthStatus.UNHEALTHY
            elif result.status == HealthStatus.DEGRADED and overall_status != HealthStatus.UNHEALTHY:
                overall_status = HealthStatus.DEGRADED

        return {
            "status": overall_status.value,
            "checks": results,
            "timestamp": datetime.utcnow().isoformat(),
        }

    def list_checks(self) -> List[str]:
        """List registered check names."""
        return list(self._checks.keys())


# Global health checker instance
health_checker = HealthChecker()


# =============================================================================
# Built-in Health Checks
# =============================================================================

def check_database() -> HealthCheckResult:
    """Check database connectivity."""
    from django.db import connection

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        return HealthCheckResult(
            name="database",
            status=HealthStatus.HEALTHY,
            message="Database connection successful",
        )
    except Exception as e:
        return HealthCheckResult(
            name="database",
            status=HealthStatus.UNHEALTHY,
            message=f"Database error: {e}",
        )


def check_cache() -> HealthCheckResult:
    """
    Check the configured cache backend (Redis in production).

    A broken cache only degrades the service: throttling falls open.
    """
    try:
        from django.core.cache import cache
        cache.set("health_check", "ok", 10)
        value = cache.get("health_check")
    except Exception as e:
        return HealthCheckResult(
            name="cache",
            status=HealthStatus.DEGRADED,
            message=f"Cache error: {e}",
        )

    if value != "ok":
        return HealthCheckResult(
            name="cache",
            status=HealthStatus.DEGRADED,
            message="Cache get/set mismatch",
        )
    return HealthCheckResult(
        name="cache",
        status=HealthStatus.HEALTHY,
        message="Cache connection successful",
    )


def check_object_storage() -> HealthCheckResult:
    """Report whether object storage credentials are configured."""
    from django.conf import settings

    missing = [
        name for name in ('STORAGE_ACCESS_KEY_ID', 'STORAGE_SECRET_ACCESS_KEY', 'STORAGE_BUCKET_NAME')
        if not getattr(settings, name, '')
    ]
    if missing:
        return HealthCheckResult(
            name="object_storage",
            status=HealthStatus.DEGRADED,
            message="Object storage not configured",
            details={"missing": missing},
        )
    return HealthCheckResult(
        name="object_storage",
        status=HealthStatus.HEALTHY,
        message="Object storage configured",
        details={"bucket": settings.STORAGE_BUCKET_NAME},
    )


def register_default_checks():
    """Register default health checks."""
    health_checker.register("database", check_database)
    health_checker.register("cache", check_cache)
    health_checker.register("object_storage", check_object_storage)
