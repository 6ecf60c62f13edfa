"""Health reporting for the portfolio service.

Checks are small async callables returning a ``ServiceCheck``. The checker
runs them concurrently, bounds each with a timeout, and folds the results
into one ``HealthReport``.

Example:
    checker = HealthChecker(version="1.0.0")

    async def check_carousel() -> ServiceCheck:
        status = ServiceStatus.HEALTHY if session.is_mounted else ServiceStatus.UNHEALTHY
        return ServiceCheck(name="carousel", status=status)

    checker.add_check("carousel", check_carousel)
    report = await checker.check_all()
"""

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

CHECK_TIMEOUT_SECONDS = 5.0


class ServiceStatus(Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"
    UNKNOWN = "unknown"


@dataclass
class ServiceCheck:
    """Result of a single check."""

    name: str
    status: ServiceStatus
    latency_ms: float | None = None
    message: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "latency_ms": self.latency_ms,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class HealthReport:
    status: ServiceStatus
    timestamp: str
    checks: list[ServiceCheck]
    version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "timestamp": self.timestamp,
            "version": self.version,
            "checks": [check.to_dict() for check in self.checks],
        }


HealthCheckFunc = Callable[[], Coroutine[Any, Any, ServiceCheck]]


def _overall_status(checks: list[ServiceCheck]) -> ServiceStatus:
    if all(c.status == ServiceStatus.HEALTHY for c in checks):
        return ServiceStatus.HEALTHY
    if any(c.status == ServiceStatus.UNHEALTHY for c in checks):
        return ServiceStatus.UNHEALTHY
    if any(c.status == ServiceStatus.DEGRADED for c in checks):
        return ServiceStatus.DEGRADED
    return ServiceStatus.UNKNOWN


class HealthChecker:
    """Registry of named health checks."""

    def __init__(self, version: str | None = None) -> None:
        self._checks: dict[str, HealthCheckFunc] = {}
        self._version = version

    def add_check(self, name: str, check_func: HealthCheckFunc) -> None:
        self._checks[name] = check_func

    def remove_check(self, name: str) -> None:
        self._checks.pop(name, None)

    async def check_one(self, name: str) -> ServiceCheck:
        """Run one registered check.

        A check that times out or raises is reported as UNHEALTHY rather than
        propagating, so one broken check cannot hide the others.

        Raises:
            KeyError: If no check is registered under ``name``.
        """
        if name not in self._checks:
            raise KeyError(f"No health check registered for: {name}")

        loop = asyncio.get_running_loop()
        start = loop.time()

        def elapsed_ms() -> float:
            return round((loop.time() - start) * 1000, 2)

        try:
            result = await asyncio.wait_for(
                self._checks[name](), timeout=CHECK_TIMEOUT_SECONDS
            )
        except TimeoutError:
            return ServiceCheck(
                name=name,
                status=ServiceStatus.UNHEALTHY,
                latency_ms=elapsed_ms(),
                message="Health check timed out",
            )
        except Exception as ex:
            return ServiceCheck(
                name=name,
                status=ServiceStatus.UNHEALTHY,
                latency_ms=elapsed_ms(),
                message=str(ex),
            )
        if result.latency_ms is None:
            result.latency_ms = elapsed_ms()
        return result

    async def check_all(self) -> HealthReport:
        timestamp = datetime.now(UTC).isoformat()
        checks = list(await asyncio.gather(*(self.check_one(n) for n in self._checks)))
        return HealthReport(
            status=_overall_status(checks) if checks else ServiceStatus.HEALTHY,
            timestamp=timestamp,
            checks=checks,
            version=self._version,
        )
