"""Tests for health check functionality."""

import asyncio

import pytest

from src.core import health
from src.core.health import HealthChecker, HealthReport, ServiceCheck, ServiceStatus


def _check(name: str, status: ServiceStatus):
    async def run() -> ServiceCheck:
        return ServiceCheck(name=name, status=status)

    return run


class TestHealthReport:
    def test_to_dict(self) -> None:
        report = HealthReport(
            status=ServiceStatus.HEALTHY,
            timestamp="2025-01-01T00:00:00Z",
            checks=[
                ServiceCheck(
                    name="carousel",
                    status=ServiceStatus.HEALTHY,
                    latency_ms=1.0,
                    details={"total": 3},
                )
            ],
            version="1.0.0",
        )
        assert report.to_dict() == {
            "status": "healthy",
            "timestamp": "2025-01-01T00:00:00Z",
            "version": "1.0.0",
            "checks": [
                {
                    "name": "carousel",
                    "status": "healthy",
                    "latency_ms": 1.0,
                    "message": None,
                    "details": {"total": 3},
                }
            ],
        }


class TestHealthChecker:
    @pytest.mark.asyncio
    async def test_no_checks_is_healthy(self) -> None:
        report = await HealthChecker(version="test").check_all()
        assert report.status == ServiceStatus.HEALTHY
        assert report.checks == []
        assert report.version == "test"

    @pytest.mark.asyncio
    async def test_records_latency(self) -> None:
        checker = HealthChecker()
        checker.add_check("a", _check("a", ServiceStatus.HEALTHY))
        result = await checker.check_one("a")
        assert result.latency_ms is not None

    @pytest.mark.asyncio
    async def test_unknown_check_raises(self) -> None:
        with pytest.raises(KeyError):
            await HealthChecker().check_one("missing")

    @pytest.mark.asyncio
    async def test_failing_check_is_unhealthy(self) -> None:
        async def broken() -> ServiceCheck:
            raise RuntimeError("no timer")

        checker = HealthChecker()
        checker.add_check("carousel", broken)
        result = await checker.check_one("carousel")
        assert result.status == ServiceStatus.UNHEALTHY
        assert result.message == "no timer"

    @pytest.mark.asyncio
    async def test_slow_check_times_out(self, monkeypatch) -> None:
        monkeypatch.setattr(health, "CHECK_TIMEOUT_SECONDS", 0.01)

        async def slow() -> ServiceCheck:
            await asyncio.sleep(1)
            return ServiceCheck(name="slow", status=ServiceStatus.HEALTHY)

        checker = HealthChecker()
        checker.add_check("slow", slow)
        result = await checker.check_one("slow")
        assert result.status == ServiceStatus.UNHEALTHY
        assert result.message == "Health check timed out"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "statuses,expected",
        [
            ([ServiceStatus.HEALTHY, ServiceStatus.HEALTHY], ServiceStatus.HEALTHY),
            ([ServiceStatus.HEALTHY, ServiceStatus.DEGRADED], ServiceStatus.DEGRADED),
            ([ServiceStatus.DEGRADED, ServiceStatus.UNHEALTHY], ServiceStatus.UNHEALTHY),
            ([ServiceStatus.UNKNOWN], ServiceStatus.UNKNOWN),
        ],
    )
    async def test_overall_status(self, statuses, expected) -> None:
        checker = HealthChecker()
        for i, status in enumerate(statuses):
            checker.add_check(f"c{i}", _check(f"c{i}", status))
        report = await checker.check_all()
        assert report.status == expected

    @pytest.mark.asyncio
    async def test_remove_check(self) -> None:
        checker = HealthChecker()
        checker.add_check("a", _check("a", ServiceStatus.UNHEALTHY))
        checker.remove_check("a")
        checker.remove_check("a")
        report = await checker.check_all()
        assert report.status == ServiceStatus.HEALTHY
