"""Health check routes for the HTTP API.

``/health`` runs every registered check, ``/ready`` reports whether the
portfolio is mounted and serving, ``/live`` only proves the loop responds.
"""

from typing import Any

from fastapi import APIRouter, Request, Response

from src.core.health import HealthChecker, ServiceStatus
from src.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request, response: Response) -> dict[str, Any]:
    """Full health report; 200 when every check is healthy, 503 otherwise."""
    checker: HealthChecker = request.app.state.health_checker
    report = await checker.check_all()

    response.status_code = 200 if report.status == ServiceStatus.HEALTHY else 503

    logger.info(
        "health_check",
        status=report.status,
        checks={c.name: c.status.value for c in report.checks},
    )
    return report.to_dict()


@router.get("/ready")
async def readiness_check(request: Request, response: Response) -> dict[str, Any]:
    """Ready while no check is unhealthy."""
    checker: HealthChecker = request.app.state.health_checker
    report = await checker.check_all()
    is_ready = report.status in (ServiceStatus.HEALTHY, ServiceStatus.DEGRADED)

    response.status_code = 200 if is_ready else 503
    return {"ready": is_ready, "status": report.status.value}


@router.get("/live")
async def liveness_check() -> dict[str, bool]:
    return {"alive": True}
