"""Health check endpoints for monitoring and deployment verification."""

import time

from fastapi import APIRouter, Response, status

from src.api.deps import ProfileStoreDep
from src.api.middleware.latency_logging import get_latency_stats
from src.schemas.common import (
    CheckResult,
    HealthResponse,
    HealthStatus,
    LatencyStatsResponse,
    ReadinessResponse,
)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Basic health check to verify the service is running. Used for liveness probes.",
)
async def health_check() -> HealthResponse:
    """Return basic health status.

    This endpoint should always return 200 if the service is running.
    It does not check the profile store.

    Returns:
        HealthResponse: Current health status with timestamp.
    """
    return HealthResponse(status=HealthStatus.HEALTHY)


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    responses={
        200: {"description": "Profile store reachable"},
        503: {"description": "Profile store unreachable"},
    },
    summary="Readiness check",
    description="Check that the profile store can serve requests. Used for readiness probes.",
)
async def readiness_check(response: Response, store: ProfileStoreDep) -> ReadinessResponse:
    """Check readiness of the profile store.

    Args:
        response: FastAPI response object for setting status code.
        store: The application's profile store.

    Returns:
        ReadinessResponse: Status of the store check; 503 if unhealthy.
    """
    start_time = time.perf_counter()
    result = await store.check_connection()
    latency_ms = (time.perf_counter() - start_time) * 1000

    checks = [
        CheckResult(
            name="profile_store",
            healthy=result["healthy"],
            latency_ms=round(latency_ms, 2),
            error=result.get("error"),
        )
    ]

    all_healthy = all(check.healthy for check in checks)
    if not all_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(
        status=HealthStatus.HEALTHY if all_healthy else HealthStatus.UNHEALTHY,
        checks=checks,
    )


@router.get(
    "/health/stats",
    response_model=LatencyStatsResponse,
    summary="Request latency stats",
    description="Latency aggregates for recent non-health requests.",
)
async def latency_stats() -> LatencyStatsResponse:
    stats = get_latency_stats()
    return LatencyStatsResponse(**stats.get_stats(), by_path=stats.get_stats_by_path())
