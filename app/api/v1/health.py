# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# This file provides health check endpoints that tell us if the service is working properly,
# like a doctor's checkup confirming the database can still be reached.
# 🧪 Purpose (Technical Summary):
# Liveness and readiness endpoints. Readiness probes the database engine and answers
# 200 when it responds, 503 otherwise.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.connection, datetime
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)

HealthProbe = Callable[[], Awaitable[Dict[str, Any]]]


def get_database_probe() -> HealthProbe:
    return database_health_check


@health_router.get("/health",
                  summary="Health Check",
                  description="Database connectivity probe for load balancers and monitoring",
                  tags=["Health Check"])
async def health_check(probe: HealthProbe = Depends(get_database_probe)) -> JSONResponse:
    """
    Readiness check.

    Returns 200 when the database answers a trivial query and 503 when it
    does not, so orchestrators stop routing traffic to this instance.
    """
    database = await probe()
    healthy = database.get("status") == "healthy"

    if not healthy:
        logger.warning(f"Health check failed: {database.get('error')}")

    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "user-subscriptions-api",
            "version": get_settings().APP_VERSION,
            "uptime_seconds": round((datetime.now(timezone.utc) - _app_start_time).total_seconds(), 3),
            "components": {"database": database},
        }
    )


@health_router.get("/health/live",
                  summary="Liveness Probe",
                  tags=["Health Check"])
async def liveness_probe() -> Dict[str, str]:
    """The process is up and serving requests."""
    return {"status": "alive"}
