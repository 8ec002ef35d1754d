"""Health check API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global match engine instance
from ..engine_instance import match_engine

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the match service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the match service.
    
    Runs a known fuzzy match through the engine and reports the service
    as unhealthy if the result is not the expected one.
    """
    try:
        uptime = time.time() - app_start_time
        
        dependencies = {"match_engine": "healthy"}
        
        try:
            probe = match_engine.match("fooBarbaz", "obz", match_type="fuzzy", case_mode="ignore")
            if (probe.start, probe.end) != (2, 9):
                dependencies["match_engine"] = "degraded"
        except Exception:
            dependencies["match_engine"] = "unhealthy"
        
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"
        
        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive and responsive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
