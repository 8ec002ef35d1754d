"""Metrics API endpoints."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..core.engine import MatchType
from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global match engine instance
from ..engine_instance import match_engine


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query statistics for the match engine"
)
async def get_metrics() -> MetricsResponse:
    """Get query statistics for the match engine."""
    try:
        stats = match_engine.get_stats()
        
        return MetricsResponse(
            total_queries=stats["total_queries"],
            total_lines=stats["total_lines"],
            matches=stats["matches"],
            no_matches=stats["no_matches"],
            match_rate=stats["match_rate"],
            average_response_time_ms=stats["average_execution_time_ms"],
            queries_by_algorithm={
                match_type.value: stats[f"{match_type.value}_queries"]
                for match_type in MatchType
            }
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )


@router.post(
    "/metrics/reset",
    summary="Reset metrics",
    description="Reset all match engine statistics"
)
async def reset_metrics() -> JSONResponse:
    """Reset all match engine statistics."""
    match_engine.reset_stats()
    return JSONResponse(
        status_code=200,
        content={"message": "Metrics reset successfully"}
    )
