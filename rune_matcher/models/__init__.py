"""Data models for the rune matcher API."""

from .response import (
    MatchResponse,
    LineMatch,
    BatchMatchResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import MatchRequest, BatchMatchRequest

__all__ = [
    "MatchResponse",
    "LineMatch",
    "BatchMatchResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "MatchRequest",
    "BatchMatchRequest",
]
