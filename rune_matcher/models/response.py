"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class MatchResponse(BaseModel):
    """Response for a single match."""
    
    text: str = Field(..., description="Input line")
    pattern: str = Field(..., description="Pattern as given in the request")
    algorithm: str = Field(..., description="Match strategy used")
    case_sensitive: bool = Field(..., description="Resolved case sensitivity")
    forward: bool = Field(..., description="Scan direction used")
    matched: bool = Field(..., description="Whether the pattern matched")
    start: int = Field(..., description="Inclusive start of the match, -1 if none")
    end: int = Field(..., description="Exclusive end of the match, -1 if none")
    penalty: int = Field(..., ge=0, description="Match penalty, lower is better")
    matched_text: Optional[str] = Field(None, description="Matched part of the input")
    execution_time_ms: float = Field(..., description="Match execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class LineMatch(BaseModel):
    """Match result for one line of a batch."""
    
    index: int = Field(..., description="Position of the line in the request")
    text: str = Field(..., description="Input line")
    matched: bool = Field(..., description="Whether the pattern matched")
    start: int = Field(..., description="Inclusive start of the match, -1 if none")
    end: int = Field(..., description="Exclusive end of the match, -1 if none")
    penalty: int = Field(..., ge=0, description="Match penalty, lower is better")


class BatchMatchResponse(BaseModel):
    """Response for a batch match."""
    
    pattern: str = Field(..., description="Pattern as given in the request")
    algorithm: str = Field(..., description="Match strategy used")
    case_sensitive: bool = Field(..., description="Resolved case sensitivity")
    forward: bool = Field(..., description="Scan direction used")
    total_lines: int = Field(..., description="Number of lines evaluated")
    total_matches: int = Field(..., description="Number of matching lines")
    results: List[LineMatch] = Field(..., description="Per-line results in request order")
    execution_time_ms: float = Field(..., description="Batch execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""
    
    total_queries: int = Field(..., description="Total match queries processed")
    total_lines: int = Field(..., description="Total lines evaluated")
    matches: int = Field(..., description="Lines that matched")
    no_matches: int = Field(..., description="Lines that did not match")
    match_rate: float = Field(..., description="Share of lines that matched")
    average_response_time_ms: float = Field(..., description="Average query time")
    queries_by_algorithm: Dict[str, int] = Field(..., description="Query count per strategy")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
