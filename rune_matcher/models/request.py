"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.engine import CaseMode, MatchType


class MatchRequest(BaseModel):
    """Request model for matching a single line."""
    
    text: str = Field(..., description="Input line to match against")
    pattern: str = Field(..., description="Search pattern as typed by the user")
    algorithm: Optional[MatchType] = Field(
        None, description="Match strategy (defaults to the configured one)"
    )
    case_mode: Optional[CaseMode] = Field(
        None, description="Case mode: 'smart', 'ignore' or 'respect'"
    )
    forward: Optional[bool] = Field(
        None, description="Scan direction; backward scans prefer the rightmost match"
    )


class BatchMatchRequest(BaseModel):
    """Request model for matching many lines against one pattern."""
    
    lines: List[str] = Field(..., min_length=1, description="Input lines")
    pattern: str = Field(..., description="Search pattern as typed by the user")
    algorithm: Optional[MatchType] = Field(
        None, description="Match strategy (defaults to the configured one)"
    )
    case_mode: Optional[CaseMode] = Field(
        None, description="Case mode: 'smart', 'ignore' or 'respect'"
    )
    forward: Optional[bool] = Field(None, description="Scan direction")
    only_matches: bool = Field(
        default=False, description="Leave lines that did not match out of the results"
    )
