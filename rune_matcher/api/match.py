"""Match API endpoints."""

import time

from fastapi import APIRouter, HTTPException
import structlog

from ..core.engine import MatchType
from ..models.request import MatchRequest, BatchMatchRequest
from ..models.response import MatchResponse, BatchMatchResponse, LineMatch
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["match"])
settings = get_settings()
logger = structlog.get_logger(__name__)

# Import the global match engine instance
from ..engine_instance import match_engine


def _check_pattern(pattern: str) -> None:
    if len(pattern) > settings.max_pattern_length:
        raise HTTPException(
            status_code=400,
            detail=f"Pattern too long. Maximum length is {settings.max_pattern_length} characters"
        )


def _check_line(text: str) -> None:
    if len(text) > settings.max_input_length:
        raise HTTPException(
            status_code=400,
            detail=f"Input too long. Maximum length is {settings.max_input_length} characters"
        )


@router.post(
    "/match",
    response_model=MatchResponse,
    summary="Match a single line",
    description="Match one input line against a pattern with the selected strategy"
)
async def match_line(request: MatchRequest) -> MatchResponse:
    """
    Match a single line against a pattern.
    
    Returns the matched span in left-to-right coordinates together with
    the penalty used for ranking (only fuzzy matches carry a penalty).
    """
    try:
        _check_pattern(request.pattern)
        _check_line(request.text)
        
        start_time = time.time()
        algorithm = request.algorithm or match_engine.default_match_type
        forward = match_engine.forward if request.forward is None else request.forward
        case_sensitive, _ = match_engine.prepare(request.pattern, request.case_mode)
        
        result = match_engine.match(
            request.text,
            request.pattern,
            match_type=algorithm,
            case_mode=request.case_mode,
            forward=forward
        )
        execution_time = (time.time() - start_time) * 1000
        
        return MatchResponse(
            text=request.text,
            pattern=request.pattern,
            algorithm=algorithm.value,
            case_sensitive=case_sensitive,
            forward=forward,
            matched=result.matched,
            start=result.start,
            end=result.end,
            penalty=result.penalty,
            matched_text=request.text[result.start:result.end] if result.matched else None,
            execution_time_ms=execution_time
        )
        
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Match failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Match failed: {str(e)}"
        )


@router.post(
    "/match/batch",
    response_model=BatchMatchResponse,
    summary="Batch match",
    description="Match many lines against one pattern in a single request"
)
async def match_batch(request: BatchMatchRequest) -> BatchMatchResponse:
    """
    Match many lines against a single pattern.
    
    The pattern is prepared once for the whole batch. Results keep the
    order of the request; sorting them by penalty is left to the client.
    """
    try:
        if len(request.lines) > settings.max_batch_size:
            raise HTTPException(
                status_code=400,
                detail=f"Batch too large. Maximum size is {settings.max_batch_size} lines"
            )
        _check_pattern(request.pattern)
        for line in request.lines:
            _check_line(line)
        
        start_time = time.time()
        algorithm = request.algorithm or match_engine.default_match_type
        forward = match_engine.forward if request.forward is None else request.forward
        case_sensitive, _ = match_engine.prepare(request.pattern, request.case_mode)
        
        results = match_engine.match_many(
            request.lines,
            request.pattern,
            match_type=algorithm,
            case_mode=request.case_mode,
            forward=forward
        )
        execution_time = (time.time() - start_time) * 1000
        
        line_matches = [
            LineMatch(
                index=index,
                text=line,
                matched=result.matched,
                start=result.start,
                end=result.end,
                penalty=result.penalty
            )
            for index, (line, result) in enumerate(zip(request.lines, results))
            if result.matched or not request.only_matches
        ]
        
        return BatchMatchResponse(
            pattern=request.pattern,
            algorithm=algorithm.value,
            case_sensitive=case_sensitive,
            forward=forward,
            total_lines=len(results),
            total_matches=sum(1 for result in results if result.matched),
            results=line_matches,
            execution_time_ms=execution_time
        )
        
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Batch match failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Batch match failed: {str(e)}"
        )


@router.get(
    "/algorithms",
    response_model=list[str],
    summary="List match strategies",
    description="Get the names of all available match strategies"
)
async def list_algorithms() -> list[str]:
    """Get the names of all available match strategies."""
    return [match_type.value for match_type in MatchType]
