"""Core matching functionality."""

from .engine import CaseMode, MatchEngine, MatchType, get_matcher
from .exact_matcher import equal_match, exact_match_naive, prefix_match, suffix_match
from .fuzzy_matcher import boundary_penalty, fuzzy_match
from .result import EMPTY_MATCH, NO_MATCH, Result

__all__ = [
    "CaseMode",
    "MatchEngine",
    "MatchType",
    "get_matcher",
    "fuzzy_match",
    "boundary_penalty",
    "exact_match_naive",
    "prefix_match",
    "suffix_match",
    "equal_match",
    "Result",
    "NO_MATCH",
    "EMPTY_MATCH",
]
