"""
Rune Matcher - match strategies for interactive line filters.

This package scores how well a typed pattern matches a line of text. Fuzzy
matches are ranked by a penalty that favours characters at word and
camelCase boundaries; exact, prefix, suffix and equality matches report the
matched span only.
"""

__version__ = "1.0.0"

from .core.engine import CaseMode, MatchEngine, MatchType, get_matcher
from .core.exact_matcher import equal_match, exact_match_naive, prefix_match, suffix_match
from .core.fuzzy_matcher import fuzzy_match
from .core.result import Result

__all__ = [
    "CaseMode",
    "MatchEngine",
    "MatchType",
    "get_matcher",
    "fuzzy_match",
    "exact_match_naive",
    "prefix_match",
    "suffix_match",
    "equal_match",
    "Result",
]
