"""Strategy dispatch and the caller-side match engine."""

import threading
import time
from enum import Enum
from functools import partial
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import structlog

from .exact_matcher import equal_match, exact_match_naive, prefix_match, suffix_match
from .fuzzy_matcher import fuzzy_match
from .normalizer import fold_text, has_uppercase
from .result import Result

logger = structlog.get_logger(__name__)

MatchFunction = Callable[[bool, bool, Sequence[str], Sequence[str]], Result]


class MatchType(str, Enum):
    """Available match strategies."""

    FUZZY = "fuzzy"
    EXACT = "exact"
    PREFIX = "prefix"
    SUFFIX = "suffix"
    EQUAL = "equal"


class CaseMode(str, Enum):
    """How the case sensitivity of a query is decided."""

    SMART = "smart"
    IGNORE = "ignore"
    RESPECT = "respect"


_MATCHERS: Dict[MatchType, MatchFunction] = {
    MatchType.FUZZY: fuzzy_match,
    MatchType.EXACT: exact_match_naive,
    MatchType.PREFIX: prefix_match,
    MatchType.SUFFIX: suffix_match,
    MatchType.EQUAL: equal_match,
}


def get_matcher(match_type: Union[MatchType, str]) -> MatchFunction:
    """
    Look up the strategy function for a match type.

    Raises:
        ValueError: If the match type is unknown
    """
    return _MATCHERS[MatchType(match_type)]


def _empty_stats() -> Dict[str, Union[int, float]]:
    stats: Dict[str, Union[int, float]] = {
        "total_queries": 0,
        "total_lines": 0,
        "matches": 0,
        "no_matches": 0,
        "total_execution_time": 0.0,
    }
    for match_type in MatchType:
        stats[f"{match_type.value}_queries"] = 0
    return stats


class MatchEngine:
    """
    Runs match strategies on behalf of a caller.

    The strategies expect a pre-folded pattern when matching case
    insensitively; the engine resolves the case mode and folds the pattern
    once per query. The strategies themselves stay stateless, only the
    statistics counters are shared and they are guarded by a lock.
    """

    def __init__(
        self,
        default_match_type: Union[MatchType, str] = MatchType.FUZZY,
        case_mode: Union[CaseMode, str] = CaseMode.SMART,
        forward: bool = True,
        reset_on_match: bool = False,
    ) -> None:
        """
        Initialize the match engine.

        Args:
            default_match_type: Strategy used when a query does not name one
            case_mode: Default case mode
            forward: Default scan direction
            reset_on_match: Fuzzy scoring policy, see ``boundary_penalty``
        """
        self.default_match_type = MatchType(default_match_type)
        self.case_mode = CaseMode(case_mode)
        self.forward = forward
        self.reset_on_match = reset_on_match

        self._lock = threading.Lock()
        self._stats = _empty_stats()

        logger.debug(
            "Match engine configured",
            match_type=self.default_match_type.value,
            case_mode=self.case_mode.value,
            forward=self.forward,
            reset_on_match=self.reset_on_match,
        )

    def prepare(
        self,
        pattern: Sequence[str],
        case_mode: Optional[Union[CaseMode, str]] = None,
    ) -> Tuple[bool, str]:
        """
        Resolve case sensitivity for a pattern and fold it if needed.

        Args:
            pattern: Raw pattern as typed by the user
            case_mode: Overrides the engine's default case mode

        Returns:
            Tuple of (case_sensitive, prepared_pattern)
        """
        mode = CaseMode(case_mode) if case_mode is not None else self.case_mode
        pattern = "".join(pattern)

        if mode is CaseMode.RESPECT:
            case_sensitive = True
        elif mode is CaseMode.IGNORE:
            case_sensitive = False
        else:
            case_sensitive = has_uppercase(pattern)

        if not case_sensitive:
            pattern = fold_text(pattern)
        return case_sensitive, pattern

    def match(
        self,
        text: Sequence[str],
        pattern: Sequence[str],
        match_type: Optional[Union[MatchType, str]] = None,
        case_mode: Optional[Union[CaseMode, str]] = None,
        forward: Optional[bool] = None,
    ) -> Result:
        """
        Match one input against a raw pattern.

        Args:
            text: Input characters
            pattern: Raw pattern, folded here according to the case mode
            match_type: Strategy, defaults to the engine's
            case_mode: Case mode, defaults to the engine's
            forward: Scan direction, defaults to the engine's

        Returns:
            Result of the selected strategy
        """
        return self.match_many([text], pattern, match_type, case_mode, forward)[0]

    def match_many(
        self,
        lines: Sequence[Sequence[str]],
        pattern: Sequence[str],
        match_type: Optional[Union[MatchType, str]] = None,
        case_mode: Optional[Union[CaseMode, str]] = None,
        forward: Optional[bool] = None,
    ) -> List[Result]:
        """
        Match every line against the same pattern.

        The pattern is prepared once. Results are returned in input order;
        ordering them by quality is up to the caller.
        """
        start_time = time.time()

        match_type = (
            MatchType(match_type) if match_type is not None else self.default_match_type
        )
        forward = self.forward if forward is None else forward
        case_sensitive, prepared = self.prepare(pattern, case_mode)
        matcher = self._bind(match_type)

        results = [matcher(case_sensitive, forward, line, prepared) for line in lines]

        execution_time = (time.time() - start_time) * 1000
        matches = sum(1 for result in results if result.matched)
        self._record(match_type, len(results), matches, execution_time)

        if len(results) > 1:
            logger.debug(
                "Batch match completed",
                match_type=match_type.value,
                total_lines=len(results),
                total_matches=matches,
                execution_time_ms=round(execution_time, 3),
            )
        return results

    def _bind(self, match_type: MatchType) -> MatchFunction:
        if match_type is MatchType.FUZZY:
            return partial(fuzzy_match, reset_on_match=self.reset_on_match)
        return get_matcher(match_type)

    def _record(
        self, match_type: MatchType, lines: int, matches: int, execution_time: float
    ) -> None:
        with self._lock:
            self._stats["total_queries"] += 1
            self._stats[f"{match_type.value}_queries"] += 1
            self._stats["total_lines"] += lines
            self._stats["matches"] += matches
            self._stats["no_matches"] += lines - matches
            self._stats["total_execution_time"] += execution_time

    def get_stats(self) -> Dict[str, Union[int, float]]:
        """Get engine statistics."""
        with self._lock:
            stats = self._stats.copy()

        # Calculate averages
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0

        if stats["total_lines"] > 0:
            stats["match_rate"] = stats["matches"] / stats["total_lines"]
        else:
            stats["match_rate"] = 0.0

        return stats

    def reset_stats(self) -> None:
        """Reset statistics."""
        with self._lock:
            self._stats = _empty_stats()
