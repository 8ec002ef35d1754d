"""Result value shared by every match strategy."""

from typing import NamedTuple


class Result(NamedTuple):
    """
    Span and penalty produced by a single match call.

    ``start`` is inclusive and ``end`` exclusive, both in left-to-right
    coordinates of the input. ``(-1, -1)`` means no match.

    The penalty is only computed by the fuzzy strategy. Every character of
    the input gets a value equal to its distance from the start of its word
    (non-alphanumeric characters reset the count, and a lowercase to
    uppercase transition restarts it at 1). A match pays the value of each
    matched character that does not directly follow another matched one:

        input     "src/smartWatch.py"
        values     123-1234512345-12
        pattern        s    W     p
        penalty        1    1     1      total = 3

    Lower is better.
    """

    start: int
    end: int
    penalty: int = 0

    @property
    def matched(self) -> bool:
        return self.start >= 0 and self.end >= 0

    @property
    def length(self) -> int:
        """Width of the matched span, 0 when there is no match."""
        if not self.matched:
            return 0
        return self.end - self.start


NO_MATCH = Result(-1, -1, 0)
EMPTY_MATCH = Result(0, 0, 0)
