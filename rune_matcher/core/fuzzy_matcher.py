"""Fuzzy subsequence matching with a word-boundary penalty."""

from typing import Sequence

from .normalizer import fold_char, is_camel_boundary, is_word_char, rune_at
from .result import EMPTY_MATCH, NO_MATCH, Result


def fuzzy_match(
    case_sensitive: bool,
    forward: bool,
    runes: Sequence[str],
    pattern: Sequence[str],
    *,
    reset_on_match: bool = False,
) -> Result:
    """
    Find the pattern characters in order inside the input.

    The match is narrowed to the shortest span ending at the first place the
    pattern completes, then scored with ``boundary_penalty``.

    Args:
        case_sensitive: Compare characters as is; otherwise the pattern must
            already be folded to lowercase
        forward: Scan left-to-right when True, right-to-left otherwise
        runes: Input characters
        pattern: Pattern characters
        reset_on_match: Scoring policy, see ``boundary_penalty``

    Returns:
        Result with the span in left-to-right coordinates and its penalty
    """
    len_pattern = len(pattern)
    if len_pattern == 0:
        return EMPTY_MATCH

    len_runes = len(runes)
    if len_runes < len_pattern:
        return NO_MATCH

    # 1. Greedy scan until the whole pattern is consumed
    pidx = 0
    sidx = -1
    eidx = -1
    for index in range(len_runes):
        char = fold_char(rune_at(runes, index, len_runes, forward), case_sensitive)
        if char == rune_at(pattern, pidx, len_pattern, forward):
            if sidx < 0:
                sidx = index
            pidx += 1
            if pidx == len_pattern:
                eidx = index + 1
                break

    if eidx < 0:
        return NO_MATCH

    # 2. Walk back from the end to find the latest possible start
    #
    #    a_____b___abc__     forward scan commits to the first 'a'
    #    *-----*---*
    #    a_____b___abc__     backward scan settles on the last one
    #              ***
    pidx = len_pattern - 1
    for index in range(eidx - 1, sidx - 1, -1):
        char = fold_char(rune_at(runes, index, len_runes, forward), case_sensitive)
        if char == rune_at(pattern, pidx, len_pattern, forward):
            pidx -= 1
            if pidx < 0:
                sidx = index
                break

    if not forward:
        sidx, eidx = len_runes - eidx, len_runes - sidx

    # 3. Score in left-to-right coordinates regardless of scan direction
    penalty = boundary_penalty(
        case_sensitive, runes, pattern, sidx, eidx, reset_on_match=reset_on_match
    )
    return Result(sidx, eidx, penalty)


def boundary_penalty(
    case_sensitive: bool,
    runes: Sequence[str],
    pattern: Sequence[str],
    start: int,
    end: int,
    *,
    reset_on_match: bool = False,
) -> int:
    """
    Score a match span by how far its characters sit from word boundaries.

    The scan starts at index 0 because the distance of the first matched
    character depends on what precedes the span. Matching begins at
    ``start`` and greedily consumes the pattern before ``end``.

    Each non-consecutive matched character adds the current distance from
    its word boundary. With ``reset_on_match`` the distance also drops to 0
    after every matched character, so later characters of the same word are
    only charged for the gap since the previous match.

    The caller guarantees that ``runes[start:end]`` contains the pattern as
    a subsequence.
    """
    len_pattern = len(pattern)
    from_boundary = 0
    total = 0
    consecutive = False
    pidx = 0
    prev = ""

    for index in range(end):
        char = runes[index]
        if is_word_char(char):
            if prev and is_camel_boundary(prev, char):
                from_boundary = 1
            else:
                from_boundary += 1
        else:
            from_boundary = 0
        prev = char

        if index < start:
            continue

        if fold_char(char, case_sensitive) == pattern[pidx]:
            if not consecutive:
                total += from_boundary
            if reset_on_match:
                from_boundary = 0
            pidx += 1
            if pidx == len_pattern:
                break
            consecutive = True
        else:
            consecutive = False

    return total
