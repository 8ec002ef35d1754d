"""Contiguous match strategies: substring, prefix, suffix and equality.

These strategies do not model match quality, so every result they return
carries a zero penalty.
"""

from typing import Sequence

from .normalizer import fold_char, fold_text, rune_at, trimmed_length
from .result import EMPTY_MATCH, NO_MATCH, Result


def exact_match_naive(
    case_sensitive: bool,
    forward: bool,
    runes: Sequence[str],
    pattern: Sequence[str],
) -> Result:
    """
    Find the pattern as a contiguous substring of the input.

    Plain naive search without lookup tables: on a mismatch the scan
    restarts one character after where the failed attempt began. Lines are
    short enough that this beats folding the whole input and calling
    ``str.find``.

    Args:
        case_sensitive: Compare characters as is; otherwise the pattern must
            already be folded to lowercase
        forward: Return the leftmost occurrence when True, the rightmost
            otherwise
        runes: Input characters
        pattern: Pattern characters

    Returns:
        Result with the span in left-to-right coordinates
    """
    len_pattern = len(pattern)
    if len_pattern == 0:
        return EMPTY_MATCH

    len_runes = len(runes)
    if len_runes < len_pattern:
        return NO_MATCH

    pidx = 0
    index = 0
    while index < len_runes:
        char = fold_char(rune_at(runes, index, len_runes, forward), case_sensitive)
        if char == rune_at(pattern, pidx, len_pattern, forward):
            pidx += 1
            if pidx == len_pattern:
                if forward:
                    return Result(index - len_pattern + 1, index + 1, 0)
                return Result(
                    len_runes - index - 1, len_runes - index + len_pattern - 1, 0
                )
        else:
            index -= pidx
            pidx = 0
        index += 1

    return NO_MATCH


def prefix_match(
    case_sensitive: bool,
    forward: bool,
    runes: Sequence[str],
    pattern: Sequence[str],
) -> Result:
    """Match the pattern against the start of the input. ``forward`` is ignored."""
    len_pattern = len(pattern)
    if len(runes) < len_pattern:
        return NO_MATCH

    for index, pchar in enumerate(pattern):
        if fold_char(runes[index], case_sensitive) != pchar:
            return NO_MATCH

    return Result(0, len_pattern, 0)


def suffix_match(
    case_sensitive: bool,
    forward: bool,
    runes: Sequence[str],
    pattern: Sequence[str],
) -> Result:
    """
    Match the pattern against the end of the input.

    Trailing whitespace and control characters are not part of the input
    for this check, so ``"baz \\n"`` still ends with ``"baz"``. ``forward``
    is ignored.
    """
    trimmed = trimmed_length(runes)
    offset = trimmed - len(pattern)
    if offset < 0:
        return NO_MATCH

    for index, pchar in enumerate(pattern):
        if fold_char(runes[offset + index], case_sensitive) != pchar:
            return NO_MATCH

    return Result(offset, trimmed, 0)


def equal_match(
    case_sensitive: bool,
    forward: bool,
    runes: Sequence[str],
    pattern: Sequence[str],
) -> Result:
    """Match only when the whole input equals the pattern. ``forward`` is ignored."""
    len_pattern = len(pattern)
    if len_pattern == 0:
        return EMPTY_MATCH
    if len(runes) != len_pattern:
        return NO_MATCH

    # Every character is compared anyway, so fold the whole input at once
    text = fold_text(runes) if not case_sensitive else "".join(runes)
    if text == "".join(pattern):
        return Result(0, len_pattern, 0)
    return NO_MATCH
