"""Character-level helpers shared by the match strategies.

None of these functions allocate beyond the character they return, so the
strategies can call them once per scanned character.
"""

import unicodedata
from typing import Sequence

# Offset between an ASCII uppercase letter and its lowercase form.
ASCII_CASE_OFFSET = 32
MAX_ASCII = "\x7f"


def rune_at(runes: Sequence[str], index: int, length: int, forward: bool) -> str:
    """
    Return the character at a logical index for the given scan direction.

    Args:
        runes: Input or pattern characters
        index: Logical index, counted from the scan origin
        length: ``len(runes)``, passed in to avoid recomputing it per call
        forward: Scan left-to-right when True, right-to-left otherwise

    Returns:
        ``runes[index]`` when scanning forward, ``runes[length - index - 1]``
        when scanning backward
    """
    if forward:
        return runes[index]
    return runes[length - index - 1]


def fold_char(char: str, case_sensitive: bool) -> str:
    """
    Prepare an input character for comparison against a pattern character.

    ASCII uppercase letters are folded with a fixed offset. Anything outside
    ASCII goes through ``str.lower`` unless that would turn one character
    into several, in which case the character is kept as is.
    """
    if case_sensitive:
        return char
    if "A" <= char <= "Z":
        return chr(ord(char) + ASCII_CASE_OFFSET)
    if char > MAX_ASCII:
        lowered = char.lower()
        if len(lowered) == 1:
            return lowered
    return char


def fold_text(text: Sequence[str]) -> str:
    """Fold a whole sequence with the same per-character rules as ``fold_char``."""
    return "".join(fold_char(char, False) for char in text)


def has_uppercase(text: Sequence[str]) -> bool:
    """Check whether any character would change under case folding."""
    return any(fold_char(char, False) != char for char in text)


def is_trailing_noise(char: str) -> bool:
    """Whitespace and control characters are ignored at the end of a line."""
    return char.isspace() or unicodedata.category(char) == "Cc"


def trimmed_length(runes: Sequence[str]) -> int:
    """
    Length of ``runes`` once trailing whitespace and control characters
    are dropped.

    Returns a length instead of a slice so callers can keep indexing the
    original sequence.
    """
    end = len(runes)
    while end > 0 and is_trailing_noise(runes[end - 1]):
        end -= 1
    return end


def is_word_char(char: str) -> bool:
    """Letters and digits continue a word, everything else is a boundary."""
    return char.isalnum()


def is_camel_boundary(prev: str, char: str) -> bool:
    """A lowercase letter followed by an uppercase one starts a new word."""
    return prev.islower() and char.isupper()
