"""Unit tests for the contiguous match strategies."""

import pytest
from rune_matcher.core.exact_matcher import (
    equal_match,
    exact_match_naive,
    prefix_match,
    suffix_match,
)
from rune_matcher.core.result import Result

NO_MATCH = Result(-1, -1, 0)


def run(matcher, case_sensitive, forward, text, pattern):
    """Run a matcher, folding the pattern the way callers are expected to."""
    if not case_sensitive:
        pattern = pattern.lower()
    return matcher(case_sensitive, forward, text, pattern)


@pytest.fixture(params=[True, False], ids=["forward", "backward"])
def forward(request):
    """Both scan directions."""
    return request.param


class TestExactMatchNaive:
    """Test cases for exact_match_naive."""
    
    def test_case_insensitive(self, forward):
        """Test substring matching ignoring case."""
        assert run(exact_match_naive, False, forward, "fooBarbaz", "oBA") == Result(2, 5, 0)
    
    def test_case_sensitive(self, forward):
        """Test substring matching respecting case."""
        assert run(exact_match_naive, True, forward, "fooBarbaz", "oBA") == NO_MATCH
        assert run(exact_match_naive, True, forward, "fooBarbaz", "oBa") == Result(2, 5, 0)
    
    def test_pattern_longer_than_input(self, forward):
        """Test that an over-long pattern is rejected up front."""
        assert run(exact_match_naive, True, forward, "fooBarbaz", "fooBarbazz") == NO_MATCH
    
    def test_direction_picks_occurrence(self):
        """Test that forward finds the leftmost and backward the rightmost occurrence."""
        assert run(exact_match_naive, False, True, "foobar foob", "oo") == Result(1, 3, 0)
        assert run(exact_match_naive, False, False, "foobar foob", "oo") == Result(8, 10, 0)
    
    def test_restart_after_partial_match(self, forward):
        """Test that a failed partial match restarts one position later."""
        assert run(exact_match_naive, True, forward, "aaab", "aab") == Result(1, 4, 0)
        assert run(exact_match_naive, True, forward, "ababac", "abac") == Result(2, 6, 0)
    
    def test_whole_input(self, forward):
        """Test a pattern equal to the whole input."""
        assert run(exact_match_naive, True, forward, "abc", "abc") == Result(0, 3, 0)
    
    def test_empty_pattern(self, forward):
        """Test that an empty pattern matches trivially."""
        assert exact_match_naive(True, forward, "foobar", "") == Result(0, 0, 0)
    
    def test_no_occurrence(self, forward):
        """Test a pattern that does not occur."""
        assert run(exact_match_naive, False, forward, "foobar", "baz") == NO_MATCH


class TestPrefixMatch:
    """Test cases for prefix_match."""
    
    def test_prefix(self, forward):
        """Test prefix matching in both case modes."""
        assert run(prefix_match, False, forward, "fooBarbaz", "Foo") == Result(0, 3, 0)
        assert run(prefix_match, True, forward, "fooBarbaz", "Foo") == NO_MATCH
        assert run(prefix_match, False, forward, "fooBarbaz", "baz") == NO_MATCH
    
    def test_input_shorter_than_pattern(self, forward):
        """Test that a short input never matches."""
        assert run(prefix_match, False, forward, "fo", "foo") == NO_MATCH
    
    def test_empty_pattern(self, forward):
        """Test that an empty pattern matches trivially."""
        assert prefix_match(True, forward, "foobar", "") == Result(0, 0, 0)
        assert prefix_match(True, forward, "", "") == Result(0, 0, 0)


class TestSuffixMatch:
    """Test cases for suffix_match."""
    
    def test_suffix(self, forward):
        """Test suffix matching in both case modes."""
        assert run(suffix_match, False, forward, "fooBarbaz", "Foo") == NO_MATCH
        assert run(suffix_match, False, forward, "fooBarbaz", "baz") == Result(6, 9, 0)
        assert run(suffix_match, True, forward, "fooBarbaz", "Baz") == NO_MATCH
    
    @pytest.mark.parametrize("noise", [" ", "   ", "\t", "\n", " \t\r\n", "\x00"])
    def test_trailing_noise_ignored(self, forward, noise):
        """Test that trailing whitespace and control characters do not defeat a match."""
        assert run(suffix_match, False, forward, "fooBarbaz" + noise, "baz") == Result(6, 9, 0)
    
    def test_input_shorter_than_pattern(self, forward):
        """Test that a trimmed input shorter than the pattern never matches."""
        assert run(suffix_match, False, forward, "az   ", "baz") == NO_MATCH
    
    def test_empty_pattern(self, forward):
        """Test that an empty pattern matches at the end of the trimmed input."""
        assert suffix_match(True, forward, "foobar", "") == Result(6, 6, 0)
        assert suffix_match(True, forward, "foobar  ", "") == Result(6, 6, 0)
        assert suffix_match(True, forward, "   ", "") == Result(0, 0, 0)


class TestEqualMatch:
    """Test cases for equal_match."""
    
    def test_equal(self, forward):
        """Test equality in both case modes."""
        assert run(equal_match, False, forward, "fooBarbaz", "FOOBARBAZ") == Result(0, 9, 0)
        assert run(equal_match, True, forward, "fooBarbaz", "fooBarbaz") == Result(0, 9, 0)
        assert run(equal_match, True, forward, "fooBarbaz", "foobarbaz") == NO_MATCH
    
    def test_length_mismatch(self, forward):
        """Test that any length difference is an immediate miss."""
        assert run(equal_match, False, forward, "fooBarbaz", "fooBarba") == NO_MATCH
        assert run(equal_match, False, forward, "fooBarbaz ", "fooBarbaz") == NO_MATCH
    
    def test_non_ascii(self, forward):
        """Test equality with non-ASCII characters."""
        assert run(equal_match, False, forward, "Straße", "STRASSE") == NO_MATCH
        assert run(equal_match, False, forward, "ÉCOLE", "école") == Result(0, 5, 0)
    
    def test_empty_pattern(self, forward):
        """Test that an empty pattern matches trivially."""
        assert equal_match(True, forward, "foobar", "") == Result(0, 0, 0)
        assert equal_match(True, forward, "", "") == Result(0, 0, 0)
