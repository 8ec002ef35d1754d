"""Unit tests for the match engine and strategy dispatch."""

import threading

import pytest
from rune_matcher.core.engine import CaseMode, MatchEngine, MatchType, get_matcher
from rune_matcher.core.exact_matcher import exact_match_naive
from rune_matcher.core.fuzzy_matcher import fuzzy_match
from rune_matcher.core.result import Result


class TestGetMatcher:
    """Test cases for strategy lookup."""
    
    def test_lookup_by_enum_and_name(self):
        """Test lookup by enum member and by its string value."""
        assert get_matcher(MatchType.FUZZY) is fuzzy_match
        assert get_matcher("exact") is exact_match_naive
    
    def test_every_type_has_a_matcher(self):
        """Test that every match type dispatches to a callable."""
        for match_type in MatchType:
            assert callable(get_matcher(match_type))
    
    def test_unknown_type(self):
        """Test that unknown strategy names are rejected."""
        with pytest.raises(ValueError):
            get_matcher("regex")
    
    @pytest.mark.parametrize("match_type", list(MatchType))
    @pytest.mark.parametrize("forward", [True, False])
    def test_empty_pattern_for_every_strategy(self, match_type, forward):
        """Test the trivial empty-pattern match of every strategy."""
        result = get_matcher(match_type)(True, forward, "foobar  ", "")
        
        if match_type is MatchType.SUFFIX:
            assert result == Result(6, 6, 0)
        else:
            assert result == Result(0, 0, 0)
    
    @pytest.mark.parametrize("match_type", [t for t in MatchType if t is not MatchType.FUZZY])
    def test_non_fuzzy_strategies_have_no_penalty(self, match_type):
        """Test that only fuzzy matches carry a penalty."""
        result = get_matcher(match_type)(False, True, "foobar", "foobar")
        
        assert result.matched
        assert result.penalty == 0


class TestMatchEngine:
    """Test cases for the MatchEngine class."""
    
    @pytest.fixture
    def engine(self):
        """Create a match engine instance for testing."""
        return MatchEngine()
    
    def test_engine_initialization(self, engine):
        """Test match engine defaults."""
        assert engine.default_match_type is MatchType.FUZZY
        assert engine.case_mode is CaseMode.SMART
        assert engine.forward is True
        assert engine.reset_on_match is False
        assert engine.get_stats()["total_queries"] == 0
    
    def test_invalid_configuration(self):
        """Test that unknown names are rejected at construction."""
        with pytest.raises(ValueError):
            MatchEngine(default_match_type="regex")
        with pytest.raises(ValueError):
            MatchEngine(case_mode="shouting")
    
    def test_prepare_smart_case(self, engine):
        """Test that smart case only respects case for patterns with uppercase letters."""
        assert engine.prepare("foo") == (False, "foo")
        assert engine.prepare("Foo") == (True, "Foo")
    
    def test_prepare_explicit_modes(self, engine):
        """Test the ignore and respect case modes."""
        assert engine.prepare("Foo", CaseMode.IGNORE) == (False, "foo")
        assert engine.prepare("foo", "respect") == (True, "foo")
    
    def test_match_folds_pattern(self, engine):
        """Test that the engine folds the pattern before matching."""
        assert engine.match("fooBarbaz", "oBZ", case_mode="ignore") == Result(2, 9, 9)
    
    def test_match_smart_case(self, engine):
        """Test smart case end to end."""
        assert engine.match("fooBarbaz", "oBZ") == Result(-1, -1, 0)
        assert engine.match("fooBarbaz", "oBz") == Result(2, 9, 9)
        assert engine.match("FOOBARBAZ", "obz") == Result(2, 9, 12)
    
    def test_match_types(self, engine):
        """Test dispatch to each strategy."""
        assert engine.match("fooBarbaz", "oba", match_type="exact") == Result(2, 5, 0)
        assert engine.match("fooBarbaz", "foo", match_type=MatchType.PREFIX) == Result(0, 3, 0)
        assert engine.match("fooBarbaz \n", "baz", match_type="suffix") == Result(6, 9, 0)
        assert engine.match("fooBarbaz", "foobarbaz", match_type="equal") == Result(0, 9, 0)
    
    def test_backward_default(self):
        """Test an engine configured to scan backward."""
        engine = MatchEngine(forward=False)
        
        assert engine.match("foobar fb", "fb") == Result(7, 9, 1)
        assert engine.match("foobar fb", "fb", forward=True) == Result(0, 4, 5)
    
    def test_reset_on_match_policy(self):
        """Test that the engine passes its scoring policy to fuzzy matching."""
        assert MatchEngine().match("foo barbaz", "fbb").penalty == 6
        assert MatchEngine(reset_on_match=True).match("foo barbaz", "fbb").penalty == 5
    
    def test_match_many_keeps_order(self, engine):
        """Test that batch results follow the input order."""
        lines = ["foo bar baz", "nothing here", "foo barbaz", "fooBarBaz"]
        results = engine.match_many(lines, "fbb")
        
        assert results == [
            Result(0, 9, 3),
            Result(-1, -1, 0),
            Result(0, 8, 6),
            Result(0, 7, 3),
        ]
    
    def test_match_many_empty(self, engine):
        """Test a batch without lines."""
        assert engine.match_many([], "foo") == []
    
    def test_stats(self, engine):
        """Test statistics tracking."""
        engine.match("foobar", "fb")
        engine.match_many(["foobar", "xyz"], "foo", match_type="prefix")
        stats = engine.get_stats()
        
        assert stats["total_queries"] == 2
        assert stats["total_lines"] == 3
        assert stats["matches"] == 2
        assert stats["no_matches"] == 1
        assert stats["fuzzy_queries"] == 1
        assert stats["prefix_queries"] == 1
        assert stats["match_rate"] == pytest.approx(2 / 3)
        assert stats["average_execution_time_ms"] >= 0.0
    
    def test_reset_stats(self, engine):
        """Test that statistics can be cleared."""
        engine.match("foobar", "fb")
        engine.reset_stats()
        
        assert engine.get_stats()["total_queries"] == 0
    
    def test_concurrent_matching(self, engine):
        """Test that matching from several threads gives the same results."""
        lines = [f"src/module_{i}/fooBarBaz.py" for i in range(200)]
        expected = engine.match_many(lines, "fbb")
        outputs = []
        
        def worker():
            outputs.append(engine.match_many(lines, "fbb"))
        
        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        
        assert all(output == expected for output in outputs)
        assert engine.get_stats()["total_lines"] == len(lines) * 5
