"""
Tests for Chain Builders
"""

import pytest
from inequality_chains import (
    AscendingBase,
    AscendingChain,
    AscendingEqualLink,
    AscendingFromEqual,
    AscendingLink,
    AscendingTag,
    ChainError,
    CrossFamilyError,
    DescendingBase,
    DescendingChain,
    DescendingEqualLink,
    DescendingFromEqual,
    DescendingLink,
    DescendingTag,
    EqualBase,
    EqualLink,
    RelationSymbol,
    ascending,
    build_chain,
    descending,
    equal,
    link,
    start,
    tags,
)


class TestDispatch:
    """Test the construction chosen for each shape and symbol."""

    def test_from_term(self):
        """Test a bare term starts each shape."""
        assert isinstance(link(1, "=", 1), EqualBase)
        assert isinstance(link(1, "<", 2), AscendingBase)
        assert isinstance(link(1, "≤", 2), AscendingBase)
        assert isinstance(link(2, ">", 1), DescendingBase)
        assert isinstance(link(2, "≥", 1), DescendingBase)

    def test_from_equal_chain(self):
        """Test an equality chain extends into every family."""
        eq = equal(1, 1)
        assert isinstance(link(eq, "=", 1), EqualLink)
        assert isinstance(link(eq, "<", 2), AscendingFromEqual)
        assert isinstance(link(eq, "≥", 0), DescendingFromEqual)

    def test_from_ascending(self):
        """Test an ascending chain accepts = and ascending symbols."""
        c = link(1, "<", 2)
        assert isinstance(link(c, "=", 2), AscendingEqualLink)
        assert isinstance(link(c, "≤", 3), AscendingLink)

    def test_from_descending(self):
        """Test a descending chain accepts = and descending symbols."""
        c = link(3, ">", 2)
        assert isinstance(link(c, "=", 2), DescendingEqualLink)
        assert isinstance(link(c, "≥", 1), DescendingLink)

    def test_equality_link_keeps_tags(self):
        """Test '=' leaves the tag history unchanged."""
        c = link(1, "<", 2)
        assert tags(link(c, "=", 2)) == tags(c)

    def test_typed_entry_points(self):
        """Test equal / ascending / descending."""
        c = ascending(equal(0, 0), AscendingTag.NON_STRICT, 1)
        assert isinstance(c, AscendingFromEqual)
        d = descending(5, DescendingTag.STRICT, 4)
        assert isinstance(d, DescendingBase)
        with pytest.raises(TypeError):
            ascending(0, DescendingTag.STRICT, 1)
        with pytest.raises(TypeError):
            descending(0, AscendingTag.STRICT, 1)

    def test_symbol_enum_accepted(self):
        """Test RelationSymbol members are accepted directly."""
        c = link(0, RelationSymbol.LT, 1)
        assert c == AscendingBase(0, AscendingTag.STRICT, 1)


class TestCrossFamily:
    """Test mixing ascending and descending links is rejected."""

    @pytest.mark.parametrize("symbol", ["<", "≤", "<="])
    def test_ascending_on_descending(self, symbol):
        """Test ascending symbols on a descending chain."""
        c = build_chain(5, [(">", 4), ("=", 4)])
        assert isinstance(c, DescendingChain)
        with pytest.raises(CrossFamilyError) as info:
            link(c, symbol, 6)
        assert info.value.shape == "a DescendingChain"
        assert info.value.symbol is RelationSymbol.lookup(symbol)
        assert RelationSymbol.lookup(symbol).value in str(info.value)
        assert "DescendingChain" in str(info.value)

    @pytest.mark.parametrize("symbol", [">", "≥", ">="])
    def test_descending_on_ascending(self, symbol):
        """Test descending symbols on an ascending chain."""
        c = build_chain(1, [("=", 1), ("<", 4)])
        assert isinstance(c, AscendingChain)
        with pytest.raises(CrossFamilyError):
            link(c, symbol, 0)

    def test_is_type_error_and_chain_error(self):
        """Test the error hierarchy."""
        c = link(0, "<", 1)
        with pytest.raises(TypeError):
            link(c, ">", 0)
        with pytest.raises(ChainError):
            link(c, ">", 0)

    def test_no_chain_produced(self):
        """Test the fold stops at the first mixed link."""
        produced = []

        def pairs():
            for pair in [("≤", 4), ("<", 7), (">", 2), ("<", 9)]:
                produced.append(pair)
                yield pair

        with pytest.raises(CrossFamilyError):
            build_chain(3, pairs())
        assert produced == [("≤", 4), ("<", 7), (">", 2)]


class TestBuildChain:
    """Test folding pairs and fluent construction."""

    def test_fold_matches_manual(self):
        """Test build_chain equals step-by-step links."""
        c = build_chain(3, [("≤", 4), ("<", 7), ("=", 7), ("<", 8)])
        manual = link(link(link(link(3, "≤", 4), "<", 7), "=", 7), "<", 8)
        assert c == manual

    def test_empty_pairs(self):
        """Test a chain needs a link."""
        with pytest.raises(ValueError):
            build_chain(3, [])
        with pytest.raises(ValueError):
            build_chain(start(3), [])

    def test_empty_pairs_on_chain(self):
        """Test an existing chain passes through an empty fold unchanged."""
        c = build_chain(3, [("≤", 4)])
        assert build_chain(c, []) is c
        d = build_chain(c, [("<", 7)])
        assert build_chain(d, iter(())) == d

    def test_fluent(self):
        """Test start(...).le(...).lt(...)."""
        c = start(3).le(4).lt(7).eq(7).lt(8)
        assert c == build_chain(3, [("≤", 4), ("<", 7), ("=", 7), ("<", 8)])
        d = start(9).ge(8).gt(1)
        assert isinstance(d, DescendingLink)

    def test_fluent_rejects_mixing(self):
        """Test fluent methods go through the same dispatch."""
        with pytest.raises(CrossFamilyError):
            start(1).lt(2).gt(0)

    def test_start_wrapper_unwrapped(self):
        """Test a ChainStart operand is treated as its term."""
        assert link(start(1), "=", 1) == EqualBase(1, 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
