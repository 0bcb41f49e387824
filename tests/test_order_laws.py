"""
Tests for Order Instances and the Order Laws
"""

import operator
from fractions import Fraction

import numpy as np
import pytest
from inequality_chains import (
    BOOLEAN_ORDER,
    INTEGER_ORDER,
    RATIONAL_ORDER,
    REAL_ORDER,
    SYMBOLIC_ORDER,
    AscendingTag,
    Atom,
    DescendingTag,
    OrderInstance,
    RelationSymbol,
    check_order_laws,
)

INTEGERS = list(range(-3, 4))
RATIONALS = [Fraction(k, 3) for k in range(-4, 5)]


class TestReferenceInstances:
    """Test the reference instances satisfy every law."""

    @pytest.mark.parametrize("order,samples", [
        (INTEGER_ORDER, INTEGERS),
        (RATIONAL_ORDER, RATIONALS),
        (REAL_ORDER, list(np.linspace(-1.0, 1.0, 7))),
        (BOOLEAN_ORDER, INTEGERS),
        (SYMBOLIC_ORDER, RATIONALS),
    ])
    def test_laws_hold(self, order, samples):
        """Test no violations on sample values."""
        report = check_order_laws(order, samples)
        assert report.ok, [str(v) for v in report.violations]
        assert report.samples_checked == len(samples)
        assert report.order_name == order.name

    def test_symbolic_predicates(self):
        """Test tag to predicate mapping."""
        assert INTEGER_ORDER.ascending(AscendingTag.STRICT)(1, 2) == Atom(RelationSymbol.LT, 1, 2)
        assert INTEGER_ORDER.ascending(AscendingTag.NON_STRICT)(1, 2) == Atom(RelationSymbol.LE, 1, 2)
        assert INTEGER_ORDER.descending(DescendingTag.STRICT)(2, 1) == Atom(RelationSymbol.GT, 2, 1)
        assert INTEGER_ORDER.descending(DescendingTag.NON_STRICT)(2, 1) == Atom(RelationSymbol.GE, 2, 1)

    def test_domains(self):
        """Test domain membership."""
        assert INTEGER_ORDER.accepts(3)
        assert INTEGER_ORDER.accepts(np.int32(3))
        assert not INTEGER_ORDER.accepts(Fraction(1, 2))
        assert RATIONAL_ORDER.accepts(Fraction(1, 2))
        assert REAL_ORDER.accepts(0.5)
        assert SYMBOLIC_ORDER.accepts("anything")

    def test_samples_outside_domain(self):
        """Test law checks refuse samples the instance does not interpret."""
        with pytest.raises(ValueError, match="integer domain"):
            check_order_laws(INTEGER_ORDER, [0, Fraction(1, 2)])
        with pytest.raises(ValueError, match="'x'"):
            check_order_laws(REAL_ORDER, [0.5, "x"])

    def test_untyped_instance_accepts_any_sample(self):
        """Test an instance without a domain checks any samples."""
        assert check_order_laws(SYMBOLIC_ORDER, ["a", "b", "c"]).ok


class TestBrokenInstances:
    """Test law violations are reported."""

    def _order(self, strict, weak):
        return OrderInstance(
            name="broken",
            ascending=lambda tag: strict if tag is AscendingTag.STRICT else weak,
            descending=lambda tag: operator.gt if tag is DescendingTag.STRICT else operator.ge,
            equality=operator.eq,
            conjunction=lambda p, q: p and q,
        )

    def test_reflexive_strict(self):
        """Test a strict relation that is reflexive."""
        report = check_order_laws(self._order(operator.le, operator.le), INTEGERS)
        assert not report.ok
        laws = {v.law for v in report.violations}
        assert "strict is irreflexive" in laws
        assert all(v.family == "ascending" for v in report.violations)

    def test_non_reflexive_weak(self):
        """Test a non-strict relation that is not reflexive."""
        report = check_order_laws(self._order(operator.lt, operator.lt), INTEGERS)
        laws = {v.law for v in report.violations}
        assert "non-strict is reflexive" in laws

    def test_strict_not_implying_weak(self):
        """Test strict relation unrelated to the non-strict one."""
        report = check_order_laws(self._order(operator.lt, operator.ge), [0, 1])
        laws = {v.law for v in report.violations}
        assert "strict implies non-strict" in laws

    def test_violation_text(self):
        """Test violations render their counterexample."""
        report = check_order_laws(self._order(operator.le, operator.le), [0])
        assert str(report.violations[0]) == "ascending: strict is irreflexive fails at (0)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
