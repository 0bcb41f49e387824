"""
Order Instances

An OrderInstance tells the statement generator how each family's tags map
to relation predicates on a term type T:

    ascending(tag)(x, y)  -> Prop     e.g. STRICT -> x < y
    descending(tag)(x, y) -> Prop     e.g. STRICT -> x > y
    equality(x, y)        -> Prop
    conjunction(p, q)     -> Prop

Relation flow is only sound when these predicates obey the order laws
(see check_order_laws). Two factories cover the common cases:
- symbolic_order: statements are Atom / Conjunction values
- boolean_order:  statements are evaluated immediately to bool
"""

import itertools
import operator
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Callable, List, Sequence, Tuple

import numpy as np

from .propositions import Atom, Conjunction, truth
from .relations import AscendingTag, DescendingTag, RelationSymbol


Predicate = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class OrderInstance:
    """
    Interpretation of relation tags on one ordered term type.

    Attributes:
        name: Instance name (used in reports)
        ascending: Maps an AscendingTag to a binary predicate
        descending: Maps a DescendingTag to a binary predicate
        equality: Binary equality predicate
        conjunction: Combines two statements
        domain: Python types the instance interprets; empty means any type
    """
    name: str
    ascending: Callable[[AscendingTag], Predicate]
    descending: Callable[[DescendingTag], Predicate]
    equality: Predicate
    conjunction: Callable[[Any, Any], Any]
    domain: Tuple[type, ...] = field(default=())

    def accepts(self, value: Any) -> bool:
        """True if value belongs to the instance's domain (any value if unset)."""
        return not self.domain or isinstance(value, self.domain)


def symbolic_order(name: str = "symbolic", domain: Tuple[type, ...] = ()) -> OrderInstance:
    """Order instance producing Atom and Conjunction statements."""

    def ascending(tag: AscendingTag) -> Predicate:
        return lambda x, y: Atom(tag.symbol, x, y)

    def descending(tag: DescendingTag) -> Predicate:
        return lambda x, y: Atom(tag.symbol, x, y)

    return OrderInstance(
        name=name,
        ascending=ascending,
        descending=descending,
        equality=lambda x, y: Atom(RelationSymbol.EQ, x, y),
        conjunction=Conjunction,
        domain=domain,
    )


_BOOLEAN_ASCENDING = {
    AscendingTag.STRICT: operator.lt,
    AscendingTag.NON_STRICT: operator.le,
}

_BOOLEAN_DESCENDING = {
    DescendingTag.STRICT: operator.gt,
    DescendingTag.NON_STRICT: operator.ge,
}


def boolean_order(name: str = "boolean", domain: Tuple[type, ...] = ()) -> OrderInstance:
    """Order instance that evaluates every statement to a bool."""
    return OrderInstance(
        name=name,
        ascending=lambda tag: (lambda x, y: bool(_BOOLEAN_ASCENDING[tag](x, y))),
        descending=lambda tag: (lambda x, y: bool(_BOOLEAN_DESCENDING[tag](x, y))),
        equality=lambda x, y: bool(x == y),
        conjunction=lambda p, q: bool(p) and bool(q),
        domain=domain,
    )


SYMBOLIC_ORDER = symbolic_order()
INTEGER_ORDER = symbolic_order("integer", (int, np.integer))
RATIONAL_ORDER = symbolic_order("rational", (int, np.integer, Fraction))
REAL_ORDER = symbolic_order("real", (int, np.integer, Fraction, float, np.floating))
BOOLEAN_ORDER = boolean_order()


@dataclass
class LawViolation:
    """One counterexample to an order law."""
    law: str
    family: str
    values: Tuple[Any, ...]

    def __str__(self) -> str:
        vals = ", ".join(str(v) for v in self.values)
        return f"{self.family}: {self.law} fails at ({vals})"


@dataclass
class OrderLawReport:
    """Result of checking an order instance against the order laws."""
    order_name: str
    samples_checked: int
    violations: List[LawViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


def _check_family(strict: Predicate, weak: Predicate, family: str,
                  samples: Sequence[Any]) -> List[LawViolation]:
    violations = []

    def fail(law, *values):
        violations.append(LawViolation(law=law, family=family, values=values))

    for x in samples:
        if not truth(weak(x, x)):
            fail("non-strict is reflexive", x)
        if truth(strict(x, x)):
            fail("strict is irreflexive", x)

    for x, y in itertools.product(samples, repeat=2):
        if truth(strict(x, y)) and not truth(weak(x, y)):
            fail("strict implies non-strict", x, y)

    for x, y, z in itertools.product(samples, repeat=3):
        s_xy, s_yz = truth(strict(x, y)), truth(strict(y, z))
        w_xy, w_yz = truth(weak(x, y)), truth(weak(y, z))
        if w_xy and w_yz and not truth(weak(x, z)):
            fail("non-strict is transitive", x, y, z)
        if s_xy and s_yz and not truth(strict(x, z)):
            fail("strict is transitive", x, y, z)
        if s_xy and w_yz and not truth(strict(x, z)):
            fail("strict then non-strict is strict", x, y, z)
        if w_xy and s_yz and not truth(strict(x, z)):
            fail("non-strict then strict is strict", x, y, z)

    return violations


def check_order_laws(order: OrderInstance, samples: Sequence[Any]) -> OrderLawReport:
    """
    Check the laws that make relation flow sound.

    For both families, over every sample pair and triple:
    - NON_STRICT is reflexive and transitive
    - STRICT is irreflexive, transitive, and implies NON_STRICT
    - STRICT followed by NON_STRICT (either order) gives STRICT

    Args:
        order: The instance under test
        samples: Values of the instance's term type

    Returns:
        OrderLawReport listing every counterexample found

    Raises:
        ValueError: if a sample lies outside the instance's domain
    """
    samples = list(samples)
    outside = [s for s in samples if not order.accepts(s)]
    if outside:
        raise ValueError(
            f"Samples outside the {order.name} domain: "
            + ", ".join(repr(s) for s in outside)
        )
    report = OrderLawReport(order_name=order.name, samples_checked=len(samples))
    report.violations.extend(_check_family(
        order.ascending(AscendingTag.STRICT),
        order.ascending(AscendingTag.NON_STRICT),
        "ascending", samples,
    ))
    report.violations.extend(_check_family(
        order.descending(DescendingTag.STRICT),
        order.descending(DescendingTag.NON_STRICT),
        "descending", samples,
    ))
    return report
