"""
Symbolic Propositions

Statements produced from chains are kept symbolic so that a proof back end
can consume them. A proposition is either:
- Atom: one relational fact, left <symbol> right
- Conjunction: left ∧ right

Propositions can also be evaluated directly on concrete terms, which is
how the test-suite checks that a chain's total statement implies its
global statement.
"""

import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from .relations import RelationSymbol


_COMPARE: Dict[RelationSymbol, Callable[[Any, Any], bool]] = {
    RelationSymbol.EQ: operator.eq,
    RelationSymbol.LT: operator.lt,
    RelationSymbol.LE: operator.le,
    RelationSymbol.GT: operator.gt,
    RelationSymbol.GE: operator.ge,
}


def _resolve(term: Any, assignment: Optional[Mapping]) -> Any:
    if assignment is None:
        return term
    try:
        return assignment.get(term, term)
    except TypeError:
        # unhashable term, cannot be a variable
        return term


class Prop:
    """Base class for propositions."""

    def holds(self, assignment: Optional[Mapping] = None) -> bool:
        """
        Evaluate the proposition.

        Args:
            assignment: Optional mapping from symbolic terms to values;
                terms not in the mapping stand for themselves

        Returns:
            Truth value under Python's comparison operators
        """
        raise NotImplementedError

    def conjuncts(self) -> List["Atom"]:
        """Flattened list of atoms, left to right."""
        raise NotImplementedError

    def to_canonical(self) -> Dict[str, Any]:
        raise NotImplementedError

    def __and__(self, other: "Prop") -> "Conjunction":
        return Conjunction(self, other)


@dataclass(frozen=True)
class Atom(Prop):
    """
    A single relational fact.

    Attributes:
        symbol: The relation
        left: Left term
        right: Right term
    """
    symbol: RelationSymbol
    left: Any
    right: Any

    def holds(self, assignment: Optional[Mapping] = None) -> bool:
        compare = _COMPARE[self.symbol]
        return bool(compare(_resolve(self.left, assignment),
                            _resolve(self.right, assignment)))

    def conjuncts(self) -> List["Atom"]:
        return [self]

    def to_canonical(self) -> Dict[str, Any]:
        return {
            "type": "atom",
            "symbol": self.symbol.value,
            "left": self.left,
            "right": self.right,
        }

    def __str__(self) -> str:
        return f"{self.left} {self.symbol.value} {self.right}"


@dataclass(frozen=True, eq=False, repr=False)
class Conjunction(Prop):
    """
    left ∧ right

    Total statements nest one Conjunction per link, so everything here
    walks the tree with an explicit stack. Two conjunctions are equal when
    they conjoin the same atoms in the same order.
    """
    left: Prop
    right: Prop

    def holds(self, assignment: Optional[Mapping] = None) -> bool:
        return all(atom.holds(assignment) for atom in self.conjuncts())

    def conjuncts(self) -> List[Atom]:
        atoms = []
        stack = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Conjunction):
                stack.append(node.right)
                stack.append(node.left)
            else:
                atoms.extend(node.conjuncts())
        return atoms

    def to_canonical(self) -> Dict[str, Any]:
        return {
            "type": "and",
            "parts": [atom.to_canonical() for atom in self.conjuncts()],
        }

    def __eq__(self, other):
        if not isinstance(other, Conjunction):
            return NotImplemented
        return self.conjuncts() == other.conjuncts()

    def __hash__(self) -> int:
        return hash(tuple(self.conjuncts()))

    def __str__(self) -> str:
        return " ∧ ".join(str(atom) for atom in self.conjuncts())

    def __repr__(self) -> str:
        return f"Conjunction({str(self)!r})"


def truth(statement: Any, assignment: Optional[Mapping] = None) -> bool:
    """Truth value of a Prop or of a plain boolean statement."""
    if isinstance(statement, Prop):
        return statement.holds(assignment)
    return bool(statement)


def implies(premise: Any, conclusion: Any,
            assignment: Optional[Mapping] = None) -> bool:
    """Evaluate premise ⇒ conclusion on concrete values."""
    return (not truth(premise, assignment)) or truth(conclusion, assignment)
