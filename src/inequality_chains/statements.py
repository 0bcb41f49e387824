"""
Statement Generator

Turns a chain into the three statements it denotes:
- global:      head R tail, R resolved by relation flow
- weak global: head R' tail, R' always the non-strict relation
- total:       conjunction of every link, in construction order

For every lawful order instance the global statement follows from the
total statement alone.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .chain import (
    AscendingChain,
    ChainNode,
    DescendingChain,
    EqualChain,
    optional_flow,
)
from .order import SYMBOLIC_ORDER, OrderInstance
from .relations import AscendingTag, DescendingTag, RelationSymbol, Tag


def _predicate(order: OrderInstance, symbol: RelationSymbol):
    tag = symbol.tag
    if tag is None:
        return order.equality
    if isinstance(tag, AscendingTag):
        return order.ascending(tag)
    return order.descending(tag)


def _relate(chain: ChainNode, order: OrderInstance, tag: Optional[Tag]) -> Any:
    if isinstance(chain, EqualChain):
        return order.equality(chain.head, chain.tail)
    if isinstance(chain, AscendingChain):
        return order.ascending(tag)(chain.head, chain.tail)
    if isinstance(chain, DescendingChain):
        return order.descending(tag)(chain.head, chain.tail)
    raise TypeError(f"Not a chain: {chain!r}")


def global_statement(chain: ChainNode, order: OrderInstance = SYMBOLIC_ORDER) -> Any:
    """
    The relation between head and tail implied by the whole chain.

    Example:
        3 ≤ 4 < 7 = 7 < 8  ->  3 < 8
    """
    return _relate(chain, order, optional_flow(chain))


def weak_global_statement(chain: ChainNode, order: OrderInstance = SYMBOLIC_ORDER) -> Any:
    """Global statement with the non-strict relation regardless of flow."""
    if isinstance(chain, AscendingChain):
        return _relate(chain, order, AscendingTag.NON_STRICT)
    if isinstance(chain, DescendingChain):
        return _relate(chain, order, DescendingTag.NON_STRICT)
    return _relate(chain, order, None)


def total_statement(chain: ChainNode, order: OrderInstance = SYMBOLIC_ORDER) -> Any:
    """
    Conjunction of one relational fact per link.

    The conjunction nests to the left, matching construction order:
    ((t0 R1 t1 ∧ t1 R2 t2) ∧ t2 R3 t3) ...
    """
    statement = None
    for lk in chain.links():
        fact = _predicate(order, lk.symbol)(lk.left, lk.right)
        statement = fact if statement is None else order.conjunction(statement, fact)
    return statement


@dataclass
class ChainSummary:
    """Everything derived from one chain."""
    chain: ChainNode
    relation_flow: Optional[Tag]
    global_statement: Any
    weak_global_statement: Any
    total_statement: Any

    @property
    def shape(self) -> str:
        return self.chain.shape.value

    def to_canonical(self) -> Dict[str, Any]:
        def encode(statement):
            if hasattr(statement, "to_canonical"):
                return statement.to_canonical()
            return statement

        return {
            "chain": self.chain.to_canonical(),
            "relation_flow": self.relation_flow.symbol.value if self.relation_flow else None,
            "global": encode(self.global_statement),
            "weak_global": encode(self.weak_global_statement),
            "total": encode(self.total_statement),
        }


def describe(chain: ChainNode, order: OrderInstance = SYMBOLIC_ORDER) -> ChainSummary:
    """Compute relation flow and all three statements of a chain."""
    return ChainSummary(
        chain=chain,
        relation_flow=optional_flow(chain),
        global_statement=global_statement(chain, order),
        weak_global_statement=weak_global_statement(chain, order),
        total_statement=total_statement(chain, order),
    )
