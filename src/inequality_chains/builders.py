"""
Chain Builders

Extends a chain (or a bare starting term) by one relation symbol and one
term. The construction that fires is selected from a dispatch table keyed
on the shape of the left operand and the family of the symbol:

    left \\ symbol      =                   < ≤                  > ≥
    term               EqualBase           AscendingBase        DescendingBase
    EqualChain         EqualLink           AscendingFromEqual   DescendingFromEqual
    AscendingChain     AscendingEqualLink  AscendingLink        (rejected)
    DescendingChain    DescendingEqualLink (rejected)           DescendingLink

The two rejected cells have no entry. Mixing ascending and descending
links has no single global statement, so no chain value is produced and
CrossFamilyError is raised instead.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

from .chain import (
    AscendingBase,
    AscendingChain,
    AscendingEqualLink,
    AscendingFromEqual,
    AscendingLink,
    ChainNode,
    DescendingBase,
    DescendingChain,
    DescendingEqualLink,
    DescendingFromEqual,
    DescendingLink,
    EqualBase,
    EqualChain,
    EqualLink,
    _Linkable,
    shape_name,
)
from .embedding import NumericTower
from .errors import CrossFamilyError
from .relations import AscendingTag, DescendingTag, Family, RelationSymbol

logger = logging.getLogger(__name__)


class _Term:
    """Dispatch key for a left operand that is not a chain."""


Handler = Callable[[Any, Any, Any], ChainNode]

_dispatcher: Dict[Tuple[type, Family], Handler] = {
    (_Term, Family.EQUALITY): lambda left, tag, term: EqualBase(left, term),
    (EqualChain, Family.EQUALITY): lambda left, tag, term: EqualLink(left, term),
    (AscendingChain, Family.EQUALITY): lambda left, tag, term: AscendingEqualLink(left, term),
    (DescendingChain, Family.EQUALITY): lambda left, tag, term: DescendingEqualLink(left, term),

    (_Term, Family.ASCENDING): AscendingBase,
    (EqualChain, Family.ASCENDING): AscendingFromEqual,
    (AscendingChain, Family.ASCENDING): AscendingLink,

    (_Term, Family.DESCENDING): DescendingBase,
    (EqualChain, Family.DESCENDING): DescendingFromEqual,
    (DescendingChain, Family.DESCENDING): DescendingLink,
}


def _shape_key(left: Any) -> type:
    for shape in (EqualChain, AscendingChain, DescendingChain):
        if isinstance(left, shape):
            return shape
    return _Term


def _unwrap(left: Any) -> Any:
    if isinstance(left, ChainStart):
        return left.value
    return left


def link(left: Any, symbol: Union[RelationSymbol, str], term: Any,
         tower: Optional[NumericTower] = None) -> ChainNode:
    """
    Extend `left` by `symbol term`.

    Args:
        left: A chain, a ChainStart, or any other value (a starting term)
        symbol: RelationSymbol or text accepted by RelationSymbol.lookup
        term: The new last term
        tower: Optional numeric tower used to unify mixed-type terms

    Returns:
        A new chain wrapping `left`

    Raises:
        CrossFamilyError: ascending symbol on a DescendingChain, or the reverse
    """
    symbol = RelationSymbol.lookup(symbol)
    left = _unwrap(left)
    handler = _dispatcher.get((_shape_key(left), symbol.family))
    if handler is None:
        logger.debug("Rejected %s %s %r", shape_name(left), symbol, term)
        raise CrossFamilyError(symbol, shape_name(left))

    if tower is not None:
        left, term = tower.unify(left, term)

    return handler(left, symbol.tag, term)


def equal(left: Any, term: Any, tower: Optional[NumericTower] = None) -> ChainNode:
    """left = term"""
    return link(left, RelationSymbol.EQ, term, tower=tower)


def ascending(left: Any, tag: AscendingTag, term: Any,
              tower: Optional[NumericTower] = None) -> ChainNode:
    """left (< | ≤) term"""
    if not isinstance(tag, AscendingTag):
        raise TypeError(f"Expected an AscendingTag, got {tag!r}")
    return link(left, tag.symbol, term, tower=tower)


def descending(left: Any, tag: DescendingTag, term: Any,
               tower: Optional[NumericTower] = None) -> ChainNode:
    """left (> | ≥) term"""
    if not isinstance(tag, DescendingTag):
        raise TypeError(f"Expected a DescendingTag, got {tag!r}")
    return link(left, tag.symbol, term, tower=tower)


def build_chain(first: Any, pairs: Iterable[Tuple[Union[RelationSymbol, str], Any]],
                tower: Optional[NumericTower] = None) -> ChainNode:
    """
    Fold (symbol, term) pairs left to right onto a starting term.

    Example:
        build_chain(3, [("≤", 4), ("<", 7), ("=", 7), ("<", 8)])
        builds 3 ≤ 4 < 7 = 7 < 8

    If first is already a chain, an empty pairs list returns it unchanged.

    Raises:
        ValueError: if no pairs are given and first is a bare term
        CrossFamilyError: on the first link that mixes families
    """
    current = first
    for symbol, term in pairs:
        current = link(current, symbol, term, tower=tower)
    if not isinstance(current, ChainNode):
        raise ValueError("A chain needs at least one link")
    return current


class ChainStart(_Linkable):
    """
    A starting term awaiting its first link.

    Example:
        start(3).le(4).lt(7)  ->  3 ≤ 4 < 7
    """

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self) -> str:
        return f"ChainStart({self.value!r})"


def start(value: Any) -> ChainStart:
    return ChainStart(value)
