"""
Chain Model and Accessors

Represents an inequality chain as a small immutable tree of constructions.
Each extension wraps the previous chain, so a chain records its whole
construction history, not only its latest link.

Shapes:
- EqualChain:      t0 = t1 = ... = tn
- AscendingChain:  links drawn from {=, <, ≤}, at least one of < or ≤
- DescendingChain: links drawn from {=, >, ≥}, at least one of > or ≥

Constructions per ordered shape:
- Base:       two terms and one tag
- FromEqual:  an EqualChain extended by one tagged term
- EqualLink:  an ordered chain extended by one '=' term (no tag)
- Link:       an ordered chain extended by one tagged term
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .relations import AscendingTag, DescendingTag, Family, RelationSymbol, Tag


@dataclass(frozen=True)
class Link:
    """
    One relational fact of a chain: left <symbol> right.

    Attributes:
        symbol: The relation joining the two terms
        left: Term on the left of the link
        right: Term on the right of the link
    """
    symbol: RelationSymbol
    left: Any
    right: Any


class _Linkable:
    """Fluent extension methods shared by chains and chain starts."""

    def link(self, symbol, term, tower=None) -> "ChainNode":
        from .builders import link
        return link(self, symbol, term, tower=tower)

    def eq(self, term, tower=None) -> "ChainNode":
        return self.link(RelationSymbol.EQ, term, tower)

    def lt(self, term, tower=None) -> "ChainNode":
        return self.link(RelationSymbol.LT, term, tower)

    def le(self, term, tower=None) -> "ChainNode":
        return self.link(RelationSymbol.LE, term, tower)

    def gt(self, term, tower=None) -> "ChainNode":
        return self.link(RelationSymbol.GT, term, tower)

    def ge(self, term, tower=None) -> "ChainNode":
        return self.link(RelationSymbol.GE, term, tower)


class ChainNode(_Linkable):
    """
    Base class for every chain construction.

    Accessors walk the construction history with a loop rather than
    recursion, so chains of any length are supported.
    """

    shape: Family

    @property
    def _inner(self) -> Optional["ChainNode"]:
        """The chain this construction extends (None for a base)."""
        return None

    def _own_link(self) -> Link:
        raise NotImplementedError

    def _flow_step(self, flow: Optional[Tag]) -> Tag:
        raise NotImplementedError

    def _rebuild(self, inner: Optional["ChainNode"], f: Callable[[Any], Any]) -> "ChainNode":
        raise NotImplementedError

    def constructions(self) -> List["ChainNode"]:
        """Constructions from the base outward."""
        nodes = []
        node = self
        while node is not None:
            nodes.append(node)
            node = node._inner
        nodes.reverse()
        return nodes

    @property
    def head(self) -> Any:
        """First term of the chain."""
        node = self
        while node._inner is not None:
            node = node._inner
        return node.first

    @property
    def tail(self) -> Any:
        """Last term of the chain."""
        raise NotImplementedError

    def links(self) -> List[Link]:
        """All links in construction order."""
        return [node._own_link() for node in self.constructions()]

    def relation_flow(self) -> Tag:
        flow = None
        for node in self.constructions():
            flow = node._flow_step(flow)
        return flow

    def map(self, f: Callable[[Any], Any]) -> "ChainNode":
        """Same construction with every term replaced by f(term)."""
        mapped = None
        for node in self.constructions():
            mapped = node._rebuild(mapped, f)
        return mapped

    def terms(self) -> List[Any]:
        links = self.links()
        return [links[0].left] + [lk.right for lk in links]

    def tags(self) -> List[Tag]:
        """Tag history; equality links contribute nothing."""
        return [lk.symbol.tag for lk in self.links() if lk.symbol.tag is not None]

    def _key(self) -> tuple:
        return tuple((type(node), node._own_link()) for node in self.constructions())

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __len__(self) -> int:
        return len(self.constructions())

    def to_canonical(self) -> Dict[str, Any]:
        """Convert to canonical dictionary form."""
        return {
            "shape": self.shape.value,
            "terms": self.terms(),
            "links": [
                {"symbol": lk.symbol.value, "term": lk.right}
                for lk in self.links()
            ],
        }

    def __str__(self) -> str:
        parts = [str(self.head)]
        for lk in self.links():
            parts.append(f"{lk.symbol.value} {lk.right}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class EqualChain(ChainNode):
    """Chain whose links are all '='."""
    shape = Family.EQUALITY

    def _flow_step(self, flow):
        return flow

    def relation_flow(self) -> Tag:
        raise TypeError(
            "Relation flow is defined only for ascending and descending chains"
        )


class AscendingChain(ChainNode):
    """Chain over {=, <, ≤}."""
    shape = Family.ASCENDING


class DescendingChain(ChainNode):
    """Chain over {=, >, ≥}."""
    shape = Family.DESCENDING


# Construction behaviour shared by both ordered families.

class _Pair:
    @property
    def tail(self):
        return self.second

    def _own_link(self):
        return Link(self.tag.symbol, self.first, self.second)

    def _flow_step(self, flow):
        return self.tag

    def _rebuild(self, inner, f):
        return type(self)(f(self.first), self.tag, f(self.second))


class _FromEqual:
    @property
    def _inner(self):
        return self.equal

    @property
    def tail(self):
        return self.term

    def _own_link(self):
        return Link(self.tag.symbol, self.equal.tail, self.term)

    def _flow_step(self, flow):
        # the equality prefix carries no tag
        return self.tag

    def _rebuild(self, inner, f):
        return type(self)(inner, self.tag, f(self.term))


class _EqualStep:
    @property
    def _inner(self):
        return self.prev

    @property
    def tail(self):
        return self.term

    def _own_link(self):
        return Link(RelationSymbol.EQ, self.prev.tail, self.term)

    def _flow_step(self, flow):
        # '=' neither weakens nor strengthens the accumulated relation
        return flow

    def _rebuild(self, inner, f):
        return type(self)(inner, f(self.term))


class _TaggedStep:
    @property
    def _inner(self):
        return self.prev

    @property
    def tail(self):
        return self.term

    def _own_link(self):
        return Link(self.tag.symbol, self.prev.tail, self.term)

    def _flow_step(self, flow):
        return flow.combine(self.tag)

    def _rebuild(self, inner, f):
        return type(self)(inner, self.tag, f(self.term))


# Equality chains

@dataclass(frozen=True, eq=False, repr=False)
class EqualBase(EqualChain):
    """t0 = t1"""
    first: Any
    second: Any

    @property
    def tail(self):
        return self.second

    def _own_link(self):
        return Link(RelationSymbol.EQ, self.first, self.second)

    def _rebuild(self, inner, f):
        return EqualBase(f(self.first), f(self.second))


@dataclass(frozen=True, eq=False, repr=False)
class EqualLink(_EqualStep, EqualChain):
    """prev = term"""
    prev: EqualChain
    term: Any


# Ascending chains

@dataclass(frozen=True, eq=False, repr=False)
class AscendingBase(_Pair, AscendingChain):
    """first (< | ≤) second"""
    first: Any
    tag: AscendingTag
    second: Any


@dataclass(frozen=True, eq=False, repr=False)
class AscendingFromEqual(_FromEqual, AscendingChain):
    """(t0 = ... = tk) (< | ≤) term"""
    equal: EqualChain
    tag: AscendingTag
    term: Any


@dataclass(frozen=True, eq=False, repr=False)
class AscendingEqualLink(_EqualStep, AscendingChain):
    """prev = term"""
    prev: AscendingChain
    term: Any


@dataclass(frozen=True, eq=False, repr=False)
class AscendingLink(_TaggedStep, AscendingChain):
    """prev (< | ≤) term"""
    prev: AscendingChain
    tag: AscendingTag
    term: Any


# Descending chains

@dataclass(frozen=True, eq=False, repr=False)
class DescendingBase(_Pair, DescendingChain):
    """first (> | ≥) second"""
    first: Any
    tag: DescendingTag
    second: Any


@dataclass(frozen=True, eq=False, repr=False)
class DescendingFromEqual(_FromEqual, DescendingChain):
    """(t0 = ... = tk) (> | ≥) term"""
    equal: EqualChain
    tag: DescendingTag
    term: Any


@dataclass(frozen=True, eq=False, repr=False)
class DescendingEqualLink(_EqualStep, DescendingChain):
    """prev = term"""
    prev: DescendingChain
    term: Any


@dataclass(frozen=True, eq=False, repr=False)
class DescendingLink(_TaggedStep, DescendingChain):
    """prev (> | ≥) term"""
    prev: DescendingChain
    tag: DescendingTag
    term: Any


# Module-level accessors

def head(chain: ChainNode) -> Any:
    """First term, found by walking to the base construction."""
    return chain.head


def tail(chain: ChainNode) -> Any:
    """Last term, read from the outermost construction."""
    return chain.tail


def terms(chain: ChainNode) -> List[Any]:
    return chain.terms()


def tags(chain: ChainNode) -> List[Tag]:
    return chain.tags()


def links(chain: ChainNode) -> List[Link]:
    return chain.links()


def relation_flow(chain: ChainNode) -> Tag:
    """
    Fold the chain's tags, in construction order, into one tag.

    STRICT is absorbing: a ≤ b < c gives a < c, while a ≤ b ≤ c only
    gives a ≤ c. Equality links are transparent.

    Raises:
        TypeError: for an EqualChain
    """
    return chain.relation_flow()


def shape_name(obj: Any) -> str:
    """Human-readable shape of a builder operand."""
    if isinstance(obj, EqualChain):
        return "an EqualChain"
    if isinstance(obj, AscendingChain):
        return "an AscendingChain"
    if isinstance(obj, DescendingChain):
        return "a DescendingChain"
    return "a term"


def optional_flow(chain: ChainNode) -> Optional[Tag]:
    """relation_flow, or None for equality chains."""
    if isinstance(chain, EqualChain):
        return None
    return chain.relation_flow()
