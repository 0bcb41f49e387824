"""
Embedding / Promotion Layer

map_chain lifts a chain over type A into a chain over type B, term by
term, without touching its shape or tags. NumericTower uses it to unify a
chain with an incoming term of a different ordered type before a link is
added, e.g. a chain of integers extended by a rational.

Whether an embedding preserves order is the caller's responsibility.
"""

import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Callable, List, Tuple

import numpy as np

from .chain import ChainNode
from .errors import EmbeddingError

logger = logging.getLogger(__name__)


def map_chain(f: Callable[[Any], Any], chain: ChainNode) -> ChainNode:
    """
    Replace every term of a chain with f(term).

    Args:
        f: Value embedding A -> B
        chain: Chain over A

    Returns:
        Chain over B with the same constructions and tags
    """
    return chain.map(f)


@dataclass(frozen=True)
class TowerLevel:
    """
    One level of a numeric tower.

    Attributes:
        name: Level name
        types: Python types belonging to this level
        lift: Embeds a value of the level below into this level
    """
    name: str
    types: Tuple[type, ...]
    lift: Callable[[Any], Any] = field(default=lambda value: value)


@dataclass(frozen=True)
class NumericTower:
    """
    Ordered sequence of numeric levels, lowest first.

    Values are ranked by the first level whose types they match, so a
    level's types should exclude anything an earlier level claims.
    """
    levels: Tuple[TowerLevel, ...]

    def rank(self, value: Any) -> int:
        """Index of the level a value belongs to."""
        if isinstance(value, bool):
            raise EmbeddingError(f"Booleans are not tower values: {value!r}")
        for i, level in enumerate(self.levels):
            if isinstance(value, level.types):
                return i
        raise EmbeddingError(
            f"{type(value).__name__} value {value!r} is not in the numeric tower "
            f"({', '.join(lv.name for lv in self.levels)})"
        )

    def lift(self, value: Any, target: int) -> Any:
        """Embed value into level `target` by composing level lifts."""
        current = self.rank(value)
        if target < current:
            raise EmbeddingError(
                f"Cannot lower {value!r} from {self.levels[current].name} "
                f"to {self.levels[target].name}"
            )
        for i in range(current + 1, target + 1):
            value = self.levels[i].lift(value)
        return value

    def chain_rank(self, chain: ChainNode) -> int:
        return max(self.rank(t) for t in chain.terms())

    def unify(self, left: Any, term: Any) -> Tuple[Any, Any]:
        """
        Bring a builder operand and an incoming term to a common level.

        Args:
            left: A chain or a bare term
            term: The term about to be linked

        Returns:
            (left, term), with whichever sat lower lifted to the other's level
        """
        if isinstance(left, ChainNode):
            left_rank = self.chain_rank(left)
        else:
            left_rank = self.rank(left)
        term_rank = self.rank(term)
        target = max(left_rank, term_rank)

        if isinstance(left, ChainNode):
            if any(self.rank(t) != target for t in left.terms()):
                logger.debug("Promoting chain %s to %s", left, self.levels[target].name)
                left = map_chain(lambda t: self.lift(t, target), left)
        elif left_rank != target:
            left = self.lift(left, target)

        if term_rank != target:
            logger.debug("Promoting %r to %s", term, self.levels[target].name)
            term = self.lift(term, target)
        return left, term

    @property
    def names(self) -> List[str]:
        return [level.name for level in self.levels]


def _to_real(value: Any) -> np.float64:
    return np.float64(float(value))


DEFAULT_TOWER = NumericTower(levels=(
    TowerLevel("integer", (int, np.integer)),
    TowerLevel("rational", (Fraction,), lift=lambda n: Fraction(int(n))),
    TowerLevel("real", (float, np.floating), lift=_to_real),
))
