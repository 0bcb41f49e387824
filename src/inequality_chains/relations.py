"""
Relation Tags and Symbols

Two tag enumerations distinguish strict from non-strict relations, one per
relation family:
- AscendingTag:  STRICT is <,  NON_STRICT is ≤
- DescendingTag: STRICT is >,  NON_STRICT is ≥

The enumerations are deliberately separate types. A chain's tag history
only ever holds tags of one family, which is what keeps ascending and
descending links from being folded together.
"""

from enum import Enum
from typing import Dict, Optional, Union

from .errors import UnknownRelationError


class Family(Enum):
    """The three mutually exclusive chain shapes."""
    EQUALITY = "equality"
    ASCENDING = "ascending"
    DESCENDING = "descending"


class RelationSymbol(Enum):
    """Already-disambiguated relation operators accepted by the builders."""
    EQ = "="
    LT = "<"
    LE = "≤"
    GT = ">"
    GE = "≥"

    @property
    def family(self) -> Family:
        return _SYMBOL_FAMILY[self]

    @property
    def tag(self) -> Optional[Union["AscendingTag", "DescendingTag"]]:
        """The tag this symbol contributes to a tag history (None for =)."""
        return _SYMBOL_TAG[self]

    @classmethod
    def lookup(cls, text: Union[str, "RelationSymbol"]) -> "RelationSymbol":
        """
        Resolve a symbol from its text.

        Accepts the canonical symbol, the member name (``"LE"``), or the
        ASCII aliases ``==``, ``<=`` and ``>=``.

        Raises:
            UnknownRelationError: if the text names no relation
        """
        if isinstance(text, RelationSymbol):
            return text
        key = str(text).strip()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            pass
        try:
            return cls[key.upper()]
        except KeyError:
            raise UnknownRelationError(f"Unknown relation symbol: {text!r}") from None

    def __str__(self) -> str:
        return self.value


class AscendingTag(Enum):
    """Tag of an ascending link: < or ≤."""
    STRICT = "strict"
    NON_STRICT = "non_strict"

    @property
    def symbol(self) -> RelationSymbol:
        return RelationSymbol.LT if self is AscendingTag.STRICT else RelationSymbol.LE

    @property
    def is_strict(self) -> bool:
        return self is AscendingTag.STRICT

    def combine(self, other: "AscendingTag") -> "AscendingTag":
        """One relation-flow step: STRICT is absorbing."""
        if not isinstance(other, AscendingTag):
            raise TypeError(f"Cannot combine {self} with {other}")
        if self.is_strict or other.is_strict:
            return AscendingTag.STRICT
        return AscendingTag.NON_STRICT


class DescendingTag(Enum):
    """Tag of a descending link: > or ≥."""
    STRICT = "strict"
    NON_STRICT = "non_strict"

    @property
    def symbol(self) -> RelationSymbol:
        return RelationSymbol.GT if self is DescendingTag.STRICT else RelationSymbol.GE

    @property
    def is_strict(self) -> bool:
        return self is DescendingTag.STRICT

    def combine(self, other: "DescendingTag") -> "DescendingTag":
        """One relation-flow step: STRICT is absorbing."""
        if not isinstance(other, DescendingTag):
            raise TypeError(f"Cannot combine {self} with {other}")
        if self.is_strict or other.is_strict:
            return DescendingTag.STRICT
        return DescendingTag.NON_STRICT


Tag = Union[AscendingTag, DescendingTag]


_SYMBOL_FAMILY: Dict[RelationSymbol, Family] = {
    RelationSymbol.EQ: Family.EQUALITY,
    RelationSymbol.LT: Family.ASCENDING,
    RelationSymbol.LE: Family.ASCENDING,
    RelationSymbol.GT: Family.DESCENDING,
    RelationSymbol.GE: Family.DESCENDING,
}

_SYMBOL_TAG: Dict[RelationSymbol, Optional[Tag]] = {
    RelationSymbol.EQ: None,
    RelationSymbol.LT: AscendingTag.STRICT,
    RelationSymbol.LE: AscendingTag.NON_STRICT,
    RelationSymbol.GT: DescendingTag.STRICT,
    RelationSymbol.GE: DescendingTag.NON_STRICT,
}

_ALIASES: Dict[str, RelationSymbol] = {
    "==": RelationSymbol.EQ,
    "<=": RelationSymbol.LE,
    "=<": RelationSymbol.LE,
    ">=": RelationSymbol.GE,
    "=>": RelationSymbol.GE,
    "⩽": RelationSymbol.LE,
    "⩾": RelationSymbol.GE,
}
