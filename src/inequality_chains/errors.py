"""
Exceptions raised by chain assembly and promotion.

Every error derives from ChainError so that a host surface can report
usage errors without catching unrelated failures.
"""


class ChainError(Exception):
    """Base class for inequality chain errors."""


class CrossFamilyError(ChainError, TypeError):
    """
    An ascending symbol was applied to a descending chain, or the reverse.

    Attributes:
        symbol: The offending relation symbol
        shape: Name of the left operand's chain shape
    """

    def __init__(self, symbol, shape: str):
        self.symbol = symbol
        self.shape = shape
        super().__init__(
            f"No chain builder for '{symbol}' applied to {shape}: "
            f"ascending and descending relations cannot be mixed in one chain"
        )


class UnknownRelationError(ChainError, ValueError):
    """Relation symbol text that does not name =, <, ≤, > or ≥."""


class EmbeddingError(ChainError, TypeError):
    """A value cannot be placed in (or lifted within) a numeric tower."""
