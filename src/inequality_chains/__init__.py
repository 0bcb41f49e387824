"""
Inequality Chains - statements denoted by chains such as 3 ≤ 4 < 7 = 7 < 8

This package provides:
- An immutable chain model with three shapes (equality, ascending, descending)
- Builders that extend a chain one link at a time and reject chains mixing
  ascending and descending relations
- Relation flow: the fold of a chain's tags into the relation between its
  first and last term
- Global, weak global and total statements, parameterized by an order instance
- Term embedding over chains and a numeric tower for mixed-type chains
"""

from .relations import (
    Family,
    RelationSymbol,
    AscendingTag,
    DescendingTag,
)
from .errors import (
    ChainError,
    CrossFamilyError,
    UnknownRelationError,
    EmbeddingError,
)
from .chain import (
    Link,
    ChainNode,
    EqualChain,
    EqualBase,
    EqualLink,
    AscendingChain,
    AscendingBase,
    AscendingFromEqual,
    AscendingEqualLink,
    AscendingLink,
    DescendingChain,
    DescendingBase,
    DescendingFromEqual,
    DescendingEqualLink,
    DescendingLink,
    head,
    tail,
    terms,
    tags,
    links,
    relation_flow,
)
from .builders import (
    ChainStart,
    start,
    link,
    equal,
    ascending,
    descending,
    build_chain,
)
from .propositions import (
    Prop,
    Atom,
    Conjunction,
    truth,
    implies,
)
from .order import (
    OrderInstance,
    symbolic_order,
    boolean_order,
    SYMBOLIC_ORDER,
    INTEGER_ORDER,
    RATIONAL_ORDER,
    REAL_ORDER,
    BOOLEAN_ORDER,
    LawViolation,
    OrderLawReport,
    check_order_laws,
)
from .statements import (
    global_statement,
    weak_global_statement,
    total_statement,
    describe,
    ChainSummary,
)
from .embedding import (
    map_chain,
    TowerLevel,
    NumericTower,
    DEFAULT_TOWER,
)
from .fingerprint import (
    canonical_dumps,
    canonical_hash,
    chain_fingerprint,
)

__version__ = "0.1.0"

__all__ = [
    # Relations
    "Family",
    "RelationSymbol",
    "AscendingTag",
    "DescendingTag",
    # Errors
    "ChainError",
    "CrossFamilyError",
    "UnknownRelationError",
    "EmbeddingError",
    # Chain model
    "Link",
    "ChainNode",
    "EqualChain",
    "EqualBase",
    "EqualLink",
    "AscendingChain",
    "AscendingBase",
    "AscendingFromEqual",
    "AscendingEqualLink",
    "AscendingLink",
    "DescendingChain",
    "DescendingBase",
    "DescendingFromEqual",
    "DescendingEqualLink",
    "DescendingLink",
    # Accessors
    "head",
    "tail",
    "terms",
    "tags",
    "links",
    "relation_flow",
    # Builders
    "ChainStart",
    "start",
    "link",
    "equal",
    "ascending",
    "descending",
    "build_chain",
    # Propositions
    "Prop",
    "Atom",
    "Conjunction",
    "truth",
    "implies",
    # Order instances
    "OrderInstance",
    "symbolic_order",
    "boolean_order",
    "SYMBOLIC_ORDER",
    "INTEGER_ORDER",
    "RATIONAL_ORDER",
    "REAL_ORDER",
    "BOOLEAN_ORDER",
    "LawViolation",
    "OrderLawReport",
    "check_order_laws",
    # Statements
    "global_statement",
    "weak_global_statement",
    "total_statement",
    "describe",
    "ChainSummary",
    # Embedding
    "map_chain",
    "TowerLevel",
    "NumericTower",
    "DEFAULT_TOWER",
    # Fingerprints
    "canonical_dumps",
    "canonical_hash",
    "chain_fingerprint",
]
