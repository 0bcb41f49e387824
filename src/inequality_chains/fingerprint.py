"""
Canonical JSON and Fingerprints

Deterministic serialization of chains and statements with sorted keys, so
that identical chains hash identically across runs. Used to key cached
proofs of generated statements.
"""

import hashlib
import json
from enum import Enum
from fractions import Fraction
from typing import Any

import numpy as np

from .chain import ChainNode


def _encode(obj: Any) -> Any:
    # Non-JSON terms carry a type tag so that, e.g., Fraction(1, 2) and the
    # symbolic term "1/2" never serialize alike.
    if isinstance(obj, Fraction):
        return {"fraction": [obj.numerator, obj.denominator]}
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, Enum):
        return obj.value
    if hasattr(obj, "to_canonical"):
        return obj.to_canonical()
    raise TypeError(f"Cannot canonically encode {type(obj).__name__} value {obj!r}")


def canonical_dumps(obj: Any, indent: int = None) -> str:
    """
    Canonical JSON serialization with sorted keys.

    Fractions are written as {"fraction": [p, q]}; numpy scalars as plain
    numbers. Values with no canonical encoding raise TypeError.

    Args:
        obj: Object to serialize
        indent: Indentation level (None for compact)

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':') if indent is None else None,
        indent=indent,
        ensure_ascii=False,
        default=_encode,
    )


def canonical_hash(obj: Any) -> str:
    """SHA-256 hex digest of the canonical JSON of obj."""
    return hashlib.sha256(canonical_dumps(obj).encode("utf-8")).hexdigest()


def chain_fingerprint(chain: ChainNode) -> str:
    """Fingerprint of a chain's canonical form."""
    return canonical_hash(chain.to_canonical())
