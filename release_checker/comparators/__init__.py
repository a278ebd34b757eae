"""
Version comparison schemes and lookup helpers.
"""

from typing import Any

from ..core.interfaces import VersionComparator
from .base import CallableComparator
from .lexical import LexicalComparator
from .numeric import DECIMAL_SCHEME, DecimalComparator
from .semantic import SemanticComparator

_REGISTRY = {
    "decimal": DECIMAL_SCHEME,
    "semantic": SemanticComparator(),
    "lexical": LexicalComparator(),
}


def get_comparator(name: str) -> VersionComparator:
    """Look up a registered comparison scheme by name."""
    key = str(name).strip().lower()
    if key not in _REGISTRY:
        raise ValueError(f"Unknown version scheme '{name}'. Available: {', '.join(sorted(_REGISTRY))}")
    return _REGISTRY[key]


def available_comparators() -> list:
    return sorted(_REGISTRY)


def as_comparator(value: Any) -> VersionComparator:
    """Coerce a comparator, a registered scheme name or a plain function into a comparator."""
    if isinstance(value, VersionComparator):
        return value
    if isinstance(value, str):
        return get_comparator(value)
    if callable(value):
        return CallableComparator(value)
    raise TypeError(f"Expected a VersionComparator, scheme name or callable, got {type(value).__name__}")


__all__ = [
    "VersionComparator", "CallableComparator", "DecimalComparator", "DECIMAL_SCHEME",
    "SemanticComparator", "LexicalComparator",
    "get_comparator", "available_comparators", "as_comparator",
]
