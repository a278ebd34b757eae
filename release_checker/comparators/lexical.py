from typing import Optional

from ..core.interfaces import VersionComparator


class LexicalComparator(VersionComparator):
    """Plain string ordering, for date stamps or zero-padded build ids."""

    def compare(self, first: str, second: str) -> Optional[str]:
        if not (first or "").strip() or not (second or "").strip():
            return None
        return first if first > second else second

    def __repr__(self) -> str:
        return "LexicalComparator()"
