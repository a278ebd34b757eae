"""
Decimal version scheme.

Versions are read as the first dot-separated run of digits found anywhere in
the string, so ``"v1.4.2-beta"`` compares as ``1.4.2`` and ``"Build 12"`` as
``12``. Strings without digits cannot be compared.
"""

import re
from typing import List, Optional

from ..core.interfaces import VersionComparator

_VERSION_RUN = re.compile(r"\d+(?:\.\d+)*", re.ASCII)


class DecimalComparator(VersionComparator):
    """Compares versions segment by segment as integers."""

    def split_version_info(self, version: str) -> Optional[List[str]]:
        match = _VERSION_RUN.search(version or "")
        return match.group().split(".") if match else None

    @staticmethod
    def _to_int(segment: str) -> int:
        try:
            return int(segment)
        except ValueError:
            return 0

    def compare(self, first: str, second: str) -> Optional[str]:
        first_split = self.split_version_info(first)
        second_split = self.split_version_info(second)

        if first_split is None or second_split is None:
            return None

        for current, newest in zip(first_split, second_split):
            current_value = self._to_int(current)
            newest_value = self._to_int(newest)

            if newest_value > current_value:
                return second
            elif newest_value < current_value:
                return first

        # Equal prefix: more segments wins, an exact tie goes to ``second``
        return first if len(first_split) > len(second_split) else second

    def __repr__(self) -> str:
        return "DecimalComparator()"


DECIMAL_SCHEME = DecimalComparator()
