from typing import Optional

from packaging.version import InvalidVersion, Version

from ..core.interfaces import VersionComparator


class SemanticComparator(VersionComparator):
    """
    Orders versions with PEP 440 rules via ``packaging``.

    Understands pre-releases (``2.0.0rc1 < 2.0.0``) and a leading ``v``.
    Inputs ``packaging`` cannot parse are reported as incomparable.
    """

    def _parse(self, version: str) -> Optional[Version]:
        try:
            return Version((version or "").strip())
        except InvalidVersion:
            return None

    def compare(self, first: str, second: str) -> Optional[str]:
        first_version = self._parse(first)
        second_version = self._parse(second)
        if first_version is None or second_version is None:
            return None
        return first if first_version > second_version else second

    def __repr__(self) -> str:
        return "SemanticComparator()"
