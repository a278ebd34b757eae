from typing import Callable, Optional

from ..core.interfaces import VersionComparator


class CallableComparator(VersionComparator):
    """Adapts a plain ``(first, second) -> newer | None`` function to the comparator interface."""

    def __init__(self, func: Callable[[str, str], Optional[str]]):
        if not callable(func):
            raise TypeError("CallableComparator requires a callable")
        self.func = func

    def compare(self, first: str, second: str) -> Optional[str]:
        return self.func(first, second)

    def __repr__(self) -> str:
        return f"CallableComparator({getattr(self.func, '__name__', self.func)!r})"
