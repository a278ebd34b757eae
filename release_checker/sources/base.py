from decimal import Decimal
from typing import Any, Dict, List

from ..core.exceptions import MalformedResponseError
from ..core.interfaces import ReleaseSource


class BaseReleaseSource(ReleaseSource):
    """
    Base class for concrete release APIs.
    Provides shape checks that turn any unexpected body into a MalformedResponseError.
    """

    URL_TEMPLATE = ""

    @property
    def url_template(self) -> str:
        return self.URL_TEMPLATE

    def _require_object(self, payload: Any) -> Dict[str, Any]:
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"{self.name} response must be a JSON object, got {type(payload).__name__}")
        return payload

    def _require_array(self, payload: Any) -> List[Any]:
        if not isinstance(payload, list):
            raise MalformedResponseError(
                f"{self.name} response must be a JSON array, got {type(payload).__name__}")
        return payload

    def _require_string(self, data: Dict[str, Any], field: str) -> str:
        """Read ``field`` as text. Numbers are rendered, null and containers are rejected."""
        if field not in data:
            raise MalformedResponseError(f"{self.name} response has no '{field}' field")
        value = data[field]
        if value is None:
            raise MalformedResponseError(f"{self.name} response has a null '{field}' field")
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
            raise MalformedResponseError(
                f"{self.name} field '{field}' is not a string: {type(value).__name__}")
        return value if isinstance(value, str) else str(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
