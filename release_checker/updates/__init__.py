"""
Update checking and the HTTP transports it runs on.
"""

from .checker import UpdateChecker
from .transport import AiohttpTransport, RequestsTransport

__all__ = ["UpdateChecker", "RequestsTransport", "AiohttpTransport"]
