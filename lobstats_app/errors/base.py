"""Root of the error hierarchy."""

from typing import Any, Optional


class OrderBookError(Exception):
    """Base class for every failure signalled by the package."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConfigurationError(OrderBookError):
    """Configuration file or override values are invalid."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
