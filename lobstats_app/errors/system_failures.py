"""
System and calculation error classifications.

Source failures mean the snapshot could not be read at all. Calculation
errors mean a metric cannot be derived from an otherwise valid book.
"""

from typing import Any, Optional

from .base import OrderBookError


class SystemFailureError(OrderBookError):
    """Base class for failures outside the data itself."""


class SourceUnavailableError(SystemFailureError):
    """Input source cannot be opened, read or written."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source


class MetricsCalculationError(OrderBookError):
    """A metric cannot be computed for the given book and parameters."""

    def __init__(self, message: str, metric_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.metric_name = metric_name


class InsufficientLiquidityError(MetricsCalculationError):
    """A VWAP walk ran out of orders before filling the requested quantity."""

    def __init__(self, message: str, requested_qty: Optional[float] = None,
                 available_qty: Optional[float] = None, side: Optional[str] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.requested_qty = requested_qty
        self.available_qty = available_qty
        self.side = side


class InvalidQuantityError(MetricsCalculationError):
    """Target quantity is zero, negative or not finite."""

    def __init__(self, message: str, quantity: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.quantity = quantity


class InvalidParameterError(MetricsCalculationError):
    """A calculation or generator parameter is out of range."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value
