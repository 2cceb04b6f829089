"""
Error classification system for order book loading and analysis.

Every error raised by the package derives from OrderBookError so callers can
catch the whole family at the reporting boundary. Errors carry enough context
(line number, field, raw value, prices) to be actionable on their own.
"""

from .base import ConfigurationError, OrderBookError
from .data_quality import (
    CrossedBookError,
    DataQualityError,
    EmptyFieldError,
    EmptySideError,
    InvalidFieldError,
    UnknownSideError,
)
from .system_failures import (
    InsufficientLiquidityError,
    InvalidParameterError,
    InvalidQuantityError,
    MetricsCalculationError,
    SourceUnavailableError,
    SystemFailureError,
)

__all__ = [
    "OrderBookError",
    "ConfigurationError",
    # Data Quality Errors
    "DataQualityError",
    "EmptyFieldError",
    "UnknownSideError",
    "InvalidFieldError",
    "EmptySideError",
    "CrossedBookError",
    # System Failures
    "SystemFailureError",
    "SourceUnavailableError",
    # Calculation Errors
    "MetricsCalculationError",
    "InsufficientLiquidityError",
    "InvalidQuantityError",
    "InvalidParameterError",
]
