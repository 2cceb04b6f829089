"""
Data quality error classifications for order book snapshots.

These exceptions describe problems with the input records themselves: a
malformed line, an unknown side, a one-sided or crossed book.
"""

from typing import Optional

from .base import OrderBookError


class DataQualityError(OrderBookError):
    """Base class for invalid snapshot data."""


class EmptyFieldError(DataQualityError):
    """A record has a blank side, price or size field."""

    def __init__(self, message: str, line_number: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number


class UnknownSideError(DataQualityError):
    """Side text is neither 'bid' nor 'ask'."""

    def __init__(self, message: str, raw_side: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_side = raw_side


class InvalidFieldError(DataQualityError):
    """Price or size is not a finite number greater than zero."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 raw_value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.raw_value = raw_value


class EmptySideError(DataQualityError):
    """All records parsed but one side of the book has no orders."""

    def __init__(self, message: str, side: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.side = side


class CrossedBookError(DataQualityError):
    """Best bid is not strictly below best ask."""

    def __init__(self, message: str, best_bid: Optional[float] = None,
                 best_ask: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.best_bid = best_bid
        self.best_ask = best_ask
