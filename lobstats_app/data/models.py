"""
Canonical data models for order book snapshots.

This module defines immutable data structures that represent clean, validated
orders and books after parsing from raw text records.
"""

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Side of a resting order."""
    BID = "bid"
    ASK = "ask"


@dataclass(frozen=True)
class Order:
    """Single resting order line item. Orders are fungible, no id."""
    side: Side
    price: float        # Finite, > 0
    size: float         # Finite, > 0


@dataclass(frozen=True)
class OrderBook:
    """
    Validated order book snapshot.

    Built only by the loader, which guarantees both sides are non-empty,
    bids are sorted by price descending, asks ascending, and the book is
    not crossed.
    """
    bids: tuple[Order, ...]     # Sorted by price descending
    asks: tuple[Order, ...]     # Sorted by price ascending

    @property
    def best_bid(self) -> float:
        """Highest bid price."""
        return self.bids[0].price

    @property
    def best_ask(self) -> float:
        """Lowest ask price."""
        return self.asks[0].price

    @property
    def mid_price(self) -> float:
        """Arithmetic mean of best bid and best ask."""
        return (self.best_bid + self.best_ask) / 2.0

    @property
    def spread(self) -> float:
        """Best ask minus best bid."""
        return self.best_ask - self.best_bid

    @property
    def total_bid_size(self) -> float:
        return sum(order.size for order in self.bids)

    @property
    def total_ask_size(self) -> float:
        return sum(order.size for order in self.asks)
