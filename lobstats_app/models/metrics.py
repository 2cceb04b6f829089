"""Data models for metrics calculations"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Stats:
    """Complete metrics snapshot for one (book, depth_pct, target_qty) input"""
    best_bid: float
    best_ask: float
    mid_price: float
    spread: float
    spread_pct: float       # Spread as % of mid price
    bid_depth: float        # Bid size inside the depth window
    ask_depth: float        # Ask size inside the depth window
    vwap_buy: float         # Average price paid walking the asks
    vwap_sell: float        # Average price received walking the bids

    def to_dict(self) -> dict[str, Any]:
        """Plain dict of all nine fields, in declaration order"""
        return asdict(self)

    @property
    def depth_imbalance(self) -> float:
        """(bid_depth - ask_depth) / total depth, 0.0 when the window is empty"""
        total = self.bid_depth + self.ask_depth
        if total == 0:
            return 0.0
        return (self.bid_depth - self.ask_depth) / total
