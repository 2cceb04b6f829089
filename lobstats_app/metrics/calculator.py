"""Main metrics calculator for deriving Stats from a loaded order book"""

from typing import Optional

import structlog

from ..config.defaults import AnalysisParams
from ..data.models import OrderBook
from ..logging.config import log_metric_result
from ..models.metrics import Stats
from .orderbook import calculate_depth, calculate_vwap_buy, calculate_vwap_sell, depth_window

logger = structlog.get_logger(__name__)


def calculate_stats(book: OrderBook, depth_pct: float, target_qty: float) -> Stats:
    """
    Derive the full Stats snapshot for a book

    Pure function: the book is not modified and the same inputs always give
    the same result. Either every metric is computed or an error is raised.

    Args:
        book: Validated order book
        depth_pct: Depth window half-width in percent around mid
        target_qty: Quantity for both VWAP walks

    Returns:
        Stats with all nine fields populated

    Raises:
        InvalidParameterError: If depth_pct is negative or not finite
        InvalidQuantityError: If target_qty is not a positive number
        InsufficientLiquidityError: If either side cannot fill target_qty
    """
    best_bid = book.best_bid
    best_ask = book.best_ask
    mid_price = book.mid_price
    spread = book.spread
    spread_pct = spread / mid_price * 100.0

    lower, upper = depth_window(mid_price, depth_pct)
    bid_depth = calculate_depth(book.bids, lower, upper)
    ask_depth = calculate_depth(book.asks, lower, upper)

    vwap_buy = calculate_vwap_buy(book.asks, target_qty)
    vwap_sell = calculate_vwap_sell(book.bids, target_qty)

    return Stats(
        best_bid=best_bid,
        best_ask=best_ask,
        mid_price=mid_price,
        spread=spread,
        spread_pct=spread_pct,
        bid_depth=bid_depth,
        ask_depth=ask_depth,
        vwap_buy=vwap_buy,
        vwap_sell=vwap_sell,
    )


class StatsCalculator:
    """
    Metrics calculator bound to a set of analysis parameters

    Holds no per-book state, so one instance can be reused across books.
    """

    def __init__(self, params: Optional[AnalysisParams] = None):
        self.params = params or AnalysisParams()

    def calculate(self, book: OrderBook) -> Stats:
        """Calculate Stats for a book using the configured parameters"""
        stats = calculate_stats(book, self.params.depth_pct, self.params.target_qty)

        for metric in ("mid_price", "spread_pct", "vwap_buy", "vwap_sell"):
            log_metric_result(
                logger, metric, getattr(stats, metric),
                context={"depth_pct": self.params.depth_pct, "target_qty": self.params.target_qty}
            )

        logger.info(
            "Stats computed",
            best_bid=stats.best_bid,
            best_ask=stats.best_ask,
            bid_depth=stats.bid_depth,
            ask_depth=stats.ask_depth
        )
        return stats
