"""Order book depth and VWAP calculations"""

import math
from collections.abc import Sequence

from ..data.models import Order
from ..errors import InsufficientLiquidityError, InvalidParameterError, InvalidQuantityError


def depth_window(mid_price: float, depth_pct: float) -> tuple[float, float]:
    """
    Price band of +/- depth_pct percent around the mid price

    Args:
        mid_price: Mid price of the book
        depth_pct: Band half-width in percent (0.5 means +/- 0.5%)

    Returns:
        (lower, upper) bounds, both inclusive
    """
    if not math.isfinite(depth_pct) or depth_pct < 0:
        raise InvalidParameterError(
            f"depth_pct must be a non-negative number, got {depth_pct}",
            parameter="depth_pct", value=depth_pct, metric_name="depth"
        )
    lower = mid_price * (1.0 - depth_pct / 100.0)
    upper = mid_price * (1.0 + depth_pct / 100.0)
    return lower, upper


def calculate_depth(orders: Sequence[Order], lower: float, upper: float) -> float:
    """
    Total size of orders priced within [lower, upper]

    The same window applies to both sides, so bids above the mid (or asks
    below it) still count when they fall inside.

    Args:
        orders: Orders of one side, any order
        lower: Inclusive lower price bound
        upper: Inclusive upper price bound

    Returns:
        Summed size
    """
    total = 0.0
    for order in orders:
        if lower <= order.price <= upper:
            total += order.size
    return total


def _validate_quantity(target_qty: float, side: str) -> None:
    if not math.isfinite(target_qty) or target_qty <= 0:
        raise InvalidQuantityError(
            f"Target quantity to {side} must be a positive number, got {target_qty}",
            quantity=target_qty, metric_name=f"vwap_{side}"
        )


def _walk_vwap(levels: Sequence[Order], target_qty: float, side: str) -> float:
    """Fill target_qty from levels in the order given, return average price"""
    _validate_quantity(target_qty, side)

    remaining = target_qty
    notional = 0.0

    for order in levels:
        if remaining <= 0.0:
            break
        filled = min(remaining, order.size)
        notional += filled * order.price
        remaining -= filled

    if remaining > 0.0:
        available = sum(order.size for order in levels)
        raise InsufficientLiquidityError(
            f"Not enough liquidity to {side} {target_qty} units "
            f"({available} available).",
            requested_qty=target_qty,
            available_qty=available,
            side=side,
            metric_name=f"vwap_{side}"
        )

    return notional / target_qty


def calculate_vwap_buy(asks: Sequence[Order], target_qty: float) -> float:
    """
    Average price paid to buy target_qty by walking the asks

    Args:
        asks: Asks sorted by price ascending (cheapest first)
        target_qty: Quantity to buy, must be > 0

    Returns:
        Volume-weighted average execution price, always >= best ask

    Raises:
        InvalidQuantityError: If target_qty is not a positive number
        InsufficientLiquidityError: If the asks cannot fill target_qty
    """
    return _walk_vwap(asks, target_qty, "buy")


def calculate_vwap_sell(bids: Sequence[Order], target_qty: float) -> float:
    """
    Average price received to sell target_qty by walking the bids

    Args:
        bids: Bids sorted by price descending (best first)
        target_qty: Quantity to sell, must be > 0

    Returns:
        Volume-weighted average execution price, always <= best bid

    Raises:
        InvalidQuantityError: If target_qty is not a positive number
        InsufficientLiquidityError: If the bids cannot fill target_qty
    """
    return _walk_vwap(bids, target_qty, "sell")
