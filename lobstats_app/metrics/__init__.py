"""Metrics calculation engine for order book snapshots"""

from .calculator import StatsCalculator, calculate_stats
from .orderbook import calculate_depth, calculate_vwap_buy, calculate_vwap_sell, depth_window

__all__ = [
    "StatsCalculator",
    "calculate_stats",
    "calculate_depth",
    "calculate_vwap_buy",
    "calculate_vwap_sell",
    "depth_window",
]
