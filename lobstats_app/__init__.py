"""
lobstats - Order Book Snapshot Analyzer

Loads a static limit order book snapshot from delimited text, validates it,
and derives market microstructure metrics: best bid/ask, spread, mid price,
depth around the mid and VWAP for a target quantity on each side.
"""

__version__ = "0.1.0"
__author__ = "lobstats Team"
