"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from lobstats_app.data.loader import load_book_from_text
from lobstats_app.data.models import OrderBook

SCENARIO_CSV = """side,price,size
bid,99.80,5
bid,99.70,15
ask,100.20,8
ask,100.50,12
ask,100.80,25
"""


@pytest.fixture
def scenario_csv() -> str:
    """Reference snapshot: two bids, three asks, best 99.80 / 100.20."""
    return SCENARIO_CSV


@pytest.fixture
def scenario_book() -> OrderBook:
    """Reference snapshot loaded into an OrderBook."""
    return load_book_from_text(SCENARIO_CSV)


@pytest.fixture
def scenario_file(tmp_path: Path) -> Path:
    """Reference snapshot written to a temporary CSV file."""
    path = tmp_path / "orderbook.csv"
    path.write_text(SCENARIO_CSV, encoding="utf-8")
    return path


@pytest.fixture
def deep_book() -> OrderBook:
    """Book with enough liquidity on both sides for a 40 unit VWAP."""
    return load_book_from_text(
        "side,price,size\n"
        "bid,99.90,10\n"
        "bid,99.80,20\n"
        "bid,99.50,30\n"
        "ask,100.10,10\n"
        "ask,100.20,20\n"
        "ask,100.50,30\n"
    )
