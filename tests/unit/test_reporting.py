"""Unit tests for report rendering."""

import json

import pytest

from lobstats_app.metrics.calculator import calculate_stats
from lobstats_app.reporting import format_json_report, format_text_report


@pytest.fixture
def scenario_stats(scenario_book):
    return calculate_stats(scenario_book, depth_pct=1.0, target_qty=20.0)


class TestTextReport:
    """Test the console report layout."""

    def test_contains_all_metrics(self, scenario_stats) -> None:
        report = format_text_report(scenario_stats, 1.0, 20.0)

        assert "ORDERBOOK ANALYSIS" in report
        assert "  Best Bid    : 99.8000" in report
        assert "  Best Ask    : 100.2000" in report
        assert "  Mid Price   : 100.0000" in report
        assert "  Spread      : 0.4000  (0.4000%)" in report
        assert "  Depth (±1.0000% from mid):" in report
        assert "    Bids : 20.0000 units" in report
        assert "    Asks : 45.0000 units" in report
        assert "    Imbalance : -0.3846" in report
        assert "  VWAP (qty = 20.0000 units):" in report
        assert "    Buy  : 100.3800" in report
        assert "    Sell : 99.7250" in report

    def test_framed_by_rules(self, scenario_stats) -> None:
        lines = format_text_report(scenario_stats, 1.0, 20.0).split("\n")

        assert lines[0] == ""
        assert lines[1] == "=" * 44
        assert lines[-2] == "=" * 44
        assert lines[-1] == ""

    def test_balanced_window_shows_signed_zero(self, scenario_book) -> None:
        """An empty or balanced window renders as +0.0000"""
        stats = calculate_stats(scenario_book, depth_pct=0.0, target_qty=20.0)

        assert "    Imbalance : +0.0000" in format_text_report(stats, 0.0, 20.0)


class TestJsonReport:
    """Test the JSON rendering."""

    def test_round_trips_stats(self, scenario_stats) -> None:
        payload = json.loads(format_json_report(scenario_stats, 1.0, 20.0))

        assert payload["parameters"] == {"depth_pct": 1.0, "target_qty": 20.0}
        assert payload["stats"] == scenario_stats.to_dict()

    def test_includes_depth_imbalance(self, scenario_stats) -> None:
        """Derived values sit apart from the nine raw stats"""
        payload = json.loads(format_json_report(scenario_stats, 1.0, 20.0))

        assert payload["derived"]["depth_imbalance"] == pytest.approx(-25.0 / 65.0)
        assert "depth_imbalance" not in payload["stats"]
