"""Unit tests for the command line interface."""

import json
from pathlib import Path

import pytest

from lobstats_app.cli import build_parser, main
from lobstats_app.data.loader import load_book_from_path

QUIET = ["--log-level", "CRITICAL"]


class TestParser:
    """Test argument parsing."""

    def test_analyze_defaults(self) -> None:
        args = build_parser().parse_args(["analyze"])

        assert args.file == "orderbook.csv"
        assert args.depth_pct is None
        assert args.target_qty is None
        assert args.format == "text"
        assert args.no_header is False

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestAnalyzeCommand:
    """Test the analyze subcommand."""

    def test_text_report(self, scenario_file: Path, capsys) -> None:
        code = main(QUIET + ["analyze", str(scenario_file), "--target-qty", "20"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Best Bid    : 99.8000" in out
        assert "Buy  : 100.3800" in out

    def test_json_report(self, scenario_file: Path, capsys) -> None:
        code = main(QUIET + ["analyze", str(scenario_file), "--target-qty", "20",
                             "--depth-pct", "1", "--format", "json"])
        payload = json.loads(capsys.readouterr().out)

        assert code == 0
        assert payload["parameters"] == {"depth_pct": 1.0, "target_qty": 20.0}
        assert payload["stats"]["bid_depth"] == 20.0

    def test_failure_exit_status(self, scenario_file: Path, capsys) -> None:
        """Default 40 units cannot be sold into 20 units of bids"""
        code = main(QUIET + ["analyze", str(scenario_file)])
        captured = capsys.readouterr()

        assert code == 1
        assert "[ERROR] Not enough liquidity to sell" in captured.err
        assert captured.out == ""

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        code = main(QUIET + ["analyze", str(tmp_path / "missing.csv")])

        assert code == 1
        assert "[ERROR] Cannot open file" in capsys.readouterr().err

    def test_invalid_parameter(self, scenario_file: Path, capsys) -> None:
        code = main(QUIET + ["analyze", str(scenario_file), "--target-qty", "0"])

        assert code == 1
        assert "analysis.target_qty" in capsys.readouterr().err

    def test_config_file(self, scenario_file: Path, tmp_path: Path, capsys) -> None:
        config_file = tmp_path / "lobstats.yaml"
        config_file.write_text("analysis:\n  target_qty: 10\n")

        code = main(QUIET + ["--config", str(config_file), "analyze", str(scenario_file)])

        assert code == 0
        assert "VWAP (qty = 10.0000 units)" in capsys.readouterr().out

    def test_no_header(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "headerless.csv"
        path.write_text("bid,99,1\nask,101,1\n")

        code = main(QUIET + ["analyze", str(path), "--no-header", "--target-qty", "1"])

        assert code == 0
        assert "Mid Price   : 100.0000" in capsys.readouterr().out


class TestGenerateCommand:
    """Test the generate subcommand."""

    def test_generate_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "generated.csv"
        code = main(QUIET + ["generate", str(path), "--levels", "3", "--mid", "50", "--seed", "4"])

        assert code == 0
        assert "Generated" in capsys.readouterr().out
        book = load_book_from_path(path)
        assert len(book.bids) == 3
        assert len(book.asks) == 3

    def test_generated_file_can_be_analyzed(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "generated.csv"
        main(QUIET + ["generate", str(path), "--min-size", "5", "--max-size", "10", "--seed", "1"])

        code = main(QUIET + ["analyze", str(path)])

        assert code == 0
        assert "ORDERBOOK ANALYSIS" in capsys.readouterr().out

    def test_invalid_levels(self, tmp_path: Path, capsys) -> None:
        code = main(QUIET + ["generate", str(tmp_path / "x.csv"), "--levels", "0"])

        assert code == 1
        assert "[ERROR]" in capsys.readouterr().err
