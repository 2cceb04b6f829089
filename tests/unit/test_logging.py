"""Unit tests for logging configuration."""

import json

import pytest
import structlog

from lobstats_app.cli import build_parser
from lobstats_app.logging import configure_logging, get_logger, log_metric_result


@pytest.fixture
def restore_logging(capsys):
    yield
    configure_logging(level="CRITICAL")


def _last_json_line(err: str) -> dict:
    return json.loads(err.strip().splitlines()[-1])


class TestConfigureLogging:
    """Test the structlog processor chain."""

    def test_json_output(self, capsys, restore_logging) -> None:
        configure_logging(level="INFO", format_json=True)
        get_logger("lobstats.test.json").info("Snapshot read", byte_count=12)

        record = _last_json_line(capsys.readouterr().err)
        assert record["event"] == "Snapshot read"
        assert record["byte_count"] == 12
        assert record["level"] == "info"
        assert record["logger"] == "lobstats.test.json"
        assert "timestamp" in record

    def test_timestamp_can_be_left_out(self, capsys, restore_logging) -> None:
        configure_logging(level="INFO", format_json=True, include_timestamp=False)
        get_logger("lobstats.test.no_ts").info("Snapshot read")

        record = _last_json_line(capsys.readouterr().err)
        assert "timestamp" not in record

    def test_console_renderer_by_default(self, restore_logging) -> None:
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_level_filters_output(self, capsys, restore_logging) -> None:
        configure_logging(level="WARNING", format_json=True)
        get_logger("lobstats.test.filtered").info("Hidden")

        assert capsys.readouterr().err == ""

    def test_metric_result_is_debug(self, capsys, restore_logging) -> None:
        configure_logging(level="DEBUG", format_json=True, include_timestamp=False)
        log_metric_result(get_logger("lobstats.test.metric"), "vwap_buy", 100.5, {"qty": 40.0})

        record = _last_json_line(capsys.readouterr().err)
        assert record["event"] == "Metric computed"
        assert record["metric"] == "vwap_buy"
        assert record["value"] == 100.5
        assert record["context"] == {"qty": 40.0}


class TestLoggingOptions:
    """Test the command line logging switches."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["analyze"])
        assert args.log_json is False
        assert args.log_no_timestamp is False

    def test_switches(self) -> None:
        args = build_parser().parse_args(["--log-json", "--log-no-timestamp", "analyze"])
        assert args.log_json is True
        assert args.log_no_timestamp is True
