"""Command line interface: analyze a snapshot or generate a sample one."""

import argparse
import sys
from dataclasses import replace
from typing import Any, Optional

from .config.loader import ConfigLoader
from .data.generator import write_orderbook_csv
from .engine import OrderBookAnalysisEngine
from .errors import OrderBookError
from .logging.config import configure_logging, get_logger
from .reporting import format_json_report, format_text_report

logger = get_logger(__name__)

DEFAULT_SNAPSHOT = "orderbook.csv"


def _report_error(message: str) -> int:
    print(f"\n[ERROR] {message}\n", file=sys.stderr)
    return 1


def _analysis_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    analysis = {}
    if args.depth_pct is not None:
        analysis["depth_pct"] = args.depth_pct
    if args.target_qty is not None:
        analysis["target_qty"] = args.target_qty
    if analysis:
        overrides["analysis"] = analysis
    if args.no_header:
        overrides["loader"] = {"skip_header": False}
    return overrides


def run_analyze(args: argparse.Namespace) -> int:
    try:
        engine = OrderBookAnalysisEngine(config_path=args.config, overrides=_analysis_overrides(args))
    except OrderBookError as e:
        return _report_error(str(e))

    result = engine.analyze_path(args.file)
    if not result.success:
        return _report_error(result.error_msg)

    if args.format == "json":
        output = format_json_report(result.stats, engine.depth_pct, engine.target_qty)
    else:
        output = format_text_report(result.stats, engine.depth_pct, engine.target_qty)
    print(output)
    return 0


def run_generate(args: argparse.Namespace) -> int:
    overrides = {
        name: getattr(args, name)
        for name in ("levels", "mid_price", "tick_size", "min_size", "max_size")
        if getattr(args, name) is not None
    }
    try:
        config = ConfigLoader.create(args.config).build_config({"generator": overrides})
        params = config.generator
        if args.file is not None:
            params = replace(params, filename=args.file)
        path = write_orderbook_csv(params.filename, params, seed=args.seed)
    except OrderBookError as e:
        return _report_error(str(e))

    print(
        f"Generated {path} ({params.levels} bids + {params.levels} asks, "
        f"mid = {params.mid_price:.2f})"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lobstats", description="Order book snapshot analyzer")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")
    parser.add_argument("--log-no-timestamp", action="store_true",
                        help="Leave timestamps out of log lines")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_analyze = sub.add_parser("analyze", help="Load a snapshot and print its metrics")
    p_analyze.add_argument("file", nargs="?", default=DEFAULT_SNAPSHOT)
    p_analyze.add_argument("--depth-pct", type=float, default=None,
                           help="Depth window, +/- percent around mid (default 0.5)")
    p_analyze.add_argument("--target-qty", type=float, default=None,
                           help="Quantity for VWAP walks (default 40)")
    p_analyze.add_argument("--format", choices=["text", "json"], default="text")
    p_analyze.add_argument("--no-header", action="store_true",
                           help="Treat the first line as a record instead of a header")
    p_analyze.set_defaults(func=run_analyze)

    p_generate = sub.add_parser("generate", help="Write a synthetic snapshot")
    p_generate.add_argument("file", nargs="?", default=None)
    p_generate.add_argument("--levels", type=int, default=None)
    p_generate.add_argument("--mid", dest="mid_price", type=float, default=None)
    p_generate.add_argument("--tick", dest="tick_size", type=float, default=None)
    p_generate.add_argument("--min-size", type=float, default=None)
    p_generate.add_argument("--max-size", type=float, default=None)
    p_generate.add_argument("--seed", type=int, default=None)
    p_generate.set_defaults(func=run_generate)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        level=args.log_level,
        format_json=args.log_json,
        include_timestamp=not args.log_no_timestamp,
    )
    logger.debug("Command started", cmd=args.cmd)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
