"""
Main analysis engine coordinator.

Wires configuration, snapshot loading and metrics calculation into a single
call that returns a result value instead of raising:

Snapshot → Record Parser → Book Loader → Metrics → AnalysisResult
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .data.loader import load_book_from_path, load_book_from_text
from .data.models import OrderBook
from .errors import OrderBookError
from .metrics.calculator import StatsCalculator
from .models.metrics import Stats

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis: either stats (and the book) or an error."""

    stats: Optional[Stats] = None
    book: Optional[OrderBook] = None

    success: bool = True
    error: Optional[OrderBookError] = None
    error_msg: Optional[str] = None

    @classmethod
    def success_with_stats(cls, stats: Stats, book: OrderBook) -> "AnalysisResult":
        """Create successful result."""
        return cls(stats=stats, book=book, success=True)

    @classmethod
    def failure(cls, error: OrderBookError) -> "AnalysisResult":
        """Create error result."""
        return cls(success=False, error=error, error_msg=str(error))


class OrderBookAnalysisEngine:
    """
    Coordinator for loading a snapshot and computing its Stats.

    Configuration is resolved once at construction (defaults, then the
    optional YAML file, then explicit overrides).
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 config_path: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        if config is None:
            config = ConfigLoader.create(config_path).build_config(overrides)
        self.config = config
        self.calculator = StatsCalculator(config.analysis)

    @property
    def depth_pct(self) -> float:
        return self.config.analysis.depth_pct

    @property
    def target_qty(self) -> float:
        return self.config.analysis.target_qty

    def analyze_book(self, book: OrderBook) -> AnalysisResult:
        """Compute Stats for an already loaded book."""
        try:
            stats = self.calculator.calculate(book)
        except OrderBookError as e:
            logger.warning("Stats calculation failed", error=str(e), error_type=type(e).__name__)
            return AnalysisResult.failure(e)
        return AnalysisResult.success_with_stats(stats, book)

    def analyze_text(self, text: str) -> AnalysisResult:
        """Load a snapshot from text and compute its Stats."""
        try:
            book = load_book_from_text(text, self.config.loader)
        except OrderBookError as e:
            logger.warning("Snapshot rejected", error=str(e), error_type=type(e).__name__)
            return AnalysisResult.failure(e)
        return self.analyze_book(book)

    def analyze_path(self, path: Union[str, Path]) -> AnalysisResult:
        """Load a snapshot file and compute its Stats."""
        logger.info("Analyzing snapshot", source=str(path))
        try:
            book = load_book_from_path(path, self.config.loader)
        except OrderBookError as e:
            logger.warning(
                "Snapshot rejected", source=str(path), error=str(e), error_type=type(e).__name__
            )
            return AnalysisResult.failure(e)
        return self.analyze_book(book)
