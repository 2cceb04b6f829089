"""
Logging configuration and utilities for the order book analyzer.
"""
from .config import configure_logging, get_logger, log_metric_result

__all__ = ["configure_logging", "get_logger", "log_metric_result"]
