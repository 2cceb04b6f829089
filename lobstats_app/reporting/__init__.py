"""Renderers for Stats snapshots."""

from .formatters import format_json_report, format_text_report

__all__ = ["format_text_report", "format_json_report"]
