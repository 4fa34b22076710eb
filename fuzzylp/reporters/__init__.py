"""Reporting utilities for synthesis results."""

from .console_reporter import print_results, format_alpha_table

__all__ = [
    "print_results",
    "format_alpha_table",
]
