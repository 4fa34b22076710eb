"""Utility functions for loading, saving and checking problems."""

from .data_loader import (
    load_json,
    save_json,
    save_text,
    parse_products,
    parse_resources,
    load_problem,
)
from .validators import (
    ProblemValidator,
    ValidationResult,
)

__all__ = [
    "load_json",
    "save_json",
    "save_text",
    "parse_products",
    "parse_resources",
    "load_problem",
    "ProblemValidator",
    "ValidationResult",
]
