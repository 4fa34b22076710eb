"""Fuzzy production planning: alpha-cut reduction to LP model text."""

from .config import Config, SynthesisParams, setup_logging, get_default_config

__version__ = "0.1.0"

__all__ = [
    "Config",
    "SynthesisParams",
    "setup_logging",
    "get_default_config",
]
