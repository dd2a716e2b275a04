"""Utility modules for Compositor."""

from compositor.utilities.logger import get_logger, setup_logging
from compositor.utilities.rounding import round_for_progress_percent, round_half_up
from compositor.utilities.strings import ResourceStrings
from compositor.utilities.text import SEPARATOR, is_empty, join_fragments

__all__ = [
    "ResourceStrings",
    "SEPARATOR",
    "get_logger",
    "is_empty",
    "join_fragments",
    "round_for_progress_percent",
    "round_half_up",
    "setup_logging",
]
