"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Exports:
    RANDOM_INT_RANGE (tuple[int, int]): Inclusive range for integer-valued
        samples drawn by the walkthrough.
    RANDOM_FLOAT_RANGE (tuple[float, float]): Half-open range for float
        samples drawn by the walkthrough.
    DISPLAY_PRECISION (int): Significant digits used by str() on vectors and
        matrices.
    LOG_LEVELS (tuple[str, ...]): Level names accepted by the command line.
    LOG_LEVEL (str): Default logging level, overridable through the
        PYMATRICES_LOG_LEVEL environment variable.
"""
import os
from typing import Optional

RANDOM_INT_RANGE: tuple[int, int] = (-10, 10)
RANDOM_FLOAT_RANGE: tuple[float, float] = (-10.0, 10.0)

DISPLAY_PRECISION: int = 6

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL: str = "WARNING"


def resolve_log_level(value: Optional[str]) -> str:
    """Upper-cased ``value`` if it names one of LOG_LEVELS, else the default."""
    if value is None:
        return DEFAULT_LOG_LEVEL
    name = value.strip().upper()
    return name if name in LOG_LEVELS else DEFAULT_LOG_LEVEL


LOG_LEVEL: str = resolve_log_level(os.environ.get("PYMATRICES_LOG_LEVEL"))
