"""
Counting module for wordcount.

Provides the single-pass unit counter and the file-level runner used by the CLI.
"""

from .count_units import (
    CountMode,
    FrequencyTable,
    InvalidEncodingError,
    count,
    count_text,
    iter_lines,
    total_units,
)

__all__ = [
    "CountMode",
    "FrequencyTable",
    "InvalidEncodingError",
    "count",
    "count_text",
    "iter_lines",
    "total_units",
]
