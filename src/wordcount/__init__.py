"""
wordcount: frequency counts of characters, words or lines in UTF-8 text.
"""

from wordcount.counting.count_units import (
    CountMode,
    FrequencyTable,
    InvalidEncodingError,
    count,
    count_text,
    total_units,
)

__version__ = "0.1.0"

__all__ = [
    "CountMode",
    "FrequencyTable",
    "InvalidEncodingError",
    "count",
    "count_text",
    "total_units",
]
