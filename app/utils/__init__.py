"""Utility helper functions."""

from app.utils.helpers import get_summary, host, time_taken, today_str
from app.utils.reading_time import calculate_reading_time, calculate_word_count

__all__ = [
    "calculate_reading_time",
    "calculate_word_count",
    "get_summary",
    "host",
    "time_taken",
    "today_str",
]
