"""Reading time estimation for blog bodies."""

from math import ceil

from app.configs import WORDS_PER_MINUTE


def calculate_word_count(content: str) -> int:
    """
    Calculate word count from content.

    Words are separated by runs of whitespace; an empty or whitespace-only
    body has no words.

    Args:
        content: Blog body

    Returns:
        int: Word count
    """
    return len(content.split())


def calculate_reading_time(content: str) -> int:
    """
    Calculate reading time in minutes, rounded up.

    Assumes average reading speed of 200 words per minute.

    Args:
        content: Blog body

    Returns:
        int: Reading time in minutes (0 for an empty body)
    """
    return ceil(calculate_word_count(content) / WORDS_PER_MINUTE)
