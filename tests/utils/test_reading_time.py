# tests/utils/test_reading_time.py
"""Tests for app/utils/reading_time.py module."""

import pytest

from app.utils.reading_time import calculate_reading_time, calculate_word_count


class TestCalculateWordCount:
    """Tests for calculate_word_count function."""

    def test_counts_whitespace_separated_words(self) -> None:
        assert calculate_word_count("one two three") == 3

    def test_collapses_runs_of_whitespace(self) -> None:
        assert calculate_word_count("  one \n\n two\t\tthree  ") == 3

    def test_empty_body_has_no_words(self) -> None:
        assert calculate_word_count("") == 0
        assert calculate_word_count("   \n\t ") == 0


class TestCalculateReadingTime:
    """Tests for calculate_reading_time function."""

    @pytest.mark.parametrize(
        ("words", "minutes"),
        [(1, 1), (60, 1), (199, 1), (200, 1), (201, 2), (400, 2), (401, 3)],
    )
    def test_rounds_up_to_whole_minutes(self, words: int, minutes: int) -> None:
        """Reading time is ceil(words / 200)."""
        body = " ".join(["word"] * words)
        assert calculate_reading_time(body) == minutes

    def test_short_sentence_takes_one_minute(self) -> None:
        assert calculate_reading_time("Very short now.") == 1

    def test_empty_or_whitespace_body_takes_zero_minutes(self) -> None:
        assert calculate_reading_time("") == 0
        assert calculate_reading_time("  \n ") == 0

    def test_is_deterministic(self) -> None:
        body = "lorem ipsum " * 321
        assert calculate_reading_time(body) == calculate_reading_time(body)
