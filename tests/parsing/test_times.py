"""Tests for time-range extraction."""

from datetime import time

import pytest

from shiftbot.parsing.times import END_OF_DAY, TimeRange, extract_time_range, parse_time_token


class TestParseTimeToken:
    """Test parse_time_token."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("9", time(9, 0)),
            ("09", time(9, 0)),
            ("9:30", time(9, 30)),
            ("18.00", time(18, 0)),
            ("24", END_OF_DAY),
            ("24:00", END_OF_DAY),
            ("25", None),
            ("9:75", None),
            ("", None),
            (None, None),
        ],
    )
    def test_tokens(self, token, expected):
        """Test bare hours, clock times, end of day and out-of-range values."""
        assert parse_time_token(token) == expected


class TestExtractTimeRange:
    """Test extract_time_range strategies."""

    def test_four_time_parts(self):
        """Test H:MM-H:MM."""
        assert extract_time_range("18:00-23:00") == TimeRange(time(18, 0), time(23, 0))

    def test_four_time_parts_glued(self):
        """Test two clock times written without separator."""
        assert extract_time_range("18.0023.00") == TimeRange(time(18, 0), time(23, 0))

    def test_dash_range_overnight(self):
        """Test bare hours with an end before the start."""
        assert extract_time_range("Стрижавка 18-09 9.12") == TimeRange(time(18, 0), time(9, 0))

    def test_dash_range_with_from_prefix(self):
        """Test "з 9:30 - 18"."""
        assert extract_time_range("з 9:30 - 18") == TimeRange(time(9, 30), time(18, 0))

    def test_dash_range_in_parentheses(self):
        """Test a range wrapped in parentheses."""
        assert extract_time_range("Кириченко Микита (18-9)") == TimeRange(time(18, 0), time(9, 0))

    def test_from_to_connector(self):
        """Test "з 7 до 23"."""
        assert extract_time_range("з 7 до 23") == TimeRange(time(7, 0), time(23, 0))

    def test_po_connector_is_whole_word(self):
        """Test that "по" inside "пошта" is not a connector."""
        assert extract_time_range("пошта 11.12") == TimeRange()
        assert extract_time_range("10 по 22") == TimeRange(time(10, 0), time(22, 0))

    def test_end_only(self):
        """Test an open start."""
        assert extract_time_range("Стрижавка -23") == TimeRange(None, time(23, 0))

    def test_hour_24_is_end_of_day(self):
        """Test 24 as the end of the day."""
        assert extract_time_range("20-24") == TimeRange(time(20, 0), END_OF_DAY)

    def test_two_single_digits_are_ambiguous(self):
        """Test that "7-9" is skipped."""
        assert extract_time_range("7-9").is_empty

    def test_full_range_beats_dangling_dash(self):
        """Test that "- 18-23" reads as 18-23, not as an open start ending at 18."""
        assert extract_time_range("Стрижавка - 18-23 9.12") == TimeRange(time(18, 0), time(23, 0))

    def test_dotted_date_is_not_a_clock_time(self):
        """Test that a leading 9.12 is a date, not 9:12."""
        assert extract_time_range("9.12 - 18-23") == TimeRange(time(18, 0), time(23, 0))

    def test_four_time_parts_space_separated(self):
        """Test two clock times separated by a space after a date."""
        assert extract_time_range("9.12 18:00 23:00") == TimeRange(time(18, 0), time(23, 0))

    def test_dotted_times_survive_date_blanking(self):
        """Test that 18.00 is not a calendar date."""
        assert extract_time_range("18.00-23.00 9.12") == TimeRange(time(18, 0), time(23, 0))

    def test_iso_date_is_not_a_range(self):
        """Test that 2025-12-09 is not read as 12-09."""
        assert extract_time_range("2025-12-09").is_empty

    def test_lone_clock_time_is_start(self):
        """Test a single H:MM."""
        assert extract_time_range("пошта 9.12 на 18:00") == TimeRange(time(18, 0), None)

    def test_nothing(self):
        """Test text without time."""
        assert extract_time_range("Дима Маслов").is_empty
        assert extract_time_range("").is_empty
