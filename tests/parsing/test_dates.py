"""Tests for date extraction."""

from datetime import date

from shiftbot.parsing.dates import blank_dates, extract_date


class TestExtractDate:
    """Test extract_date."""

    def test_dotted_without_year_uses_current_year(self):
        """Test day.month in the current year."""
        assert extract_date("Стрижавка 9.12", today=date(2025, 12, 1)) == date(2025, 12, 9)

    def test_slashed_date(self):
        """Test day/month separator."""
        assert extract_date("9/12", today=date(2025, 12, 1)) == date(2025, 12, 9)

    def test_rolls_forward_when_already_past(self):
        """Test that a date well behind today moves to next year."""
        assert extract_date("28.12", today=date(2026, 1, 15)) == date(2026, 12, 28)

    def test_yesterday_is_not_rolled(self):
        """Test that yesterday stays in the current year."""
        assert extract_date("9.12", today=date(2025, 12, 10)) == date(2025, 12, 9)

    def test_explicit_four_digit_year(self):
        """Test D.M.YYYY."""
        assert extract_date("11.12.2024", today=date(2025, 12, 1)) == date(2024, 12, 11)

    def test_two_digit_year(self):
        """Test two-digit years map to 20YY."""
        assert extract_date("1/3/26", today=date(2025, 12, 1)) == date(2026, 3, 1)

    def test_weekday_note_in_parentheses(self):
        """Test that a trailing weekday note is tolerated."""
        assert extract_date("06.12(сб)", today=date(2025, 12, 1)) == date(2025, 12, 6)

    def test_iso_date(self):
        """Test ISO YYYY-MM-DD."""
        assert extract_date("пошта 2025-12-09 18-23", today=date(2025, 12, 1)) == date(2025, 12, 9)

    def test_malformed_date_is_absent(self):
        """Test that day 32 or month 0 never raises."""
        assert extract_date("32.12", today=date(2025, 12, 1)) is None
        assert extract_date("12.0", today=date(2025, 12, 1)) is None

    def test_invalid_candidate_does_not_mask_later_date(self):
        """Test that 18.00 (month 0) is skipped in favour of 11.12."""
        assert extract_date("18.00 11.12", today=date(2025, 12, 1)) == date(2025, 12, 11)

    def test_no_date(self):
        """Test text without any date."""
        assert extract_date("Стрижавка 18-09", today=date(2025, 12, 1)) is None
        assert extract_date("", today=date(2025, 12, 1)) is None


class TestBlankDates:
    """Test blank_dates."""

    def test_calendar_dates_removed(self):
        """Test that dotted and ISO dates disappear."""
        assert blank_dates("9.12 - 18-23").split() == ["-", "18-23"]
        assert blank_dates("2025-12-09 7-23").split() == ["7-23"]

    def test_clock_shaped_literals_kept(self):
        """Test that 18.00 and 9.30 are not calendar dates."""
        assert blank_dates("18.00-23.00") == "18.00-23.00"
        assert blank_dates("з 9.30") == "з 9.30"
