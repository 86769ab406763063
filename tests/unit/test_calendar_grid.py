"""
Unit tests for calendar date grids and day bucketing.
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from dashboard import calendar_grid

pytestmark = pytest.mark.unit

SUNDAY = 6


class TestPeriodDates:
    """Week, month and rolling windows."""

    @pytest.mark.parametrize("offset", range(7))
    def test_week_runs_sunday_to_saturday(self, offset):
        """Any day of a week maps to the Sunday-first week containing it."""
        today = date(2024, 5, 5) + timedelta(days=offset)

        days = calendar_grid.week_dates(today)

        assert len(days) == 7
        assert days[0] == date(2024, 5, 5)
        assert days[0].weekday() == SUNDAY
        assert today in days

    def test_month_has_six_full_weeks(self):
        """Month view always covers 42 days starting on a Sunday."""
        days = calendar_grid.month_dates(date(2024, 2, 14))

        assert len(days) == 42
        assert days[0] == date(2024, 1, 28)
        assert days[0].weekday() == SUNDAY
        assert date(2024, 2, 1) in days
        assert date(2024, 2, 29) in days

    def test_month_starting_on_sunday(self):
        """When the 1st is a Sunday the grid starts on it."""
        days = calendar_grid.month_dates(date(2024, 9, 20))

        assert days[0] == date(2024, 9, 1)

    def test_all_is_last_thirty_days(self):
        """The rolling window ends today, oldest first."""
        today = date(2024, 5, 10)

        days = calendar_grid.period_dates("all", today)

        assert len(days) == 30
        assert days[-1] == today
        assert days[0] == today - timedelta(days=29)

    def test_unknown_period(self):
        """Unsupported periods are rejected."""
        with pytest.raises(ValueError):
            calendar_grid.period_dates("year", date(2024, 5, 10))


class TestHeatmap:
    """Twelve-week mood heatmap layout."""

    def test_twelve_columns_of_seven_days(self):
        """84 consecutive days ending today."""
        today = date(2024, 5, 10)

        columns = calendar_grid.build_heatmap([], today)

        assert len(columns) == 12
        assert all(len(column) == 7 for column in columns)
        assert columns[-1][-1]["date"] == today
        assert columns[0][0]["date"] == today - timedelta(days=83)
        assert columns[-1][-1]["is_today"]


class TestDayBucketing:
    """Matching entries to calendar days."""

    def test_first_entry_of_a_day_wins(self):
        """With two entries on one day the first in list order is shown."""
        newest = {"id": "b", "created_at": "2024-05-10T18:00:00+00:00"}
        oldest = {"id": "a", "created_at": "2024-05-10T07:00:00+00:00"}

        cells = calendar_grid.build_period_calendar("week", [newest, oldest], date(2024, 5, 10))

        today_cell = next(cell for cell in cells if cell["is_today"])
        assert today_cell["entry"]["id"] == "b"

    def test_day_key_follows_timezone(self):
        """A late UTC entry belongs to the next day east of UTC."""
        entry = {"created_at": "2024-05-10T23:30:00Z"}

        assert calendar_grid.entry_day(entry) == date(2024, 5, 10)
        assert calendar_grid.entry_day(entry, tz=timezone(timedelta(hours=9))) == date(2024, 5, 11)
        assert calendar_grid.entry_day(entry, tz=timezone(timedelta(hours=-3))) == date(2024, 5, 10)

    def test_naive_timestamps_are_utc(self):
        """Timestamps without an offset are read as UTC."""
        parsed = calendar_grid.parse_timestamp("2024-05-10T10:00:00")

        assert parsed == datetime(2024, 5, 10, 10, 0, tzinfo=timezone.utc)

    def test_unparseable_values_are_skipped(self):
        """Rows with bad timestamps never land in a cell."""
        index = calendar_grid.index_entries_by_day([{"created_at": "not-a-date"}, {"created_at": None}])

        assert index == {}

    def test_cell_flags(self):
        """Cells outside the month and after today are flagged."""
        cells = calendar_grid.build_period_calendar("month", [], date(2024, 5, 10))

        by_day = {cell["date"]: cell for cell in cells}
        assert not by_day[date(2024, 4, 28)]["in_month"]
        assert by_day[date(2024, 5, 11)]["is_future"]
        assert not by_day[date(2024, 5, 9)]["is_future"]
