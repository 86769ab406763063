"""
Unit tests for dashboard aggregates.
"""
from datetime import date, datetime, timezone

import pytest

from dashboard import metrics
from dashboard.constants import EMPTY_CELL_COLOR, mood_meta

pytestmark = pytest.mark.unit


def _expense(amount, category="food", day="2024-05-03"):
    return {"type": "expense", "amount": amount, "category": category, "date": day}


def _income(amount, category="salary", day="2024-05-01"):
    return {"type": "income", "amount": amount, "category": category, "date": day}


def _mood(created_at, mood="good", productivity=7):
    return {"mood": mood, "productivity": productivity, "task": "write", "created_at": created_at}


class TestFinancialTotals:
    """Income, expense and balance sums."""

    def test_income_and_expense_totals(self):
        """One income of 100 and one expense of 40 leave a balance of 60."""
        entries = [_income(100), _expense(40)]

        assert metrics.total_income(entries) == 100
        assert metrics.total_expenses(entries) == 40
        assert metrics.net_balance(entries) == 60

    def test_net_balance_is_income_minus_expenses(self):
        """Net balance always equals income minus expenses."""
        entries = [_income(1200.5), _income(80), _expense(33.25), _expense(410), _expense(7)]

        assert metrics.net_balance(entries) == pytest.approx(
            metrics.total_income(entries) - metrics.total_expenses(entries)
        )

    def test_empty_entries(self):
        """No entries produce zero everywhere."""
        summary = metrics.summarize_financial([], date(2024, 5, 10))

        assert summary == {
            "total_income": 0,
            "total_expenses": 0,
            "net_balance": 0,
            "this_month": 0,
            "avg_expense": 0.0,
            "avg_income": 0.0,
        }

    def test_summary_counts_current_month_and_averages(self):
        """This-month count uses the entry date; averages are per type."""
        entries = [_income(100, day="2024-05-01"), _expense(40, day="2024-05-03"), _expense(20, day="2024-04-28")]

        summary = metrics.summarize_financial(entries, date(2024, 5, 10))

        assert summary["this_month"] == 2
        assert summary["avg_expense"] == pytest.approx(30)
        assert summary["avg_income"] == pytest.approx(100)


class TestCategoryBreakdown:
    """Expense grouping by category."""

    def test_percentages_sum_to_hundred(self):
        """Shares of a non-empty breakdown add up to 100."""
        entries = [_expense(40, "food"), _expense(25, "transport"), _expense(35, "food"), _expense(10, "bills")]

        breakdown = metrics.category_breakdown(entries)

        assert sum(row["percentage"] for row in breakdown) == pytest.approx(100)

    def test_sorted_by_total_with_counts(self):
        """Largest category first, with its transaction count."""
        entries = [_expense(40, "food"), _expense(25, "transport"), _expense(35, "food")]

        breakdown = metrics.category_breakdown(entries)

        assert [row["value"] for row in breakdown] == ["food", "transport"]
        assert breakdown[0]["total"] == 75
        assert breakdown[0]["count"] == 2
        assert breakdown[0]["label"] == "Food & Dining"

    def test_income_is_ignored(self):
        """Only expenses are broken down."""
        assert metrics.category_breakdown([_income(500)]) == []

    def test_unknown_category_gets_fallback_label(self):
        """Unrecognised categories still show up with a readable label."""
        breakdown = metrics.category_breakdown([_expense(10, "pet_care")])

        assert breakdown[0]["label"] == "Pet Care"
        assert breakdown[0]["percentage"] == pytest.approx(100)


class TestMoodAggregates:
    """Productivity averages, weekly counts and streaks."""

    def test_average_productivity_rounds_to_one_decimal(self):
        """Average of 7, 8 and 8 is 7.7."""
        entries = [_mood("2024-05-10T08:00:00+00:00", productivity=value) for value in (7, 8, 8)]

        assert metrics.average_productivity(entries) == 7.7

    def test_streak_counts_consecutive_days_ending_today(self):
        """Entries on today and the two days before give a streak of 3."""
        entries = [
            _mood("2024-05-10T08:00:00+00:00"),
            _mood("2024-05-09T21:00:00+00:00"),
            _mood("2024-05-08T12:00:00+00:00"),
            _mood("2024-05-05T12:00:00+00:00"),
        ]

        assert metrics.current_streak(entries, date(2024, 5, 10)) == 3

    def test_streak_is_zero_without_entry_today(self):
        """A missing check-in today resets the streak."""
        entries = [_mood("2024-05-09T08:00:00+00:00"), _mood("2024-05-08T08:00:00+00:00")]

        assert metrics.current_streak(entries, date(2024, 5, 10)) == 0

    def test_streak_is_capped_by_window(self):
        """The lookback never exceeds the streak window."""
        entries = [_mood(f"2024-05-{day:02d}T08:00:00+00:00") for day in range(1, 32)]

        assert metrics.current_streak(entries, date(2024, 5, 31), window=30) == 30

    def test_this_week_counts_last_seven_days(self):
        """Entries older than seven days are excluded."""
        now = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)
        entries = [
            _mood("2024-05-10T08:00:00+00:00"),
            _mood("2024-05-04T08:00:00+00:00"),
            _mood("2024-05-01T08:00:00+00:00"),
        ]

        summary = metrics.summarize_mood(entries, now, tz=timezone.utc)

        assert summary["total_entries"] == 3
        assert summary["this_week"] == 2
        assert summary["current_streak"] == 1


class TestDisplayHelpers:
    """Trend squares and share bars."""

    def test_trend_pads_with_empty_cells(self):
        """Fewer than seven entries are padded with neutral squares."""
        trend = metrics.recent_mood_trend([{"mood": "great"}, {"mood": "sad"}])

        assert len(trend) == 7
        assert trend[0] == mood_meta("great")["color"]
        assert trend[1] == mood_meta("sad")["color"]
        assert trend[2:] == [EMPTY_CELL_COLOR] * 5

    def test_shares_use_combined_total(self):
        """Income and expense shares are relative to their sum."""
        income_share, expense_share = metrics.income_expense_shares([_income(100), _expense(40)])

        assert income_share == pytest.approx(100 / 140 * 100)
        assert expense_share == pytest.approx(40 / 140 * 100)

    def test_shares_without_entries(self):
        """Nothing recorded means empty bars."""
        assert metrics.income_expense_shares([]) == (0, 0)
