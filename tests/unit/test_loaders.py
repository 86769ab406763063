"""
Unit tests for table frames and chart inputs.
"""
from datetime import date

import pytest

from dashboard import calendar_grid
from dashboard.data.loaders import financial_frame, mood_frame, productivity_by_day
from dashboard.visualizations import build_trend_html, heatmap_matrix

pytestmark = pytest.mark.unit


class TestFrames:
    """pandas frames behind the history tables."""

    def test_financial_amounts_are_signed(self):
        """Expenses show as negative amounts."""
        frame = financial_frame(
            [
                {"type": "income", "amount": 100, "category": "salary", "description": "Pay", "date": "2024-05-01"},
                {"type": "expense", "amount": 40, "category": "food", "description": "Dinner", "date": "2024-05-02"},
            ]
        )

        assert frame["amount"].tolist() == [100.0, -40.0]
        assert frame["category"].tolist() == ["Salary", "Food & Dining"]

    def test_empty_mood_frame_keeps_columns(self):
        """Empty frames still render with headers."""
        frame = mood_frame([])

        assert frame.empty
        assert list(frame.columns) == ["date", "mood", "productivity", "task", "notes"]

    def test_productivity_by_day_keeps_newest_entry(self):
        """Duplicate days keep the first (newest) row and sort oldest first."""
        entries = [
            {"mood": "good", "productivity": 9, "created_at": "2024-05-10T18:00:00+00:00"},
            {"mood": "bad", "productivity": 3, "created_at": "2024-05-10T07:00:00+00:00"},
            {"mood": "okay", "productivity": 5, "created_at": "2024-05-08T12:00:00+00:00"},
        ]

        frame = productivity_by_day(entries)

        assert frame["date"].tolist() == [date(2024, 5, 8), date(2024, 5, 10)]
        assert frame["productivity"].tolist() == [5, 9]
        assert frame["date_str"].tolist() == ["May 08", "May 10"]


class TestChartInputs:
    """Heatmap matrix and trend markup."""

    def test_heatmap_matrix_shape(self):
        """Seven weekday rows by twelve week columns."""
        today = date(2024, 5, 10)
        columns = calendar_grid.build_heatmap(
            [{"mood": "great", "productivity": 8, "created_at": "2024-05-10T09:00:00+00:00"}], today
        )

        z, text, x_labels, y_labels = heatmap_matrix(columns)

        assert z.shape == (7, 12)
        assert len(x_labels) == 12
        assert len(y_labels) == 7
        assert "Great" in text[6][11]
        assert "No entry" in text[0][0]

    def test_trend_html_has_one_square_per_color(self):
        """Each colour becomes one square."""
        markup = build_trend_html(["#111111", "#222222"])

        assert markup.count("#111111") == 1
        assert markup.count("#222222") == 1
