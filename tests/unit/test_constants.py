"""
Unit tests for mood and category lookups.
"""
import pytest

from backend import schemas
from dashboard import constants
from dashboard.constants import Mood

pytestmark = pytest.mark.unit


class TestMoodTaxonomy:
    """Versioned mood values."""

    def test_versions(self):
        """Version 1 has five moods, version 2 has seven."""
        assert len(constants.mood_choices(1)) == 5
        assert len(constants.mood_choices(2)) == 7
        assert constants.mood_choices() == constants.mood_choices(constants.ACTIVE_MOOD_VERSION)

    def test_every_mood_has_display_metadata(self):
        """Each mood carries a label, emoji, colour and its version."""
        for version, moods in constants.MOOD_TAXONOMIES.items():
            for mood in moods:
                meta = constants.mood_meta(mood.value)
                assert meta["label"]
                assert meta["emoji"]
                assert meta["color"].startswith("#")
                assert meta["version"] == version

    def test_unknown_mood_falls_back(self):
        """Stored values outside both taxonomies still render."""
        assert constants.mood_meta("ecstatic") == constants.UNKNOWN_MOOD_META
        assert constants.mood_meta(None) == constants.UNKNOWN_MOOD_META

    def test_frontend_and_backend_agree(self):
        """The API accepts exactly the moods the dashboard can show."""
        assert set(constants.MOODS) == set(schemas.MOOD_VALUES)
        assert [m.value for m in constants.MOOD_TAXONOMIES[1]] == list(schemas.MOOD_VALUES_V1)
        assert [m.value for m in constants.MOOD_TAXONOMIES[2]] == list(schemas.MOOD_VALUES_V2)

    def test_enum_compares_to_stored_string(self):
        """Mood members compare equal to their stored values."""
        assert Mood.AMAZING == "amazing"


class TestCategories:
    """Expense and income categories."""

    def test_frontend_and_backend_agree(self):
        """Both sides share the category vocabulary."""
        assert {c["value"] for c in constants.EXPENSE_CATEGORIES} == set(schemas.EXPENSE_CATEGORIES)
        assert {c["value"] for c in constants.INCOME_CATEGORIES} == set(schemas.INCOME_CATEGORIES)

    def test_category_meta_is_type_specific(self):
        """The "other" category resolves within the requested type."""
        assert constants.category_meta("expense", "other")["color"] == "#6B7280"
        assert constants.category_meta("income", "other")["color"] == "#4B5563"
        assert constants.category_meta("income", "salary")["label"] == "Salary"
