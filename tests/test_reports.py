"""Unit tests for history report summaries."""
from datetime import datetime, timedelta, timezone

import pytest

from mindline.domain.models import AssessmentRecord
from mindline.domain.questions import DAILY_ASSESSMENT_QUESTIONS, theme_for_feeling
from mindline.domain.reports import (
    calculate_trend,
    filter_by_time_range,
    parse_range_days,
    summarize_history,
)


NOW = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


def _records(energies, theme="Peaceful and calm"):
    """Build records newest first, one per day."""
    return [
        AssessmentRecord(date=NOW - timedelta(days=i), emotional_theme=theme, energy_level=e)
        for i, e in enumerate(energies)
    ]


class TestTimeRange:
    """Test time range filtering."""

    def test_parse_range(self):
        assert parse_range_days("7d") == 7
        assert parse_range_days("90") == 90
        assert parse_range_days("abc") == 30
        assert parse_range_days(None) == 30

    def test_filter(self):
        records = [
            AssessmentRecord(date=NOW - timedelta(days=2)),
            AssessmentRecord(date=NOW - timedelta(days=10)),
            AssessmentRecord(date=NOW - timedelta(days=45)),
        ]
        assert len(filter_by_time_range(records, "30d", now=NOW)) == 2
        assert len(filter_by_time_range(records, "7d", now=NOW)) == 1
        assert len(filter_by_time_range(records, "90d", now=NOW)) == 3

    @pytest.mark.parametrize("time_range", ["999999999d", "800000d", "99999999999999999999"])
    def test_out_of_bounds_range_uses_default(self, time_range):
        records = [
            AssessmentRecord(date=NOW - timedelta(days=2)),
            AssessmentRecord(date=NOW - timedelta(days=45)),
        ]
        kept = filter_by_time_range(records, time_range, now=NOW)
        assert kept == filter_by_time_range(records, "30d", now=NOW)
        assert len(kept) == 1

    def test_naive_and_string_dates(self):
        records = [
            AssessmentRecord.model_validate({"date": "2024-06-29T08:00:00Z", "energyLevel": "4"}),
            AssessmentRecord(date=datetime(2024, 6, 28, 8, 0)),
        ]
        kept = filter_by_time_range(records, "7d", now=NOW)
        assert len(kept) == 2
        assert kept[0].energy_level == 4


class TestTrend:
    """Test energy trend detection."""

    def test_improving(self):
        assert calculate_trend(_records([5, 5, 5, 2, 2, 2])) == "improving"

    def test_declining(self):
        assert calculate_trend(_records([1, 2, 1, 4, 4, 4])) == "declining"

    def test_stable_within_margin(self):
        assert calculate_trend(_records([3, 3, 3, 3, 3, 2])) == "stable"

    def test_stable_without_previous_window(self):
        assert calculate_trend(_records([5, 1, 1])) == "stable"
        assert calculate_trend(_records([5])) == "stable"


class TestSummary:
    """Test the full history summary."""

    def test_empty(self):
        summary = summarize_history([])
        assert summary.total_assessments == 0
        assert summary.average_score == 0.0
        assert summary.trend == "stable"
        assert summary.key_insights == ("No data available yet",)
        assert summary.risk_factors == ()

    def test_balanced(self):
        summary = summarize_history(_records([5, 5]))
        assert summary.total_assessments == 2
        # (5 / 5 * 10 + 8) / 2
        assert summary.average_score == 9.0
        assert summary.key_insights == ("Your mental health patterns appear balanced",)
        assert summary.risk_factors == ()

    def test_low_energy_and_negative_themes(self):
        summary = summarize_history(_records([2, 3, 1], theme="Sad and melancholic"))
        assert summary.average_score == pytest.approx(round(((4 + 3) / 2 + (6 + 3) / 2 + (2 + 3) / 2) / 3, 1))
        assert len(summary.key_insights) == 2
        assert summary.risk_factors == (
            "Persistent low energy levels",
            "Predominant negative emotional themes",
        )

    def test_angry_theme_not_counted_as_negative(self):
        summary = summarize_history(_records([5, 5], theme="Angry and frustrated"))
        assert summary.risk_factors == ()


class TestQuestions:
    """Test the daily question set."""

    def test_question_ids(self):
        ids = [q["id"] for q in DAILY_ASSESSMENT_QUESTIONS]
        assert ids == ["journalEntry", "emotionalTheme", "memorableMoment", "energyLevel", "positiveExperience"]

    def test_feeling_scale(self):
        assert theme_for_feeling(1) == "Sad and melancholic"
        assert theme_for_feeling(5) == "Happy and joyful"
        assert theme_for_feeling(None) == "Neutral"
