import logging
import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from .heuristics import emotional_score
from .models import AssessmentRecord, HistorySummary, Trend

logger = logging.getLogger(__name__)


DEFAULT_RANGE_DAYS = 30
TREND_WINDOW = 7
TREND_SPLIT = 3
TREND_MARGIN = 0.5

# "Angry and frustrated" is left out here, unlike the scorer's negative set.
REPORT_NEGATIVE_THEMES = {"Chaotic and overwhelming", "Anxious and worried", "Sad and melancholic"}


def parse_range_days(time_range: Optional[str]) -> int:
    match = re.fullmatch(r"\s*(\d+)\s*d?\s*", time_range or "")
    if not match:
        return DEFAULT_RANGE_DAYS
    return int(match.group(1))


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def filter_by_time_range(
    records: Sequence[AssessmentRecord],
    time_range: Optional[str] = "30d",
    now: Optional[datetime] = None,
) -> List[AssessmentRecord]:
    now = _as_utc(now or datetime.now(timezone.utc))
    try:
        cutoff = now - timedelta(days=parse_range_days(time_range))
    except OverflowError:
        logger.debug("Time range %r is out of bounds; using %sd", time_range, DEFAULT_RANGE_DAYS)
        cutoff = now - timedelta(days=DEFAULT_RANGE_DAYS)
    return [r for r in records if _as_utc(r.date) >= cutoff]


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def calculate_trend(records: Sequence[AssessmentRecord]) -> Trend:
    """Compare mean energy of the newest three records with the three before.

    Records are expected newest first.
    """
    recent_window = list(records[:TREND_WINDOW])
    if len(recent_window) < 2:
        return "stable"
    recent = recent_window[:TREND_SPLIT]
    previous = recent_window[TREND_SPLIT:TREND_SPLIT * 2]
    if not previous:
        return "stable"

    recent_avg = _mean([r.energy_level for r in recent])
    previous_avg = _mean([r.energy_level for r in previous])
    if recent_avg > previous_avg + TREND_MARGIN:
        return "improving"
    if recent_avg < previous_avg - TREND_MARGIN:
        return "declining"
    return "stable"


def _negative_share(records: Sequence[AssessmentRecord]) -> float:
    negatives = sum(1 for r in records if r.emotional_theme in REPORT_NEGATIVE_THEMES)
    return negatives / len(records)


def generate_insights(records: Sequence[AssessmentRecord]) -> List[str]:
    insights: List[str] = []
    if _mean([r.energy_level for r in records]) < 5:
        insights.append("Low energy levels detected - consider improving sleep and nutrition")
    if _negative_share(records) > 0.5:
        insights.append("High frequency of negative emotions - consider stress management techniques")
    if not insights:
        insights.append("Your mental health patterns appear balanced")
    return insights


def identify_risk_factors(records: Sequence[AssessmentRecord]) -> List[str]:
    risk_factors: List[str] = []
    low_energy = sum(1 for r in records if r.energy_level < 4)
    if low_energy > len(records) * 0.3:
        risk_factors.append("Persistent low energy levels")
    if _negative_share(records) > 0.5:
        risk_factors.append("Predominant negative emotional themes")
    return risk_factors


def record_score(record: AssessmentRecord) -> float:
    # stored energy is on the 1-5 scale
    energy = record.energy_level / 5 * 10
    return (energy + emotional_score(record.emotional_theme)) / 2


def summarize_history(records: Sequence[AssessmentRecord]) -> HistorySummary:
    if not records:
        return HistorySummary(
            total_assessments=0,
            average_score=0.0,
            trend="stable",
            key_insights=("No data available yet",),
            risk_factors=(),
        )

    average = _mean([record_score(r) for r in records])
    return HistorySummary(
        total_assessments=len(records),
        average_score=min(10.0, max(0.0, round(average, 1))),
        trend=calculate_trend(records),
        key_insights=generate_insights(records),
        risk_factors=identify_risk_factors(records),
    )
