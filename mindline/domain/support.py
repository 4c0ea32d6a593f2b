"""Next-step suggestions and therapist lookup shown after an assessment."""
from typing import Iterable, List, Optional

from .models import AssessmentIndicators, TherapistRecord


THERAPIST_SUGGESTION = "Based on today, consider speaking with a therapist."
FRIEND_SUGGESTION = "A quick chat with a friend could help today."
BALANCED_SUGGESTION = "You seem balanced — keep up the self-care!"

DEFAULT_EMOTIONAL_WELLBEING = 6
DEFAULT_ENERGY_LEVEL = 5
MAX_THERAPISTS = 10


def suggest_support(indicators: Optional[AssessmentIndicators]) -> str:
    if indicators is None:
        emotional, energy = DEFAULT_EMOTIONAL_WELLBEING, DEFAULT_ENERGY_LEVEL
    else:
        emotional, energy = indicators.emotional_wellbeing, indicators.energy_level

    if emotional <= 4 or energy <= 3:
        return THERAPIST_SUGGESTION
    if emotional <= 6:
        return FRIEND_SUGGESTION
    return BALANCED_SUGGESTION


def filter_therapists(
    records: Iterable[TherapistRecord],
    city: Optional[str] = None,
    insurance: Optional[str] = None,
    limit: int = MAX_THERAPISTS,
) -> List[TherapistRecord]:
    """Return at most ``limit`` therapists in ``city`` taking ``insurance``.

    City must match exactly, ignoring case. Insurance matches any part of the
    accepted-insurance text, ignoring case. Blank filters match everything.
    """
    city = (city or "").strip().lower()
    insurance = (insurance or "").strip().lower()

    matches: List[TherapistRecord] = []
    for record in records:
        if city and record.city.lower() != city:
            continue
        if insurance and insurance not in record.insurance_accepted.lower():
            continue
        matches.append(record)
        if len(matches) >= limit:
            break
    return matches
