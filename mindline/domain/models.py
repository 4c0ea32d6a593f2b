import math
from datetime import datetime
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from mindline.domain.questions import theme_for_feeling


Severity = Literal["mild", "moderate", "severe"]
RiskLevel = Literal["low", "moderate", "high"]
Sentiment = Literal["positive", "neutral", "negative"]
Trend = Literal["improving", "stable", "declining"]


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys used by the JSON payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ConditionRecord(FrozenCamelModel):
    illness: str
    definition: str
    symptoms: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    severity: Severity = "mild"


class ConditionSummary(FrozenCamelModel):
    illness: str
    definition: str
    severity: Severity
    symptoms: Tuple[str, ...] = ()


class DetectedCondition(FrozenCamelModel):
    illness: str
    definition: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    severity: Severity
    matched_symptoms: Tuple[str, ...] = ()


class DetectionResult(FrozenCamelModel):
    detected_conditions: Tuple[DetectedCondition, ...] = ()
    overall_risk: RiskLevel = "low"
    recommendations: Tuple[str, ...] = ()


class SentimentResult(FrozenCamelModel):
    sentiment: Sentiment
    confidence: float = Field(..., ge=0.0, le=1.0)
    emotional_indicators: Tuple[str, ...] = ()
    suggested_follow_ups: Tuple[str, ...] = ()


def _coerce_score(v):
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    # half-up rounding; inf and nan are treated as missing
    try:
        return math.floor(float(str(v).strip()) + 0.5)
    except (TypeError, ValueError, OverflowError):
        return None


class AssessmentInput(CamelModel):
    journal_entry: str = ""
    emotional_theme: str = ""
    memorable_moment: str = ""
    energy_level: Optional[int] = None
    physical_tension: str = ""
    positive_experience: str = ""
    emotional_need: str = ""
    heart_weather: str = ""
    energy_drain: str = ""
    coping_mechanism: str = ""
    social_connection: Optional[int] = None

    @field_validator("energy_level", "social_connection", mode="before")
    @classmethod
    def coerce_scale(cls, v):
        return _coerce_score(v)

    @field_validator(
        "journal_entry",
        "memorable_moment",
        "physical_tension",
        "positive_experience",
        "emotional_need",
        "heart_weather",
        "energy_drain",
        "coping_mechanism",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v):
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("emotional_theme", mode="before")
    @classmethod
    def theme_from_scale(cls, v):
        # the feeling question answers on a 1-5 scale
        if isinstance(v, int) and not isinstance(v, bool):
            return theme_for_feeling(v)
        return "" if v is None else str(v).strip()


class AssessmentIndicators(FrozenCamelModel):
    emotional_wellbeing: int
    energy_level: int
    social_connection: int


class AssessmentResult(FrozenCamelModel):
    overall_score: float
    indicators: AssessmentIndicators
    summary: Tuple[str, ...] = ()


class AssessmentRecord(CamelModel):
    """A previously stored assessment, as read back for history reports."""

    date: datetime
    emotional_theme: str = ""
    energy_level: int = 5

    @field_validator("energy_level", mode="before")
    @classmethod
    def default_energy(cls, v):
        coerced = _coerce_score(v)
        return 5 if coerced is None else coerced


class HistorySummary(FrozenCamelModel):
    total_assessments: int
    average_score: float
    trend: Trend = "stable"
    key_insights: Tuple[str, ...] = ()
    risk_factors: Tuple[str, ...] = ()


class TherapistRecord(CamelModel):
    id: str = ""
    name: str
    city: str = ""
    specialty: str = ""
    insurance_accepted: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""

    @field_validator("id", "city", "specialty", "insurance_accepted", "phone", "email", "address", mode="before")
    @classmethod
    def blank_if_missing(cls, v):
        return "" if v is None else str(v).strip()
