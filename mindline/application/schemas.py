from typing import List

from pydantic import field_validator

from mindline.domain.models import (
    AssessmentRecord,
    CamelModel,
    ConditionSummary,
    DetectionResult,
    HistorySummary,
    SentimentResult,
)


MIN_ANALYSIS_TEXT_LENGTH = 10

DISCLAIMER = (
    "This analysis is for informational purposes only and should not replace "
    "professional mental health evaluation."
)


class ConditionAnalysisRequest(CamelModel):
    text: str

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str):
        v = v.strip()
        if len(v) < MIN_ANALYSIS_TEXT_LENGTH:
            raise ValueError(
                f"Text must be at least {MIN_ANALYSIS_TEXT_LENGTH} characters long for meaningful analysis"
            )
        return v


class ConditionAnalysisResponse(CamelModel):
    analysis: DetectionResult
    disclaimer: str = DISCLAIMER


class ConditionListResponse(CamelModel):
    conditions: List[ConditionSummary] = []


class CheckinRequest(CamelModel):
    question: str
    response: str

    @field_validator("question", "response")
    @classmethod
    def validate_required(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("Question and response are required")
        return v


class CheckinResult(CamelModel):
    question: str
    response: str
    ai_analysis: SentimentResult
    ai_reply: str


class HistoryReport(CamelModel):
    assessments: List[AssessmentRecord] = []
    summary: HistorySummary
