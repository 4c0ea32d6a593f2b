import copy
import json
import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from mindline.application.fallback import parse_json_object, with_fallback
from mindline.application.ports import CompletionError, CompletionPort
from mindline.application.schemas import (
    CheckinRequest,
    CheckinResult,
    ConditionAnalysisRequest,
    ConditionAnalysisResponse,
    ConditionListResponse,
    HistoryReport,
)
from mindline.domain.heuristics import heuristic_assessment, heuristic_reply, heuristic_sentiment
from mindline.domain.models import AssessmentInput, AssessmentRecord, AssessmentResult, SentimentResult, TherapistRecord
from mindline.domain.questions import DAILY_ASSESSMENT_QUESTIONS
from mindline.domain.reports import filter_by_time_range, summarize_history
from mindline.domain.rules import ConditionDetector
from mindline.domain.support import filter_therapists, suggest_support


logger = logging.getLogger(__name__)


SYSTEM_PROMPT = "Return strictly valid JSON. No prose."

REPLY_SYSTEM_PROMPT = (
    "You are a supportive journaling companion. You are not a therapist. "
    "Avoid medical claims and reply with the message text only."
)


def build_sentiment_prompt(text: str) -> str:
    return (
        "Analyze the user's check-in text and return JSON with keys: "
        "sentiment one of [positive, neutral, negative]; confidence number 0-1; "
        "emotionalIndicators array of strings; suggestedFollowUps array of 2-3 brief questions. "
        f"Text: {text}"
    )


def build_assessment_prompt(data: AssessmentInput) -> str:
    payload = json.dumps(data.model_dump(by_alias=True))
    return (
        "Given assessment fields, return JSON with keys: overallScore number 0-10; "
        "indicators object with emotionalWellbeing, energyLevel, socialConnection; "
        "summary array of brief insights. "
        f"Input: {payload}"
    )


def build_reply_prompt(text: str) -> str:
    return (
        "Compose a brief, empathetic, supportive 2-3 sentence reply to the user's message. "
        "Avoid medical claims; encourage self-care and seeking support when appropriate. "
        "Reply only with the message text. "
        f"Message: {text}"
    )


class WellbeingAnalysisUseCase:
    """Runs each analysis against the completion service, falling back to local heuristics."""

    def __init__(self, detector: ConditionDetector, completion: Optional[CompletionPort] = None):
        self.detector = detector
        self.completion = completion

    def _complete_json(self, prompt: str) -> dict:
        if self.completion is None:
            raise CompletionError("No completion service configured")
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]
        return parse_json_object(self.completion.complete(messages, json_mode=True))

    def _complete_text(self, prompt: str) -> str:
        if self.completion is None:
            raise CompletionError("No completion service configured")
        messages = [
            {"role": "system", "content": REPLY_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]
        reply = (self.completion.complete(messages, json_mode=False) or "").strip()
        if not reply:
            raise CompletionError("Empty reply from completion service")
        return reply

    def analyze_response(self, text: str) -> SentimentResult:
        return with_fallback(
            lambda: SentimentResult.model_validate(self._complete_json(build_sentiment_prompt(text))),
            lambda: heuristic_sentiment(text),
            label="Sentiment analysis",
        )

    def analyze_assessment(self, data: AssessmentInput) -> AssessmentResult:
        return with_fallback(
            lambda: AssessmentResult.model_validate(self._complete_json(build_assessment_prompt(data))),
            lambda: heuristic_assessment(data),
            label="Assessment analysis",
        )

    def supportive_reply(self, text: str) -> str:
        return with_fallback(
            lambda: self._complete_text(build_reply_prompt(text)),
            lambda: heuristic_reply(text),
            label="Supportive reply",
        )

    def checkin(self, request: CheckinRequest) -> CheckinResult:
        return CheckinResult(
            question=request.question,
            response=request.response,
            ai_analysis=self.analyze_response(request.response),
            ai_reply=self.supportive_reply(request.response),
        )

    def detect_conditions(self, request: ConditionAnalysisRequest) -> ConditionAnalysisResponse:
        analysis = self.detector.analyze_text(request.text)
        logger.debug(
            "Detected %d condition(s), overall risk %s",
            len(analysis.detected_conditions),
            analysis.overall_risk,
        )
        return ConditionAnalysisResponse(analysis=analysis)

    def list_conditions(self) -> ConditionListResponse:
        return ConditionListResponse(conditions=self.detector.conditions)

    def daily_questions(self) -> List[Dict]:
        return copy.deepcopy(DAILY_ASSESSMENT_QUESTIONS)

    def support_suggestion(self, result: Optional[AssessmentResult]) -> str:
        return suggest_support(result.indicators if result is not None else None)

    def find_therapists(
        self,
        therapists: Iterable[TherapistRecord],
        city: Optional[str] = None,
        insurance: Optional[str] = None,
    ) -> List[TherapistRecord]:
        return filter_therapists(therapists, city=city, insurance=insurance)

    def history_report(
        self,
        records: Sequence[AssessmentRecord],
        time_range: Optional[str] = "30d",
        now: Optional[datetime] = None,
    ) -> HistoryReport:
        """Summarize the assessments that fall inside ``time_range``.

        Records are expected newest first, as the trend compares the leading
        entries against the ones after them.
        """
        recent = filter_by_time_range(records, time_range, now=now)
        logger.debug("History report over %s: %d of %d assessment(s)", time_range, len(recent), len(records))
        return HistoryReport(assessments=recent, summary=summarize_history(recent))
