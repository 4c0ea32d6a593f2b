from typing import List, Sequence, Tuple

from .models import ConditionRecord, ConditionSummary, DetectedCondition, DetectionResult, RiskLevel


MIN_CONFIDENCE = 0.2
HIGH_CONFIDENCE = 0.7
MAX_DETECTED = 3
MAX_RECOMMENDATIONS = 3

NAME_WEIGHT = 0.5
SYMPTOM_WEIGHT = 0.1
KEYWORD_WEIGHT = 0.05

BASE_RECOMMENDATIONS = {
    "high": (
        "Consider seeking professional mental health support",
        "Reach out to a trusted friend or family member",
        "Consider contacting a mental health crisis line if needed",
    ),
    "moderate": (
        "Monitor your symptoms and consider professional consultation",
        "Practice self-care and stress management techniques",
        "Consider journaling to track your mood patterns",
    ),
    "low": (
        "Continue maintaining good mental health habits",
        "Practice regular self-care and mindfulness",
        "Stay connected with supportive people in your life",
    ),
}

# Checked in order; a condition contributes the advice of its first match only.
CONDITION_RECOMMENDATIONS = [
    ("depression", [
        "Focus on activities that bring you joy and meaning",
        "Maintain regular sleep and meal schedules",
    ]),
    ("anxiety", [
        "Practice deep breathing and relaxation techniques",
        "Consider mindfulness or meditation practices",
    ]),
    ("bipolar", [
        "Monitor your mood patterns and energy levels",
        "Maintain a consistent daily routine",
    ]),
]


def score_condition(condition: ConditionRecord, text_lower: str) -> DetectedCondition:
    confidence = 0.0
    if condition.illness.lower() in text_lower:
        confidence += NAME_WEIGHT

    matched_symptoms: List[str] = []
    for symptom in condition.symptoms:
        if symptom.lower() in text_lower and symptom not in matched_symptoms:
            confidence += SYMPTOM_WEIGHT
            matched_symptoms.append(symptom)

    for keyword in condition.keywords:
        if keyword.lower() in text_lower:
            confidence += KEYWORD_WEIGHT

    # weights are multiples of 0.05; rounding drops float drift around the threshold
    confidence = round(min(confidence, 1.0), 2)
    return DetectedCondition(
        illness=condition.illness,
        definition=condition.definition,
        confidence=confidence,
        severity=condition.severity,
        matched_symptoms=tuple(matched_symptoms),
    )


def calculate_overall_risk(detected: Sequence[DetectedCondition]) -> RiskLevel:
    if not detected:
        return "low"
    if any(c.confidence > HIGH_CONFIDENCE or c.severity == "severe" for c in detected):
        return "high"
    if len(detected) > 1:
        return "moderate"
    return "low"


def generate_recommendations(detected: Sequence[DetectedCondition], overall_risk: RiskLevel) -> Tuple[str, ...]:
    recommendations = list(BASE_RECOMMENDATIONS[overall_risk])

    for condition in detected:
        name = condition.illness.lower()
        for marker, advice in CONDITION_RECOMMENDATIONS:
            if marker in name:
                recommendations.extend(advice)
                break

    unique: List[str] = []
    for rec in recommendations:
        if rec not in unique:
            unique.append(rec)
    return tuple(unique[:MAX_RECOMMENDATIONS])


class ConditionDetector:
    """Scores free text against a loaded lexicon of conditions.

    The lexicon is held as a tuple and never modified, so one detector can be
    shared by every request.
    """

    def __init__(self, lexicon: Sequence[ConditionRecord] = ()):
        self._lexicon = tuple(lexicon)

    @property
    def conditions(self) -> List[ConditionSummary]:
        return [
            ConditionSummary(
                illness=c.illness,
                definition=c.definition,
                severity=c.severity,
                symptoms=c.symptoms,
            )
            for c in self._lexicon
        ]

    def __len__(self) -> int:
        return len(self._lexicon)

    def analyze_text(self, text: str) -> DetectionResult:
        text_lower = (text or "").lower()

        retained = []
        for condition in self._lexicon:
            scored = score_condition(condition, text_lower)
            if scored.confidence >= MIN_CONFIDENCE:
                retained.append(scored)

        # stable sort keeps lexicon order between equal confidences
        retained.sort(key=lambda c: c.confidence, reverse=True)

        overall_risk = calculate_overall_risk(retained)
        return DetectionResult(
            detected_conditions=tuple(retained[:MAX_DETECTED]),
            overall_risk=overall_risk,
            recommendations=generate_recommendations(retained, overall_risk),
        )
