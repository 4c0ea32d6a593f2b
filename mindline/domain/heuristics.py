"""Local scoring used when no remote completion is available."""
from typing import List

from .models import AssessmentIndicators, AssessmentInput, AssessmentResult, SentimentResult


POSITIVE_WORDS = ["good", "great", "happy", "calm", "peaceful", "hopeful", "joy"]
NEGATIVE_WORDS = ["sad", "depressed", "anxious", "worried", "overwhelmed", "angry", "hopeless"]

FOLLOW_UPS = {
    "negative": (
        "Would you like to share what feels most difficult now?",
        "What has helped you even a little in similar moments?",
        "Is there someone you would like to reach out to today?",
    ),
    "positive": (
        "What contributed most to feeling this way today?",
        "How can you carry this into tomorrow?",
    ),
    "neutral": (
        "What feeling stands out to you right now?",
        "What small step could improve your day?",
    ),
}

POSITIVE_THEMES = {"Peaceful and calm", "Happy and joyful", "Hopeful and optimistic"}
NEGATIVE_THEMES = {"Chaotic and overwhelming", "Anxious and worried", "Sad and melancholic", "Angry and frustrated"}

DEFAULT_SCALE_VALUE = 5


def heuristic_sentiment(text: str) -> SentimentResult:
    t = (text or "").lower()
    score = 0
    indicators: List[str] = []
    for word in POSITIVE_WORDS:
        if word in t:
            score += 1
            indicators.append(word)
    for word in NEGATIVE_WORDS:
        if word in t:
            score -= 1
            indicators.append(word)

    if score > 0:
        sentiment = "positive"
    elif score < 0:
        sentiment = "negative"
    else:
        sentiment = "neutral"

    return SentimentResult(
        sentiment=sentiment,
        confidence=min(abs(score) / 5 + 0.3, 0.9),
        emotional_indicators=tuple(dict.fromkeys(indicators)),
        suggested_follow_ups=FOLLOW_UPS[sentiment],
    )


def emotional_score(theme: str) -> int:
    if theme in POSITIVE_THEMES:
        return 8
    if theme in NEGATIVE_THEMES:
        return 3
    return 6


def heuristic_assessment(data: AssessmentInput) -> AssessmentResult:
    emotional_wellbeing = emotional_score(data.emotional_theme)
    # passed through unscaled; the UI collects these on a 1-5 scale
    energy_level = data.energy_level if data.energy_level is not None else DEFAULT_SCALE_VALUE
    social_connection = data.social_connection if data.social_connection is not None else DEFAULT_SCALE_VALUE

    overall_score = round((emotional_wellbeing + energy_level + social_connection) / 3, 1)

    summary: List[str] = []
    if energy_level < 5:
        summary.append("Energy appears low; consider sleep and gentle activity.")
    if social_connection < 5:
        summary.append("Social connection is limited; small reaches can help.")
    if emotional_wellbeing <= 4:
        summary.append("Emotional tone leans negative; grounding may help.")
    if not summary:
        summary.append("Patterns look balanced overall.")

    return AssessmentResult(
        overall_score=overall_score,
        indicators=AssessmentIndicators(
            emotional_wellbeing=emotional_wellbeing,
            energy_level=energy_level,
            social_connection=social_connection,
        ),
        summary=tuple(summary),
    )


def heuristic_reply(text: str) -> str:
    t = (text or "").lower()
    if "anxious" in t or "overwhelmed" in t:
        return (
            "Thank you for sharing this. It sounds heavy, so try a few slow breaths and a short break. "
            "You're not alone, and reaching out to someone you trust can help."
        )
    if "sad" in t or "depressed" in t:
        return (
            "I'm sorry you're feeling this way. A small, gentle step like a brief walk or texting a friend can help. "
            "If it feels intense, consider contacting a professional or a crisis line."
        )
    return (
        "Thanks for sharing. Noticing what helps, even small things, can make a difference. "
        "What's one simple action that could support you today?"
    )
