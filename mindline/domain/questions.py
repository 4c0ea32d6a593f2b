from typing import Optional


EMOTIONAL_THEMES = [
    "Peaceful and calm",
    "Happy and joyful",
    "Hopeful and optimistic",
    "Neutral",
    "Tired and drained",
    "Chaotic and overwhelming",
    "Anxious and worried",
    "Sad and melancholic",
    "Angry and frustrated",
]

# The "How are you feeling" scale question stores a theme label, not the number.
FEELING_SCALE_THEMES = {
    1: "Sad and melancholic",
    2: "Tired and drained",
    3: "Neutral",
    4: "Hopeful and optimistic",
    5: "Happy and joyful",
}


def theme_for_feeling(value: Optional[int]) -> str:
    return FEELING_SCALE_THEMES.get(value, "Neutral")


DAILY_ASSESSMENT_QUESTIONS = [
    {
        "id": "journalEntry",
        "question": "Describe your day: what happened? You may type or use voice.",
        "type": "textarea",
        "placeholder": "Share your journal entry for today...",
    },
    {
        "id": "emotionalTheme",
        "question": "How are you feeling right now?",
        "type": "scale",
        "min": 1,
        "max": 5,
        "labels": {"min": "Very sad", "max": "Very happy"},
    },
    {
        "id": "memorableMoment",
        "question": "What was the most memorable moment of your day, and why did it stand out?",
        "type": "textarea",
        "placeholder": "Describe a moment that made today unique...",
    },
    {
        "id": "energyLevel",
        "question": "How would you rate your energy level today compared to yesterday?",
        "type": "scale",
        "min": 1,
        "max": 5,
        "labels": {"min": "Much lower", "max": "Much higher"},
    },
    {
        "id": "positiveExperience",
        "question": "What made you smile today?",
        "type": "textarea",
        "placeholder": "No matter how small, what went well today?",
    },
]
