from typing import Iterable, List, Optional, Sequence, Tuple

from .models import ConditionRecord, Severity


SYMPTOM_TERMS = [
    "sadness", "anxiety", "worry", "panic", "fear", "depression", "mania", "mood",
    "hallucinations", "delusions", "disorganized", "intrusive thoughts", "compulsions",
    "hyperactivity", "inattention", "impulsivity", "social withdrawal", "communication",
    "eating", "sleep", "substance", "trauma", "stress", "personality", "behavior",
]

# Grouped by disorder family; some terms repeat across families.
KEYWORD_FAMILIES = {
    "depression": ["depressed", "sad", "hopeless", "worthless", "empty", "crying", "tears", "loss of interest"],
    "anxiety": ["anxious", "worried", "panic", "fear", "nervous", "restless", "overwhelmed", "stress"],
    "bipolar": ["manic", "euphoric", "irritable", "racing thoughts", "impulsive", "grandiose", "elevated"],
    "ptsd": ["trauma", "flashback", "nightmare", "triggered", "hypervigilant", "avoidance", "intrusive"],
    "ocd": ["obsessive", "compulsive", "rituals", "checking", "contamination", "intrusive thoughts"],
    "adhd": ["distracted", "hyperactive", "impulsive", "inattentive", "restless", "disorganized", "focus"],
    "eating": ["binge", "purge", "restrict", "body image", "weight", "food guilt", "eating"],
    "personality": ["unstable relationships", "identity crisis", "manipulation", "emptiness", "abandonment"],
    "psychosis": ["hallucination", "delusion", "paranoid", "disorganized", "catatonic", "psychotic"],
    "sleep": ["insomnia", "hypersomnia", "nightmare", "sleep paralysis", "restless sleep", "fatigue"],
}


def _unique(terms: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for t in terms:
        if t not in seen:
            seen.add(t)
            out.append(t)
    return out


KEYWORD_TERMS = _unique(t for family in KEYWORD_FAMILIES.values() for t in family)

SEVERE_TERMS = [
    "schizophrenia", "bipolar i", "severe", "psychotic", "delusional",
    "substance use disorder", "anorexia nervosa", "borderline personality",
]

MODERATE_TERMS = [
    "major depressive", "panic disorder", "ptsd", "ocd", "bulimia",
    "adhd", "autism", "narcissistic",
]


def extract_symptoms(definition: str) -> List[str]:
    text = definition.lower()
    return [term for term in SYMPTOM_TERMS if term in text]


def extract_keywords(illness: str, definition: str) -> List[str]:
    text = f"{illness} {definition}".lower()
    return [term for term in KEYWORD_TERMS if term in text]


def assess_severity(illness: str) -> Severity:
    name = illness.lower()
    # severe before moderate: "severe major depressive disorder" is severe
    if any(term in name for term in SEVERE_TERMS):
        return "severe"
    if any(term in name for term in MODERATE_TERMS):
        return "moderate"
    return "mild"


def _clean(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip().strip('"').strip()


def build_condition(illness: Optional[str], definition: Optional[str]) -> Optional[ConditionRecord]:
    illness = _clean(illness)
    definition = _clean(definition)
    if not illness or not definition:
        return None
    return ConditionRecord(
        illness=illness,
        definition=definition,
        symptoms=tuple(extract_symptoms(definition)),
        keywords=tuple(extract_keywords(illness, definition)),
        severity=assess_severity(illness),
    )


def build_lexicon(rows: Iterable[Sequence[str]]) -> Tuple[ConditionRecord, ...]:
    """Build an immutable lexicon from (illness, definition) rows.

    Rows with fewer than two cells or a blank name/definition are skipped.
    Cells beyond the second are ignored.
    """
    records: List[ConditionRecord] = []
    for row in rows:
        if row is None or len(row) < 2:
            continue
        record = build_condition(row[0], row[1])
        if record is not None:
            records.append(record)
    return tuple(records)
