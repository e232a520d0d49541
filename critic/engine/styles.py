import re
from collections.abc import Sequence

from critic.models.feedback import FeedbackPhrase, PhraseStyle
from critic.personas.definitions import resolve_persona

# Business and metrics vocabulary.
STAKEHOLDER_PATTERN = re.compile(
    r"conversion|retention|metrics|\broi\b|funnel|completion rate|abandonment|bounce|drop[- ]off"
    r"|industry avg|viewport benchmarks|exit rate|value props|\d+%\s*(?:lift|fewer|per)\b",
    re.IGNORECASE,
)

# Formal accessibility-standard vocabulary (WCAG success criteria and their terms).
ACCESSIBILITY_PATTERN = re.compile(
    r"wcag|\bsc\s*[1-4]\.|4\.5:1|focus order|focus visible|target size|reflow"
    r"|labels or instructions|use of color|info and relationships",
    re.IGNORECASE,
)


def _searchable(phrase: FeedbackPhrase) -> str:
    return f"{phrase.text} {phrase.suggestion or ''}"


def is_stakeholder_style(phrase: FeedbackPhrase) -> bool:
    return STAKEHOLDER_PATTERN.search(_searchable(phrase)) is not None


def is_accessibility_style(phrase: FeedbackPhrase) -> bool:
    return ACCESSIBILITY_PATTERN.search(_searchable(phrase)) is not None


def classify_style(phrase: FeedbackPhrase) -> PhraseStyle:
    """Classify a phrase by its wording. Metrics vocabulary wins over WCAG vocabulary."""
    if is_stakeholder_style(phrase):
        return "stakeholder"
    if is_accessibility_style(phrase):
        return "accessibility"
    return "generic"


def filter_by_style(pool: Sequence[FeedbackPhrase], persona: str) -> list[FeedbackPhrase]:
    """Restrict a category-filtered pool to the phrase style the persona reads.

    Falls back to generic phrases when nothing in the pool has the persona's
    style, and to the whole pool when it has no generic phrases either.
    """
    style = resolve_persona(persona).style
    matching = [p for p in pool if classify_style(p) == style]
    if matching:
        return matching
    generic = [p for p in pool if classify_style(p) == "generic"]
    if generic:
        return generic
    return list(pool)
