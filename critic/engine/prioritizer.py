from collections.abc import Sequence

from critic.models.feedback import FeedbackItem
from critic.personas.definitions import resolve_persona


def prioritize(items: Sequence[FeedbackItem], persona: str) -> list[FeedbackItem]:
    """Stable-sort: persona-preferred categories first, then issues before positives."""
    preferred = set(resolve_persona(persona).preferred_categories)
    return sorted(items, key=lambda item: (item.category not in preferred, item.type != "issue"))
