import logging
from collections.abc import Sequence

from critic.engine.classifier import extract_keywords, select_categories
from critic.engine.image import coerce_image_metadata, image_feedback
from critic.engine.phrases import PHRASES
from critic.engine.prioritizer import prioritize
from critic.engine.selector import (
    MAX_FEEDBACK,
    MIN_FEEDBACK,
    compute_seed,
    seeded_order,
    select_phrases,
)
from critic.engine.styles import filter_by_style
from critic.models.feedback import FeedbackItem, FeedbackPhrase
from critic.personas.definitions import DEFAULT_PERSONA

logger = logging.getLogger(__name__)


def text_key(phrase: FeedbackPhrase) -> str:
    return phrase.text.strip().lower()


def dedupe(items: Sequence[FeedbackItem]) -> list[FeedbackItem]:
    """Drop items whose normalized text was already seen; the first occurrence wins."""
    seen: set[str] = set()
    unique = []
    for item in items:
        key = text_key(item)
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


def _top_up(
    feedback: list[FeedbackItem],
    persona: str,
    seed: int,
    phrases: Sequence[FeedbackPhrase],
) -> list[FeedbackItem]:
    used = {text_key(item) for item in feedback}
    pool = filter_by_style([p for p in phrases if text_key(p) not in used], persona)

    extra: list[FeedbackItem] = []
    for phrase in seeded_order(pool, seed, salt="fallback"):
        if len(feedback) + len(extra) >= MIN_FEEDBACK:
            break
        if text_key(phrase) in used:
            continue
        used.add(text_key(phrase))
        extra.append(phrase.with_id(f"feedback-fallback-{seed}-{len(extra)}"))
    return extra


def generate_feedback(
    description: object = "",
    image: object = None,
    persona: str = DEFAULT_PERSONA,
    *,
    phrases: Sequence[FeedbackPhrase] = PHRASES,
) -> list[FeedbackItem]:
    """Generate 6-8 persona-prioritized feedback items for a wireframe.

    Pure and deterministic: identical (description, image dimensions, persona)
    always produce the same items in the same order with the same ids. Never
    raises for bad input; malformed image metadata is ignored and unknown
    personas use the General Designer profile.
    """
    metadata = coerce_image_metadata(image)
    seed = compute_seed(description, metadata, persona)
    categories = select_categories(extract_keywords(description), persona)

    feedback = select_phrases(categories, persona, seed, phrases)
    if metadata is not None:
        feedback += image_feedback(metadata, persona, seed, phrases)

    feedback = dedupe(feedback)
    feedback = prioritize(feedback, persona)[:MAX_FEEDBACK]

    if len(feedback) < MIN_FEEDBACK and len(phrases) >= MIN_FEEDBACK:
        feedback += _top_up(feedback, persona, seed, phrases)

    logger.info(
        "Generated %d feedback items for persona %r (seed=%d, categories=%s)",
        len(feedback),
        persona,
        seed,
        categories,
    )
    return feedback
