import logging
from collections.abc import Sequence

from critic.engine.phrases import PHRASES
from critic.engine.styles import filter_by_style
from critic.models.feedback import FeedbackItem, FeedbackPhrase, ImageMetadata

logger = logging.getLogger(__name__)

MIN_FEEDBACK = 6
MAX_FEEDBACK = 8
# Size of the table-head fallback when no phrase matches the working categories.
TABLE_FALLBACK_SIZE = 4

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193


def fnv1a(value: str) -> int:
    """32-bit FNV-1a over the UTF-8 bytes of ``value``. Reproducible, not cryptographic."""
    h = _FNV_OFFSET
    for byte in value.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & 0xFFFFFFFF
    return h


def _fmix32(h: int) -> int:
    """Murmur3 finalizer; spreads low-byte differences across all 32 bits."""
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & 0xFFFFFFFF
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & 0xFFFFFFFF
    h ^= h >> 16
    return h


def order_key(value: str) -> int:
    """Sort key for seeded ordering: FNV-1a followed by an avalanche step."""
    return _fmix32(fnv1a(value))


def normalize_description(description: object) -> str:
    if not isinstance(description, str):
        return ""
    return " ".join(description.split()).lower()


def compute_seed(description: object, image: ImageMetadata | None, persona: str) -> int:
    """Derive the generation seed from the normalized inputs."""
    dimension_key = image.dimension_key if image is not None else ""
    persona_key = persona if isinstance(persona, str) else ""
    return fnv1a(f"{normalize_description(description)}|{dimension_key}|{persona_key}")


def seeded_order(phrases: Sequence[FeedbackPhrase], seed: int, salt: str = "") -> list[FeedbackPhrase]:
    """Order phrases by order_key(text + seed + salt); equal keys keep their original order."""
    return sorted(phrases, key=lambda p: order_key(f"{p.text}{seed}{salt}"))


def target_count(seed: int, available: int) -> int:
    target = min(max(MIN_FEEDBACK + seed % 3, MIN_FEEDBACK), MAX_FEEDBACK)
    return min(target, available)


def select_phrases(
    categories: Sequence[str],
    persona: str,
    seed: int,
    phrases: Sequence[FeedbackPhrase] = PHRASES,
) -> list[FeedbackItem]:
    """Pick 6-8 persona-appropriate phrases from the working categories in seeded order.

    Returns fewer when the filtered pool is smaller; the pipeline tops the list up.
    """
    pool = filter_by_style([p for p in phrases if p.category in categories], persona)

    if not pool:
        logger.warning("No phrases for categories %s, using the first table entries", list(categories))
        head = phrases[: min(TABLE_FALLBACK_SIZE, len(phrases))]
        return [phrase.with_id(f"feedback-{seed}-fallback-{index}") for index, phrase in enumerate(head)]

    selected = seeded_order(pool, seed)[: target_count(seed, len(pool))]
    logger.debug("Selected %d of %d phrases for %s (seed=%d)", len(selected), len(pool), list(categories), seed)
    return [phrase.with_id(f"feedback-{seed}-{index}") for index, phrase in enumerate(selected)]
