import base64
import binascii
import io
import logging
from collections.abc import Mapping, Sequence

from PIL import Image
from pydantic import ValidationError

from critic.engine.phrases import PHRASES
from critic.engine.styles import filter_by_style
from critic.models.feedback import (
    LARGE_LAYOUT_WIDTH,
    MOBILE_BREAKPOINT,
    FeedbackItem,
    FeedbackPhrase,
    ImageMetadata,
)

logger = logging.getLogger(__name__)

RESPONSIVE_LAYOUT_PHRASE = FeedbackPhrase(
    text="Consider how this large layout adapts to smaller screens and mobile devices.",
    category="mobile",
    type="issue",
    suggestion="Ensure responsive breakpoints are implemented and test the layout at various screen sizes.",
)


def probe_image(data: bytes) -> ImageMetadata:
    """Read pixel dimensions from encoded image bytes.

    Raises OSError if Pillow can't identify it, and ValueError if the header
    claims more pixels than Pillow is willing to open.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
    except Image.DecompressionBombError as e:
        raise ValueError(f"Image is too large to open: {e}") from e
    logger.debug("Probed image: %dx%d", width, height)
    return ImageMetadata(width=width, height=height)


def probe_image_base64(data: str) -> ImageMetadata:
    """Decode a base64 upload (optionally a ``data:`` URL) and probe it."""
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    try:
        raw = base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Image is not valid base64: {e}") from e
    return probe_image(raw)


def coerce_image_metadata(value: object) -> ImageMetadata | None:
    """Accept ImageMetadata, a mapping or an object with width/height; None when absent or malformed."""
    if value is None or isinstance(value, ImageMetadata):
        return value
    try:
        if isinstance(value, Mapping):
            return ImageMetadata.model_validate(value)
        return ImageMetadata.model_validate(value, from_attributes=True)
    except ValidationError as e:
        logger.debug("Ignoring malformed image metadata: %s", e.errors(include_url=False))
        return None


def image_feedback(
    image: ImageMetadata,
    persona: str,
    seed: int,
    phrases: Sequence[FeedbackPhrase] = PHRASES,
) -> list[FeedbackItem]:
    """Supplementary feedback driven by the wireframe's pixel dimensions (0-2 items)."""
    items: list[FeedbackItem] = []

    if image.width / image.height < 1 or image.width < MOBILE_BREAKPOINT:
        pool = filter_by_style([p for p in phrases if p.category == "mobile"], persona)
        if pool:
            items.append(pool[seed % len(pool)].with_id(f"feedback-image-mobile-{seed}"))

    if image.width > LARGE_LAYOUT_WIDTH:
        items.append(RESPONSIVE_LAYOUT_PHRASE.with_id(f"feedback-image-responsive-{seed}"))

    logger.debug("Image %s produced %d supplementary items", image.dimension_key, len(items))
    return items
