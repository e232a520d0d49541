import base64

import pytest

from critic.engine.image import (
    RESPONSIVE_LAYOUT_PHRASE,
    coerce_image_metadata,
    image_feedback,
    probe_image,
    probe_image_base64,
)
from critic.engine.phrases import PHRASES
from critic.engine.styles import classify_style, filter_by_style
from critic.models.feedback import ImageMetadata
from critic.models.request import Dimensions

from .conftest import TINY_PNG, oversized_png_base64, png_base64


def test_metadata_derived_fields_for_phone():
    meta = ImageMetadata(width=375, height=667)
    assert meta.aspect_ratio == 0.56
    assert meta.orientation == "portrait"
    assert meta.is_mobile_friendly
    assert not meta.has_large_dimensions
    assert meta.dimension_key == "375-667"


def test_metadata_derived_fields_for_large_and_square():
    assert ImageMetadata(width=2400, height=1200).has_large_dimensions
    assert ImageMetadata(width=2400, height=1200).orientation == "landscape"
    assert ImageMetadata(width=1000, height=1000).orientation == "square"
    assert not ImageMetadata(width=1000, height=1000).is_mobile_friendly


def test_mobile_trigger_picks_by_seed():
    seed = 1001
    items = image_feedback(ImageMetadata(width=375, height=667), "End-User", seed)
    pool = filter_by_style([p for p in PHRASES if p.category == "mobile"], "End-User")
    assert len(items) == 1
    assert items[0].id == f"feedback-image-mobile-{seed}"
    assert items[0].text == pool[seed % len(pool)].text


def test_mobile_trigger_on_narrow_landscape():
    items = image_feedback(ImageMetadata(width=700, height=400), "General Designer", 5)
    assert [item.id for item in items] == ["feedback-image-mobile-5"]


def test_mobile_pick_follows_persona_style():
    for seed in range(10):
        items = image_feedback(ImageMetadata(width=375, height=667), "Accessibility Expert", seed)
        assert classify_style(items[0]) == "accessibility"
        items = image_feedback(ImageMetadata(width=375, height=667), "Stakeholder", seed)
        assert classify_style(items[0]) == "stakeholder"


def test_large_layout_trigger():
    items = image_feedback(ImageMetadata(width=2400, height=1200), "Stakeholder", 77)
    assert len(items) == 1
    assert items[0].id == "feedback-image-responsive-77"
    assert items[0].text == RESPONSIVE_LAYOUT_PHRASE.text
    assert items[0].category == "mobile"
    assert items[0].type == "issue"


def test_both_triggers_fire_for_tall_large_image():
    items = image_feedback(ImageMetadata(width=2000, height=3000), "End-User", 9)
    assert [item.id for item in items] == ["feedback-image-mobile-9", "feedback-image-responsive-9"]


def test_desktop_image_adds_nothing():
    assert image_feedback(ImageMetadata(width=1440, height=900), "End-User", 9) == []


def test_mobile_trigger_without_mobile_phrases():
    table = PHRASES[:3]
    assert all(p.category != "mobile" for p in table)
    assert image_feedback(ImageMetadata(width=375, height=667), "End-User", 1, phrases=table) == []


def test_coerce_accepts_mapping_and_objects():
    assert coerce_image_metadata({"width": 375, "height": 667}) == ImageMetadata(width=375, height=667)
    assert coerce_image_metadata(Dimensions(width=10, height=20)) == ImageMetadata(width=10, height=20)
    meta = ImageMetadata(width=1, height=1)
    assert coerce_image_metadata(meta) is meta


@pytest.mark.parametrize(
    "value",
    [None, {"width": 0, "height": 100}, {"width": "wide", "height": 100}, {"height": 100}, "375x667", 12],
)
def test_coerce_ignores_absent_or_malformed(value):
    assert coerce_image_metadata(value) is None


def test_probe_image_reads_dimensions():
    meta = probe_image(base64.b64decode(png_base64(640, 480)))
    assert (meta.width, meta.height) == (640, 480)


def test_probe_image_base64_accepts_data_url():
    assert probe_image_base64(TINY_PNG) == ImageMetadata(width=1, height=1)
    assert probe_image_base64(f"data:image/png;base64,{TINY_PNG}") == ImageMetadata(width=1, height=1)


def test_probe_rejects_invalid_base64():
    with pytest.raises(ValueError, match="not valid base64"):
        probe_image_base64("not base64!!")


def test_probe_rejects_non_image_bytes():
    with pytest.raises(OSError):
        probe_image_base64(base64.b64encode(b"hello").decode())


def test_oversized_image_header_is_rejected():
    with pytest.raises(ValueError, match="too large"):
        probe_image_base64(oversized_png_base64())
