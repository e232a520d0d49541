import pytest

from critic.engine.phrases import PHRASES
from critic.engine.styles import (
    classify_style,
    filter_by_style,
    is_accessibility_style,
    is_stakeholder_style,
)
from critic.models.feedback import FeedbackPhrase


def _phrase(text: str, suggestion: str | None = None, category: str = "usability") -> FeedbackPhrase:
    return FeedbackPhrase(text=text, category=category, type="issue", suggestion=suggestion)


GENERIC = _phrase("Navigation placement is intuitive and follows common web conventions.")
STAKEHOLDER = _phrase("Long forms are a leading cause of abandonment.")
ACCESSIBILITY = _phrase("Text contrast is low.", "Meet the WCAG AA ratio of 4.5:1 for body text.")


@pytest.mark.parametrize(
    ("phrase", "expected"),
    [
        (GENERIC, "generic"),
        (STAKEHOLDER, "stakeholder"),
        (ACCESSIBILITY, "accessibility"),
        (_phrase("Clear ROI story for the upgrade page."), "stakeholder"),
        (_phrase("Heroic onboarding copy."), "generic"),
        (_phrase("Simplified checkout.", "Expect a 12% lift in orders."), "stakeholder"),
        (_phrase("Tiny buttons.", "Check SC 2.5.8 (Target Size)."), "accessibility"),
        (_phrase("Cards don't reflow on narrow screens."), "accessibility"),
    ],
)
def test_classify_style(phrase, expected):
    assert classify_style(phrase) == expected


def test_suggestion_text_is_considered():
    assert is_accessibility_style(_phrase("Status relies on hue.", "Review use of color."))
    assert not is_accessibility_style(_phrase("Status relies on hue."))


def test_known_table_phrases():
    by_text = {p.text: p for p in PHRASES}
    contrast = by_text[
        "Text contrast may be insufficient for users with low vision; dark gray on light gray is problematic."
    ]
    abandonment = by_text["The form length is reasonable; breaking multi-step forms into stages would reduce abandonment."]
    touch_targets = by_text[
        "The layout adapts well to smaller screens with appropriate touch target sizes (minimum 44x44px)."
    ]
    assert classify_style(contrast) == "accessibility"
    assert classify_style(abandonment) == "stakeholder"
    assert classify_style(touch_targets) == "accessibility"


def test_no_table_phrase_matches_both_styles():
    both = [p.text for p in PHRASES if is_stakeholder_style(p) and is_accessibility_style(p)]
    assert both == []


def test_every_category_has_every_style():
    for category in ("usability", "hierarchy", "accessibility", "navigation", "form", "mobile"):
        styles = {classify_style(p) for p in PHRASES if p.category == category}
        assert styles == {"generic", "stakeholder", "accessibility"}, category


def test_table_texts_are_unique():
    keys = [p.text.strip().lower() for p in PHRASES]
    assert len(keys) == len(set(keys))


def test_filter_restricts_to_persona_style():
    pool = [GENERIC, STAKEHOLDER, ACCESSIBILITY]
    assert filter_by_style(pool, "Stakeholder") == [STAKEHOLDER]
    assert filter_by_style(pool, "Accessibility Expert") == [ACCESSIBILITY]
    assert filter_by_style(pool, "End-User") == [GENERIC]
    assert filter_by_style(pool, "General Designer") == [GENERIC]


def test_filter_falls_back_to_generic():
    assert filter_by_style([GENERIC, ACCESSIBILITY], "Stakeholder") == [GENERIC]


def test_filter_falls_back_to_whole_pool():
    assert filter_by_style([STAKEHOLDER, ACCESSIBILITY], "End-User") == [STAKEHOLDER, ACCESSIBILITY]


def test_filter_empty_pool():
    assert filter_by_style([], "Stakeholder") == []


def test_unknown_persona_reads_generic_phrases():
    assert filter_by_style([GENERIC, STAKEHOLDER], "Product Manager") == [GENERIC]
