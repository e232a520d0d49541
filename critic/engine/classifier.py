import re

from critic.models.feedback import Category
from critic.personas.definitions import resolve_persona

# Checked in this order; the order of the emitted keywords follows it.
KEYWORD_PATTERNS: dict[Category, re.Pattern[str]] = {
    "navigation": re.compile(
        r"\b(nav|navigation|menu|header|footer|sidebar|breadcrumb|link|links)\b", re.IGNORECASE
    ),
    "form": re.compile(
        r"\b(form|input|field|fields|button|buttons|submit|textbox|textarea|checkbox|radio|dropdown|select)\b",
        re.IGNORECASE,
    ),
    "hierarchy": re.compile(
        r"\b(layout|grid|column|columns|row|card|cards|section|group|hierarchy|heading|headings|title|titles)\b",
        re.IGNORECASE,
    ),
    "mobile": re.compile(
        r"\b(mobile|responsive|breakpoint|breakpoints|touch|tap|screen|viewport|device)\b", re.IGNORECASE
    ),
    "usability": re.compile(
        r"\b(click|interaction|action|cta|call.to.action|user|users|interface|ui|ux|experience)\b",
        re.IGNORECASE,
    ),
    "accessibility": re.compile(
        r"\b(accessibility|accessible|a11y|screen.reader|keyboard|contrast|color|blind|vision|disability)\b",
        re.IGNORECASE,
    ),
}

DEFAULT_CATEGORIES: tuple[Category, ...] = ("usability", "hierarchy")


def extract_keywords(description: object) -> list[Category]:
    """Return the topic tags whose word patterns appear in the description."""
    if not isinstance(description, str) or not description:
        return []
    return [topic for topic, pattern in KEYWORD_PATTERNS.items() if pattern.search(description)]


def select_categories(keywords: list[Category], persona: str) -> list[Category]:
    """Build the working category set: detected keywords, the defaults, then persona extras."""
    categories: list[Category] = list(dict.fromkeys([*keywords, *DEFAULT_CATEGORIES]))
    for category in resolve_persona(persona).always_include:
        if category not in categories:
            categories.append(category)
    return categories
