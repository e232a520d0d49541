from collections.abc import Sequence

from critic.models.feedback import FeedbackItem
from critic.personas.definitions import resolve_persona

CATEGORY_LABELS = {
    "form": "form and input design",
    "navigation": "navigation and wayfinding",
    "usability": "overall usability and flow",
    "hierarchy": "visual hierarchy and layout",
    "accessibility": "accessibility and inclusive design",
    "mobile": "mobile and responsive behavior",
}

RUN_SHORT_TEST = "Run a short usability test with 3–5 participants."
CAPTURE_HESITATION = "Capture where users hesitate or get stuck."
MOBILE_HINT = "Test on mobile first, then desktop."
FORM_HINT = "Test form flows on both mobile and desktop."

MIN_STEPS = 3
MAX_STEPS = 5


def generate_next_test_steps(items: Sequence[FeedbackItem], persona: str) -> list[str]:
    """Suggest 3-5 follow-ups for testing with real users, based on where the issues cluster."""
    profile = resolve_persona(persona)
    if not items:
        return [RUN_SHORT_TEST, profile.test_target, profile.test_question]

    issue_counts: dict[str, int] = {}
    for item in items:
        issue_counts.setdefault(item.category, 0)
        if item.type == "issue":
            issue_counts[item.category] += 1
    # sorted() is stable, so ties keep first-seen category order
    ranked = sorted(
        ((category, count) for category, count in issue_counts.items() if count > 0),
        key=lambda pair: pair[1],
        reverse=True,
    )

    steps: list[str] = []
    if ranked:
        category, count = ranked[0]
        label = CATEGORY_LABELS.get(category, category)
        steps.append(f"Prioritize testing {label} ({count} issue{'s' if count > 1 else ''} in feedback).")
    if len(ranked) > 1:
        steps.append(f"Also validate {CATEGORY_LABELS.get(ranked[1][0], ranked[1][0])}.")

    steps.append(profile.test_question)
    steps.append(profile.test_target)

    present = {item.category for item in items}
    if "mobile" in present:
        steps.append(MOBILE_HINT)
    elif "form" in present:
        steps.append(FORM_HINT)

    steps = list(dict.fromkeys(steps))
    if len(steps) < MIN_STEPS:
        steps.extend(f for f in (RUN_SHORT_TEST, CAPTURE_HESITATION) if f not in steps)
    return steps[:MAX_STEPS]
