from collections.abc import Sequence
from datetime import datetime

from critic.models.feedback import FeedbackItem

REPORT_TITLE = "AI Wireframe Critic - Feedback Report"
_RULE_WIDTH = 50


def format_feedback_as_text(
    items: Sequence[FeedbackItem],
    description: str,
    persona: str,
    generated_at: datetime | None = None,
) -> str:
    """Render a plain-text feedback report suitable for copying or saving as .txt."""
    generated_at = generated_at or datetime.now()
    rule = "-" * _RULE_WIDTH

    lines = [REPORT_TITLE, "=" * _RULE_WIDTH, ""]
    if description:
        lines += ["Wireframe Description:", description, ""]
    lines += [f"Persona: {persona}", f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}", "", rule, ""]

    for index, item in enumerate(items, start=1):
        lines.append(f"{index}. [{item.category.upper()}] {item.type.upper()}")
        lines.append(item.text)
        if item.suggestion:
            lines += ["", f"Suggestion: {item.suggestion}"]
        lines += ["", rule, ""]

    return "\n".join(lines) + "\n"


def export_filename(prefix: str = "wireframe-feedback", generated_at: datetime | None = None) -> str:
    generated_at = generated_at or datetime.now()
    return f"{prefix}-{generated_at:%Y%m%d-%H%M%S}.txt"
