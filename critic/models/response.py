from pydantic import BaseModel

from critic.models.feedback import Category, FeedbackItem, ImageMetadata, PhraseStyle


class PersonaSummary(BaseModel):
    name: str
    style: PhraseStyle
    preferred_categories: list[Category]


class FeedbackResponse(BaseModel):
    persona: str
    seed: int
    keywords: list[str]
    categories: list[Category]
    image: ImageMetadata | None = None
    feedback: list[FeedbackItem]
    next_steps: list[str]
