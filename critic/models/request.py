from pydantic import BaseModel, Field

from critic.models.feedback import FeedbackItem


class Dimensions(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class FeedbackRequest(BaseModel):
    description: str = ""
    persona: str = "General Designer"
    image: str | None = None  # base64-encoded upload; probed for pixel dimensions only
    dimensions: Dimensions | None = None


class ExportRequest(BaseModel):
    description: str = ""
    persona: str = "General Designer"
    feedback: list[FeedbackItem] = Field(min_length=1)


class NoteRequest(BaseModel):
    note: str
