from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

Category = Literal["usability", "hierarchy", "accessibility", "navigation", "form", "mobile"]
Polarity = Literal["positive", "issue"]
PhraseStyle = Literal["stakeholder", "accessibility", "generic"]

# Widths below this are treated as phone-sized layouts.
MOBILE_BREAKPOINT = 768
LARGE_LAYOUT_WIDTH = 1920


class FeedbackPhrase(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    category: Category
    type: Polarity
    suggestion: str | None = None

    def with_id(self, item_id: str) -> "FeedbackItem":
        return FeedbackItem(
            text=self.text, category=self.category, type=self.type, suggestion=self.suggestion, id=item_id
        )


class FeedbackItem(FeedbackPhrase):
    id: str


class ImageMetadata(BaseModel):
    """Pixel dimensions of an uploaded wireframe plus the heuristics derived from them."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        return round(self.width / self.height, 2)

    @computed_field
    @property
    def is_mobile_friendly(self) -> bool:
        return self.width < MOBILE_BREAKPOINT or self.width / self.height < 1

    @computed_field
    @property
    def has_large_dimensions(self) -> bool:
        return self.width > LARGE_LAYOUT_WIDTH

    @computed_field
    @property
    def orientation(self) -> Literal["landscape", "portrait", "square"]:
        if self.width > self.height:
            return "landscape"
        if self.width < self.height:
            return "portrait"
        return "square"

    @property
    def dimension_key(self) -> str:
        return f"{self.width}-{self.height}"
