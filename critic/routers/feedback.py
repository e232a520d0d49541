from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from loguru import logger

from critic.engine.classifier import extract_keywords, select_categories
from critic.engine.image import coerce_image_metadata, probe_image_base64
from critic.engine.next_steps import generate_next_test_steps
from critic.engine.pipeline import generate_feedback
from critic.engine.selector import compute_seed
from critic.export import export_filename, format_feedback_as_text
from critic.models.feedback import ImageMetadata
from critic.models.request import ExportRequest, FeedbackRequest
from critic.models.response import FeedbackResponse, PersonaSummary
from critic.personas.definitions import get_persona, list_personas

router = APIRouter()


@router.get("/api/personas")
async def get_personas() -> list[PersonaSummary]:
    """Return the available personas and the categories each one prioritizes."""
    return [PersonaSummary.model_validate(p) for p in list_personas()]


def _validate_persona(name: str) -> None:
    """Raise HTTPException if the persona is unknown."""
    if get_persona(name) is None:
        logger.warning("Unknown persona requested: {name}", name=name)
        raise HTTPException(status_code=400, detail=f"Unknown persona: {name}")


def _validate_description(description: str) -> None:
    if not description.strip():
        raise HTTPException(status_code=400, detail="Please enter a wireframe description first.")


def _resolve_image(request: FeedbackRequest) -> ImageMetadata | None:
    """Probe the uploaded image, or fall back to explicit dimensions.

    An upload that can't be decoded is ignored rather than rejected, so the
    critique still runs on the description alone.
    """
    if request.image:
        try:
            return probe_image_base64(request.image)
        except (ValueError, OSError) as e:
            logger.warning("Could not read uploaded image, continuing without it: {error}", error=e)
    if request.dimensions:
        return coerce_image_metadata(request.dimensions)
    return None


@router.post("/api/feedback", response_model=FeedbackResponse)
async def create_feedback(request: FeedbackRequest) -> FeedbackResponse:
    logger.info(
        "Feedback request: persona={persona}, {chars} chars, image={has_image}",
        persona=request.persona,
        chars=len(request.description),
        has_image=bool(request.image or request.dimensions),
    )
    _validate_description(request.description)
    _validate_persona(request.persona)
    image = _resolve_image(request)

    keywords = extract_keywords(request.description)
    feedback = generate_feedback(request.description, image, request.persona)

    return FeedbackResponse(
        persona=request.persona,
        seed=compute_seed(request.description, image, request.persona),
        keywords=keywords,
        categories=select_categories(keywords, request.persona),
        image=image,
        feedback=feedback,
        next_steps=generate_next_test_steps(feedback, request.persona),
    )


@router.post("/api/feedback/export", response_class=PlainTextResponse)
async def export_feedback(request: ExportRequest) -> PlainTextResponse:
    _validate_persona(request.persona)
    text = format_feedback_as_text(request.feedback, request.description, request.persona)
    filename = export_filename()
    logger.debug("Exporting {count} feedback items as {filename}", count=len(request.feedback), filename=filename)
    return PlainTextResponse(text, headers={"Content-Disposition": f'attachment; filename="{filename}"'})
