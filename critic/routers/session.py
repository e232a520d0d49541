from fastapi import APIRouter, HTTPException
from loguru import logger

from critic.config import settings
from critic.models.request import NoteRequest
from critic.session import SESSION_VERSION, SessionSnapshot, SessionStore

router = APIRouter(prefix="/api/session")


def _store() -> SessionStore:
    return SessionStore(settings.session_path)


@router.get("")
async def get_session() -> SessionSnapshot:
    snapshot = _store().load()
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No saved session")
    return snapshot


@router.put("")
async def save_session(snapshot: SessionSnapshot) -> SessionSnapshot:
    if not _store().save(snapshot):
        raise HTTPException(status_code=500, detail="Failed to save session")
    return snapshot.model_copy(update={"version": SESSION_VERSION})


@router.delete("", status_code=204)
async def clear_session() -> None:
    if not _store().clear():
        raise HTTPException(status_code=500, detail="Failed to clear session")
    logger.info("Session cleared")


@router.put("/notes/{feedback_id}")
async def set_note(feedback_id: str, request: NoteRequest) -> SessionSnapshot:
    """Attach a free-text note to one feedback card in the saved session."""
    store = _store()
    snapshot = store.load()
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No saved session")
    if feedback_id not in {item.id for item in snapshot.feedback}:
        raise HTTPException(status_code=404, detail=f"Unknown feedback id: {feedback_id}")

    updated = snapshot.model_copy(update={"notes": {**snapshot.notes, feedback_id: request.note}})
    if not store.save(updated):
        raise HTTPException(status_code=500, detail="Failed to save session")
    return updated
