from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from critic.models.feedback import FeedbackItem, ImageMetadata
from critic.personas.definitions import DEFAULT_PERSONA

# Bump when the snapshot layout changes; older snapshots are discarded on load.
SESSION_VERSION = 1


class SessionSnapshot(BaseModel):
    version: int = SESSION_VERSION
    description: str = ""
    image: ImageMetadata | None = None
    persona: str = DEFAULT_PERSONA
    feedback: list[FeedbackItem] = []
    notes: dict[str, str] = Field(default_factory=dict)  # keyed by feedback id
    last_generated_description: str = ""


class SessionStore:
    """Persist a single session snapshot as a JSON blob on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, snapshot: SessionSnapshot) -> bool:
        snapshot = snapshot.model_copy(update={"version": SESSION_VERSION})
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(snapshot.model_dump_json(), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save session to {path}: {error}", path=self.path, error=e)
            return False
        logger.debug("Saved session with {count} feedback items", count=len(snapshot.feedback))
        return True

    def load(self) -> SessionSnapshot | None:
        """Return the stored snapshot, or None if absent, outdated or unreadable (which clears it)."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.error("Failed to read session from {path}: {error}", path=self.path, error=e)
            return None

        try:
            snapshot = SessionSnapshot.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Invalid session data, clearing session: {count} errors", count=e.error_count())
            self.clear()
            return None

        if snapshot.version != SESSION_VERSION:
            logger.warning(
                "Session version mismatch. Expected {expected}, got {actual}. Clearing session.",
                expected=SESSION_VERSION,
                actual=snapshot.version,
            )
            self.clear()
            return None

        return snapshot

    def clear(self) -> bool:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("Failed to clear session at {path}: {error}", path=self.path, error=e)
            return False
        return True
