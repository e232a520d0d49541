import json
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from critic.config import settings
from critic.models.feedback import Category, PhraseStyle

DEFAULT_PERSONA = "General Designer"


class Persona(BaseModel):
    name: str
    style: PhraseStyle
    preferred_categories: list[Category]
    always_include: list[Category] = []
    test_target: str
    test_question: str


def load_personas(directory: str | Path) -> dict[str, Persona]:
    """Load all persona JSON files from a directory.

    Each JSON file must have: name, style, preferred_categories, test_target, test_question.
    Returns dict keyed by persona name.
    """
    dir_path = Path(directory)
    if not dir_path.is_dir():
        raise FileNotFoundError(f"Personas directory not found: {dir_path.resolve()}")

    personas: dict[str, Persona] = {}
    for json_file in sorted(dir_path.glob("*.json")):
        data = json.loads(json_file.read_text(encoding="utf-8"))
        persona = Persona.model_validate(data)
        personas[persona.name] = persona
        logger.debug("Loaded persona: {name} ({file})", name=persona.name, file=json_file.name)

    if not personas:
        raise ValueError(f"No persona JSON files found in: {dir_path.resolve()}")

    return personas


# Load personas at import time from configured directory
PERSONAS = load_personas(settings.personas_dir)
logger.info("Loaded {count} personas total", count=len(PERSONAS))


def get_persona(name: str) -> Persona | None:
    return PERSONAS.get(name)


def resolve_persona(name: object) -> Persona:
    """Return the named persona, falling back to the General Designer profile."""
    persona = PERSONAS.get(name) if isinstance(name, str) else None
    if persona is None:
        logger.debug("Unknown persona {name!r}, using {default}", name=name, default=DEFAULT_PERSONA)
        return PERSONAS[DEFAULT_PERSONA]
    return persona


def list_personas() -> list[dict]:
    """Return name, style and preferred categories for all loaded personas (for API response)."""
    return [
        {"name": p.name, "style": p.style, "preferred_categories": p.preferred_categories}
        for p in PERSONAS.values()
    ]
