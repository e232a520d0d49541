import base64
import io
import struct
import zlib

import pytest
from PIL import Image

from critic.models.feedback import FeedbackItem
from tests import TEST_API_KEY

# Minimal valid 1x1 PNG as base64
TINY_PNG = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="

LOGIN_DESCRIPTION = "Login page with email field, password field, and submit button"
# Matches none of the keyword patterns, so only the default categories apply.
PLAIN_DESCRIPTION = "Homepage with hero banner"

PERSONAS = ["End-User", "Stakeholder", "Accessibility Expert", "General Designer"]

SAMPLE_FEEDBACK = [
    FeedbackItem(
        id="feedback-1-0",
        text="Required fields are not clearly marked, which may lead to form submission errors.",
        category="form",
        type="issue",
        suggestion="Use asterisks (*) or 'required' labels.",
    ),
    FeedbackItem(
        id="feedback-1-1",
        text="Navigation placement is intuitive and follows common web conventions.",
        category="navigation",
        type="positive",
    ),
]


def png_base64(width: int, height: int) -> str:
    """Encode a blank PNG of the given size as base64."""
    buf = io.BytesIO()
    Image.new("RGB", (width, height), "white").save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")


def oversized_png_base64(width: int = 30000, height: int = 30000) -> str:
    """A header-only PNG claiming far more pixels than Pillow will open."""

    def chunk(kind: bytes, body: bytes) -> bytes:
        return struct.pack(">I", len(body)) + kind + body + struct.pack(">I", zlib.crc32(kind + body))

    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    data = b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", header) + chunk(b"IDAT", b"") + chunk(b"IEND", b"")
    return base64.b64encode(data).decode("ascii")


@pytest.fixture(autouse=True)
def _set_api_key(monkeypatch):
    """Patch the settings object API key for all tests."""
    from critic.config import settings

    monkeypatch.setattr(settings, "api_key", TEST_API_KEY)


@pytest.fixture(autouse=True)
def session_path(tmp_path, monkeypatch):
    """Point the session store at a per-test file."""
    from critic.config import settings

    path = tmp_path / "session.json"
    monkeypatch.setattr(settings, "session_path", str(path))
    return path
