import logging as stdlib_logging

import pytest
from httpx import ASGITransport, AsyncClient
from loguru import logger

from critic.config import Settings
from critic.logging import setup_logging
from critic.main import app


def test_default_log_level(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.log_level == "INFO"


def test_log_level_override(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    s = Settings()
    assert s.log_level == "WARNING"


def test_setup_logging_configures_loguru(capsys):
    setup_logging("DEBUG")
    logger.info("test message")
    captured = capsys.readouterr()
    assert "test message" in captured.err


def test_setup_logging_intercepts_stdlib(capsys):
    setup_logging("DEBUG")
    stdlib_logging.getLogger("test.stdlib").info("stdlib forwarded")
    captured = capsys.readouterr()
    assert "stdlib forwarded" in captured.err


def test_engine_logs_reach_loguru(capsys):
    from critic.engine.pipeline import generate_feedback

    setup_logging("DEBUG")
    generate_feedback("Login page with a submit button", None, "End-User")
    captured = capsys.readouterr()
    assert "Generated" in captured.err
    assert "End-User" in captured.err


@pytest.mark.asyncio
async def test_request_middleware_logs_request(capsys):
    """Middleware should log request start and completion."""
    setup_logging("DEBUG")
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")
    assert response.status_code == 200
    assert len(response.headers["X-Request-ID"]) == 8
    captured = capsys.readouterr()
    assert "GET /health" in captured.err
    assert "200" in captured.err


@pytest.mark.asyncio
async def test_request_middleware_keeps_client_request_id(capsys):
    setup_logging("DEBUG")
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health", headers={"X-Request-ID": "trace-abc.123"})
    assert response.headers["X-Request-ID"] == "trace-abc.123"
    assert "trace-abc.123" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_request_middleware_replaces_malformed_request_id():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health", headers={"X-Request-ID": "bad id with spaces!"})
    rid = response.headers["X-Request-ID"]
    assert rid != "bad id with spaces!"
    assert len(rid) == 8


@pytest.mark.asyncio
async def test_health_checks_only_logged_at_debug(capsys):
    setup_logging("INFO")
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        await client.get("/health")
    assert "GET /health" not in capsys.readouterr().err
