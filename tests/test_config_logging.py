"""설정, 로깅, 요청 로깅 미들웨어 테스트."""

import logging

import pytest
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient

from project_board.config import Settings, settings
from project_board.middleware import request_logging
from project_board.middleware.request_logging import (
    RequestLoggingMiddleware,
    extract_error_detail,
    mask_sensitive,
)
from project_board.utils.logging import configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "LOG_LEVEL", "COLUMN_REPO_LOCK_ON_APPEND", "AXIOM_API_TOKEN"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.DATABASE_URL.startswith("postgresql+asyncpg://")
        assert s.LOG_LEVEL == "INFO"
        assert s.COLUMN_REPO_LOCK_ON_APPEND is False
        assert s.AXIOM_API_TOKEN == ""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("COLUMN_REPO_LOCK_ON_APPEND", "true")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.COLUMN_REPO_LOCK_ON_APPEND is True
        assert s.LOG_LEVEL == "DEBUG"


class TestConfigureLogging:

    @pytest.fixture
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield root
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_single_handler_and_level(self, restore_root):
        configure_logging("debug")
        configure_logging("warning")
        assert len(restore_root.handlers) == 1
        assert restore_root.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, restore_root):
        configure_logging("chatty")
        assert restore_root.level == logging.INFO


class TestMaskSensitive:

    def test_nested_keys_masked(self):
        data = {"repo_id": 3, "auth": {"api_key": "k", "access_token": "t"}, "items": [{"password": "p"}]}
        masked = mask_sensitive(data)
        assert masked["repo_id"] == 3
        assert masked["auth"] == {"api_key": "***", "access_token": "***"}
        assert masked["items"] == [{"password": "***"}]

    def test_error_detail(self):
        assert extract_error_detail(b'{"detail": "Project not found: 3"}') == "Project not found: 3"
        assert extract_error_detail(b"plain failure") == "plain failure"
        assert extract_error_detail(b"x" * 800).endswith("...")


class _FakeAxiom:
    def __init__(self) -> None:
        self.events: list[dict] = []

    def ingest_events(self, dataset, events) -> None:
        self.events.extend(events)


class TestRequestLoggingMiddleware:

    async def test_ships_masked_event_with_error(self):
        axiom = _FakeAxiom()
        demo = FastAPI()
        demo.add_middleware(RequestLoggingMiddleware, axiom_client=axiom)

        @demo.post("/things")
        async def create_thing(payload: dict) -> dict:
            raise HTTPException(status_code=400, detail="nope")

        transport = ASGITransport(app=demo)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.post("/things", json={"name": "x", "secret": "s"})

        assert res.status_code == 400
        assert res.json() == {"detail": "nope"}
        assert len(axiom.events) == 1
        event = axiom.events[0]
        assert event["method"] == "POST"
        assert event["path"] == "/things"
        assert event["status_code"] == 400
        assert event["error"] == "nope"
        assert event["request_body"] == {"name": "x", "secret": "***"}

    async def test_health_not_shipped(self):
        axiom = _FakeAxiom()
        demo = FastAPI()
        demo.add_middleware(RequestLoggingMiddleware, axiom_client=axiom)

        @demo.get("/health")
        async def health() -> dict:
            return {"status": "ok"}

        transport = ASGITransport(app=demo)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.get("/health")

        assert res.status_code == 200
        assert axiom.events == []

    async def test_error_body_untouched_without_client(self, monkeypatch, caplog):
        """Axiom 미설정 시 에러 응답 본문을 읽지 않고 로그만 남긴다."""
        monkeypatch.setattr(settings, "AXIOM_API_TOKEN", "")
        calls: list[bytes] = []
        monkeypatch.setattr(request_logging, "extract_error_detail", calls.append)

        demo = FastAPI()
        demo.add_middleware(RequestLoggingMiddleware)

        @demo.get("/things/{thing_id}")
        async def get_thing(thing_id: int) -> dict:
            raise HTTPException(status_code=404, detail="missing")

        transport = ASGITransport(app=demo)
        with caplog.at_level(logging.INFO, logger="project_board.middleware.request_logging"):
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                res = await ac.get("/things/7")

        assert res.status_code == 404
        assert res.json() == {"detail": "missing"}
        assert calls == []
        assert "GET /things/7 -> 404" in caplog.text
