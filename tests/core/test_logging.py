"""Tests for user_service/core/logging.py and request logging middleware."""

import json
import logging
import sys

from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_service.core.logging import JsonFormatter, build_logging_config, env_bool
from user_service.core.request_logging import (
    RequestLoggingMiddleware,
    add_request_logging_middleware,
)


def test_env_bool(monkeypatch):
    monkeypatch.setenv("FLAG", "Yes")
    assert env_bool("FLAG", default=False) is True
    monkeypatch.setenv("FLAG", "off")
    assert env_bool("FLAG", default=True) is False
    monkeypatch.delenv("FLAG")
    assert env_bool("FLAG", default=True) is True


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        name="user_service.user.service",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Updated user %s",
        args=(7,),
        exc_info=None,
    )
    record.user_id = 7
    record.status_code = 200

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "user_service.user.service"
    assert payload["msg"] == "Updated user 7"
    assert payload["user_id"] == 7
    assert payload["status_code"] == 200


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()
    record = logging.LogRecord(
        "x", logging.ERROR, __file__, 1, "failed", None, exc_info
    )

    payload = json.loads(JsonFormatter().format(record))

    assert "ValueError: boom" in payload["exc_info"]


def test_build_logging_config(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON", "true")
    monkeypatch.delenv("LOG_UVICORN_ACCESS", raising=False)
    monkeypatch.delenv("LOG_REQUESTS", raising=False)

    config = build_logging_config()

    assert config["root"]["level"] == "DEBUG"
    assert config["handlers"]["console"]["formatter"] == "json"
    # Request middleware is on, so uvicorn access logs are quieted.
    assert config["loggers"]["uvicorn.access"]["level"] == "WARNING"
    assert config["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"


def test_request_logging_middleware_logs_request(caplog):
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    with caplog.at_level(logging.INFO, logger="user_service.request"):
        response = TestClient(app).get("/ping?x=1")

    assert response.status_code == 200
    record = next(r for r in caplog.records if r.name == "user_service.request")
    assert record.method == "GET"
    assert record.path == "/ping"
    assert record.query == "x=1"
    assert record.status_code == 200


def test_request_logging_can_be_disabled(monkeypatch):
    monkeypatch.setenv("LOG_REQUESTS", "false")
    app = FastAPI()

    add_request_logging_middleware(app)

    assert app.user_middleware == []
