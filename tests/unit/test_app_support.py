"""Tests for the database helpers, health check and logging setup."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from api.health import health_router
from cascade.utils.logging_utils import configure_logging
from cascade.utils.message_utils import format_table_counts, generate_delete_message
from db import create_tables, get_table_list, print_table_info
from db.models import Project
from db.session import get_db


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_table_list_covers_every_model() -> None:
    names = {table["name"] for table in get_table_list()}

    assert len(names) == 39
    assert {"projects", "indicators", "project_field_mappings", "rule_actions"} <= names


def test_create_tables_on_configured_engine() -> None:
    assert create_tables() is True


def test_health_endpoints(session_factory: sessionmaker) -> None:
    app = FastAPI()
    app.include_router(health_router)

    def override_get_db() -> Iterator[Session]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    db = session_factory()
    db.add(Project(id="p-001", name="2024 의무교육 평가"))
    db.commit()
    db.close()

    client = TestClient(app)

    assert client.get("/health/").json()["status"] == "healthy"
    body = client.get("/health/db").json()
    assert body["status"] == "success"
    assert body["project_count"] == 1


def test_configure_logging_renders_json(capsys: pytest.CaptureFixture[str], restore_logging: None) -> None:
    configure_logging(json_output=True, level="DEBUG")

    structlog.get_logger("supervision.probe").info("cascade_probe", table="schools")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "cascade_probe"
    assert record["table"] == "schools"
    assert record["level"] == "info"


def test_delete_message_uses_display_names() -> None:
    message = generate_delete_message("indicator_systems", {"indicators": 2, "data_indicators": 0})

    assert message == "지표 체계 연쇄 삭제 완료 (지표: 2개)"


def test_nothing_deleted_message() -> None:
    assert format_table_counts({"schools": 0}) == "삭제된 항목이 없습니다."


def test_print_table_info(capsys: pytest.CaptureFixture[str]) -> None:
    print_table_info()

    out = capsys.readouterr().out
    assert "submission_materials" in out
    assert "총 39개 테이블" in out
