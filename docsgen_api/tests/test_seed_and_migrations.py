import json
from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect

from src.api.generate_openapi import write_schema
from src.api.main import mount_spa
from src.db.models import Guarantor, HeadOfSmc, Subject, Syllabus, Teacher, TeacherLoad
from src.db.run_migrations import main as run_alembic
from src.db.seed import _current_academic_year, seed_session
from src.repositories.unit_of_work import UnitOfWork


async def test_seed_is_idempotent(session_maker):
    async with session_maker() as session:
        assert await seed_session(session) is True
    async with session_maker() as session:
        assert await seed_session(session) is False

    async with session_maker() as session:
        uow = UnitOfWork(session)
        assert len(await uow.repository(Teacher).get_all()) == 2
        assert len(await uow.repository(Subject).get_all()) == 2
        assert len(await uow.repository(Guarantor).get_all()) == 1
        assert len(await uow.repository(HeadOfSmc).get_all()) == 1
        assert len(await uow.repository(TeacherLoad).get_all()) == 2
        syllabi = await uow.repository(Syllabus).get_all()
        assert {s.academic_year for s in syllabi} == {_current_academic_year()}


async def test_failed_seed_leaves_nothing_and_can_be_retried(session_maker, monkeypatch):
    def broken_year(today=None):
        raise RuntimeError("clock unavailable")

    monkeypatch.setattr("src.db.seed._current_academic_year", broken_year)
    async with session_maker() as session:
        with pytest.raises(RuntimeError):
            await seed_session(session)

    async with session_maker() as session:
        uow = UnitOfWork(session)
        assert await uow.repository(Teacher).get_all() == []
        assert await uow.repository(Subject).get_all() == []

    monkeypatch.undo()
    async with session_maker() as session:
        assert await seed_session(session) is True


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2024, 9, 1), "2024-2025"),
        (date(2024, 8, 31), "2023-2024"),
        (date(2025, 3, 1), "2024-2025"),
    ],
)
def test_academic_year_starts_in_september(today, expected):
    assert _current_academic_year(today) == expected


def test_migrations_create_and_drop_schema(tmp_path, monkeypatch):
    db_file = tmp_path / "docs.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")

    run_alembic(["upgrade", "head"])

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        tables = set(inspect(engine).get_table_names())
        assert {
            "knowledge_branches",
            "specialties",
            "teachers",
            "subjects",
            "syllabi",
            "guarantors",
            "heads_of_smc",
            "teacher_loads",
        } <= tables

        run_alembic(["downgrade", "base"])
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()


def test_migration_runner_requires_arguments():
    with pytest.raises(SystemExit):
        run_alembic([])


def test_openapi_schema_declares_bearer_auth(tmp_path):
    path = write_schema(str(tmp_path))

    with open(path) as f:
        schema = json.load(f)
    assert schema["components"]["securitySchemes"]["Bearer"]["scheme"] == "bearer"
    assert "/api/teachers" in schema["paths"]
    assert "/api/subjects/{subject_id}/syllabi" in schema["paths"]


def test_spa_fallback_serves_index(tmp_path):
    (tmp_path / "index.html").write_text("<html>app</html>")
    (tmp_path / "app.js").write_text("console.log('app')")
    application = FastAPI()

    assert mount_spa(application, str(tmp_path)) is True
    client = TestClient(application)
    assert client.get("/syllabi/12").text == "<html>app</html>"
    assert "console.log" in client.get("/app.js").text
    assert client.get("/api/unknown").status_code == 404


def test_spa_is_skipped_without_index(tmp_path):
    assert mount_spa(FastAPI(), str(tmp_path)) is False
    assert mount_spa(FastAPI(), "") is False
