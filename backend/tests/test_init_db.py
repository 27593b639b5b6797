from pathlib import Path
from uuid import uuid4

import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine

from scripts import init_db


@pytest.fixture
def fresh_engine(monkeypatch):
    db_path = Path(f"./init_db_{uuid4().hex}.db").resolve()
    engine = create_engine(f"sqlite:///{db_path}")
    monkeypatch.setattr(init_db, "engine", engine)
    yield engine
    engine.dispose()
    if db_path.exists():
        db_path.unlink()


def test_init_db_creates_tables_then_skips_them(fresh_engine, capsys):
    assert init_db.init_db() is True
    first = capsys.readouterr().out
    assert "[OK] created table: page_versions" in first
    assert "[OK] created table: subject_review_versions" in first
    assert "[OK] unique (field_id, version_number) on page_versions" in first
    assert "[OK] unique (subject_id, version_number) on subject_versions" in first

    assert init_db.init_db() is True
    second = capsys.readouterr().out
    assert "[SKIP] table already exists: subject_versions" in second
    assert "[OK] created table" not in second


def test_init_db_warns_when_legacy_log_lacks_numbering_constraint(fresh_engine, capsys):
    legacy = MetaData()
    Table(
        "page_versions",
        legacy,
        Column("version_id", Integer, primary_key=True),
        Column("field_id", Integer, nullable=False),
        Column("version_number", Integer, nullable=False),
        Column("user_id", Integer, nullable=False),
        Column("subject_ids", String(2000)),
    )
    legacy.create_all(fresh_engine)

    assert init_db.init_db() is False
    out = capsys.readouterr().out
    assert "[SKIP] table already exists: page_versions" in out
    assert "[WARN] page_versions lacks unique (field_id, version_number)" in out
    assert "[OK] unique (subject_id, version_number) on subject_versions" in out
