import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from coursereview.database import Base, get_db
from coursereview.main import app
from coursereview.models.user import User
from coursereview.models.catalog import Campus, Field, Level
from coursereview.models.subject import Subject

TEST_DB_URL = "sqlite:///./test_coursereview.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "moderator": User(name="Moderator", email="moderator@example.com", role="moderator"),
        "kari": User(name="Kari", email="kari@example.com", role="student"),
        "ola": User(name="Ola", email="ola@example.com", role="student"),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


@pytest.fixture
def seed_catalog(db):
    campus = Campus(name="Trondheim")
    db.add(campus)
    db.flush()
    fields = {
        "informatics": Field(field_id=101, name="Informatikk", campus_id=campus.campus_id),
        "math": Field(field_id=102, name="Matematikk", campus_id=campus.campus_id),
    }
    levels = {
        "bachelor": Level(level_id=1, name="Bachelor"),
        "master": Level(level_id=2, name="Master"),
    }
    db.add_all(list(fields.values()) + list(levels.values()))
    db.commit()
    return {"campus": campus, "fields": fields, "levels": levels}


@pytest.fixture
def seed_subjects(db, seed_catalog):
    subjects = [
        Subject(subject_id="TDT4120", name="Algoritmer og datastrukturer", field_id=101, level_id=1,
                description="Algoritmer"),
        Subject(subject_id="TDT4100", name="Objektorientert programmering", field_id=101, level_id=1,
                description="Java"),
        Subject(subject_id="TDT4900", name="Masteroppgave", field_id=101, level_id=2,
                description="Master"),
        Subject(subject_id="TMA4100", name="Matematikk 1", field_id=102, level_id=1,
                description="Kalkulus"),
    ]
    db.add_all(subjects)
    db.commit()
    return {s.subject_id: s for s in subjects}


def get_token(client, email: str) -> str:
    resp = client.post("/api/auth/login", json={"email": email})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email)}"}
