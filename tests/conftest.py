"""
pytest 설정: 인메모리 SQLite + 고정된 "오늘" 날짜
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pethealth.core.clock import get_today
from pethealth.db import get_db
from pethealth.main import app
from pethealth.models import Base

TODAY = date(2026, 1, 15)

# 모든 연결이 같은 인메모리 DB를 보도록 StaticPool 사용
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_session():
    """테스트마다 테이블을 새로 만들고 끝나면 삭제"""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def pet_data():
    """반려동물 등록 기본 데이터"""
    return {
        "name": "Buddy",
        "breed": "Pug",
        "species": "dog",
        "dateOfBirth": "2020-03-15",
        "gender": "male",
        "color": "Fawn",
    }


@pytest.fixture
def make_pet(client):
    """반려동물을 등록하고 응답 JSON을 반환"""
    def _make(name="Buddy", breed="Pug", **extra):
        response = client.post("/api/pets", json={"name": name, "breed": breed, **extra})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_event(client):
    """이벤트를 생성하고 응답 JSON을 반환"""
    def _make(pet_ids, title="Annual Wellness Exam", category="vet_visit", event_date="2026-01-20", **extra):
        response = client.post("/api/events", json={
            "title": title,
            "category": category,
            "eventDate": event_date,
            "petIds": pet_ids,
            **extra,
        })
        assert response.status_code == 201, response.text
        return response.json()
    return _make
