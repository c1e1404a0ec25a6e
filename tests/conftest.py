"""공용 테스트 fixture"""
import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.models.base import generate_id
from app.models.store import MemoryStore


@pytest.fixture
def store():
    """테스트마다 새로 만드는 빈 저장소"""
    return MemoryStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    """API 테스트 클라이언트 (lifespan 미실행, 데모 데이터 없음)"""
    return TestClient(app)


def make_question_payload(text: str = "테스트 문제", correct_index: int = 1) -> dict:
    """선택지 4개짜리 문제 payload 생성"""
    options = [
        {"id": generate_id(), "text": f"선택지{i + 1}", "letter": letter}
        for i, letter in enumerate(("A", "B", "C", "D"))
    ]
    return {
        "id": generate_id(),
        "text": text,
        "options": options,
        "correctAnswerId": options[correct_index]["id"],
        "explanation": "설명",
    }


@pytest.fixture
def question_factory():
    """문제 payload 생성 함수"""
    return make_question_payload


@pytest.fixture
def question_payload():
    return make_question_payload()
