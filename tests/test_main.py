"""애플리케이션 공통 엔드포인트 테스트"""
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import create_app
from app.models.store import MemoryStore


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Quiz Practice Backend API"


def test_health_check(client):
    """헬스 체크"""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_error_response_wildcard_origin_without_credentials(client, monkeypatch):
    """와일드카드 설정에서는 "*"만 반환하고 자격 증명 헤더는 없음"""
    monkeypatch.setattr(settings, "allowed_origins", "*")
    wildcard_client = TestClient(create_app(MemoryStore()))

    response = wildcard_client.get(
        "/api/resources/unknown-id", headers={"Origin": "https://evil.example.com"}
    )

    assert response.status_code == 404
    assert response.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in response.headers


def test_error_response_listed_origin(monkeypatch):
    """허용 목록에 있는 origin은 그대로 반환 (자격 증명 허용)"""
    monkeypatch.setattr(settings, "allowed_origins", "http://localhost:5173")
    listed_client = TestClient(create_app(MemoryStore()))

    response = listed_client.get("/api/resources/unknown-id", headers={"Origin": "http://localhost:5173"})

    assert response.status_code == 404
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_error_response_unlisted_origin(monkeypatch):
    """허용 목록에 없는 origin에는 CORS 헤더 없음"""
    monkeypatch.setattr(settings, "allowed_origins", "http://localhost:5173")
    listed_client = TestClient(create_app(MemoryStore()))

    response = listed_client.get("/api/resources/unknown-id", headers={"Origin": "https://evil.example.com"})

    assert response.status_code == 404
    assert "access-control-allow-origin" not in response.headers


def test_apps_do_not_share_store(client, store):
    """애플리케이션마다 주입된 저장소를 사용"""
    client.post("/api/resources", json={"title": "Book A"})
    other = TestClient(create_app())

    assert len(store.resources) == 1
    assert other.get("/api/resources").json() == []
