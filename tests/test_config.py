"""설정 테스트"""
from app.core.config import Settings


def test_settings_defaults(monkeypatch):
    """기본값"""
    for name in ("API_PREFIX", "GEMINI_MODEL", "BONUS_QUESTION_COUNT", "GENERATION_TIMEOUT_SECONDS", "MAX_UPLOAD_SIZE_MB"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_prefix == "/api"
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.bonus_question_count == 5
    assert settings.generation_timeout_seconds == 30.0
    assert settings.max_upload_size_bytes == 10 * 1024 * 1024


def test_settings_from_env(monkeypatch):
    """환경변수 우선"""
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("BONUS_QUESTION_COUNT", "3")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://quiz.example.com, http://localhost:5173")

    settings = Settings(_env_file=None)

    assert settings.gemini_api_key == "test-key"
    assert settings.bonus_question_count == 3
    assert settings.allowed_origins_list == ["https://quiz.example.com", "http://localhost:5173"]
