from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 (환경변수 또는 .env 파일에서 로드)"""

    environment: str = "development"
    api_prefix: str = "/api"
    allowed_origins: str = "*"

    # Gemini (보너스 문제 생성)
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    generation_timeout_seconds: float = 30.0
    bonus_question_count: int = 5

    # 문서 업로드
    max_upload_size_mb: int = 10

    # 시작 시 데모 데이터 적재 여부
    seed_demo_data: bool = True

    log_dir: str = "logs"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def allowed_origins_list(self) -> list[str]:
        """쉼표로 구분된 CORS 허용 origin 목록"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


settings = Settings()
