from datetime import datetime

from pydantic import Field

from app.models.base import Base


class Resource(Base):
    """학습 자료 (책/스터디 가이드)"""

    id: str
    title: str
    description: str | None = None
    cover_image_url: str | None = None
    total_quizzes: int = Field(0, ge=0, description="소속 퀴즈 개수 (퀴즈 생성/삭제 시 함께 갱신)")
    created_at: datetime
