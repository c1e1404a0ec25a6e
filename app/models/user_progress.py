from datetime import datetime

from app.models.base import Base


class UserProgress(Base):
    """퀴즈 응시 기록 (응시마다 한 건씩 추가, 수정/삭제 없음)"""

    id: str
    user_id: str
    resource_id: str
    quiz_id: str
    score: int
    total_questions: int
    answers: dict[str, str]
    completed_at: datetime
