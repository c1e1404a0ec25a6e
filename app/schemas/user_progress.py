from pydantic import Field, ValidationInfo, field_validator

from app.models.base import Base


class UserProgressCreateRequest(Base):
    """응시 기록 저장 요청 스키마"""
    user_id: str = Field(..., min_length=1, description="사용자 ID")
    resource_id: str = Field(..., min_length=1, description="리소스 ID")
    quiz_id: str = Field(..., min_length=1, description="퀴즈 ID")
    # score 검증에서 참조하므로 score보다 먼저 선언
    total_questions: int = Field(..., ge=0, strict=True, description="전체 문제 수")
    score: int = Field(..., ge=0, strict=True, description="맞힌 문제 수")
    answers: dict[str, str] = Field(..., description="문제 ID -> 선택한 선택지 ID")

    @field_validator("score")
    @classmethod
    def validate_score(cls, v: int, info: ValidationInfo) -> int:
        total_questions = info.data.get("total_questions")
        if total_questions is not None and v > total_questions:
            raise ValueError("score must not exceed totalQuestions")
        return v


class ResourceProgressSummary(Base):
    """리소스별 학습 진행 요약"""
    resource_id: str
    title: str
    attempts: int
    quizzes_completed: int
    average_score: int
    completion_percentage: float


class ProgressSummaryResponse(Base):
    """사용자 학습 진행 요약 응답 스키마"""
    user_id: str
    total_attempts: int
    average_score: int
    resources: list[ResourceProgressSummary]
