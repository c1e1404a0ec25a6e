from pydantic import Field

from app.models.base import Base
from app.models.quiz import Question


class QuizCreateRequest(Base):
    """퀴즈 생성 요청 스키마 (업로드 문서 파싱 결과로 구성)"""
    resource_id: str = Field(..., min_length=1, description="소속 리소스 ID")
    title: str = Field(..., min_length=1, description="퀴즈 제목")
    description: str | None = Field(None, description="퀴즈 설명")
    questions: list[Question] = Field(..., description="문제 목록 (순서 유지)")


class BonusQuestionsResponse(Base):
    """보너스 문제 응답 스키마"""
    questions: list[Question]
