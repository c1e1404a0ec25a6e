from datetime import datetime

from pydantic import Field, model_validator

from app.models.base import Base


class QuestionOption(Base):
    """문제 선택지"""

    id: str
    text: str
    letter: str


class Question(Base):
    """퀴즈에 포함되는 객관식 문제 (독립 엔티티가 아닌 값 객체)"""

    id: str
    text: str
    options: list[QuestionOption] = Field(..., min_length=1)
    correct_answer_id: str
    explanation: str

    @model_validator(mode="after")
    def check_correct_answer(self) -> "Question":
        """정답 ID가 선택지 중 하나를 가리키는지 검증"""
        option_ids = {option.id for option in self.options}
        if self.correct_answer_id not in option_ids:
            raise ValueError(
                f"correctAnswerId '{self.correct_answer_id}' does not match any option of question '{self.id}'"
            )
        return self


class Quiz(Base):
    """리소스에 속한 퀴즈"""

    id: str
    resource_id: str
    title: str
    description: str | None = None
    questions: list[Question]
    created_at: datetime
