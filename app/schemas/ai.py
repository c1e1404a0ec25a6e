from pydantic import BaseModel, Field


class AIQuestionOption(BaseModel):
    """AI 생성 문제 선택지 스키마"""
    text: str = Field(..., description="선택지 텍스트")
    letter: str = Field(..., description="선택지 기호 (A-D)")


class AIQuestion(BaseModel):
    """AI 생성 문제 스키마 (ID 없이 정답을 기호로 표시)"""
    text: str = Field(..., description="문제 내용")
    options: list[AIQuestionOption] = Field(..., min_length=4, max_length=4, description="선택지 (4개 필수)")
    correct_letter: str = Field(..., alias="correctLetter", description="정답 선택지 기호")
    explanation: str = Field(..., description="해설")

    model_config = {"populate_by_name": True}


class AIBonusQuestionsResponse(BaseModel):
    """AI 보너스 문제 생성 응답 스키마 (Structured Output)"""
    questions: list[AIQuestion]
