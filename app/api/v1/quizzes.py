from fastapi import APIRouter, Depends, Path

from app.crud import quiz as quiz_crud
from app.exceptions import QuizNotFoundError
from app.models import Quiz
from app.models.store import MemoryStore, get_store
from app.schemas import quiz as quiz_schema
from app.schemas.common import ERROR_RESPONSES
from app.services import quiz_service

router = APIRouter(prefix="/quizzes", tags=["quizzes"], responses=ERROR_RESPONSES)


@router.get("/{quiz_id}", response_model=Quiz)
async def get_quiz(
    quiz_id: str = Path(..., min_length=1),
    store: MemoryStore = Depends(get_store),
):
    """퀴즈 조회 API"""
    quiz = await quiz_crud.get_quiz_by_id(store, quiz_id)
    if not quiz:
        raise QuizNotFoundError(quiz_id)
    return quiz


@router.post("/{quiz_id}/bonus-questions", response_model=quiz_schema.BonusQuestionsResponse)
async def generate_bonus_questions(
    quiz_id: str = Path(..., min_length=1),
    store: MemoryStore = Depends(get_store),
):
    """보너스 문제 생성 API (AI 생성, 저장하지 않음)"""
    questions = await quiz_service.generate_bonus_questions(store, quiz_id)
    return quiz_schema.BonusQuestionsResponse(questions=questions)
