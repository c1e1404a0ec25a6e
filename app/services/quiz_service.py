import logging

from app.crud import quiz as quiz_crud
from app.exceptions import InvalidRequestError, QuizNotFoundError
from app.models.quiz import Question, Quiz
from app.models.store import MemoryStore
from app.schemas import quiz as quiz_schema
from app.schemas.common import validate_payload
from app.services import ai_service, document_service

logger = logging.getLogger(__name__)


async def create_quiz_from_document(
    store: MemoryStore,
    resource_id: str,
    title: str | None,
    description: str | None,
    content: bytes | None,
    content_type: str | None,
) -> Quiz:
    """업로드 문서로 퀴즈 생성 (검사 → 파싱 → 스키마 검증 → 저장)"""
    if content is None:
        raise InvalidRequestError("No file uploaded")

    document_service.check_document(content_type, len(content))
    questions = document_service.parse_quiz_document(content, content_type)

    request = validate_payload(
        quiz_schema.QuizCreateRequest,
        {
            "resourceId": resource_id,
            "title": title,
            "description": description,
            "questions": questions,
        },
    )
    quiz = await quiz_crud.create_quiz(store, request)

    logger.info(
        f"퀴즈 생성 완료: quiz_id={quiz.id}, resource_id={resource_id}, "
        f"question_count={len(quiz.questions)}"
    )
    return quiz


async def generate_bonus_questions(store: MemoryStore, quiz_id: str) -> list[Question]:
    """퀴즈 주제로 보너스 문제 생성 (저장소에는 아무것도 기록하지 않음)"""
    quiz = await quiz_crud.get_quiz_by_id(store, quiz_id)
    if not quiz:
        raise QuizNotFoundError(quiz_id)

    # 생성 호출 동안 저장소 잠금을 잡지 않음 (quiz는 이미 복사본)
    return await ai_service.generate_bonus_questions(
        quiz.title,
        quiz.description or "",
        quiz.questions,
    )
