"""Quiz Service 테스트"""
import pytest
from unittest.mock import AsyncMock, patch

from app.crud import resource as resource_crud
from app.exceptions import InvalidRequestError, PayloadValidationError, QuizNotFoundError
from app.schemas.resource import ResourceCreateRequest
from app.services import quiz_service


@pytest.mark.asyncio
async def test_create_quiz_from_document(store):
    """업로드 문서로 퀴즈 생성 + 리소스 카운터 증가"""
    resource = await resource_crud.create_resource(store, ResourceCreateRequest(title="Book A"))

    quiz = await quiz_service.create_quiz_from_document(
        store,
        resource_id=resource.id,
        title="Chapter 1",
        description=None,
        content=b"chapter text",
        content_type="text/plain",
    )

    assert quiz.resource_id == resource.id
    assert quiz.title == "Chapter 1"
    assert len(quiz.questions) == 1
    assert store.resources[resource.id].total_quizzes == 1


@pytest.mark.asyncio
async def test_create_quiz_from_document_without_file(store):
    """파일 없이 업로드"""
    with pytest.raises(InvalidRequestError) as exc_info:
        await quiz_service.create_quiz_from_document(
            store, "resource-1", "Chapter 1", None, None, None
        )

    assert exc_info.value.message == "No file uploaded"
    assert store.quizzes == {}


@pytest.mark.asyncio
async def test_create_quiz_from_document_without_title(store):
    """제목 누락 시 필드 오류 반환"""
    with pytest.raises(PayloadValidationError) as exc_info:
        await quiz_service.create_quiz_from_document(
            store, "resource-1", None, None, b"text", "text/plain"
        )

    assert exc_info.value.status_code == 400
    assert any(error["field"] == "title" for error in exc_info.value.errors)
    assert store.quizzes == {}


@pytest.mark.asyncio
async def test_generate_bonus_questions_quiz_not_found(store):
    """존재하지 않는 퀴즈의 보너스 문제 생성"""
    with pytest.raises(QuizNotFoundError):
        await quiz_service.generate_bonus_questions(store, "missing")


@pytest.mark.asyncio
async def test_generate_bonus_questions_passes_quiz_topic(store):
    """퀴즈 제목/설명/기존 문제를 생성기에 전달"""
    resource = await resource_crud.create_resource(store, ResourceCreateRequest(title="Book A"))
    quiz = await quiz_service.create_quiz_from_document(
        store, resource.id, "Chapter 1", None, b"text", "text/plain"
    )

    with patch(
        "app.services.quiz_service.ai_service.generate_bonus_questions",
        new=AsyncMock(return_value=[]),
    ) as mock_generate:
        result = await quiz_service.generate_bonus_questions(store, quiz.id)

    assert result == []
    args = mock_generate.await_args.args
    assert args[0] == "Chapter 1"
    assert args[1] == ""
    assert [q.id for q in args[2]] == [q.id for q in quiz.questions]
    assert len(store.quizzes) == 1
