"""AI Service (보너스 문제 생성) 테스트"""
import json
import time
from unittest.mock import MagicMock, patch

import httpx
import pytest

from app.core.config import settings
from app.exceptions import GenerationError
from app.services import ai_service


def _ai_payload(count: int = 5, correct_letter: str = "B") -> dict:
    return {
        "questions": [
            {
                "text": f"Scenario {i}: which option frames the update best?",
                "options": [
                    {"text": "Option A text", "letter": "A"},
                    {"text": "Option B text", "letter": "B"},
                    {"text": "Option C text", "letter": "C"},
                    {"text": "Option D text", "letter": "D"},
                ],
                "correctLetter": correct_letter,
                "explanation": "Because it states context, intent and key message.",
            }
            for i in range(count)
        ]
    }


@pytest.fixture
def mock_gemini_client():
    """모킹된 Gemini 클라이언트"""
    client = MagicMock()
    with patch.object(ai_service, "get_gemini_client", return_value=client):
        yield client


def test_parse_generated_questions():
    """응답 파싱: 새 ID 발급, 정답 기호 → 선택지 ID"""
    questions = ai_service.parse_generated_questions(json.dumps(_ai_payload()), 5)

    assert len(questions) == 5
    for question in questions:
        option_ids = [option.id for option in question.options]
        assert len(set(option_ids)) == 4
        assert question.correct_answer_id == question.options[1].id
    assert len({question.id for question in questions}) == 5


def test_parse_generated_questions_code_block():
    """마크다운 코드 블록으로 감싼 응답도 파싱"""
    raw = "```json\n" + json.dumps(_ai_payload()) + "\n```"

    questions = ai_service.parse_generated_questions(raw, 5)

    assert len(questions) == 5


def test_parse_generated_questions_unknown_letter_falls_back():
    """정답 기호가 선택지에 없으면 첫 번째 선택지를 정답으로 사용"""
    questions = ai_service.parse_generated_questions(json.dumps(_ai_payload(correct_letter="E")), 5)

    assert all(q.correct_answer_id == q.options[0].id for q in questions)


def test_parse_generated_questions_truncates_extra():
    """요청보다 많이 생성되면 앞에서부터 요청 개수만 사용"""
    questions = ai_service.parse_generated_questions(json.dumps(_ai_payload(count=7)), 5)

    assert len(questions) == 5


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "not json",
        json.dumps({"items": []}),
        json.dumps(_ai_payload(count=3)),
    ],
)
def test_parse_generated_questions_invalid(raw):
    """비어 있거나 형식이 맞지 않는 응답은 GenerationError"""
    with pytest.raises(GenerationError):
        ai_service.parse_generated_questions(raw, 5)


def test_build_prompt_includes_existing_questions():
    """기존 문제는 반복하지 않도록 프롬프트에 포함"""
    from app.models.quiz import Question, QuestionOption

    existing = Question(
        id="q1",
        text="What does GPS stand for?",
        options=[QuestionOption(id="o1", text="Goal, Path, Success", letter="A")],
        correct_answer_id="o1",
        explanation="",
    )

    prompt = ai_service.build_prompt("GPS Method", "Goal, Path, Success", 5, [existing])

    assert 'quiz about "GPS Method"' in prompt
    assert "Generate 5 multiple choice questions" in prompt
    assert "- What does GPS stand for?" in prompt


@pytest.mark.asyncio
async def test_generate_bonus_questions(mock_gemini_client):
    """Gemini 응답으로 보너스 문제 생성"""
    mock_gemini_client.models.generate_content.return_value = MagicMock(text=json.dumps(_ai_payload()))

    questions = await ai_service.generate_bonus_questions("Framing", "Setting the stage")

    assert len(questions) == settings.bonus_question_count
    kwargs = mock_gemini_client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == settings.gemini_model
    assert "Framing" in kwargs["contents"]


@pytest.mark.asyncio
async def test_generate_bonus_questions_missing_api_key():
    """API 키가 없으면 호출 없이 즉시 GenerationError"""
    with patch.object(settings, "gemini_api_key", None), patch.object(ai_service, "_gemini_client", None):
        with pytest.raises(GenerationError) as exc_info:
            await ai_service.generate_bonus_questions("Framing", "")

    assert "GEMINI_API_KEY" in exc_info.value.message


@pytest.mark.asyncio
async def test_generate_bonus_questions_timeout(mock_gemini_client):
    """응답 시간 초과 시 GenerationError"""
    def slow_response(**kwargs):
        time.sleep(0.5)
        return MagicMock(text=json.dumps(_ai_payload()))

    mock_gemini_client.models.generate_content.side_effect = slow_response

    with patch.object(settings, "generation_timeout_seconds", 0.05):
        with pytest.raises(GenerationError) as exc_info:
            await ai_service.generate_bonus_questions("Framing", "")

    assert "timed out" in exc_info.value.message


@pytest.mark.asyncio
async def test_generate_bonus_questions_upstream_unreachable(mock_gemini_client):
    """업스트림 연결 실패 시 GenerationError (재시도 없음)"""
    mock_gemini_client.models.generate_content.side_effect = httpx.ConnectError("connection refused")

    with pytest.raises(GenerationError):
        await ai_service.generate_bonus_questions("Framing", "")

    assert mock_gemini_client.models.generate_content.call_count == 1
