import asyncio
import json
import logging

import httpx
from google import genai
from google.genai import types
from google.genai.errors import APIError
from pydantic import ValidationError

from app.core.config import settings
from app.exceptions import GenerationError
from app.models.base import generate_id
from app.models.quiz import Question, QuestionOption
from app.schemas.ai import AIBonusQuestionsResponse, AIQuestion

logger = logging.getLogger(__name__)

_gemini_client: genai.Client | None = None

SYSTEM_INSTRUCTION = (
    "You are an expert in workplace communication and professional development. "
    "Generate high-quality quiz questions that help people practice real-world scenarios."
)


def get_gemini_client() -> genai.Client:
    """Gemini 클라이언트 싱글톤"""
    global _gemini_client
    if _gemini_client is None:
        if not settings.gemini_api_key:
            raise GenerationError("GEMINI_API_KEY is not configured")
        _gemini_client = genai.Client(api_key=settings.gemini_api_key)
    return _gemini_client


def build_prompt(
    quiz_title: str,
    quiz_description: str,
    question_count: int,
    existing_questions: list[Question] | None = None,
) -> str:
    """보너스 문제 생성 프롬프트 구성"""
    existing_block = ""
    if existing_questions:
        existing_block = "\nExisting questions (do not repeat these):\n" + "\n".join(
            f"- {question.text}" for question in existing_questions
        ) + "\n"

    return f"""Generate {question_count} multiple choice questions for a quiz about "{quiz_title}".

Context: {quiz_description}
{existing_block}
Requirements:
- Focus on workplace scenarios similar to the existing questions
- Each question should have 4 options (A, B, C, D)
- Include detailed explanations for the correct answers
- Make questions practical and realistic
- Vary difficulty levels
- Don't repeat concepts from existing questions

Generate questions that test understanding of the core concepts in a fresh way.

Please respond with JSON in this exact format:
{{
  "questions": [
    {{
      "text": "Question text here",
      "options": [
        {{ "text": "Option A text", "letter": "A" }},
        {{ "text": "Option B text", "letter": "B" }},
        {{ "text": "Option C text", "letter": "C" }},
        {{ "text": "Option D text", "letter": "D" }}
      ],
      "correctLetter": "B",
      "explanation": "Detailed explanation of why this is correct"
    }}
  ]
}}"""


def parse_generated_questions(raw_text: str | None, question_count: int) -> list[Question]:
    """모델 응답 텍스트를 Question 목록으로 변환

    선택지마다 새 ID를 발급하고, correctLetter와 일치하는 선택지가 없으면
    첫 번째 선택지를 정답으로 사용합니다.
    """
    if not raw_text:
        raise GenerationError("Empty response from the text-generation service")

    # JSON 파싱 (마크다운 코드 블록 제거)
    result = raw_text.strip()
    if result.startswith("```json"):
        result = result[7:]
    if result.startswith("```"):
        result = result[3:]
    if result.endswith("```"):
        result = result[:-3]
    result = result.strip()

    try:
        data = AIBonusQuestionsResponse.model_validate(json.loads(result))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"보너스 문제 응답 파싱 실패: error_type={type(e).__name__}, error_message={str(e)[:200]}")
        raise GenerationError("Invalid response format from the text-generation service")

    if len(data.questions) < question_count:
        logger.error(f"보너스 문제 개수 부족: 요청={question_count}, 실제={len(data.questions)}")
        raise GenerationError("Invalid response format from the text-generation service")

    return [_to_question(ai_question) for ai_question in data.questions[:question_count]]


def _to_question(ai_question: AIQuestion) -> Question:
    options = [
        QuestionOption(id=generate_id(), text=option.text, letter=option.letter.strip().upper())
        for option in ai_question.options
    ]
    correct_letter = ai_question.correct_letter.strip().upper()
    correct_option = next((option for option in options if option.letter == correct_letter), options[0])
    return Question(
        id=generate_id(),
        text=ai_question.text,
        options=options,
        correct_answer_id=correct_option.id,
        explanation=ai_question.explanation,
    )


async def generate_bonus_questions(
    quiz_title: str,
    quiz_description: str,
    existing_questions: list[Question] | None = None,
) -> list[Question]:
    """Gemini를 사용하여 보너스 문제 생성 (재시도/캐싱 없음, 타임아웃 적용)"""
    client = get_gemini_client()
    question_count = settings.bonus_question_count
    prompt = build_prompt(quiz_title, quiz_description, question_count, existing_questions)

    try:
        # Gemini는 동기 API이므로 asyncio로 래핑
        loop = asyncio.get_running_loop()
        response = await asyncio.wait_for(
            loop.run_in_executor(
                None,
                lambda: client.models.generate_content(
                    model=settings.gemini_model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        system_instruction=SYSTEM_INSTRUCTION,
                        temperature=0.8,
                        response_mime_type="application/json",
                    ),
                ),
            ),
            timeout=settings.generation_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.error(f"Gemini API 응답 시간 초과: timeout={settings.generation_timeout_seconds}s, quiz_title={quiz_title}")
        raise GenerationError("Bonus question generation timed out. Please try again.")
    except (APIError, httpx.HTTPError) as e:
        logger.error(
            f"Gemini API 오류: status_code={getattr(e, 'code', 'unknown')}, "
            f"error_type={type(e).__name__}, error_message={str(e)[:200]}"
        )
        raise GenerationError()

    questions = parse_generated_questions(response.text, question_count)
    logger.info(f"보너스 문제 생성 완료: quiz_title={quiz_title}, count={len(questions)}")
    return questions
