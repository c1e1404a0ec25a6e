from app.services.ai_service import generate_bonus_questions
from app.services.document_service import (
    check_document,
    parse_quiz_document,
)
from app.services.progress_service import get_progress_summary
from app.services.quiz_service import create_quiz_from_document

__all__ = [
    "generate_bonus_questions",
    "check_document",
    "parse_quiz_document",
    "get_progress_summary",
    "create_quiz_from_document",
]
