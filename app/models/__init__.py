from app.models.base import Base, generate_id, utcnow
from app.models.quiz import Question, QuestionOption, Quiz
from app.models.resource import Resource
from app.models.store import MemoryStore, get_store
from app.models.user_progress import UserProgress

__all__ = [
    "Base",
    "Resource",
    "Quiz",
    "Question",
    "QuestionOption",
    "UserProgress",
    "MemoryStore",
    "get_store",
    "generate_id",
    "utcnow",
]
