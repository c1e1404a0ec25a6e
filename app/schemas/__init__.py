from app.schemas.ai import (
    AIBonusQuestionsResponse,
    AIQuestion,
    AIQuestionOption,
)
from app.schemas.common import (
    ErrorResponse,
    FieldError,
    format_field_errors,
    validate_payload,
)
from app.schemas.quiz import (
    BonusQuestionsResponse,
    QuizCreateRequest,
)
from app.schemas.resource import (
    ResourceCreateRequest,
    ResourceUpdateRequest,
)
from app.schemas.user_progress import (
    ProgressSummaryResponse,
    ResourceProgressSummary,
    UserProgressCreateRequest,
)

__all__ = [
    "ResourceCreateRequest",
    "ResourceUpdateRequest",
    "QuizCreateRequest",
    "BonusQuestionsResponse",
    "UserProgressCreateRequest",
    "ProgressSummaryResponse",
    "ResourceProgressSummary",
    "AIBonusQuestionsResponse",
    "AIQuestion",
    "AIQuestionOption",
    "ErrorResponse",
    "FieldError",
    "format_field_errors",
    "validate_payload",
]
