from app.models.base import generate_id, utcnow
from app.models.store import MemoryStore
from app.models.user_progress import UserProgress
from app.schemas.user_progress import UserProgressCreateRequest


async def get_user_progress_by_user_id(store: MemoryStore, user_id: str) -> list[UserProgress]:
    """사용자별 응시 기록 조회"""
    with store.transaction():
        return [
            progress.model_copy(deep=True)
            for progress in store.user_progress.values()
            if progress.user_id == user_id
        ]


async def get_user_progress_by_user_and_resource(
    store: MemoryStore,
    user_id: str,
    resource_id: str,
) -> list[UserProgress]:
    """사용자 + 리소스 기준 응시 기록 조회"""
    with store.transaction():
        return [
            progress.model_copy(deep=True)
            for progress in store.user_progress.values()
            if progress.user_id == user_id and progress.resource_id == resource_id
        ]


async def save_user_progress(store: MemoryStore, data: UserProgressCreateRequest) -> UserProgress:
    """응시 기록 저장 (같은 퀴즈 재응시도 별도 기록으로 추가)"""
    progress = UserProgress(
        id=generate_id(),
        user_id=data.user_id,
        resource_id=data.resource_id,
        quiz_id=data.quiz_id,
        score=data.score,
        total_questions=data.total_questions,
        answers=dict(data.answers),
        completed_at=utcnow(),
    )
    with store.transaction():
        store.user_progress[progress.id] = progress
    return progress.model_copy(deep=True)
