from app.crud import resource as resource_crud, user_progress as progress_crud
from app.models.store import MemoryStore
from app.models.user_progress import UserProgress
from app.schemas import user_progress as progress_schema


def score_percentage(progress: UserProgress) -> float:
    """응시 1건의 백분율 점수 (문제 수 0이면 0)"""
    if progress.total_questions <= 0:
        return 0.0
    return progress.score / progress.total_questions * 100


def average_score(records: list[UserProgress]) -> int:
    if not records:
        return 0
    return round(sum(score_percentage(p) for p in records) / len(records))


async def get_progress_summary(store: MemoryStore, user_id: str) -> progress_schema.ProgressSummaryResponse:
    """사용자 학습 진행 요약 (전체 응시 이력 기준, 중복 제거 없음)"""
    records = await progress_crud.get_user_progress_by_user_id(store, user_id)

    by_resource: dict[str, list[UserProgress]] = {}
    for record in records:
        by_resource.setdefault(record.resource_id, []).append(record)

    resource_summaries = []
    for resource_id, resource_records in by_resource.items():
        resource = await resource_crud.get_resource_by_id(store, resource_id)
        if not resource:
            continue

        quizzes_completed = len({r.quiz_id for r in resource_records})
        completion = min(quizzes_completed / (resource.total_quizzes or 1) * 100, 100.0)
        resource_summaries.append(
            progress_schema.ResourceProgressSummary(
                resource_id=resource_id,
                title=resource.title,
                attempts=len(resource_records),
                quizzes_completed=quizzes_completed,
                average_score=average_score(resource_records),
                completion_percentage=completion,
            )
        )

    return progress_schema.ProgressSummaryResponse(
        user_id=user_id,
        total_attempts=len(records),
        average_score=average_score(records),
        resources=resource_summaries,
    )
