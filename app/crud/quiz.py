from app.models.base import generate_id, utcnow
from app.models.quiz import Quiz
from app.models.store import MemoryStore
from app.schemas.quiz import QuizCreateRequest


async def get_quizzes_by_resource_id(store: MemoryStore, resource_id: str) -> list[Quiz]:
    """리소스별 퀴즈 목록 조회"""
    with store.transaction():
        return [
            quiz.model_copy(deep=True)
            for quiz in store.quizzes.values()
            if quiz.resource_id == resource_id
        ]


async def get_quiz_by_id(store: MemoryStore, quiz_id: str) -> Quiz | None:
    """ID로 퀴즈 조회"""
    with store.transaction():
        quiz = store.quizzes.get(quiz_id)
        return quiz.model_copy(deep=True) if quiz else None


async def create_quiz(store: MemoryStore, data: QuizCreateRequest) -> Quiz:
    """퀴즈 생성

    같은 트랜잭션에서 상위 리소스의 total_quizzes를 1 증가시킵니다.
    상위 리소스가 없으면 카운터 갱신 없이 퀴즈만 저장합니다.
    """
    quiz = Quiz(
        id=generate_id(),
        resource_id=data.resource_id,
        title=data.title,
        description=data.description,
        questions=[question.model_copy(deep=True) for question in data.questions],
        created_at=utcnow(),
    )
    with store.transaction():
        resource = store.resources.get(quiz.resource_id)
        updated_resource = None
        if resource:
            updated_resource = resource.model_copy(update={"total_quizzes": resource.total_quizzes + 1})

        store.quizzes[quiz.id] = quiz
        if updated_resource:
            store.resources[updated_resource.id] = updated_resource
    return quiz.model_copy(deep=True)


async def delete_quiz(store: MemoryStore, quiz_id: str) -> bool:
    """퀴즈 삭제 (상위 리소스 total_quizzes 1 감소, 0 미만으로 내려가지 않음)"""
    with store.transaction():
        quiz = store.quizzes.pop(quiz_id, None)
        if not quiz:
            return False

        resource = store.resources.get(quiz.resource_id)
        if resource and resource.total_quizzes > 0:
            store.resources[resource.id] = resource.model_copy(
                update={"total_quizzes": resource.total_quizzes - 1}
            )
        return True
