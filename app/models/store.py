import threading
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request

from app.models.quiz import Quiz
from app.models.resource import Resource
from app.models.user_progress import UserProgress


class MemoryStore:
    """프로세스 메모리 기반 엔티티 저장소

    리소스/퀴즈/응시 기록 세 종류의 맵을 소유합니다. 모든 연산은
    transaction() 안에서 수행되어 다른 연산과 원자적으로 실행됩니다.
    프로세스가 종료되면 데이터는 사라집니다.
    """

    def __init__(self) -> None:
        self.resources: dict[str, Resource] = {}
        self.quizzes: dict[str, Quiz] = {}
        self.user_progress: dict[str, UserProgress] = {}
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["MemoryStore"]:
        """저장소 전체 잠금 (재진입 가능)"""
        with self._lock:
            yield self


def get_store(request: Request) -> MemoryStore:
    """요청이 속한 애플리케이션의 저장소 의존성"""
    return request.app.state.store
