"""커스텀 예외 클래스 정의"""


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""

    def __init__(self, message: str, status_code: int = 500, errors: list[dict] | None = None):
        self.message = message
        self.status_code = status_code
        self.errors = errors
        super().__init__(self.message)


class ResourceNotFoundError(BaseAppError):
    """리소스를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__("Resource not found", status_code=404)


class QuizNotFoundError(BaseAppError):
    """퀴즈를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, quiz_id: str):
        self.quiz_id = quiz_id
        super().__init__("Quiz not found", status_code=404)


class InvalidRequestError(BaseAppError):
    """잘못된 요청일 때 발생하는 예외 (400)"""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class PayloadValidationError(BaseAppError):
    """스키마 검증 실패 (400, 필드별 오류 목록 포함)"""

    def __init__(self, errors: list[dict], message: str = "Invalid data"):
        super().__init__(message, status_code=400, errors=errors)


class GenerationError(BaseAppError):
    """보너스 문제 생성 실패 (500, 메시지는 클라이언트에 그대로 전달)"""

    def __init__(self, message: str = "Failed to generate bonus questions. Please try again."):
        super().__init__(message, status_code=500)
