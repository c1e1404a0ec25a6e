from app.core.config import settings
from app.exceptions import InvalidRequestError
from app.models.base import generate_id

ALLOWED_DOCUMENT_TYPES = {
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain",
}


def check_document(content_type: str | None, size: int) -> None:
    """업로드 문서 형식/크기 검증"""
    # "text/plain; charset=utf-8" 형태의 파라미터 제거
    mime_type = (content_type or "").split(";")[0].strip().lower()
    if mime_type not in ALLOWED_DOCUMENT_TYPES:
        raise InvalidRequestError("Invalid file type. Only PDF, DOCX, and TXT files are allowed.")
    if size > settings.max_upload_size_bytes:
        raise InvalidRequestError(f"File too large. Maximum size is {settings.max_upload_size_mb}MB.")


def parse_quiz_document(content: bytes, content_type: str | None) -> list[dict]:
    """업로드 문서에서 문제 추출

    실제 문서 파싱은 지원하지 않으며, 입력과 무관하게 샘플 문제 1개를 반환합니다.
    """
    options = [
        {"id": generate_id(), "text": f"Option {letter}", "letter": letter}
        for letter in ("A", "B", "C", "D")
    ]
    return [
        {
            "id": generate_id(),
            "text": "Sample question parsed from uploaded document?",
            "options": options,
            "correctAnswerId": options[0]["id"],
            "explanation": "This is a sample explanation parsed from the document.",
        }
    ]
