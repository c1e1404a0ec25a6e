from typing import Any, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from app.exceptions import PayloadValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# FastAPI가 오류 위치 앞에 붙이는 요청 영역 이름
_REQUEST_LOCATIONS = {"body", "query", "path", "form"}


class FieldError(BaseModel):
    """필드 단위 검증 오류"""
    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """오류 응답 스키마"""
    message: str
    errors: list[FieldError] | None = None


def format_field_errors(errors: Sequence[Any]) -> list[dict]:
    """pydantic/FastAPI 오류 목록을 {field, message, type} 목록으로 변환"""
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if error.get("type") == "json_invalid":
            # JSON 파싱 오류의 loc는 필드가 아닌 문자 위치
            loc = []
        elif len(loc) > 1 and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        formatted.append(
            FieldError(
                field=".".join(loc) or "body",
                message=error.get("msg", ""),
                type=error.get("type", ""),
            ).model_dump()
        )
    return formatted


def validate_payload(schema: type[SchemaT], data: dict) -> SchemaT:
    """서버에서 조립한 입력을 스키마로 검증 (실패 시 PayloadValidationError)"""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise PayloadValidationError(format_field_errors(e.errors()))


# 라우터 공통 오류 응답 문서화
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "검증 오류"},
    404: {"model": ErrorResponse, "description": "대상 없음"},
    500: {"model": ErrorResponse, "description": "서버 오류"},
}
