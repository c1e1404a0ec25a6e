from pydantic import Field, field_validator

from app.models.base import Base


class ResourceCreateRequest(Base):
    """리소스 생성 요청 스키마"""
    title: str = Field(..., min_length=1, description="리소스 제목")
    description: str | None = Field(None, description="설명")
    cover_image_url: str | None = Field(None, description="표지 이미지 URL")
    total_quizzes: int = Field(0, ge=0, strict=True, description="초기 퀴즈 개수 (기본값 0)")


class ResourceUpdateRequest(Base):
    """리소스 부분 수정 요청 스키마 (전달된 필드만 반영)"""
    title: str | None = Field(None, min_length=1)
    description: str | None = None
    cover_image_url: str | None = None
    total_quizzes: int | None = Field(None, ge=0, strict=True)

    @field_validator("title", "total_quizzes")
    @classmethod
    def reject_null(cls, v):
        # 필수 필드는 생략만 가능하고 null로 지울 수 없음
        if v is None:
            raise ValueError("field cannot be null")
        return v
