import uuid
from datetime import datetime, timezone

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """도메인 모델 기본 클래스 (JSON은 camelCase, 입력은 snake_case도 허용)"""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


def generate_id() -> str:
    """엔티티 ID 생성 (UUID4 문자열)"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
