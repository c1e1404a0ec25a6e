import logging

from fastapi import APIRouter, Depends, File, Form, Path, UploadFile, status

from app.core.config import settings
from app.crud import quiz as quiz_crud, resource as resource_crud
from app.exceptions import ResourceNotFoundError
from app.models import Quiz, Resource
from app.models.store import MemoryStore, get_store
from app.schemas import resource as resource_schema
from app.schemas.common import ERROR_RESPONSES
from app.services import document_service, quiz_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resources", tags=["resources"], responses=ERROR_RESPONSES)


@router.get("", response_model=list[Resource])
async def get_resources(
    store: MemoryStore = Depends(get_store),
):
    """리소스 목록 조회 API"""
    return await resource_crud.get_all_resources(store)


@router.get("/{resource_id}", response_model=Resource)
async def get_resource(
    resource_id: str = Path(..., min_length=1),
    store: MemoryStore = Depends(get_store),
):
    """리소스 조회 API"""
    resource = await resource_crud.get_resource_by_id(store, resource_id)
    if not resource:
        raise ResourceNotFoundError(resource_id)
    return resource


@router.post("", response_model=Resource, status_code=status.HTTP_201_CREATED)
async def create_resource(
    request: resource_schema.ResourceCreateRequest,
    store: MemoryStore = Depends(get_store),
):
    """리소스 생성 API"""
    resource = await resource_crud.create_resource(store, request)
    logger.info(f"리소스 생성: resource_id={resource.id}, title={resource.title}")
    return resource


@router.get("/{resource_id}/quizzes", response_model=list[Quiz])
async def get_resource_quizzes(
    resource_id: str = Path(..., min_length=1),
    store: MemoryStore = Depends(get_store),
):
    """리소스별 퀴즈 목록 조회 API"""
    return await quiz_crud.get_quizzes_by_resource_id(store, resource_id)


@router.post("/{resource_id}/quizzes", response_model=Quiz, status_code=status.HTTP_201_CREATED)
async def upload_quiz(
    resource_id: str = Path(..., min_length=1),
    title: str | None = Form(None),
    description: str | None = Form(None),
    document: UploadFile | None = File(None),
    store: MemoryStore = Depends(get_store),
):
    """문서 업로드로 퀴즈 생성 API (관리자용, multipart/form-data)"""
    content = None
    if document:
        if document.size is not None:
            document_service.check_document(document.content_type, document.size)
        # 제한 + 1 바이트까지만 읽음 (초과 여부는 서비스에서 판정)
        content = await document.read(settings.max_upload_size_bytes + 1)
    return await quiz_service.create_quiz_from_document(
        store,
        resource_id=resource_id,
        title=title,
        description=description,
        content=content,
        content_type=document.content_type if document else None,
    )
