from fastapi import APIRouter, Depends, Path, status

from app.crud import user_progress as progress_crud
from app.models import UserProgress
from app.models.store import MemoryStore, get_store
from app.schemas import user_progress as progress_schema
from app.schemas.common import ERROR_RESPONSES
from app.services import progress_service

router = APIRouter(prefix="/progress", tags=["progress"], responses=ERROR_RESPONSES)


@router.get("/{user_id}", response_model=list[UserProgress])
async def get_user_progress(
    user_id: str = Path(..., min_length=1),
    store: MemoryStore = Depends(get_store),
):
    """사용자 응시 기록 조회 API"""
    return await progress_crud.get_user_progress_by_user_id(store, user_id)


@router.get("/{user_id}/summary", response_model=progress_schema.ProgressSummaryResponse)
async def get_progress_summary(
    user_id: str = Path(..., min_length=1),
    store: MemoryStore = Depends(get_store),
):
    """사용자 학습 진행 요약 API (평균 점수, 리소스별 완료율)"""
    return await progress_service.get_progress_summary(store, user_id)


@router.get("/{user_id}/resources/{resource_id}", response_model=list[UserProgress])
async def get_user_resource_progress(
    user_id: str = Path(..., min_length=1),
    resource_id: str = Path(..., min_length=1),
    store: MemoryStore = Depends(get_store),
):
    """사용자 + 리소스 기준 응시 기록 조회 API"""
    return await progress_crud.get_user_progress_by_user_and_resource(store, user_id, resource_id)


@router.post("", response_model=UserProgress, status_code=status.HTTP_201_CREATED)
async def save_user_progress(
    request: progress_schema.UserProgressCreateRequest,
    store: MemoryStore = Depends(get_store),
):
    """응시 기록 저장 API"""
    return await progress_crud.save_user_progress(store, request)
