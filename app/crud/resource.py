from app.models.base import generate_id, utcnow
from app.models.resource import Resource
from app.models.store import MemoryStore
from app.schemas.resource import ResourceCreateRequest, ResourceUpdateRequest


async def get_all_resources(store: MemoryStore) -> list[Resource]:
    """모든 리소스 조회"""
    with store.transaction():
        return [resource.model_copy(deep=True) for resource in store.resources.values()]


async def get_resource_by_id(store: MemoryStore, resource_id: str) -> Resource | None:
    """ID로 리소스 조회"""
    with store.transaction():
        resource = store.resources.get(resource_id)
        return resource.model_copy(deep=True) if resource else None


async def create_resource(store: MemoryStore, data: ResourceCreateRequest) -> Resource:
    """리소스 생성"""
    resource = Resource(
        id=generate_id(),
        title=data.title,
        description=data.description,
        cover_image_url=data.cover_image_url,
        total_quizzes=data.total_quizzes,
        created_at=utcnow(),
    )
    with store.transaction():
        store.resources[resource.id] = resource
    return resource.model_copy(deep=True)


async def update_resource(
    store: MemoryStore,
    resource_id: str,
    data: ResourceUpdateRequest,
) -> Resource | None:
    """리소스 부분 수정 (전달되지 않은 필드는 유지)"""
    with store.transaction():
        resource = store.resources.get(resource_id)
        if not resource:
            return None
        updated = resource.model_copy(update=data.model_dump(exclude_unset=True))
        store.resources[resource_id] = updated
        return updated.model_copy(deep=True)


async def delete_resource(store: MemoryStore, resource_id: str) -> bool:
    """리소스 삭제 (소속 퀴즈는 그대로 둠)"""
    with store.transaction():
        return store.resources.pop(resource_id, None) is not None
