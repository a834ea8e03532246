"""Tag endpoints.

`/api/tags` - every tag is returned with the products it labels.
"""

from fastapi import APIRouter

from inventory_api.api.deps import Tags
from inventory_api.schemas.common import MessageResponse
from inventory_api.schemas.tag import TagCreate, TagRead, TagRecord, TagUpdate

router = APIRouter()

_NOT_FOUND = {404: {"model": MessageResponse, "description": "No tag with this id"}}
_FAILED = {500: {"model": MessageResponse, "description": "Database error"}}


@router.get("", response_model=list[TagRead], responses=_FAILED)
async def list_tags(service: Tags) -> list[TagRead]:
    tags = await service.list_tags()
    return [TagRead.model_validate(t) for t in tags]


@router.get("/{tag_id}", response_model=TagRead, responses={**_NOT_FOUND, **_FAILED})
async def get_tag(tag_id: int, service: Tags) -> TagRead:
    return TagRead.model_validate(await service.get_tag(tag_id))


@router.post(
    "",
    response_model=TagRecord,
    responses={400: {"model": MessageResponse, "description": "Tag could not be stored"}},
)
async def create_tag(payload: TagCreate, service: Tags) -> TagRecord:
    return TagRecord.model_validate(await service.create_tag(payload))


@router.put("/{tag_id}", response_model=list[int], responses={**_NOT_FOUND, **_FAILED})
async def update_tag(tag_id: int, payload: TagUpdate, service: Tags) -> list[int]:
    return await service.update_tag(tag_id, payload)


@router.delete("/{tag_id}", response_model=MessageResponse, responses={**_NOT_FOUND, **_FAILED})
async def delete_tag(tag_id: int, service: Tags) -> MessageResponse:
    await service.delete_tag(tag_id)
    return MessageResponse(message="Tag deleted!")
