"""Category endpoints.

`/api/categories` - every category is returned with its products.
"""

from fastapi import APIRouter

from inventory_api.api.deps import Categories
from inventory_api.schemas.category import (
    CategoryCreate,
    CategoryRead,
    CategoryRecord,
    CategoryUpdate,
)
from inventory_api.schemas.common import MessageResponse

router = APIRouter()

_NOT_FOUND = {404: {"model": MessageResponse, "description": "No category with this id"}}
_FAILED = {500: {"model": MessageResponse, "description": "Database error"}}


@router.get("", response_model=list[CategoryRead], responses=_FAILED)
async def list_categories(service: Categories) -> list[CategoryRead]:
    categories = await service.list_categories()
    return [CategoryRead.model_validate(c) for c in categories]


@router.get("/{category_id}", response_model=CategoryRead, responses={**_NOT_FOUND, **_FAILED})
async def get_category(category_id: int, service: Categories) -> CategoryRead:
    category = await service.get_category(category_id)
    return CategoryRead.model_validate(category)


@router.post("", response_model=CategoryRecord, responses=_FAILED)
async def create_category(payload: CategoryCreate, service: Categories) -> CategoryRecord:
    category = await service.create_category(payload)
    return CategoryRecord.model_validate(category)


@router.put("/{category_id}", response_model=list[int], responses={**_NOT_FOUND, **_FAILED})
async def update_category(
    category_id: int,
    payload: CategoryUpdate,
    service: Categories,
) -> list[int]:
    return await service.update_category(category_id, payload)


@router.delete("/{category_id}", response_model=MessageResponse, responses={**_NOT_FOUND, **_FAILED})
async def delete_category(category_id: int, service: Categories) -> MessageResponse:
    await service.delete_category(category_id)
    return MessageResponse(message="Category deleted!")
