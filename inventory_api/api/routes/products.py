"""Product endpoints.

`/api/products` - products are returned with their category and tags.
Create and update accept an optional `tagIds` list that drives the
product's tag associations.
"""

from fastapi import APIRouter

from inventory_api.api.deps import Products
from inventory_api.schemas.common import MessageResponse
from inventory_api.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductRecord,
    ProductUpdate,
)

router = APIRouter()

_NOT_FOUND = {404: {"model": MessageResponse, "description": "No product with this id"}}
_FAILED = {500: {"model": MessageResponse, "description": "Database error"}}


@router.get("", response_model=list[ProductRead], responses=_FAILED)
async def list_products(service: Products) -> list[ProductRead]:
    products = await service.list_products()
    return [ProductRead.model_validate(p) for p in products]


@router.get("/{product_id}", response_model=ProductRead, responses={**_NOT_FOUND, **_FAILED})
async def get_product(product_id: int, service: Products) -> ProductRead:
    return ProductRead.model_validate(await service.get_product(product_id))


@router.post(
    "",
    response_model=ProductRecord,
    summary="Create a product and attach its tags",
    responses={400: {"model": MessageResponse, "description": "Product could not be stored"}},
)
async def create_product(payload: ProductCreate, service: Products) -> ProductRecord:
    return ProductRecord.model_validate(await service.create_product(payload))


@router.put(
    "/{product_id}",
    response_model=list[int],
    summary="Update a product and reconcile its tags",
    responses={**_NOT_FOUND, **_FAILED},
)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: Products,
) -> list[int]:
    return await service.update_product(product_id, payload)


@router.delete("/{product_id}", response_model=MessageResponse, responses={**_NOT_FOUND, **_FAILED})
async def delete_product(product_id: int, service: Products) -> MessageResponse:
    await service.delete_product(product_id)
    return MessageResponse(message="Product deleted!")
