"""Category request and response schemas."""

from pydantic import AliasChoices, BaseModel, Field

from inventory_api.schemas.common import Name
from inventory_api.schemas.product import ProductRecord


class CategoryCreate(BaseModel):
    category_name: Name

    model_config = {"extra": "forbid"}


class CategoryUpdate(BaseModel):
    category_name: Name | None = None

    model_config = {"extra": "forbid"}


class CategoryRecord(BaseModel):
    """Category row without relations."""

    id: int
    category_name: str

    model_config = {"from_attributes": True}


class CategoryRead(CategoryRecord):
    """Category with its products."""

    products: list[ProductRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("products", "Products"),
        serialization_alias="Products",
    )
