"""Tag request and response schemas."""

from pydantic import AliasChoices, BaseModel, Field

from inventory_api.schemas.common import Name
from inventory_api.schemas.product import ProductRecord, TagRecord


class TagCreate(BaseModel):
    tag_name: Name

    model_config = {"extra": "forbid"}


class TagUpdate(BaseModel):
    tag_name: Name | None = None

    model_config = {"extra": "forbid"}


class TagRead(TagRecord):
    """Tag with the products it is attached to."""

    products: list[ProductRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("products", "Products"),
        serialization_alias="Products",
    )
