"""Product request and response schemas.

`tagIds` is accepted on create and update; it drives the product's tag
associations and is never stored on the product row itself.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from inventory_api.schemas.common import Money, Name, RowId


class _ProductWrite(BaseModel):
    """Shared handling of the `tagIds` field."""

    tag_ids: list[RowId] | None = Field(
        default=None,
        alias="tagIds",
        description="Tag ids the product should be associated with",
    )

    model_config = {"extra": "forbid", "populate_by_name": True}

    def product_fields(self) -> dict[str, Any]:
        """Column values explicitly sent by the client, without `tagIds`."""
        return self.model_dump(exclude={"tag_ids"}, exclude_unset=True)


class ProductCreate(_ProductWrite):
    product_name: Name
    price: Money
    stock: int = Field(default=0, ge=0, le=2**31 - 1)
    category_id: RowId | None = None

    def product_fields(self) -> dict[str, Any]:
        # Defaults count on insert
        return self.model_dump(exclude={"tag_ids"})


class ProductUpdate(_ProductWrite):
    product_name: Name | None = None
    price: Money | None = None
    stock: int | None = Field(default=None, ge=0, le=2**31 - 1)
    category_id: RowId | None = None

    @field_validator("product_name", "price", "stock")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Only `category_id` may be cleared with null."""
        if v is None:
            raise ValueError("field cannot be null")
        return v


class ProductRecord(BaseModel):
    """Product row without relations."""

    id: int
    product_name: str
    price: Money
    stock: int
    category_id: int | None = None

    model_config = {"from_attributes": True}


class CategoryRef(BaseModel):
    id: int
    category_name: str

    model_config = {"from_attributes": True}


class TagRecord(BaseModel):
    """Tag row without relations."""

    id: int
    tag_name: str

    model_config = {"from_attributes": True}


class ProductRead(ProductRecord):
    """Product with its category and tags."""

    category: CategoryRef | None = Field(
        default=None,
        validation_alias=AliasChoices("category", "Category"),
        serialization_alias="Category",
    )
    tags: list[TagRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("tags", "Tags"),
        serialization_alias="Tags",
    )
