"""Tag model - free-form label attached to many products."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_api.models.base import Base

if TYPE_CHECKING:
    from inventory_api.models.product import Product


class Tag(Base):
    """Product tag, many-to-many with Product through `product_tag`."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tag_name: Mapped[str] = mapped_column(String(255), nullable=False)

    products: Mapped[list["Product"]] = relationship(
        "Product",
        secondary="product_tag",
        back_populates="tags",
        order_by="Product.id",
        passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, tag_name='{self.tag_name}')>"
