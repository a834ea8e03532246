"""Category model - groups products one-to-many."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_api.models.base import Base

if TYPE_CHECKING:
    from inventory_api.models.product import Product


class Category(Base):
    """Product category.

    A product references at most one category; deleting a category leaves
    its products uncategorised.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships (loaded explicitly per query)
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="category",
        order_by="Product.id",
        passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, category_name='{self.category_name}')>"
