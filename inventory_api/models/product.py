"""Product model - stock-keeping item with a category and tags."""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_api.models.base import Base

if TYPE_CHECKING:
    from inventory_api.models.category import Category
    from inventory_api.models.tag import Tag


class Product(Base):
    """Product in the inventory.

    Tags are attached through the `product_tag` join table.
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Relationships (loaded explicitly per query)
    category: Mapped["Category | None"] = relationship(
        "Category",
        back_populates="products",
        lazy="raise",
    )
    tags: Mapped[list["Tag"]] = relationship(
        "Tag",
        secondary="product_tag",
        back_populates="products",
        order_by="Tag.id",
        passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, product_name='{self.product_name}')>"
