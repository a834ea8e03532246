"""ProductTag model - product/tag join rows."""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from inventory_api.models.base import Base


class ProductTag(Base):
    """One product/tag association.

    Has its own surrogate key so stale rows can be removed by id.
    There is no unique constraint on (product_id, tag_id); the
    reconciler never inserts a pair that is already present.
    """

    __tablename__ = "product_tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<ProductTag(id={self.id}, product_id={self.product_id}, tag_id={self.tag_id})>"
