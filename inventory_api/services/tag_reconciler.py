"""Product/tag association reconciliation.

Converges the `product_tag` rows of one product onto a desired set of tag
ids with the minimal set of inserts and deletes.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from inventory_api.infra.logging import get_logger
from inventory_api.infra.repository import Repository
from inventory_api.models.product_tag import ProductTag

logger = get_logger(__name__)


@dataclass(frozen=True)
class TagDiff:
    """Changes needed to converge a product's tags.

    Attributes:
        to_add: Tag ids to associate, in request order
        to_remove: Join-row ids whose tag is no longer wanted
    """

    to_add: tuple[int, ...]
    to_remove: tuple[int, ...]

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


def unique_ids(ids: Iterable[int]) -> list[int]:
    """Drop duplicate ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


def diff_product_tags(current: Sequence[ProductTag], desired: Iterable[int]) -> TagDiff:
    """Compute the add/remove sets between stored rows and desired tag ids.

    Args:
        current: Existing join rows for one product
        desired: Tag ids the product should end up with

    Returns:
        TagDiff with tag ids to insert and row ids to delete
    """
    wanted = unique_ids(desired)
    wanted_set = set(wanted)
    present = {row.tag_id for row in current}

    return TagDiff(
        to_add=tuple(tag_id for tag_id in wanted if tag_id not in present),
        to_remove=tuple(row.id for row in current if row.tag_id not in wanted_set),
    )


class ProductTagReconciler:
    """Applies tag associations for a product.

    Neither method commits; callers run them inside their own transaction.
    """

    def __init__(self, product_tags: Repository[ProductTag]) -> None:
        self._product_tags = product_tags

    async def attach(self, product_id: int, tag_ids: Iterable[int]) -> list[ProductTag]:
        """Insert one join row per tag id for a freshly created product."""
        rows = [
            {"product_id": product_id, "tag_id": tag_id}
            for tag_id in unique_ids(tag_ids)
        ]
        return await self._product_tags.bulk_create(rows)

    async def reconcile(self, product_id: int, tag_ids: Iterable[int]) -> TagDiff:
        """Converge the product's join rows onto ``tag_ids``.

        Removes rows for tags no longer listed and inserts rows for tags
        not yet associated.
        """
        current = await self._product_tags.find_all(product_id=product_id)
        diff = diff_product_tags(current, tag_ids)

        if diff.is_empty:
            logger.debug("Product tags already in sync", product_id=product_id)
            return diff

        await self._product_tags.destroy_many(diff.to_remove)
        await self._product_tags.bulk_create(
            {"product_id": product_id, "tag_id": tag_id} for tag_id in diff.to_add
        )

        logger.info(
            "Product tags reconciled",
            product_id=product_id,
            added=list(diff.to_add),
            removed_rows=list(diff.to_remove),
        )
        return diff
