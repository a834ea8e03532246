"""Tag Service - CRUD over tags with their products."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventory_api.core.exceptions import (
    InvalidPayloadError,
    NotFoundError,
    PersistenceError,
)
from inventory_api.infra.logging import get_logger
from inventory_api.infra.repository import Repository
from inventory_api.models.tag import Tag
from inventory_api.schemas.tag import TagCreate, TagUpdate
from inventory_api.services.base_service import BaseResourceService

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "No tag found with this id!"


class TagService(BaseResourceService):
    """Tags, each read together with the products it labels."""

    entity = "tag"

    def __init__(
        self,
        db_session: AsyncSession,
        tags: Repository[Tag] | None = None,
    ) -> None:
        super().__init__(db_session)
        self.tags = tags or Repository(db_session, Tag)

    async def list_tags(self) -> list[Tag]:
        try:
            return await self.tags.find_all(selectinload(Tag.products))
        except SQLAlchemyError as e:
            await self._abort(e, "list")
            raise PersistenceError("Error fetching tags.") from e

    async def get_tag(self, tag_id: int) -> Tag:
        try:
            tag = await self.tags.find_by_pk(tag_id, selectinload(Tag.products))
        except SQLAlchemyError as e:
            await self._abort(e, "get", tag_id=tag_id)
            raise PersistenceError("Error fetching tag.") from e

        if tag is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return tag

    async def create_tag(self, payload: TagCreate) -> Tag:
        """Create a tag.

        Storage failures are reported as a client error (400), since the
        only input is the client-supplied name.
        """
        try:
            tag = await self.tags.create(payload.model_dump())
            await self._commit()
        except SQLAlchemyError as e:
            await self._abort(e, "create")
            raise InvalidPayloadError("Unable to create tag.") from e

        logger.info("Tag created", tag_id=tag.id)
        return tag

    async def update_tag(self, tag_id: int, payload: TagUpdate) -> list[int]:
        try:
            affected = await self.tags.update(payload.model_dump(exclude_unset=True), tag_id)
            if not affected:
                await self.db.rollback()
                raise NotFoundError(NOT_FOUND_MESSAGE)
            await self._commit()
        except SQLAlchemyError as e:
            await self._abort(e, "update", tag_id=tag_id)
            raise PersistenceError("Error updating tag.") from e

        return [affected]

    async def delete_tag(self, tag_id: int) -> None:
        try:
            affected = await self.tags.destroy(tag_id)
            if not affected:
                await self.db.rollback()
                raise NotFoundError(NOT_FOUND_MESSAGE)
            await self._commit()
        except SQLAlchemyError as e:
            await self._abort(e, "delete", tag_id=tag_id)
            raise PersistenceError("Error deleting tag.") from e

        logger.info("Tag deleted", tag_id=tag_id)
