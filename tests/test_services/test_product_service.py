"""Tests for ProductService transaction handling with mocked collaborators."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.core.exceptions import (
    InvalidPayloadError,
    NotFoundError,
    PersistenceError,
)
from inventory_api.infra.repository import Repository
from inventory_api.models.product import Product
from inventory_api.schemas.product import ProductCreate, ProductUpdate
from inventory_api.services.product_service import ProductService
from inventory_api.services.tag_reconciler import ProductTagReconciler, TagDiff


class TestProductService:
    """Tests for ProductService."""

    @pytest.fixture
    def mock_db_session(self) -> AsyncSession:
        return AsyncMock(spec=AsyncSession)

    @pytest.fixture
    def products(self) -> Repository:
        return AsyncMock(spec=Repository)

    @pytest.fixture
    def reconciler(self) -> ProductTagReconciler:
        mock = MagicMock(spec=ProductTagReconciler)
        mock.attach = AsyncMock(return_value=[])
        mock.reconcile = AsyncMock(return_value=TagDiff(to_add=(), to_remove=()))
        return mock

    @pytest.fixture
    def service(self, mock_db_session, products, reconciler) -> ProductService:
        return ProductService(mock_db_session, products=products, reconciler=reconciler)

    @pytest.mark.asyncio
    async def test_create_attaches_tags_then_commits(
        self, service, mock_db_session, products, reconciler
    ):
        products.create.return_value = Product(
            id=7, product_name="Lamp", price=Decimal("19.99"), stock=2, category_id=None
        )
        payload = ProductCreate(product_name="Lamp", price=Decimal("19.99"), stock=2, tagIds=[1, 2, 3, 4])

        product = await service.create_product(payload)

        assert product.id == 7
        products.create.assert_awaited_once_with(
            {"product_name": "Lamp", "price": Decimal("19.99"), "stock": 2, "category_id": None}
        )
        reconciler.attach.assert_awaited_once_with(7, [1, 2, 3, 4])
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_without_tags_skips_attach(self, service, products, reconciler):
        products.create.return_value = Product(id=8, product_name="Lamp", price=Decimal("1"), stock=0)

        await service.create_product(ProductCreate(product_name="Lamp", price=Decimal("1")))

        reconciler.attach.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_failure_rolls_back(self, service, mock_db_session, products, reconciler):
        products.create.return_value = Product(id=9, product_name="Lamp", price=Decimal("1"), stock=0)
        reconciler.attach.side_effect = IntegrityError("INSERT", {}, Exception("fk"))

        with pytest.raises(InvalidPayloadError) as exc_info:
            await service.create_product(
                ProductCreate(product_name="Lamp", price=Decimal("1"), tagIds=[999])
            )

        assert exc_info.value.message == "Unable to create product."
        mock_db_session.rollback.assert_awaited()
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_missing_product_skips_reconcile(
        self, service, mock_db_session, products, reconciler
    ):
        products.update.return_value = 0

        with pytest.raises(NotFoundError):
            await service.update_product(999, ProductUpdate(tagIds=[1]))

        reconciler.reconcile.assert_not_awaited()
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_reconciles_inside_transaction(
        self, service, mock_db_session, products, reconciler
    ):
        products.update.return_value = 1

        result = await service.update_product(3, ProductUpdate(stock=5, tagIds=[1, 2]))

        assert result == [1]
        products.update.assert_awaited_once_with({"stock": 5}, 3)
        reconciler.reconcile.assert_awaited_once_with(3, [1, 2])
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_reconcile_error_is_reported(
        self, service, mock_db_session, products, reconciler
    ):
        products.update.return_value = 1
        reconciler.reconcile.side_effect = SQLAlchemyError("deadlock")

        with pytest.raises(PersistenceError) as exc_info:
            await service.update_product(3, ProductUpdate(tagIds=[1]))

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Error updating product."
        mock_db_session.rollback.assert_awaited()
        mock_db_session.commit.assert_not_awaited()
