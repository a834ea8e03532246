"""Tests for product request/response schemas."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from inventory_api.models import Category, Product, Tag
from inventory_api.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductRecord,
    ProductUpdate,
)


class TestProductCreate:
    """Tests for ProductCreate."""

    def test_tag_ids_alias(self):
        payload = ProductCreate.model_validate(
            {"product_name": "Lamp", "price": 12.5, "tagIds": [1, 2]}
        )

        assert payload.tag_ids == [1, 2]
        assert payload.stock == 0

    def test_product_fields_exclude_tag_ids(self):
        payload = ProductCreate.model_validate(
            {"product_name": "Lamp", "price": "12.50", "tagIds": [1]}
        )

        assert payload.product_fields() == {
            "product_name": "Lamp",
            "price": Decimal("12.50"),
            "stock": 0,
            "category_id": None,
        }

    @pytest.mark.parametrize(
        "body",
        [
            {"price": 1},
            {"product_name": "Lamp"},
            {"product_name": "Lamp", "price": -0.01},
            {"product_name": "Lamp", "price": 1, "stock": -1},
            {"product_name": "Lamp", "price": 1.234},
            {"product_name": "Lamp", "price": 1, "tagIds": "1,2"},
            {"product_name": "Lamp", "price": 1, "tagIds": [0]},
            {"product_name": "Lamp", "price": 1, "tagIds": [2**64]},
            {"product_name": "Lamp", "price": 1, "category_id": 2**31},
            {"product_name": "Lamp", "price": 1, "stock": 2**63},
            {"product_name": "Lamp", "price": 1, "sku": "L-1"},
        ],
    )
    def test_rejects_malformed_bodies(self, body):
        with pytest.raises(ValidationError):
            ProductCreate.model_validate(body)


class TestProductUpdate:
    """Tests for ProductUpdate."""

    def test_only_sent_fields_are_updated(self):
        payload = ProductUpdate.model_validate({"stock": 3, "tagIds": [4]})

        assert payload.product_fields() == {"stock": 3}
        assert payload.tag_ids == [4]

    def test_category_can_be_cleared(self):
        payload = ProductUpdate.model_validate({"category_id": None})

        assert payload.product_fields() == {"category_id": None}

    def test_required_columns_cannot_be_nulled(self):
        with pytest.raises(ValidationError):
            ProductUpdate.model_validate({"price": None})


class TestProductRead:
    """Tests for ProductRead serialization."""

    def test_price_serializes_as_number(self):
        product = Product(id=1, product_name="Lamp", price=Decimal("19.99"), stock=4, category_id=None)

        data = ProductRecord.model_validate(product).model_dump(mode="json")

        assert data["price"] == 19.99

    def test_includes_category_and_tags(self):
        product = Product(id=1, product_name="Lamp", price=Decimal("5.00"), stock=1, category_id=2)
        product.category = Category(id=2, category_name="Home")
        product.tags = [Tag(id=3, tag_name="gold")]

        data = ProductRead.model_validate(product).model_dump(mode="json", by_alias=True)

        assert data["Category"] == {"id": 2, "category_name": "Home"}
        assert data["Tags"] == [{"id": 3, "tag_name": "gold"}]

    def test_accepts_its_own_serialized_keys(self):
        data = {
            "id": 1,
            "product_name": "Lamp",
            "price": 5,
            "stock": 1,
            "Category": {"id": 2, "category_name": "Home"},
            "Tags": [{"id": 3, "tag_name": "gold"}],
        }

        product = ProductRead.model_validate(data)

        assert product.category.category_name == "Home"
        assert [tag.id for tag in product.tags] == [3]
