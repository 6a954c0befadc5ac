"""Tests for CartService."""

import pytest

from peakpulse.core.exceptions import (
    InsufficientStockException,
    NotFoundException,
    ProductNotFoundException,
    VariantNotFoundException,
)
from peakpulse.services.cart_service import CartService
from peakpulse.services.product_service import ProductService

USER_ID = 1


class TestCartItemIds:
    def test_make_and_parse_item_id(self):
        assert CartService.make_item_id(5) == "5"
        assert CartService.make_item_id(5, 3) == "5-3"
        assert CartService.parse_item_id("5") == (5, None)
        assert CartService.parse_item_id("5-3") == (5, 3)


class TestCartService:
    def test_add_item_accumulates_quantity(self, make_product, test_db, redis_client, settings):
        """같은 항목을 다시 담으면 수량이 합산됨"""
        product = make_product(price=4500)

        CartService.add_item(USER_ID, product.id, 1, test_db, redis_client, settings)
        cart = CartService.add_item(USER_ID, product.id, 2, test_db, redis_client, settings)

        assert cart["item_count"] == 3
        assert cart["subtotal"] == 13500
        assert cart["items"][0]["item_id"] == str(product.id)
        assert cart["items"][0]["line_total"] == 13500
        assert 0 < redis_client.ttl(f"cart:{USER_ID}") <= settings.cart_ttl_seconds

    def test_add_variant_uses_variant_price(self, make_product, test_db, redis_client, settings):
        product = make_product(
            price=4500, variants=[{"name": "Size", "value": "XL", "price": 4900, "stock": 3}]
        )
        variant = product.variants[0]

        cart = CartService.add_item(
            USER_ID, product.id, 2, test_db, redis_client, settings, variant_id=variant.id
        )

        item = cart["items"][0]
        assert item["item_id"] == f"{product.id}-{variant.id}"
        assert item["name"] == "Himalayan Hoodie (Size: XL)"
        assert item["unit_price"] == 4900
        assert cart["subtotal"] == 9800

    def test_add_unknown_product(self, test_db, redis_client, settings):
        with pytest.raises(ProductNotFoundException):
            CartService.add_item(USER_ID, 999, 1, test_db, redis_client, settings)

    def test_add_unknown_variant(self, make_product, test_db, redis_client, settings):
        product = make_product()

        with pytest.raises(VariantNotFoundException):
            CartService.add_item(USER_ID, product.id, 1, test_db, redis_client, settings, variant_id=42)

    def test_add_beyond_stock_rejected(self, make_product, test_db, redis_client, settings):
        """누적 수량이 현재 재고를 넘으면 장바구니가 바뀌지 않음"""
        product = make_product(stock=3)
        CartService.add_item(USER_ID, product.id, 2, test_db, redis_client, settings)

        with pytest.raises(InsufficientStockException) as exc_info:
            CartService.add_item(USER_ID, product.id, 2, test_db, redis_client, settings)

        assert (exc_info.value.requested, exc_info.value.available) == (4, 3)
        assert CartService.get_cart(USER_ID, test_db, redis_client)["item_count"] == 2

    def test_add_checks_variant_stock(self, make_product, test_db, redis_client, settings):
        product = make_product(stock=10, variants=[{"name": "Size", "value": "S", "price": 4500, "stock": 1}])
        variant = product.variants[0]
        redis_client.delete(f"stock:{product.id}:{variant.id}")

        with pytest.raises(InsufficientStockException):
            CartService.add_item(USER_ID, product.id, 2, test_db, redis_client, settings, variant_id=variant.id)

        # Redis 키가 없으면 DB 재고로 초기화
        assert redis_client.get(f"stock:{product.id}:{variant.id}") == "1"

    def test_update_item_quantity(self, make_product, test_db, redis_client, settings):
        product = make_product(price=1000)
        CartService.add_item(USER_ID, product.id, 1, test_db, redis_client, settings)

        cart = CartService.update_item(USER_ID, str(product.id), 5, test_db, redis_client, settings)

        assert cart["item_count"] == 5
        assert cart["subtotal"] == 5000

    def test_update_to_zero_removes_item(self, make_product, test_db, redis_client, settings):
        product = make_product()
        CartService.add_item(USER_ID, product.id, 1, test_db, redis_client, settings)

        cart = CartService.update_item(USER_ID, str(product.id), 0, test_db, redis_client, settings)

        assert cart["items"] == []

    def test_update_missing_item(self, test_db, redis_client, settings):
        with pytest.raises(NotFoundException):
            CartService.update_item(USER_ID, "1", 2, test_db, redis_client, settings)

    def test_remove_and_clear(self, make_product, test_db, redis_client, settings):
        tee = make_product(name="Everest Tee", price=1800)
        cap = make_product(name="Summit Cap", price=900)
        CartService.add_item(USER_ID, tee.id, 1, test_db, redis_client, settings)
        CartService.add_item(USER_ID, cap.id, 1, test_db, redis_client, settings)

        cart = CartService.remove_item(USER_ID, str(tee.id), test_db, redis_client)
        assert [item["product_id"] for item in cart["items"]] == [cap.id]

        CartService.clear(USER_ID, redis_client)
        assert CartService.get_cart(USER_ID, test_db, redis_client)["item_count"] == 0

    def test_carts_are_per_user(self, make_product, test_db, redis_client, settings):
        product = make_product()
        CartService.add_item(USER_ID, product.id, 1, test_db, redis_client, settings)

        assert CartService.get_cart(USER_ID + 1, test_db, redis_client)["items"] == []

    def test_deleted_product_dropped_from_cart(self, make_product, test_db, redis_client, settings):
        """삭제된 상품은 장바구니 조회 시 제거됨"""
        product = make_product()
        CartService.add_item(USER_ID, product.id, 1, test_db, redis_client, settings)
        redis_client.hset(f"cart:{USER_ID}", "not-a-number", 1)

        ProductService.delete_product(product.id, test_db, redis_client)
        cart = CartService.get_cart(USER_ID, test_db, redis_client)

        assert cart == {"items": [], "item_count": 0, "subtotal": 0}
        assert redis_client.hgetall(f"cart:{USER_ID}") == {}
