"""
장바구니 서비스

사용자별 장바구니를 Redis Hash(cart:{user_id})에 저장합니다.
필드는 장바구니 항목 ID, 값은 수량입니다.
"""

from loguru import logger
from redis import Redis
from sqlalchemy.orm import Session

from peakpulse.core.config import Settings
from peakpulse.core.exceptions import InsufficientStockException, NotFoundException
from peakpulse.services.inventory_service import InventoryService
from peakpulse.services.product_service import ProductService


class CartService:
    """Redis 기반 장바구니 서비스 클래스"""

    @staticmethod
    def _cart_key(user_id: int) -> str:
        return f"cart:{user_id}"

    @staticmethod
    def make_item_id(product_id: int, variant_id: int | None = None) -> str:
        """
        장바구니 항목 ID를 생성합니다.

        Example:
            >>> CartService.make_item_id(5)
            '5'
            >>> CartService.make_item_id(5, 3)
            '5-3'
        """
        if variant_id is None:
            return str(product_id)
        return f"{product_id}-{variant_id}"

    @staticmethod
    def parse_item_id(item_id: str) -> tuple[int, int | None]:
        product_part, _, variant_part = item_id.partition("-")
        return int(product_part), int(variant_part) if variant_part else None

    @staticmethod
    def add_item(
        user_id: int,
        product_id: int,
        quantity: int,
        db: Session,
        redis: Redis,
        settings: Settings,
        variant_id: int | None = None,
    ) -> dict:
        """
        장바구니에 상품을 담습니다. 이미 담긴 항목이면 수량을 더합니다.

        담은 뒤의 총 수량이 현재 재고를 넘으면 거절합니다. 재고를 예약하지는
        않으므로 실제 차감과 초과 판매 방지는 체크아웃에서 락과 함께 처리됩니다.

        Args:
            user_id: 사용자 ID
            product_id: 상품 ID
            quantity: 추가할 수량 (1 이상)
            db: DB 세션
            redis: Redis 클라이언트
            settings: 애플리케이션 설정 (cart_ttl_seconds)
            variant_id: 옵션 ID (선택)

        Returns:
            갱신된 장바구니 (get_cart 결과)

        Raises:
            ProductNotFoundException: 상품이 없는 경우
            VariantNotFoundException: 옵션이 해당 상품에 없는 경우
            InsufficientStockException: 총 수량이 현재 재고보다 많은 경우
        """
        product = ProductService.get_product_or_404(product_id, db)
        db_stock = product.stock
        if variant_id is not None:
            db_stock = ProductService.get_variant(product, variant_id).stock

        key = CartService._cart_key(user_id)
        item_id = CartService.make_item_id(product_id, variant_id)

        available = InventoryService.ensure_stock(product_id, db_stock, redis, variant_id)
        requested = int(redis.hget(key, item_id) or 0) + quantity
        if requested > available:
            raise InsufficientStockException(product_id, requested, available)

        redis.hincrby(key, item_id, quantity)
        redis.expire(key, settings.cart_ttl_seconds)

        logger.debug("Cart add: user={} item={} qty={}", user_id, item_id, quantity)
        return CartService.get_cart(user_id, db, redis)

    @staticmethod
    def update_item(
        user_id: int,
        item_id: str,
        quantity: int,
        db: Session,
        redis: Redis,
        settings: Settings,
    ) -> dict:
        """
        항목 수량을 변경합니다. 1 미만이면 항목을 삭제합니다.

        Raises:
            NotFoundException: 장바구니에 없는 항목인 경우
        """
        key = CartService._cart_key(user_id)
        if not redis.hexists(key, item_id):
            raise NotFoundException("Cart item", item_id)

        if quantity < 1:
            redis.hdel(key, item_id)
        else:
            redis.hset(key, item_id, quantity)
            redis.expire(key, settings.cart_ttl_seconds)
        return CartService.get_cart(user_id, db, redis)

    @staticmethod
    def remove_item(user_id: int, item_id: str, db: Session, redis: Redis) -> dict:
        redis.hdel(CartService._cart_key(user_id), item_id)
        return CartService.get_cart(user_id, db, redis)

    @staticmethod
    def clear(user_id: int, redis: Redis) -> None:
        redis.delete(CartService._cart_key(user_id))

    @staticmethod
    def get_cart(user_id: int, db: Session, redis: Redis) -> dict:
        """
        장바구니를 DB 상품 정보와 결합하여 반환합니다.

        상품 또는 옵션이 삭제된 항목은 장바구니에서 제거됩니다.

        Returns:
            {
                "items": [
                    {"item_id": "1-3", "product_id": 1, "variant_id": 3, "name": "...",
                     "slug": "...", "image_url": "...", "unit_price": 4500,
                     "quantity": 2, "line_total": 9000}
                ],
                "item_count": 2,
                "subtotal": 9000
            }
        """
        key = CartService._cart_key(user_id)
        raw_items = redis.hgetall(key)

        items = []
        stale = []
        for item_id, raw_quantity in sorted(raw_items.items()):
            try:
                product_id, variant_id = CartService.parse_item_id(item_id)
            except ValueError:
                stale.append(item_id)
                continue

            product = ProductService.get_product(product_id, db)
            if product is None:
                stale.append(item_id)
                continue

            name = product.name
            unit_price = product.price
            if variant_id is not None:
                variant = next((v for v in product.variants if v.id == variant_id), None)
                if variant is None:
                    stale.append(item_id)
                    continue
                name = f"{product.name} ({variant.name}: {variant.value})"
                unit_price = variant.price

            quantity = int(raw_quantity)
            items.append(
                {
                    "item_id": item_id,
                    "product_id": product_id,
                    "variant_id": variant_id,
                    "name": name,
                    "slug": product.slug,
                    "image_url": product.primary_image_url,
                    "unit_price": unit_price,
                    "quantity": quantity,
                    "line_total": unit_price * quantity,
                }
            )

        if stale:
            redis.hdel(key, *stale)
            logger.info("Dropped stale cart items for user {}: {}", user_id, stale)

        return {
            "items": items,
            "item_count": sum(item["quantity"] for item in items),
            "subtotal": sum(item["line_total"] for item in items),
        }
