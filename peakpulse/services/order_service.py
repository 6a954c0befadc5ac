"""
주문 처리 서비스

장바구니를 주문으로 전환하는 체크아웃과 주문 조회/상태 변경을 담당합니다.
재고는 Redis 비관적 락으로 차감하고, DB 저장 실패 시 보상 처리로 복구합니다.
"""

import uuid

from loguru import logger
from redis import Redis
from sqlalchemy.orm import Session

from peakpulse.core.config import Settings
from peakpulse.core.exceptions import (
    EmptyCartException,
    InsufficientStockException,
    InvalidStatusException,
    LockAcquisitionException,
    OrderNotFoundException,
    PaymentValidationException,
    PermissionDeniedException,
    ProductNotFoundException,
    VariantNotFoundException,
)
from peakpulse.core.utils import utcnow
from peakpulse.models import Order, OrderItem, User
from peakpulse.models.order import ORDER_STATUSES, PAYMENT_STATUSES
from peakpulse.services.cart_service import CartService
from peakpulse.services.inventory_service import InventoryService
from peakpulse.services.payment_gateway_service import PaymentGatewayService
from peakpulse.services.payment_validation import is_valid_cvc, is_valid_expiry, luhn_check
from peakpulse.services.product_service import ProductService

REDIRECT_PAYMENT_METHODS = (
    "card_nepal",
    "esewa",
    "khalti",
    "imepay",
    "connectips",
    "qr",
    "banktransfer",
)
PAYMENT_METHODS = ("cod", "card_international") + REDIRECT_PAYMENT_METHODS


def generate_order_number() -> str:
    """
    주문 번호를 생성합니다.

    Example:
        >>> generate_order_number()
        'PP-20250122-1A2B3C4D'
    """
    return f"PP-{utcnow():%Y%m%d}-{uuid.uuid4().hex[:8].upper()}"


class OrderService:
    """주문 생성/조회/상태 변경 서비스 클래스"""

    @staticmethod
    def _validate_payment(
        payment_method: str, card_details: dict | None, db: Session
    ) -> None:
        """
        결제 수단과 카드 정보를 검증합니다.

        Raises:
            PaymentValidationException: 지원하지 않는 결제 수단, 비활성 게이트웨이,
                잘못된 카드 정보
        """
        if payment_method not in PAYMENT_METHODS:
            raise PaymentValidationException("Invalid payment method selected.")

        gateway = PaymentGatewayService.find(payment_method, db)
        if gateway is not None and not gateway.is_enabled:
            raise PaymentValidationException(
                f"Payment method '{payment_method}' is currently unavailable."
            )

        if payment_method != "card_international":
            return

        card = card_details or {}
        required = ("cardholder_name", "card_number", "expiry_date", "cvc")
        if not all(card.get(field) and str(card[field]).strip() for field in required):
            raise PaymentValidationException("Missing international card details.")
        if not luhn_check(card["card_number"]):
            raise PaymentValidationException("Invalid credit card number (Luhn check failed).")
        if not is_valid_expiry(card["expiry_date"]):
            raise PaymentValidationException("Invalid expiry date format. Use MM/YY.")
        if not is_valid_cvc(card["cvc"]):
            raise PaymentValidationException("CVC must be 3 or 4 digits.")

    @staticmethod
    def _resolve_statuses(payment_method: str) -> tuple[str, str, str]:
        """결제 수단별 (주문 상태, 결제 상태, 안내 제목)"""
        if payment_method == "cod":
            return "Processing", "Pending", "COD Order Placed"
        if payment_method == "card_international":
            # 결제 승인 시뮬레이션
            return "Processing", "Paid", "International Order Placed"
        return "Pending", "Pending", "Order Pending Payment"

    @staticmethod
    def _build_message(
        full_name: str,
        total: int,
        shipping_cost: int,
        payment_method: str,
        card_details: dict | None,
        currency: str,
    ) -> str:
        message = f"Order for {full_name} (Total: {currency} {total:,}) received."
        if payment_method == "cod":
            message += (
                " Payment: Cash on Delivery. Our team may contact you for confirmation"
                " regarding the 10% advance."
            )
        elif payment_method == "card_international":
            last4 = "".join(ch for ch in card_details["card_number"] if ch.isdigit())[-4:]
            message += (
                f" Payment: International Card (ending {last4})."
                f" Shipping fee: {currency} {shipping_cost:,}."
            )
        else:
            message += (
                f" Payment: {payment_method}. You will be prompted to complete your payment"
                f" via the {payment_method} interface."
            )
        return message

    @staticmethod
    def _restore_stock(reserved: list[tuple[int, int | None, int]], redis: Redis) -> None:
        for product_id, variant_id, quantity in reserved:
            try:
                InventoryService.increase_stock(product_id, quantity, redis, variant_id)
            except Exception:
                logger.exception(
                    "Failed to restore stock: product={} variant={} qty={}",
                    product_id,
                    variant_id,
                    quantity,
                )

    @staticmethod
    def _reserve_stock(
        items: list[dict], db: Session, redis: Redis, settings: Settings
    ) -> list[tuple[int, int | None, int]]:
        """
        장바구니 항목별로 Redis 재고를 차감합니다.

        하나라도 실패하면 앞서 차감한 재고를 복구한 뒤 예외를 발생시킵니다.

        Returns:
            차감된 (product_id, variant_id, quantity) 목록

        Raises:
            ProductNotFoundException: 상품이 없는 경우
            InsufficientStockException: 재고가 부족한 경우
            LockAcquisitionException: 락 획득에 실패한 경우 (재시도 초과)
        """
        reserved: list[tuple[int, int | None, int]] = []
        for item in items:
            product_id, variant_id, quantity = item["product_id"], item["variant_id"], item["quantity"]

            product = ProductService.get_product(product_id, db)
            if product is None:
                OrderService._restore_stock(reserved, redis)
                raise ProductNotFoundException(product_id)
            db_stock = product.stock
            if variant_id is not None:
                try:
                    db_stock = ProductService.get_variant(product, variant_id).stock
                except VariantNotFoundException:
                    OrderService._restore_stock(reserved, redis)
                    raise
            InventoryService.ensure_stock(product_id, db_stock, redis, variant_id)

            if InventoryService.decrease_stock(product_id, quantity, redis, settings, variant_id):
                reserved.append((product_id, variant_id, quantity))
                continue

            OrderService._restore_stock(reserved, redis)
            current_stock = InventoryService.get_stock(product_id, redis, variant_id)
            if current_stock is None:
                raise ProductNotFoundException(product_id)
            if current_stock < quantity:
                raise InsufficientStockException(product_id, quantity, current_stock)
            raise LockAcquisitionException(
                InventoryService._get_stock_key(product_id, variant_id),
                f"Failed to acquire lock after {settings.lock_retry_attempts} retries",
            )
        return reserved

    @staticmethod
    def create_order(
        user: User,
        shipping_details: dict,
        payment_method: str,
        db: Session,
        redis: Redis,
        settings: Settings,
        card_details: dict | None = None,
        promo_code: str | None = None,
    ) -> dict:
        """
        장바구니를 주문으로 전환합니다.

        프로세스:
        1. 장바구니 조회 (비어 있으면 실패)
        2. 결제 수단 / 카드 정보 검증
        3. 배송비 계산 (국내/해외)
        4. Redis 비관적 락으로 항목별 재고 차감
        5. DB 트랜잭션: Order + OrderItem 생성, 상품 재고 동기화
           (실패 시 롤백 후 Redis 재고 복구)
        6. 장바구니 비우기

        Args:
            user: 주문자
            shipping_details: 배송지 정보 (ShippingDetails.model_dump())
            payment_method: 결제 수단
            db: DB 세션
            redis: Redis 클라이언트
            settings: 애플리케이션 설정 (배송비, 통화, 락 설정)
            card_details: 카드 정보 (card_international 결제 시)
            promo_code: 프로모션 코드 (기록만 함)

        Returns:
            {"title": str, "message": str, "order": Order}

        Raises:
            EmptyCartException: 장바구니가 비어 있는 경우
            PaymentValidationException: 결제 정보 검증 실패
            InsufficientStockException: 재고 부족
            LockAcquisitionException: 락 획득 실패
        """
        cart = CartService.get_cart(user.id, db, redis)
        if not cart["items"]:
            raise EmptyCartException()

        OrderService._validate_payment(payment_method, card_details, db)

        is_international = bool(shipping_details.get("is_international"))
        shipping_cost = (
            settings.international_shipping_cost
            if is_international
            else settings.domestic_shipping_cost
        )
        subtotal = cart["subtotal"]
        total = subtotal + shipping_cost
        order_status, payment_status, title = OrderService._resolve_statuses(payment_method)

        reserved = OrderService._reserve_stock(cart["items"], db, redis, settings)

        try:
            order = Order(
                order_number=generate_order_number(),
                user_id=user.id,
                subtotal=subtotal,
                shipping_cost=shipping_cost,
                total_amount=total,
                currency=settings.currency,
                status=order_status,
                payment_method=payment_method,
                payment_status=payment_status,
                shipping_address=shipping_details,
                is_international=is_international,
                promo_code=promo_code,
                items=[
                    OrderItem(
                        product_id=item["product_id"],
                        variant_id=item["variant_id"],
                        name=item["name"],
                        unit_price=item["unit_price"],
                        quantity=item["quantity"],
                        line_total=item["line_total"],
                    )
                    for item in cart["items"]
                ],
            )
            db.add(order)

            # DB 재고 컬럼을 Redis 값과 동기화
            for product_id, variant_id, _ in reserved:
                current = InventoryService.get_stock(product_id, redis, variant_id)
                if current is not None:
                    ProductService.sync_stock_to_db(product_id, current, db, variant_id)

            db.commit()
            db.refresh(order)
        except Exception:
            db.rollback()
            OrderService._restore_stock(reserved, redis)
            logger.exception("Order persistence failed for user {}", user.id)
            raise

        CartService.clear(user.id, redis)

        logger.info(
            "Order placed: {} user={} total={} method={}",
            order.order_number,
            user.id,
            total,
            payment_method,
        )
        message = OrderService._build_message(
            shipping_details.get("full_name", ""),
            total,
            shipping_cost,
            payment_method,
            card_details,
            settings.currency,
        )
        return {"title": title, "message": message, "order": order}

    @staticmethod
    def list_user_orders(user_id: int, db: Session) -> list[Order]:
        return (
            db.query(Order)
            .filter(Order.user_id == user_id)
            .order_by(Order.created_at.desc(), Order.id.desc())
            .all()
        )

    @staticmethod
    def get_order_by_number(order_number: str, user: User, db: Session) -> Order:
        """
        주문 번호로 주문을 조회합니다 (본인 주문만, 관리자는 전체).

        Raises:
            OrderNotFoundException: 주문이 없는 경우
            PermissionDeniedException: 다른 사용자의 주문인 경우
        """
        order = db.query(Order).filter(Order.order_number == order_number).first()
        if order is None:
            raise OrderNotFoundException(order_number)
        if order.user_id != user.id and not user.is_admin:
            raise PermissionDeniedException("You can only view your own orders")
        return order

    @staticmethod
    def list_orders(db: Session, status: str | None = None) -> list[Order]:
        query = db.query(Order)
        if status:
            query = query.filter(Order.status == status)
        return query.order_by(Order.created_at.desc(), Order.id.desc()).all()

    @staticmethod
    def get_order(order_id: int, db: Session) -> Order:
        order = db.query(Order).filter(Order.id == order_id).first()
        if order is None:
            raise OrderNotFoundException(order_id)
        return order

    @staticmethod
    def update_status(
        order_id: int,
        status: str,
        db: Session,
        tracking_number: str | None = None,
        payment_status: str | None = None,
    ) -> Order:
        """
        관리자가 주문 상태를 변경합니다.

        Raises:
            InvalidStatusException: 허용되지 않는 주문/결제 상태
            OrderNotFoundException: 주문이 없는 경우
        """
        if status not in ORDER_STATUSES:
            raise InvalidStatusException(status, ORDER_STATUSES)
        if payment_status is not None and payment_status not in PAYMENT_STATUSES:
            raise InvalidStatusException(payment_status, PAYMENT_STATUSES)

        order = OrderService.get_order(order_id, db)
        previous = order.status
        order.status = status
        if tracking_number is not None:
            order.tracking_number = tracking_number
        if payment_status is not None:
            order.payment_status = payment_status
        db.commit()
        db.refresh(order)

        logger.info("Order {} status: {} -> {}", order.order_number, previous, status)
        return order
