"""
Order 모델
"""

from sqlalchemy import Boolean, Column, Integer, String, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship

from peakpulse.core.utils import utcnow
from peakpulse.db.database import Base

ORDER_STATUSES = ("Pending", "Processing", "Shipped", "Delivered", "Cancelled", "Refunded")
PAYMENT_STATUSES = ("Pending", "Paid", "Failed")


class Order(Base):
    """
    주문 모델

    Attributes:
        id: 주문 고유 ID (Primary Key)
        order_number: 고객에게 노출되는 주문 번호 (예: PP-20250122-1A2B3C4D)
        user_id: 주문한 사용자 ID (Foreign Key to users.id)
        subtotal: 상품 합계 (단위: NPR)
        shipping_cost: 배송비
        total_amount: 총 결제 금액 (subtotal + shipping_cost)
        status: 주문 상태 (Pending, Processing, Shipped, Delivered, Cancelled, Refunded)
        payment_status: 결제 상태 (Pending, Paid, Failed)
        shipping_address: 배송지 정보 (JSON)
        items: OrderItem 목록
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    order_number = Column(String(40), unique=True, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    subtotal = Column(Integer, nullable=False)
    shipping_cost = Column(Integer, nullable=False, default=0)
    total_amount = Column(Integer, nullable=False)
    currency = Column(String(3), nullable=False, default="NPR")
    status = Column(String(20), nullable=False, default="Pending", index=True)
    payment_method = Column(String(40), nullable=False)
    payment_status = Column(String(20), nullable=False, default="Pending")
    shipping_address = Column(JSON, nullable=False)
    is_international = Column(Boolean, nullable=False, default=False)
    promo_code = Column(String(50), nullable=True)
    tracking_number = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    user = relationship("User", backref="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, order_number='{self.order_number}', status='{self.status}')>"

    def __str__(self) -> str:
        return f"Order {self.order_number}: {self.total_amount} {self.currency}"


class OrderItem(Base):
    """
    주문 항목 모델 (주문 시점의 상품명/단가를 그대로 보관)
    """

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    variant_id = Column(Integer, nullable=True)
    name = Column(String(250), nullable=False)
    unit_price = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    line_total = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="items")

    def __repr__(self) -> str:
        return f"<OrderItem(order_id={self.order_id}, product_id={self.product_id}, quantity={self.quantity})>"
