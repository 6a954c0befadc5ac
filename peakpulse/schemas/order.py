"""
주문/체크아웃 관련 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class ShippingDetails(BaseModel):
    """
    배송지 정보 스키마

    Example:
        {
            "full_name": "Jane Doe",
            "street_address": "Thamel Marg 12",
            "city": "Kathmandu",
            "country": "Nepal",
            "postal_code": "44600",
            "phone": "+977-9800000000",
            "is_international": false
        }
    """

    full_name: str = Field(..., min_length=1, max_length=150, examples=["Jane Doe"])
    street_address: str = Field(..., min_length=1, max_length=255, examples=["Thamel Marg 12"])
    apartment_suite: str | None = Field(None, max_length=100)
    city: str = Field(..., min_length=1, max_length=100, examples=["Kathmandu"])
    country: str = Field("Nepal", max_length=100)
    postal_code: str | None = Field(None, max_length=20, examples=["44600"])
    phone: str | None = Field(None, max_length=30)
    is_international: bool = Field(False, description="해외 배송 여부")
    international_destination_country: str | None = Field(None, max_length=100)


class CardDetails(BaseModel):
    """해외 카드 결제 정보 (card_international 결제 시 필수)"""

    cardholder_name: str | None = None
    card_number: str | None = None
    expiry_date: str | None = Field(None, description="MM/YY 또는 MMYY")
    cvc: str | None = None


class CheckoutRequest(BaseModel):
    """
    체크아웃 요청 스키마 (장바구니 → 주문)

    Example:
        {
            "shipping_details": {...},
            "payment_method": "cod",
            "promo_code": null
        }
    """

    shipping_details: ShippingDetails
    payment_method: str = Field(..., description="결제 수단", examples=["cod"])
    card_details: CardDetails | None = None
    promo_code: str | None = Field(None, max_length=50)


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int | None = None
    variant_id: int | None = None
    name: str
    unit_price: int
    quantity: int
    line_total: int


class OrderResponse(BaseModel):
    """
    주문 정보 응답 스키마

    Example:
        {
            "id": 1,
            "order_number": "PP-20250122-1A2B3C4D",
            "subtotal": 9000,
            "shipping_cost": 500,
            "total_amount": 9500,
            "status": "Processing",
            "payment_status": "Pending",
            "items": [...]
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="주문 ID")
    order_number: str = Field(..., description="주문 번호")
    user_id: int = Field(..., description="주문자 ID")
    subtotal: int
    shipping_cost: int
    total_amount: int
    currency: str
    status: str
    payment_method: str
    payment_status: str
    shipping_address: dict
    is_international: bool
    promo_code: str | None = None
    tracking_number: str | None = None
    items: list[OrderItemResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class CheckoutResponse(BaseModel):
    """체크아웃 결과 (안내 제목/메시지 + 생성된 주문)"""

    title: str = Field(..., examples=["COD Order Placed"])
    message: str
    order: OrderResponse


class OrderStatusUpdateRequest(BaseModel):
    """
    관리자용 주문 상태 변경 요청 스키마

    Example:
        {"status": "Shipped", "tracking_number": "NP123456"}
    """

    status: str = Field(..., description="주문 상태", examples=["Shipped"])
    tracking_number: str | None = Field(None, max_length=100)
    payment_status: str | None = Field(None, description="결제 상태 (선택)")
