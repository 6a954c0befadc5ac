"""
Pydantic 스키마 모듈
"""

from peakpulse.schemas.auth import (
    UserRegisterRequest,
    UserLoginRequest,
    TokenResponse,
    UserResponse,
)
from peakpulse.schemas.catalog import (
    CategoryResponse,
    ProductCreateRequest,
    ProductResponse,
    StockResponse,
)
from peakpulse.schemas.cart import CartResponse
from peakpulse.schemas.order import CheckoutRequest, CheckoutResponse, OrderResponse

__all__ = [
    "UserRegisterRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "CategoryResponse",
    "ProductCreateRequest",
    "ProductResponse",
    "StockResponse",
    "CartResponse",
    "CheckoutRequest",
    "CheckoutResponse",
    "OrderResponse",
]
