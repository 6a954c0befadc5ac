"""
장바구니 관련 Pydantic 스키마
"""

from pydantic import BaseModel, Field


class CartItemAddRequest(BaseModel):
    """
    장바구니 담기 요청 스키마

    Example:
        {"product_id": 1, "variant_id": 3, "quantity": 2}
    """

    product_id: int = Field(..., gt=0, description="상품 ID", examples=[1])
    variant_id: int | None = Field(None, gt=0, description="옵션 ID (선택)", examples=[3])
    quantity: int = Field(1, ge=1, description="수량 (1 이상)", examples=[2])


class CartItemUpdateRequest(BaseModel):
    """수량 변경 요청 스키마 (1 미만이면 항목 삭제)"""

    quantity: int = Field(..., description="변경할 수량", examples=[3])


class CartItemResponse(BaseModel):
    item_id: str = Field(..., description="장바구니 항목 ID (product_id 또는 product_id-variant_id)")
    product_id: int
    variant_id: int | None = None
    name: str
    slug: str
    image_url: str | None = None
    unit_price: int
    quantity: int
    line_total: int


class CartResponse(BaseModel):
    """
    장바구니 응답 스키마

    Example:
        {
            "items": [...],
            "item_count": 3,
            "subtotal": 13500
        }
    """

    items: list[CartItemResponse] = Field(default_factory=list)
    item_count: int = Field(0, description="총 수량")
    subtotal: int = Field(0, description="상품 합계")
