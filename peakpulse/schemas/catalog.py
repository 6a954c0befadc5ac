"""
카탈로그(카테고리, 상품) 관련 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class CategoryCreateRequest(BaseModel):
    """
    카테고리 생성 요청 스키마

    slug를 생략하면 name으로부터 생성됩니다.

    Example:
        {
            "name": "Hoodies",
            "description": "Warm layers for the mountains"
        }
    """

    name: str = Field(..., min_length=1, max_length=100, description="카테고리명", examples=["Hoodies"])
    slug: str | None = Field(None, max_length=120, description="URL slug (선택)")
    description: str | None = Field(None, description="설명")
    image_url: str | None = Field(None, max_length=500, description="대표 이미지 URL")
    ai_image_prompt: str | None = Field(None, description="이미지 생성용 프롬프트 메모")
    parent_id: int | None = Field(None, description="상위 카테고리 ID")


class CategoryUpdateRequest(BaseModel):
    """카테고리 수정 요청 스키마 (전달된 필드만 수정)"""

    name: str | None = Field(None, min_length=1, max_length=100)
    slug: str | None = Field(None, max_length=120)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    ai_image_prompt: str | None = None
    parent_id: int | None = None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="카테고리 ID")
    name: str = Field(..., description="카테고리명")
    slug: str = Field(..., description="URL slug")
    description: str | None = None
    image_url: str | None = None
    ai_image_prompt: str | None = None
    parent_id: int | None = None
    created_at: datetime
    updated_at: datetime


class CategorySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str


class ProductImage(BaseModel):
    url: str = Field(..., min_length=1, description="이미지 URL")
    alt_text: str | None = Field(None, description="대체 텍스트")


class VariantInput(BaseModel):
    """
    상품 옵션 입력 스키마

    Example:
        {"name": "Size", "value": "M", "price": 4500, "stock": 5}
    """

    name: str = Field(..., min_length=1, max_length=50, examples=["Size"])
    value: str = Field(..., min_length=1, max_length=50, examples=["M"])
    sku: str | None = Field(None, max_length=100)
    price: int = Field(..., gt=0, description="옵션 가격", examples=[4500])
    stock: int = Field(0, ge=0, description="옵션 재고", examples=[5])


class VariantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    value: str
    sku: str | None = None
    price: int
    stock: int


class ProductCreateRequest(BaseModel):
    """
    상품 생성 요청 스키마

    Example:
        {
            "name": "Himalayan Hoodie",
            "price": 4500,
            "stock": 10,
            "category_ids": [1],
            "variants": [{"name": "Size", "value": "M", "price": 4500, "stock": 5}]
        }
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="상품명",
        examples=["Himalayan Hoodie"],
    )
    slug: str | None = Field(None, max_length=220, description="URL slug (선택)")
    description: str = Field("", description="상세 설명")
    short_description: str | None = Field(None, max_length=500)
    price: int = Field(..., gt=0, description="판매가 (양수)", examples=[4500])
    compare_at_price: int | None = Field(None, gt=0, description="할인 전 가격")
    sku: str | None = Field(None, max_length=100)
    stock: int = Field(0, ge=0, description="초기 재고 수량 (0 이상)", examples=[10])
    images: list[ProductImage] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    fabric_details: str | None = None
    care_instructions: str | None = None
    sustainability_metrics: str | None = None
    fit_guide: str | None = None
    is_featured: bool = False
    category_ids: list[int] = Field(default_factory=list, description="카테고리 ID 목록")
    variants: list[VariantInput] = Field(default_factory=list, description="상품 옵션 목록")


class ProductUpdateRequest(BaseModel):
    """
    상품 수정 요청 스키마 (전달된 필드만 수정)

    variants를 전달하면 기존 옵션 목록을 통째로 교체합니다.
    """

    name: str | None = Field(None, min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    short_description: str | None = Field(None, max_length=500)
    price: int | None = Field(None, gt=0)
    compare_at_price: int | None = Field(None, gt=0)
    sku: str | None = Field(None, max_length=100)
    stock: int | None = Field(None, ge=0)
    images: list[ProductImage] | None = None
    tags: list[str] | None = None
    fabric_details: str | None = None
    care_instructions: str | None = None
    sustainability_metrics: str | None = None
    fit_guide: str | None = None
    is_featured: bool | None = None
    category_ids: list[int] | None = None
    variants: list[VariantInput] | None = None


class ProductResponse(BaseModel):
    """
    상품 정보 응답 스키마

    Example:
        {
            "id": 1,
            "name": "Himalayan Hoodie",
            "slug": "himalayan-hoodie",
            "price": 4500,
            "stock": 10,
            "redis_stock": 10,
            "categories": [{"id": 1, "name": "Hoodies", "slug": "hoodies"}],
            "variants": []
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="상품 ID")
    name: str = Field(..., description="상품명")
    slug: str = Field(..., description="URL slug")
    description: str = ""
    short_description: str | None = None
    price: int = Field(..., description="판매가")
    compare_at_price: int | None = None
    sku: str | None = None
    stock: int = Field(..., description="DB에 저장된 재고 수량")
    redis_stock: int | None = Field(None, description="Redis에서 조회한 실시간 재고 (선택)")
    images: list[ProductImage] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    fabric_details: str | None = None
    care_instructions: str | None = None
    sustainability_metrics: str | None = None
    fit_guide: str | None = None
    is_featured: bool = False
    average_rating: float = 0.0
    review_count: int = 0
    categories: list[CategorySummary] = Field(default_factory=list)
    variants: list[VariantResponse] = Field(default_factory=list)
    created_at: datetime = Field(..., description="상품 생성 일시")
    updated_at: datetime = Field(..., description="상품 수정 일시")


class StockResponse(BaseModel):
    """
    재고 조회 응답 스키마 (정합성 확인용)

    Example:
        {
            "product_id": 1,
            "variant_id": null,
            "db_stock": 10,
            "redis_stock": 10,
            "synced": true
        }
    """

    product_id: int = Field(..., description="상품 ID")
    variant_id: int | None = Field(None, description="옵션 ID")
    db_stock: int = Field(..., description="DB에 저장된 재고")
    redis_stock: int | None = Field(None, description="Redis에 저장된 재고")
    synced: bool = Field(..., description="DB와 Redis 재고가 일치하는지 여부")
