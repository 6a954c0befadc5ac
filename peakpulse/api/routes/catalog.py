"""
카탈로그 API 엔드포인트

카테고리 목록, 상품 목록/상세, 실시간 재고 조회 기능을 제공합니다.
"""

from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from redis import Redis
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db
from peakpulse.core.exceptions import ProductNotFoundException, VariantNotFoundException
from peakpulse.db.redis_client import get_redis_client
from peakpulse.models import Product
from peakpulse.schemas.catalog import CategoryResponse, ProductResponse, StockResponse
from peakpulse.services.category_service import CategoryService
from peakpulse.services.inventory_service import InventoryService
from peakpulse.services.product_service import ProductService


router = APIRouter()


def product_to_response(product: Product, redis: Redis) -> ProductResponse:
    """ORM 상품을 응답 스키마로 변환하고 Redis 실시간 재고를 채웁니다."""
    response = ProductResponse.model_validate(product)
    response.redis_stock = InventoryService.get_stock(product.id, redis)
    return response


@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    """카테고리 목록을 이름순으로 조회합니다."""
    return CategoryService.list_categories(db)


@router.get("/products", response_model=List[ProductResponse])
def list_products(
    category: str | None = Query(None, description="카테고리 slug"),
    q: str | None = Query(None, description="검색어 (상품명, 설명, 태그)"),
    featured: bool | None = Query(None, description="추천 상품만"),
    min_price: int | None = Query(None, ge=0),
    max_price: int | None = Query(None, ge=0),
    sort: Literal["newest", "price_asc", "price_desc", "name"] = "newest",
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=200),
    db: Session = Depends(get_db),
):
    """
    상품 목록을 조회합니다.

    Example:
        GET /api/products?category=hoodies&sort=price_asc&min_price=1000
    """
    return ProductService.list_products(
        db,
        category=category,
        q=q,
        featured=featured,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
        skip=skip,
        limit=limit,
    )


@router.get("/products/{slug}", response_model=ProductResponse)
def get_product(
    slug: str,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
):
    """
    slug로 상품 상세를 조회합니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    try:
        product = ProductService.get_product_by_slug(slug, db)
    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return product_to_response(product, redis)


@router.get("/products/{product_id}/stock", response_model=StockResponse)
def get_stock(
    product_id: int,
    variant_id: int | None = Query(None, description="옵션 ID"),
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
):
    """
    DB 재고와 Redis 실시간 재고를 함께 조회합니다 (정합성 확인용).

    Example:
        Response (200):
        ```json
        {
            "product_id": 1,
            "variant_id": null,
            "db_stock": 10,
            "redis_stock": 10,
            "synced": true
        }
        ```
    """
    try:
        return ProductService.get_product_with_stock(product_id, db, redis, variant_id)

    except (ProductNotFoundException, VariantNotFoundException) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
