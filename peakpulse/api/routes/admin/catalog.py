"""
관리자 카탈로그 API 엔드포인트

카테고리와 상품(옵션 포함)의 생성/수정/삭제를 제공합니다.
상품 재고가 바뀌면 Redis 실시간 재고도 함께 재설정됩니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from redis import Redis
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_admin
from peakpulse.api.routes.catalog import product_to_response
from peakpulse.core.config import Settings, get_settings
from peakpulse.core.exceptions import (
    CategoryNotFoundException,
    LockAcquisitionException,
    NoFieldsToUpdateException,
    ProductNotFoundException,
    SlugAlreadyExistsException,
    ValidationException,
)
from peakpulse.db.redis_client import get_redis_client
from peakpulse.schemas.catalog import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from peakpulse.services.category_service import CategoryService
from peakpulse.services.product_service import ProductService


router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.post(
    "/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED
)
def create_category(category_data: CategoryCreateRequest, db: Session = Depends(get_db)):
    """
    카테고리를 생성합니다. slug를 생략하면 이름으로 생성합니다.

    Raises:
        HTTPException 404: 상위 카테고리를 찾을 수 없는 경우
        HTTPException 409: slug가 이미 존재하는 경우
    """
    try:
        return CategoryService.create_category(category_data.model_dump(), db)

    except CategoryNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SlugAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put("/categories/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    category_data: CategoryUpdateRequest,
    db: Session = Depends(get_db),
):
    try:
        return CategoryService.update_category(
            category_id, category_data.model_dump(exclude_unset=True), db
        )

    except CategoryNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SlugAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (NoFieldsToUpdateException, ValidationException) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """카테고리를 삭제합니다. 하위 카테고리는 최상위로 이동합니다."""
    try:
        CategoryService.delete_category(category_id, db)
    except CategoryNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/products", response_model=List[ProductResponse])
def list_products(
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
):
    """전체 상품 목록 (Redis 재고 포함)"""
    products = ProductService.list_products(db, limit=None)
    return [product_to_response(p, redis) for p in products]


@router.post(
    "/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED
)
def create_product(
    product_data: ProductCreateRequest,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
):
    """
    새 상품을 생성합니다.

    Example:
        Request:
        ```json
        {
            "name": "Himalayan Hoodie",
            "price": 4500,
            "stock": 20,
            "category_ids": [1],
            "variants": [{"name": "Size", "value": "M", "price": 4500, "stock": 5}]
        }
        ```

    Raises:
        HTTPException 404: 존재하지 않는 카테고리가 포함된 경우
        HTTPException 409: slug 중복 또는 같은 상품의 생성이 진행 중인 경우
    """
    try:
        product = ProductService.create_product(product_data.model_dump(), db, redis, settings)
    except CategoryNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (SlugAlreadyExistsException, LockAcquisitionException) as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return product_to_response(product, redis)


@router.get("/products/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
):
    try:
        product = ProductService.get_product_or_404(product_id, db)
    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return product_to_response(product, redis)


@router.put("/products/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdateRequest,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
):
    """
    상품을 부분 수정합니다.

    stock 또는 variants가 포함되면 Redis 재고가 새 값으로 재설정됩니다.
    """
    try:
        product = ProductService.update_product(
            product_id, product_data.model_dump(exclude_unset=True), db, redis
        )
    except (ProductNotFoundException, CategoryNotFoundException) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SlugAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except NoFieldsToUpdateException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return product_to_response(product, redis)


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
):
    try:
        ProductService.delete_product(product_id, db, redis)
    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
