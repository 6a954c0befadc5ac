"""
장바구니 API 엔드포인트 (인증 필요)
"""

from fastapi import APIRouter, Depends, HTTPException, status
from redis import Redis
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_user
from peakpulse.core.config import Settings, get_settings
from peakpulse.core.exceptions import InsufficientStockException, NotFoundException
from peakpulse.db.redis_client import get_redis_client
from peakpulse.models.user import User
from peakpulse.schemas.cart import CartItemAddRequest, CartItemUpdateRequest, CartResponse
from peakpulse.services.cart_service import CartService


router = APIRouter()


@router.get("", response_model=CartResponse)
def get_cart(
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    current_user: User = Depends(get_current_user),
):
    return CartService.get_cart(current_user.id, db, redis)


@router.post("/items", response_model=CartResponse)
def add_item(
    item_data: CartItemAddRequest,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(get_current_user),
):
    """
    장바구니에 상품을 담습니다.

    Raises:
        HTTPException 400: 담은 뒤 총 수량이 재고보다 많은 경우
        HTTPException 404: 상품 또는 옵션을 찾을 수 없는 경우

    Example:
        Request:
        ```json
        {"product_id": 1, "variant_id": 3, "quantity": 2}
        ```
    """
    try:
        return CartService.add_item(
            user_id=current_user.id,
            product_id=item_data.product_id,
            quantity=item_data.quantity,
            db=db,
            redis=redis,
            settings=settings,
            variant_id=item_data.variant_id,
        )

    except InsufficientStockException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/items/{item_id}", response_model=CartResponse)
def update_item(
    item_id: str,
    item_data: CartItemUpdateRequest,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(get_current_user),
):
    """수량을 변경합니다. 1 미만이면 항목이 삭제됩니다."""
    try:
        return CartService.update_item(
            current_user.id, item_id, item_data.quantity, db, redis, settings
        )

    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/items/{item_id}", response_model=CartResponse)
def remove_item(
    item_id: str,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    current_user: User = Depends(get_current_user),
):
    return CartService.remove_item(current_user.id, item_id, db, redis)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart(
    redis: Redis = Depends(get_redis_client),
    current_user: User = Depends(get_current_user),
):
    CartService.clear(current_user.id, redis)
