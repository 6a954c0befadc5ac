"""
계정 API 엔드포인트

프로필, 주문 내역, 위시리스트, 북마크한 커뮤니티 게시물을 제공합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_user
from peakpulse.core.exceptions import (
    OrderNotFoundException,
    PermissionDeniedException,
    ProductNotFoundException,
)
from peakpulse.models.user import User
from peakpulse.schemas.auth import UserProfileUpdateRequest, UserResponse
from peakpulse.schemas.catalog import ProductResponse
from peakpulse.schemas.community import PostResponse
from peakpulse.schemas.order import OrderResponse
from peakpulse.services.auth_service import AuthService
from peakpulse.services.community_service import CommunityService
from peakpulse.services.order_service import OrderService
from peakpulse.services.wishlist_service import WishlistService


router = APIRouter()


@router.get("/profile", response_model=UserResponse)
def get_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/profile", response_model=UserResponse)
def update_profile(
    profile_data: UserProfileUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """프로필(name, avatar_url, bio)을 수정합니다. 전달된 필드만 변경됩니다."""
    return AuthService.update_profile(
        current_user, profile_data.model_dump(exclude_unset=True), db
    )


@router.get("/orders", response_model=List[OrderResponse])
def get_my_orders(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    현재 사용자의 주문 내역을 조회합니다 (최신순).

    Example:
        Response (200):
        ```json
        [
            {
                "id": 1,
                "order_number": "PP-20250122-1A2B3C4D",
                "total_amount": 9500,
                "status": "Processing",
                ...
            }
        ]
        ```
    """
    return OrderService.list_user_orders(current_user.id, db)


@router.get("/orders/{order_number}", response_model=OrderResponse)
def get_my_order(
    order_number: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return OrderService.get_order_by_number(order_number, current_user, db)

    except OrderNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    except PermissionDeniedException as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.get("/wishlist", response_model=List[ProductResponse])
def get_wishlist(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return WishlistService.list_products(current_user.id, db)


@router.post("/wishlist/{product_id}", response_model=List[ProductResponse])
def add_to_wishlist(
    product_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """위시리스트에 상품을 추가합니다 (이미 있으면 그대로 유지)."""
    try:
        return WishlistService.add(current_user.id, product_id, db)

    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/wishlist/{product_id}", response_model=List[ProductResponse])
def remove_from_wishlist(
    product_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return WishlistService.remove(current_user.id, product_id, db)


@router.get("/bookmarks", response_model=List[PostResponse])
def get_bookmarked_posts(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    posts = CommunityService.list_bookmarked(current_user.id, db)
    return CommunityService.serialize_posts(posts, db, viewer_id=current_user.id)
