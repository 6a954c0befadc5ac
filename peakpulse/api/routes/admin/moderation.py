"""
관리자 검수 API 엔드포인트

상품 리뷰와 커뮤니티 게시물의 승인/거절/삭제를 제공합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_admin
from peakpulse.core.exceptions import (
    InvalidStatusException,
    NoFieldsToUpdateException,
    NotFoundException,
)
from peakpulse.schemas.community import PostAdminUpdateRequest, PostResponse
from peakpulse.schemas.review import ReviewResponse, ReviewStatusUpdateRequest
from peakpulse.services.community_service import CommunityService
from peakpulse.services.review_service import ReviewService


router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/reviews", response_model=List[ReviewResponse])
def list_reviews(
    review_status: str | None = Query(None, alias="status", description="pending, approved, rejected"),
    db: Session = Depends(get_db),
):
    return [ReviewService.to_dict(r) for r in ReviewService.list_all(db, status=review_status)]


@router.put("/reviews/{review_id}/status", response_model=ReviewResponse)
def update_review_status(
    review_id: int,
    status_data: ReviewStatusUpdateRequest,
    db: Session = Depends(get_db),
):
    """
    리뷰 검수 상태를 변경하고 상품 평점을 다시 계산합니다.

    Raises:
        HTTPException 400: 허용되지 않는 상태
        HTTPException 404: 리뷰를 찾을 수 없는 경우
    """
    try:
        review = ReviewService.update_status(review_id, status_data.status, db)
    except InvalidStatusException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ReviewService.to_dict(review)


@router.delete("/reviews/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(review_id: int, db: Session = Depends(get_db)):
    try:
        ReviewService.delete_review(review_id, db)
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/user-posts", response_model=List[PostResponse])
def list_user_posts(
    post_status: str | None = Query(None, alias="status", description="pending, approved, rejected"),
    db: Session = Depends(get_db),
):
    """검수 대기 중인 게시물을 포함한 전체 게시물"""
    posts = CommunityService.list_all(db, status=post_status)
    return CommunityService.serialize_posts(posts, db)


@router.put("/user-posts/{post_id}", response_model=PostResponse)
def update_user_post(
    post_id: int,
    post_data: PostAdminUpdateRequest,
    db: Session = Depends(get_db),
):
    try:
        post = CommunityService.admin_update(
            post_id, db, status=post_data.status, caption=post_data.caption
        )
    except (InvalidStatusException, NoFieldsToUpdateException) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CommunityService.serialize_posts([post], db)[0]


@router.delete("/user-posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_post(post_id: int, db: Session = Depends(get_db)):
    try:
        CommunityService.delete_post(post_id, db)
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
