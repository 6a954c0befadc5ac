"""
리뷰 API 엔드포인트
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_user
from peakpulse.core.exceptions import ProductNotFoundException, ValidationException
from peakpulse.models.user import User
from peakpulse.schemas.review import ReviewCreateRequest, ReviewResponse
from peakpulse.services.review_service import ReviewService


router = APIRouter()


@router.get("", response_model=List[ReviewResponse])
def list_reviews(
    product_id: int | None = Query(None, description="상품 ID"),
    db: Session = Depends(get_db),
):
    """승인된 리뷰 목록을 최신순으로 조회합니다."""
    return [ReviewService.to_dict(r) for r in ReviewService.list_public(db, product_id)]


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_review(
    review_data: ReviewCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    리뷰를 작성합니다 (인증 필요). 관리자 승인 전까지 공개되지 않습니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
        HTTPException 422: 평점이 1~5 범위를 벗어나거나 본문이 비어 있는 경우
    """
    try:
        review = ReviewService.create_review(current_user.id, review_data.model_dump(), db)
    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ReviewService.to_dict(review)
