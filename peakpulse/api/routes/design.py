"""
디자인 허브 공개 API 엔드포인트
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db
from peakpulse.core.exceptions import NotFoundException
from peakpulse.schemas.design import CollaborationCategoryResponse, CollaborationResponse
from peakpulse.services.design_service import DesignService


router = APIRouter()


@router.get(
    "/design-collaboration-categories",
    response_model=List[CollaborationCategoryResponse],
)
def list_collaboration_categories(db: Session = Depends(get_db)):
    return DesignService.list_categories(db)


@router.get("/design-collaborations", response_model=List[CollaborationResponse])
def list_collaborations(db: Session = Depends(get_db)):
    """공개된 디자인 콜라보 목록 (콜라보 일자 내림차순)"""
    return DesignService.list_collaborations(db, published_only=True)


@router.get("/design-collaborations/{slug}", response_model=CollaborationResponse)
def get_collaboration(slug: str, db: Session = Depends(get_db)):
    try:
        return DesignService.get_collaboration_by_slug(slug, db, published_only=True)

    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
