"""
관리자 콘텐츠 관리 API 엔드포인트

사이트 설정, 홈페이지/푸터/브랜드 스토리/일반 페이지 콘텐츠와
프로모션 게시물을 관리합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_admin
from peakpulse.core.exceptions import (
    NoFieldsToUpdateException,
    NotFoundException,
    SlugAlreadyExistsException,
    ValidationException,
)
from peakpulse.schemas.content import (
    FooterContent,
    HomepageContent,
    OurStoryContent,
    PageContent,
    PromotionalPostCreateRequest,
    PromotionalPostResponse,
    PromotionalPostUpdateRequest,
    SiteSettings,
    SiteSettingsUpdateRequest,
)
from peakpulse.services.content_service import ContentService
from peakpulse.services.promotion_service import PromotionService


router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/settings", response_model=SiteSettings)
def get_site_settings(db: Session = Depends(get_db)):
    return ContentService.get_site_settings(db)


@router.put("/settings", response_model=SiteSettings)
def update_site_settings(settings_data: SiteSettingsUpdateRequest, db: Session = Depends(get_db)):
    """
    사이트 일반 설정을 저장합니다. 생략하거나 비운 필드는 기본값으로 채워집니다.

    Example:
        Request:
        ```json
        {"site_title": "Peak Pulse", "store_email": "hello@peakpulse.com"}
        ```
    """
    return ContentService.update_site_settings(settings_data.model_dump(), db)


@router.put("/content/homepage", response_model=HomepageContent)
def update_homepage(content: HomepageContent, db: Session = Depends(get_db)):
    """
    홈페이지 콘텐츠를 저장합니다.

    Raises:
        HTTPException 400: hero.video_id가 YouTube 영상 ID 형식이 아닌 경우
    """
    try:
        return ContentService.update_homepage(content.model_dump(), db)

    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/content/footer", response_model=FooterContent)
def update_footer(content: FooterContent, db: Session = Depends(get_db)):
    return ContentService.update_footer(content.model_dump(), db)


@router.put("/content/our-story", response_model=OurStoryContent)
def update_our_story(content: OurStoryContent, db: Session = Depends(get_db)):
    return ContentService.update_our_story(content.model_dump(), db)


@router.put("/content/page/{page_key}", response_model=PageContent)
def update_page(page_key: str, content: PageContent, db: Session = Depends(get_db)):
    try:
        return ContentService.update_page(page_key, content.content, db)

    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/promotional-posts", response_model=List[PromotionalPostResponse])
def list_promotions(db: Session = Depends(get_db)):
    """비활성/기간 외 게시물을 포함한 전체 프로모션 게시물"""
    return PromotionService.list_all(db)


@router.post(
    "/promotional-posts",
    response_model=PromotionalPostResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_promotion(post_data: PromotionalPostCreateRequest, db: Session = Depends(get_db)):
    try:
        return PromotionService.create(post_data.model_dump(), db)

    except SlugAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put("/promotional-posts/{post_id}", response_model=PromotionalPostResponse)
def update_promotion(
    post_id: int,
    post_data: PromotionalPostUpdateRequest,
    db: Session = Depends(get_db),
):
    try:
        return PromotionService.update(post_id, post_data.model_dump(exclude_unset=True), db)

    except NoFieldsToUpdateException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SlugAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/promotional-posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_promotion(post_id: int, db: Session = Depends(get_db)):
    try:
        PromotionService.delete(post_id, db)
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
