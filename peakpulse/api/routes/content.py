"""
공개 콘텐츠 API 엔드포인트

사이트 설정, 홈페이지/푸터/브랜드 스토리/일반 페이지 콘텐츠,
프로모션 게시물, 뉴스레터 구독 기능을 제공합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db
from peakpulse.core.exceptions import ValidationException
from peakpulse.schemas.content import (
    FooterContent,
    HomepageContent,
    MessageResponse,
    NewsletterSubscribeRequest,
    OurStoryContent,
    PageContent,
    PromotionalPostResponse,
    SiteSettings,
)
from peakpulse.services.content_service import ContentService
from peakpulse.services.newsletter_service import NewsletterService
from peakpulse.services.promotion_service import PromotionService


router = APIRouter()


@router.get("/settings", response_model=SiteSettings)
def get_site_settings(db: Session = Depends(get_db)):
    """사이트 일반 설정 (저장된 값이 없으면 기본값)"""
    return ContentService.get_site_settings(db)


@router.get("/content/homepage", response_model=HomepageContent)
def get_homepage(db: Session = Depends(get_db)):
    return ContentService.get_homepage(db)


@router.get("/content/footer", response_model=FooterContent)
def get_footer(db: Session = Depends(get_db)):
    return ContentService.get_footer(db)


@router.get("/content/our-story", response_model=OurStoryContent)
def get_our_story(db: Session = Depends(get_db)):
    return ContentService.get_our_story(db)


@router.get("/content/page/{page_key}", response_model=PageContent)
def get_page(page_key: str, db: Session = Depends(get_db)):
    """
    일반 페이지 콘텐츠 (예: privacy-policy, affiliate-terms)

    Example:
        Response (200):
        ```json
        {"content": "Default content for privacy-policy. Please edit."}
        ```
    """
    try:
        return ContentService.get_page(page_key, db)

    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/promotional-posts", response_model=List[PromotionalPostResponse])
def list_active_promotions(db: Session = Depends(get_db)):
    """현재 노출 중인 프로모션 게시물 (display_order, 최신순)"""
    return PromotionService.list_active(db)


@router.post(
    "/newsletter/subscribe",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def subscribe_newsletter(
    subscription: NewsletterSubscribeRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    뉴스레터를 구독합니다.

    신규 구독은 201, 이미 구독 중인 이메일은 200을 반환합니다.

    Example:
        Response (200):
        ```json
        {"message": "You are already subscribed! Thank you."}
        ```
    """
    try:
        created, message = NewsletterService.subscribe(
            subscription.email, db, source=subscription.source
        )
    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if not created:
        response.status_code = status.HTTP_200_OK
    return MessageResponse(message=message)
