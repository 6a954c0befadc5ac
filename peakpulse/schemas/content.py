"""
사이트 콘텐츠 관련 Pydantic 스키마

사이트 설정, 홈페이지/푸터/브랜드 스토리 콘텐츠, 일반 페이지,
프로모션 게시물, 뉴스레터 구독 요청/응답 모델을 정의합니다.
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator

from peakpulse.core.utils import to_naive_utc


class MessageResponse(BaseModel):
    message: str


class SocialLink(BaseModel):
    platform: str = Field(..., examples=["Instagram"])
    url: str = Field(..., examples=["https://instagram.com/peakpulse"])


class SiteSettings(BaseModel):
    """
    사이트 일반 설정

    Example:
        {
            "site_title": "Peak Pulse",
            "store_email": "info@peakpulse.com",
            "social_links": [{"platform": "Instagram", "url": "https://instagram.com/peakpulse"}]
        }
    """

    site_title: str
    site_description: str
    store_email: str
    store_phone: str
    store_address: str
    social_links: list[SocialLink] = Field(default_factory=list)


class SiteSettingsUpdateRequest(BaseModel):
    """빈 값이거나 생략된 필드는 기본값으로 채워집니다."""

    site_title: str | None = None
    site_description: str | None = None
    store_email: str | None = None
    store_phone: str | None = None
    store_address: str | None = None
    social_links: list[SocialLink] | None = None


class HeroSection(BaseModel):
    title: str
    description: str
    video_id: str | None = Field(None, description="YouTube 영상 ID (11자)")
    image_url: str | None = None


class TitledSection(BaseModel):
    title: str
    description: str


class HomepageContent(BaseModel):
    """
    홈페이지 콘텐츠

    Example:
        {
            "hero": {"title": "Peak Pulse", "description": "...", "video_id": "dQw4w9WgXcQ"},
            "artisanal_roots": {"title": "Our Heritage", "description": "..."}
        }
    """

    hero: HeroSection
    artisanal_roots: TitledSection | None = None


class FooterLink(BaseModel):
    id: str | None = None
    name: str
    href: str


class FooterSection(BaseModel):
    id: str | None = None
    label: str
    items: list[FooterLink] = Field(default_factory=list)


class FooterContent(BaseModel):
    copyright_text: str
    navigation_sections: list[FooterSection] = Field(default_factory=list)
    social_links: list[SocialLink] = Field(default_factory=list)


class StorySection(BaseModel):
    title: str
    description: str | None = None
    paragraph1: str | None = None
    paragraph2: str | None = None
    image_url: str | None = None


class OurStoryContent(BaseModel):
    hero: StorySection
    mission: StorySection | None = None
    craftsmanship: StorySection | None = None
    community: StorySection | None = None
    values_section: StorySection | None = None
    join_journey_section: StorySection | None = None


class PageContent(BaseModel):
    content: str = Field(..., description="페이지 본문 (마크다운/HTML)")


class PromotionalPostCreateRequest(BaseModel):
    """
    프로모션 게시물 생성 요청 스키마

    Example:
        {
            "title": "Dashain Sale",
            "image_url": "https://cdn.peakpulse.com/promos/dashain.jpg",
            "cta_text": "Shop now",
            "cta_link": "/products"
        }
    """

    title: str = Field(..., min_length=1, max_length=200, examples=["Dashain Sale"])
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    image_url: str = Field(..., min_length=1, max_length=500)
    image_alt_text: str | None = Field(None, max_length=200)
    cta_text: str | None = Field(None, max_length=100)
    cta_link: str | None = Field(None, max_length=500)
    price: int | None = Field(None, ge=0)
    discount_price: int | None = Field(None, ge=0)
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool = True
    display_order: int = 0
    background_color: str | None = Field(None, max_length=20)
    text_color: str | None = Field(None, max_length=20)

    @field_validator("valid_from", "valid_until")
    @classmethod
    def normalize_to_utc(cls, value: datetime | None) -> datetime | None:
        return to_naive_utc(value)


class PromotionalPostUpdateRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    image_url: str | None = Field(None, min_length=1, max_length=500)
    image_alt_text: str | None = Field(None, max_length=200)
    cta_text: str | None = Field(None, max_length=100)
    cta_link: str | None = Field(None, max_length=500)
    price: int | None = Field(None, ge=0)
    discount_price: int | None = Field(None, ge=0)
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool | None = None
    display_order: int | None = None
    background_color: str | None = Field(None, max_length=20)
    text_color: str | None = Field(None, max_length=20)

    @field_validator("valid_from", "valid_until")
    @classmethod
    def normalize_to_utc(cls, value: datetime | None) -> datetime | None:
        return to_naive_utc(value)


class PromotionalPostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: str | None = None
    image_url: str
    image_alt_text: str | None = None
    cta_text: str | None = None
    cta_link: str | None = None
    price: int | None = None
    discount_price: int | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool
    display_order: int
    background_color: str | None = None
    text_color: str | None = None
    created_at: datetime
    updated_at: datetime


class NewsletterSubscribeRequest(BaseModel):
    """
    뉴스레터 구독 요청 스키마

    Example:
        {"email": "jane@peakpulse.com", "source": "footer"}
    """

    email: str = Field(..., max_length=255, examples=["jane@peakpulse.com"])
    source: str | None = Field(None, max_length=50, examples=["footer"])
