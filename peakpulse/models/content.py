"""
콘텐츠 모델 (사이트 설정, 프로모션 게시물, 뉴스레터 구독)
"""

from sqlalchemy import Boolean, Column, Integer, String, Text, DateTime, JSON

from peakpulse.core.utils import utcnow
from peakpulse.db.database import Base


class SiteConfiguration(Base):
    """
    키-값 형태의 사이트 설정 모델

    config_key 예시: siteGeneralSettings, homepageContent, footerContent,
    ourStoryContent, pageContent_{pageKey}
    """

    __tablename__ = "site_configurations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    config_key = Column(String(120), unique=True, nullable=False, index=True)
    value = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<SiteConfiguration(config_key='{self.config_key}')>"


class PromotionalPost(Base):
    """
    프로모션 배너/게시물 모델

    is_active이고 valid_from ~ valid_until 기간 안에 있는 게시물만 공개됩니다.
    """

    __tablename__ = "promotional_posts"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column(String(200), nullable=False)
    slug = Column(String(220), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=False)
    image_alt_text = Column(String(200), nullable=True)
    cta_text = Column(String(100), nullable=True)
    cta_link = Column(String(500), nullable=True)
    price = Column(Integer, nullable=True)
    discount_price = Column(Integer, nullable=True)
    valid_from = Column(DateTime, nullable=True)
    valid_until = Column(DateTime, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    display_order = Column(Integer, nullable=False, default=0)
    background_color = Column(String(20), nullable=True)
    text_color = Column(String(20), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<PromotionalPost(id={self.id}, slug='{self.slug}')>"


class NewsletterSubscription(Base):
    __tablename__ = "newsletter_subscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    source = Column(String(50), nullable=False, default="unknown")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<NewsletterSubscription(email='{self.email}')>"
