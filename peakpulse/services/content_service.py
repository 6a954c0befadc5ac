"""
사이트 콘텐츠 서비스

site_configurations 테이블의 키-값 설정으로 사이트 일반 설정, 홈페이지,
푸터, 브랜드 스토리, 일반 페이지 콘텐츠를 관리합니다.
저장된 값이 없으면 기본 콘텐츠를 반환합니다.
"""

import copy
import re

from loguru import logger
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import ValidationException
from peakpulse.models import SiteConfiguration

SITE_SETTINGS_KEY = "siteGeneralSettings"
HOMEPAGE_KEY = "homepageContent"
FOOTER_KEY = "footerContent"
OUR_STORY_KEY = "ourStoryContent"
PAGE_KEY_PREFIX = "pageContent_"

YOUTUBE_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
PAGE_KEY_RE = re.compile(r"^[A-Za-z0-9_-]+$")

DEFAULT_SITE_SETTINGS = {
    "site_title": "Peak Pulse",
    "site_description": (
        "Discover Peak Pulse, a Nepali clothing brand blending traditional craftsmanship "
        "with contemporary streetwear."
    ),
    "store_email": "info@peakpulse.com",
    "store_phone": "+977-1-XXXXXXX",
    "store_address": "Kathmandu, Nepal",
    "social_links": [{"platform": "Instagram", "url": "https://instagram.com/peakpulse"}],
}

DEFAULT_HOMEPAGE = {
    "hero": {
        "title": "Peak Pulse",
        "description": "Nepali craftsmanship, made for the streets and the summits.",
    },
    "artisanal_roots": {
        "title": "Our Artisanal Roots",
        "description": "Every piece is made with artisans across Nepal.",
    },
}

DEFAULT_FOOTER = {
    "copyright_text": "© {currentYear} Peak Pulse. All rights reserved.",
    "navigation_sections": [
        {
            "id": "company-default",
            "label": "Company",
            "items": [{"id": "os", "name": "Our Story", "href": "/our-story"}],
        },
        {
            "id": "support-default",
            "label": "Support",
            "items": [{"id": "cu", "name": "Contact Us", "href": "/contact"}],
        },
        {
            "id": "legal-default",
            "label": "Legal",
            "items": [{"id": "pp", "name": "Privacy Policy", "href": "/privacy-policy"}],
        },
    ],
    "social_links": [],
}

DEFAULT_OUR_STORY = {
    "hero": {"title": "Our Story", "description": "From the Himalayas to your wardrobe."},
    "mission": {"title": "Our Mission", "paragraph1": "", "paragraph2": ""},
    "craftsmanship": {"title": "Craftsmanship", "paragraph1": "", "paragraph2": ""},
    "community": {"title": "Community", "description": ""},
    "values_section": {"title": "Our Values"},
    "join_journey_section": {"title": "Join Our Journey", "description": ""},
}


class ContentService:
    """키-값 사이트 콘텐츠 서비스 클래스"""

    @staticmethod
    def get_value(config_key: str, db: Session):
        row = (
            db.query(SiteConfiguration)
            .filter(SiteConfiguration.config_key == config_key)
            .first()
        )
        return row.value if row is not None else None

    @staticmethod
    def put_value(config_key: str, value, db: Session) -> None:
        """설정 값을 저장합니다 (없으면 생성, 있으면 교체)."""
        row = (
            db.query(SiteConfiguration)
            .filter(SiteConfiguration.config_key == config_key)
            .first()
        )
        if row is None:
            db.add(SiteConfiguration(config_key=config_key, value=value))
        else:
            row.value = value
        db.commit()
        logger.info("Site configuration saved: {}", config_key)

    @staticmethod
    def get_site_settings(db: Session) -> dict:
        return ContentService.get_value(SITE_SETTINGS_KEY, db) or copy.deepcopy(
            DEFAULT_SITE_SETTINGS
        )

    @staticmethod
    def update_site_settings(updates: dict, db: Session) -> dict:
        """
        사이트 일반 설정을 저장합니다.

        비어 있거나 생략된 필드는 기본값으로 채웁니다.
        """
        merged = {
            field: updates.get(field) or copy.deepcopy(default)
            for field, default in DEFAULT_SITE_SETTINGS.items()
        }
        ContentService.put_value(SITE_SETTINGS_KEY, merged, db)
        return merged

    @staticmethod
    def get_homepage(db: Session) -> dict:
        return ContentService.get_value(HOMEPAGE_KEY, db) or copy.deepcopy(DEFAULT_HOMEPAGE)

    @staticmethod
    def update_homepage(data: dict, db: Session) -> dict:
        """
        홈페이지 콘텐츠를 저장합니다.

        - hero.video_id는 11자 YouTube 영상 ID여야 하며, 빈 값이면 제거합니다.
        - hero.image_url도 빈 값이면 제거합니다.
        - artisanal_roots를 생략하면 기존 값을 유지합니다.

        Raises:
            ValidationException: YouTube 영상 ID 형식이 잘못된 경우
        """
        new_hero = data["hero"]
        video_id = (new_hero.get("video_id") or "").strip()
        if video_id and not YOUTUBE_ID_RE.match(video_id):
            raise ValidationException("Invalid YouTube Video ID format for hero section.")

        current = ContentService.get_value(HOMEPAGE_KEY, db) or {}
        hero = dict(current.get("hero") or {})
        hero.update(title=new_hero["title"], description=new_hero["description"])
        hero.pop("video_id", None)
        hero.pop("image_url", None)
        if video_id:
            hero["video_id"] = video_id
        image_url = (new_hero.get("image_url") or "").strip()
        if image_url:
            hero["image_url"] = image_url

        updated = {
            **current,
            "hero": hero,
            "artisanal_roots": data.get("artisanal_roots")
            or current.get("artisanal_roots")
            or {"title": "", "description": ""},
        }
        ContentService.put_value(HOMEPAGE_KEY, updated, db)
        return updated

    @staticmethod
    def get_footer(db: Session) -> dict:
        """저장된 푸터 콘텐츠를 기본값과 병합하여 반환합니다."""
        stored = ContentService.get_value(FOOTER_KEY, db) or {}
        return {
            "copyright_text": stored.get("copyright_text") or DEFAULT_FOOTER["copyright_text"],
            "navigation_sections": stored.get("navigation_sections")
            or copy.deepcopy(DEFAULT_FOOTER["navigation_sections"]),
            "social_links": stored.get("social_links") or [],
        }

    @staticmethod
    def update_footer(data: dict, db: Session) -> dict:
        ContentService.put_value(FOOTER_KEY, data, db)
        return ContentService.get_footer(db)

    @staticmethod
    def get_our_story(db: Session) -> dict:
        return ContentService.get_value(OUR_STORY_KEY, db) or copy.deepcopy(DEFAULT_OUR_STORY)

    @staticmethod
    def update_our_story(data: dict, db: Session) -> dict:
        ContentService.put_value(OUR_STORY_KEY, data, db)
        return data

    @staticmethod
    def _page_config_key(page_key: str) -> str:
        if not PAGE_KEY_RE.match(page_key):
            raise ValidationException(f"Invalid page key '{page_key}'.")
        return f"{PAGE_KEY_PREFIX}{page_key}"

    @staticmethod
    def get_page(page_key: str, db: Session) -> dict:
        """
        일반 페이지 콘텐츠를 조회합니다.

        Example:
            >>> ContentService.get_page("privacy-policy", db)
            {'content': 'Default content for privacy-policy. Please edit.'}
        """
        stored = ContentService.get_value(ContentService._page_config_key(page_key), db)
        if stored and stored.get("content") is not None:
            return {"content": stored["content"]}
        return {"content": f"Default content for {page_key}. Please edit."}

    @staticmethod
    def update_page(page_key: str, content: str, db: Session) -> dict:
        ContentService.put_value(
            ContentService._page_config_key(page_key), {"content": content}, db
        )
        return {"content": content}
