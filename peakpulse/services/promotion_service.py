"""프로모션 게시물 서비스."""

from loguru import logger
from sqlalchemy import or_
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import (
    NoFieldsToUpdateException,
    NotFoundException,
    SlugAlreadyExistsException,
)
from peakpulse.core.utils import drop_required_nulls, slugify, utcnow
from peakpulse.models import PromotionalPost


class PromotionService:
    """프로모션 게시물 조회 및 관리자 CRUD 서비스."""

    @staticmethod
    def list_active(db: Session) -> list[PromotionalPost]:
        """
        현재 노출 중인 프로모션 목록을 조회합니다.

        is_active이고 valid_from <= 현재 <= valid_until (값이 없으면 제한 없음)인
        게시물을 display_order, 최신순으로 반환합니다.
        """
        now = utcnow()
        return (
            db.query(PromotionalPost)
            .filter(PromotionalPost.is_active.is_(True))
            .filter(or_(PromotionalPost.valid_from.is_(None), PromotionalPost.valid_from <= now))
            .filter(or_(PromotionalPost.valid_until.is_(None), PromotionalPost.valid_until >= now))
            .order_by(PromotionalPost.display_order.asc(), PromotionalPost.created_at.desc())
            .all()
        )

    @staticmethod
    def list_all(db: Session) -> list[PromotionalPost]:
        return (
            db.query(PromotionalPost)
            .order_by(PromotionalPost.display_order.asc(), PromotionalPost.created_at.desc())
            .all()
        )

    @staticmethod
    def get(post_id: int, db: Session) -> PromotionalPost:
        post = db.query(PromotionalPost).filter(PromotionalPost.id == post_id).first()
        if post is None:
            raise NotFoundException("Promotional post", post_id)
        return post

    @staticmethod
    def _ensure_slug_available(slug: str, db: Session, exclude_id: int | None = None) -> None:
        query = db.query(PromotionalPost).filter(PromotionalPost.slug == slug)
        if exclude_id is not None:
            query = query.filter(PromotionalPost.id != exclude_id)
        if query.first() is not None:
            raise SlugAlreadyExistsException("Promotional post", slug)

    @staticmethod
    def create(data: dict, db: Session) -> PromotionalPost:
        """
        프로모션 게시물을 생성합니다 (slug 생략 시 title에서 생성).

        Raises:
            SlugAlreadyExistsException: slug가 이미 존재하는 경우
        """
        data = dict(data)
        data["slug"] = data.get("slug") or slugify(data["title"])
        PromotionService._ensure_slug_available(data["slug"], db)

        post = PromotionalPost(**data)
        db.add(post)
        db.commit()
        db.refresh(post)
        logger.info("Promotional post created: {}", post.slug)
        return post

    @staticmethod
    def update(post_id: int, updates: dict, db: Session) -> PromotionalPost:
        updates = drop_required_nulls(PromotionalPost, updates)
        if not updates:
            raise NoFieldsToUpdateException()

        post = PromotionService.get(post_id, db)
        if updates.get("slug") and updates["slug"] != post.slug:
            PromotionService._ensure_slug_available(updates["slug"], db, exclude_id=post.id)
        for field, value in updates.items():
            if field == "slug" and not value:
                continue
            setattr(post, field, value)
        db.commit()
        db.refresh(post)
        return post

    @staticmethod
    def delete(post_id: int, db: Session) -> None:
        post = PromotionService.get(post_id, db)
        db.delete(post)
        db.commit()
        logger.info("Promotional post {} deleted", post_id)
