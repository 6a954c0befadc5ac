"""
디자인 허브 서비스

콜라보 카테고리, 디자인 콜라보 갤러리, 주문 제작(print-on-demand) 디자인의
조회와 관리자 CRUD를 담당합니다. 세 리소스 모두 slug를 생략하면
제목/이름에서 생성합니다.
"""

from loguru import logger
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import (
    NoFieldsToUpdateException,
    NotFoundException,
    SlugAlreadyExistsException,
)
from peakpulse.core.utils import drop_required_nulls, slugify
from peakpulse.models import (
    DesignCollaboration,
    DesignCollaborationCategory,
    PrintOnDemandDesign,
)


def _ensure_slug_available(model, resource: str, slug: str, db: Session, exclude_id=None) -> None:
    query = db.query(model).filter(model.slug == slug)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first() is not None:
        raise SlugAlreadyExistsException(resource, slug)


def _get_or_404(model, resource: str, object_id: int, db: Session):
    obj = db.query(model).filter(model.id == object_id).first()
    if obj is None:
        raise NotFoundException(resource, object_id)
    return obj


def _apply_updates(obj, model, resource: str, updates: dict, db: Session) -> None:
    updates = drop_required_nulls(model, updates)
    if not updates:
        raise NoFieldsToUpdateException()
    new_slug = updates.get("slug")
    if new_slug and new_slug != obj.slug:
        _ensure_slug_available(model, resource, new_slug, db, exclude_id=obj.id)
    for field, value in updates.items():
        if field == "slug" and not value:
            continue
        setattr(obj, field, value)


class DesignService:
    """디자인 허브 CRUD 서비스 클래스"""

    # 콜라보 카테고리

    @staticmethod
    def list_categories(db: Session) -> list[DesignCollaborationCategory]:
        return (
            db.query(DesignCollaborationCategory)
            .order_by(DesignCollaborationCategory.name.asc())
            .all()
        )

    @staticmethod
    def create_category(data: dict, db: Session) -> DesignCollaborationCategory:
        data = dict(data)
        data["slug"] = data.get("slug") or slugify(data["name"])
        _ensure_slug_available(DesignCollaborationCategory, "Collaboration category", data["slug"], db)

        category = DesignCollaborationCategory(**data)
        db.add(category)
        db.commit()
        db.refresh(category)
        logger.info("Collaboration category created: {}", category.slug)
        return category

    @staticmethod
    def update_category(category_id: int, updates: dict, db: Session) -> DesignCollaborationCategory:
        category = _get_or_404(
            DesignCollaborationCategory, "Collaboration category", category_id, db
        )
        _apply_updates(
            category, DesignCollaborationCategory, "Collaboration category", updates, db
        )
        db.commit()
        db.refresh(category)
        return category

    @staticmethod
    def delete_category(category_id: int, db: Session) -> None:
        category = _get_or_404(
            DesignCollaborationCategory, "Collaboration category", category_id, db
        )
        db.query(DesignCollaboration).filter(
            DesignCollaboration.category_id == category_id
        ).update({DesignCollaboration.category_id: None}, synchronize_session=False)
        db.delete(category)
        db.commit()
        logger.info("Collaboration category {} deleted", category_id)

    # 디자인 콜라보

    @staticmethod
    def _check_category(category_id: int | None, db: Session) -> None:
        if category_id is not None:
            _get_or_404(DesignCollaborationCategory, "Collaboration category", category_id, db)

    @staticmethod
    def list_collaborations(db: Session, published_only: bool = True) -> list[DesignCollaboration]:
        """
        콜라보 목록 (콜라보 일자 내림차순, 일자가 없으면 뒤로, 그다음 최신순)

        Args:
            published_only: True면 공개된 콜라보만 반환
        """
        query = db.query(DesignCollaboration)
        if published_only:
            query = query.filter(DesignCollaboration.is_published.is_(True))
        return query.order_by(
            DesignCollaboration.collaboration_date.is_(None),
            DesignCollaboration.collaboration_date.desc(),
            DesignCollaboration.created_at.desc(),
            DesignCollaboration.id.desc(),
        ).all()

    @staticmethod
    def get_collaboration_by_slug(
        slug: str, db: Session, published_only: bool = True
    ) -> DesignCollaboration:
        query = db.query(DesignCollaboration).filter(DesignCollaboration.slug == slug)
        if published_only:
            query = query.filter(DesignCollaboration.is_published.is_(True))
        collaboration = query.first()
        if collaboration is None:
            raise NotFoundException("Design collaboration", slug)
        return collaboration

    @staticmethod
    def get_collaboration(collaboration_id: int, db: Session) -> DesignCollaboration:
        return _get_or_404(DesignCollaboration, "Design collaboration", collaboration_id, db)

    @staticmethod
    def create_collaboration(data: dict, db: Session) -> DesignCollaboration:
        data = dict(data)
        data["slug"] = data.get("slug") or slugify(data["title"])
        _ensure_slug_available(DesignCollaboration, "Design collaboration", data["slug"], db)
        DesignService._check_category(data.get("category_id"), db)

        collaboration = DesignCollaboration(**data)
        db.add(collaboration)
        db.commit()
        db.refresh(collaboration)
        logger.info("Design collaboration created: {}", collaboration.slug)
        return collaboration

    @staticmethod
    def update_collaboration(collaboration_id: int, updates: dict, db: Session) -> DesignCollaboration:
        collaboration = DesignService.get_collaboration(collaboration_id, db)
        if updates.get("category_id") is not None:
            DesignService._check_category(updates["category_id"], db)
        _apply_updates(collaboration, DesignCollaboration, "Design collaboration", updates, db)
        db.commit()
        db.refresh(collaboration)
        return collaboration

    @staticmethod
    def delete_collaboration(collaboration_id: int, db: Session) -> None:
        collaboration = DesignService.get_collaboration(collaboration_id, db)
        db.query(PrintOnDemandDesign).filter(
            PrintOnDemandDesign.collaboration_id == collaboration_id
        ).update({PrintOnDemandDesign.collaboration_id: None}, synchronize_session=False)
        db.delete(collaboration)
        db.commit()
        logger.info("Design collaboration {} deleted", collaboration_id)

    # 주문 제작 디자인

    @staticmethod
    def list_print_designs(db: Session) -> list[PrintOnDemandDesign]:
        return (
            db.query(PrintOnDemandDesign)
            .order_by(PrintOnDemandDesign.created_at.desc(), PrintOnDemandDesign.id.desc())
            .all()
        )

    @staticmethod
    def get_print_design(design_id: int, db: Session) -> PrintOnDemandDesign:
        return _get_or_404(PrintOnDemandDesign, "Print-on-demand design", design_id, db)

    @staticmethod
    def create_print_design(data: dict, db: Session) -> PrintOnDemandDesign:
        data = dict(data)
        data["slug"] = data.get("slug") or slugify(data["title"])
        _ensure_slug_available(PrintOnDemandDesign, "Print-on-demand design", data["slug"], db)
        if data.get("collaboration_id") is not None:
            DesignService.get_collaboration(data["collaboration_id"], db)

        design = PrintOnDemandDesign(**data)
        db.add(design)
        db.commit()
        db.refresh(design)
        logger.info("Print-on-demand design created: {}", design.slug)
        return design

    @staticmethod
    def update_print_design(design_id: int, updates: dict, db: Session) -> PrintOnDemandDesign:
        design = DesignService.get_print_design(design_id, db)
        if updates.get("collaboration_id") is not None:
            DesignService.get_collaboration(updates["collaboration_id"], db)
        _apply_updates(design, PrintOnDemandDesign, "Print-on-demand design", updates, db)
        db.commit()
        db.refresh(design)
        return design

    @staticmethod
    def delete_print_design(design_id: int, db: Session) -> None:
        design = DesignService.get_print_design(design_id, db)
        db.delete(design)
        db.commit()
        logger.info("Print-on-demand design {} deleted", design_id)
