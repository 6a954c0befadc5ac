"""카테고리 관리 서비스."""

from loguru import logger
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import (
    CategoryNotFoundException,
    NoFieldsToUpdateException,
    SlugAlreadyExistsException,
    ValidationException,
)
from peakpulse.core.utils import slugify
from peakpulse.models import Category


class CategoryService:
    """카테고리 조회, 생성, 수정, 삭제 서비스."""

    @staticmethod
    def list_categories(db: Session) -> list[Category]:
        return db.query(Category).order_by(Category.name.asc()).all()

    @staticmethod
    def get_category(category_id: int, db: Session) -> Category:
        category = db.query(Category).filter(Category.id == category_id).first()
        if category is None:
            raise CategoryNotFoundException(category_id)
        return category

    @staticmethod
    def _ensure_slug_available(slug: str, db: Session, exclude_id: int | None = None) -> None:
        query = db.query(Category).filter(Category.slug == slug)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first() is not None:
            raise SlugAlreadyExistsException("Category", slug)

    @staticmethod
    def create_category(data: dict, db: Session) -> Category:
        """
        카테고리를 생성합니다.

        Args:
            data: 카테고리 필드 (name 필수, slug 생략 시 name에서 생성)
            db: DB 세션

        Returns:
            생성된 Category 객체

        Raises:
            SlugAlreadyExistsException: slug가 이미 존재하는 경우
            CategoryNotFoundException: parent_id가 존재하지 않는 경우
        """
        slug = data.get("slug") or slugify(data["name"])
        CategoryService._ensure_slug_available(slug, db)

        parent_id = data.get("parent_id")
        if parent_id is not None:
            CategoryService.get_category(parent_id, db)

        category = Category(
            name=data["name"],
            slug=slug,
            description=data.get("description"),
            image_url=data.get("image_url"),
            ai_image_prompt=data.get("ai_image_prompt"),
            parent_id=parent_id,
        )
        db.add(category)
        db.commit()
        db.refresh(category)

        logger.info("Category created: {} ({})", category.name, category.slug)
        return category

    @staticmethod
    def update_category(category_id: int, updates: dict, db: Session) -> Category:
        """
        카테고리를 부분 수정합니다.

        name만 바뀌고 slug가 전달되지 않으면 slug를 다시 생성합니다.

        Raises:
            NoFieldsToUpdateException: 수정할 필드가 없는 경우
            ValidationException: 자기 자신을 상위 카테고리로 지정한 경우
        """
        if not updates:
            raise NoFieldsToUpdateException()

        category = CategoryService.get_category(category_id, db)

        if "slug" in updates and updates["slug"]:
            new_slug = updates["slug"]
        elif "name" in updates and updates["name"]:
            new_slug = slugify(updates["name"])
        else:
            new_slug = category.slug
        if new_slug != category.slug:
            CategoryService._ensure_slug_available(new_slug, db, exclude_id=category.id)
        category.slug = new_slug

        if "parent_id" in updates:
            parent_id = updates["parent_id"]
            if parent_id == category.id:
                raise ValidationException("A category cannot be its own parent.")
            if parent_id is not None:
                CategoryService.get_category(parent_id, db)
            category.parent_id = parent_id

        for field in ("name", "description", "image_url", "ai_image_prompt"):
            if field in updates and (field != "name" or updates[field]):
                setattr(category, field, updates[field])

        db.commit()
        db.refresh(category)
        return category

    @staticmethod
    def delete_category(category_id: int, db: Session) -> None:
        """카테고리를 삭제합니다. 하위 카테고리는 최상위로 이동합니다."""
        category = CategoryService.get_category(category_id, db)
        db.query(Category).filter(Category.parent_id == category.id).update(
            {Category.parent_id: None}, synchronize_session=False
        )
        db.delete(category)
        db.commit()
        logger.info("Category deleted: {}", category_id)
