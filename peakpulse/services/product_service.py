"""상품 관리 서비스."""

import uuid
from typing import Optional

from loguru import logger
from redis import Redis
from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session

from peakpulse.core.config import Settings
from peakpulse.core.exceptions import (
    CategoryNotFoundException,
    LockAcquisitionException,
    NoFieldsToUpdateException,
    ProductNotFoundException,
    SlugAlreadyExistsException,
    VariantNotFoundException,
)
from peakpulse.core.utils import slugify
from peakpulse.models import Category, Product, ProductVariant
from peakpulse.services.inventory_service import RELEASE_LOCK_SCRIPT, InventoryService

SORT_OPTIONS = {
    "newest": (Product.created_at.desc(), Product.id.desc()),
    "price_asc": (Product.price.asc(), Product.id.asc()),
    "price_desc": (Product.price.desc(), Product.id.desc()),
    "name": (Product.name.asc(), Product.id.asc()),
}

_SIMPLE_FIELDS = (
    "name",
    "description",
    "short_description",
    "price",
    "compare_at_price",
    "sku",
    "tags",
    "fabric_details",
    "care_instructions",
    "sustainability_metrics",
    "fit_guide",
    "is_featured",
)


class ProductService:
    """상품 생성, 조회, 수정, 삭제 및 재고 동기화 서비스."""

    @staticmethod
    def _resolve_categories(category_ids: list[int], db: Session) -> list[Category]:
        categories = []
        for category_id in dict.fromkeys(category_ids):
            category = db.query(Category).filter(Category.id == category_id).first()
            if category is None:
                raise CategoryNotFoundException(category_id)
            categories.append(category)
        return categories

    @staticmethod
    def _ensure_slug_available(slug: str, db: Session, exclude_id: int | None = None) -> None:
        query = db.query(Product).filter(Product.slug == slug)
        if exclude_id is not None:
            query = query.filter(Product.id != exclude_id)
        if query.first() is not None:
            raise SlugAlreadyExistsException("Product", slug)

    @staticmethod
    def _build_variants(variants: list[dict]) -> list[ProductVariant]:
        return [
            ProductVariant(
                name=v["name"],
                value=v["value"],
                sku=v.get("sku"),
                price=v["price"],
                stock=v.get("stock", 0),
            )
            for v in variants
        ]

    @staticmethod
    def create_product(
        data: dict, db: Session, redis: Redis, settings: Settings
    ) -> Product:
        """
        상품을 생성하고 DB와 Redis에 저장합니다.

        slug 기반 락으로 같은 상품의 동시 생성을 막고,
        생성 후 상품/옵션 재고를 Redis에 기록합니다.

        Args:
            data: 상품 필드 (ProductCreateRequest.model_dump())
            db: DB 세션
            redis: Redis 클라이언트
            settings: 애플리케이션 설정

        Returns:
            생성된 Product 객체

        Raises:
            LockAcquisitionException: 같은 slug의 생성이 진행 중인 경우
            SlugAlreadyExistsException: slug가 이미 존재하는 경우
            CategoryNotFoundException: category_ids에 없는 카테고리가 있는 경우
        """
        slug = data.get("slug") or slugify(data["name"])

        lock_key = f"lock:product:create:{slug}"
        lock_id = str(uuid.uuid4())
        acquired = redis.set(lock_key, lock_id, nx=True, ex=settings.lock_timeout_seconds)
        if not acquired:
            raise LockAcquisitionException(lock_key, "Another product creation in progress")

        try:
            ProductService._ensure_slug_available(slug, db)
            categories = ProductService._resolve_categories(data.get("category_ids") or [], db)

            product = Product(
                slug=slug,
                stock=data.get("stock", 0),
                images=data.get("images") or [],
                categories=categories,
                variants=ProductService._build_variants(data.get("variants") or []),
                **{
                    field: data[field]
                    for field in _SIMPLE_FIELDS
                    if data.get(field) is not None
                },
            )
            db.add(product)
            db.commit()
            db.refresh(product)

            # 새 상품이므로 남아 있는 키가 있더라도 덮어씀
            InventoryService.set_stock(product.id, product.stock, redis)
            for variant in product.variants:
                InventoryService.set_stock(product.id, variant.stock, redis, variant.id)

            logger.info("Product created: id={} slug={}", product.id, product.slug)
            return product
        finally:
            redis.eval(RELEASE_LOCK_SCRIPT, 1, lock_key, lock_id)

    @staticmethod
    def get_product(product_id: int, db: Session) -> Optional[Product]:
        """
        상품 ID로 상품을 조회합니다.

        Args:
            product_id: 상품 ID
            db: DB 세션

        Returns:
            Product 객체 또는 None
        """
        return db.query(Product).filter(Product.id == product_id).first()

    @staticmethod
    def get_product_or_404(product_id: int, db: Session) -> Product:
        product = ProductService.get_product(product_id, db)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    @staticmethod
    def get_product_by_slug(slug: str, db: Session) -> Product:
        product = db.query(Product).filter(Product.slug == slug).first()
        if product is None:
            raise ProductNotFoundException(slug)
        return product

    @staticmethod
    def get_variant(product: Product, variant_id: int) -> ProductVariant:
        for variant in product.variants:
            if variant.id == variant_id:
                return variant
        raise VariantNotFoundException(variant_id)

    @staticmethod
    def list_products(
        db: Session,
        category: str | None = None,
        q: str | None = None,
        featured: bool | None = None,
        min_price: int | None = None,
        max_price: int | None = None,
        sort: str = "newest",
        skip: int = 0,
        limit: int | None = 100,
    ) -> list[Product]:
        """
        필터와 정렬을 적용하여 상품 목록을 조회합니다.

        Args:
            db: DB 세션
            category: 카테고리 slug
            q: 검색어 (상품명, 설명, 태그에서 대소문자 무시 검색)
            featured: 추천 상품 여부
            min_price / max_price: 가격 범위 (포함)
            sort: newest, price_asc, price_desc, name (그 외 값은 newest)
            skip: 건너뛸 레코드 수 (페이지네이션)
            limit: 조회할 최대 레코드 수 (None이면 제한 없음)

        Returns:
            Product 객체 리스트
        """
        query = db.query(Product)

        if category:
            query = query.join(Product.categories).filter(Category.slug == category)
        if q and q.strip():
            pattern = f"%{q.strip()}%"
            query = query.filter(
                or_(
                    Product.name.ilike(pattern),
                    Product.description.ilike(pattern),
                    cast(Product.tags, String).ilike(pattern),
                )
            )
        if featured is not None:
            query = query.filter(Product.is_featured == featured)
        if min_price is not None:
            query = query.filter(Product.price >= min_price)
        if max_price is not None:
            query = query.filter(Product.price <= max_price)

        order_by = SORT_OPTIONS.get(sort, SORT_OPTIONS["newest"])
        return query.order_by(*order_by).offset(skip).limit(limit).all()

    @staticmethod
    def update_product(
        product_id: int, updates: dict, db: Session, redis: Redis
    ) -> Product:
        """
        상품을 부분 수정합니다.

        - stock이 전달되면 Redis 재고를 같은 값으로 재설정합니다.
        - variants가 전달되면 기존 옵션을 교체하고 옵션 재고 키를 다시 만듭니다.

        Raises:
            NoFieldsToUpdateException: 수정할 필드가 없는 경우
            ProductNotFoundException: 상품이 없는 경우
            SlugAlreadyExistsException: 새 slug가 이미 사용 중인 경우
        """
        if not updates:
            raise NoFieldsToUpdateException()

        product = ProductService.get_product_or_404(product_id, db)

        if updates.get("slug") and updates["slug"] != product.slug:
            ProductService._ensure_slug_available(updates["slug"], db, exclude_id=product.id)
            product.slug = updates["slug"]

        for field in _SIMPLE_FIELDS:
            if field in updates and updates[field] is not None:
                setattr(product, field, updates[field])
        if updates.get("images") is not None:
            product.images = updates["images"]
        if updates.get("category_ids") is not None:
            product.categories = ProductService._resolve_categories(updates["category_ids"], db)

        old_variant_ids = []
        if updates.get("variants") is not None:
            old_variant_ids = [v.id for v in product.variants]
            product.variants = ProductService._build_variants(updates["variants"])

        stock_changed = updates.get("stock") is not None
        if stock_changed:
            product.stock = updates["stock"]

        db.commit()
        db.refresh(product)

        if stock_changed:
            InventoryService.set_stock(product.id, product.stock, redis)
        if updates.get("variants") is not None:
            if old_variant_ids:
                redis.delete(
                    *[InventoryService._get_stock_key(product.id, vid) for vid in old_variant_ids]
                )
            for variant in product.variants:
                InventoryService.set_stock(product.id, variant.stock, redis, variant.id)

        logger.info("Product updated: id={} fields={}", product.id, sorted(updates))
        return product

    @staticmethod
    def delete_product(product_id: int, db: Session, redis: Redis) -> None:
        product = ProductService.get_product_or_404(product_id, db)
        variant_ids = [v.id for v in product.variants]
        db.delete(product)
        db.commit()
        InventoryService.delete_stock(product_id, redis, variant_ids)
        logger.info("Product deleted: id={}", product_id)

    @staticmethod
    def get_product_with_stock(
        product_id: int, db: Session, redis: Redis, variant_id: int | None = None
    ) -> dict:
        """
        상품(또는 옵션)의 DB 재고와 Redis 재고를 함께 조회합니다.

        Redis에 재고가 없으면 DB 값으로 초기화합니다 (SETNX).

        Returns:
            {
                "product_id": int,
                "variant_id": int | None,
                "db_stock": int,
                "redis_stock": int,
                "synced": bool
            }

        Raises:
            ProductNotFoundException / VariantNotFoundException
        """
        product = ProductService.get_product_or_404(product_id, db)
        db_stock = product.stock
        if variant_id is not None:
            db_stock = ProductService.get_variant(product, variant_id).stock

        redis_stock = InventoryService.ensure_stock(product_id, db_stock, redis, variant_id)

        return {
            "product_id": product_id,
            "variant_id": variant_id,
            "db_stock": db_stock,
            "redis_stock": redis_stock,
            "synced": db_stock == redis_stock,
        }

    @staticmethod
    def sync_stock_to_db(
        product_id: int, redis_stock: int, db: Session, variant_id: int | None = None
    ) -> bool:
        """
        Redis의 재고를 DB 컬럼에 반영합니다 (커밋은 호출자가 담당).

        Args:
            product_id: 상품 ID
            redis_stock: Redis의 현재 재고
            db: DB 세션
            variant_id: 옵션 ID (선택)

        Returns:
            반영 대상이 있으면 True, 없으면 False
        """
        if variant_id is not None:
            target = (
                db.query(ProductVariant)
                .filter(ProductVariant.id == variant_id, ProductVariant.product_id == product_id)
                .first()
            )
        else:
            target = ProductService.get_product(product_id, db)
        if target is None:
            return False

        target.stock = redis_stock
        return True
