"""
카탈로그 모델 (카테고리, 상품, 상품 옵션)
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    JSON,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import relationship

from peakpulse.core.utils import utcnow
from peakpulse.db.database import Base

product_categories = Table(
    "product_categories",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)


class Category(Base):
    """
    상품 카테고리 모델

    Attributes:
        id: 카테고리 ID (Primary Key)
        name: 카테고리명
        slug: URL slug (Unique)
        description: 설명 (Nullable)
        image_url: 대표 이미지 URL (Nullable)
        ai_image_prompt: 이미지 생성용 프롬프트 메모 (Nullable)
        parent_id: 상위 카테고리 ID (Nullable, 자기 참조)
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    ai_image_prompt = Column(Text, nullable=True)
    parent_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    parent = relationship("Category", remote_side=[id], backref="children")

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, slug='{self.slug}')>"


class Product(Base):
    """
    상품 모델

    Attributes:
        id: 상품 고유 ID (Primary Key)
        name: 상품명
        slug: URL slug (Unique)
        price: 판매가 (단위: NPR)
        compare_at_price: 할인 전 가격 (Nullable)
        stock: 기본 재고 수량 - Redis 실시간 재고와 동기화
        images: 이미지 목록 [{"url": ..., "alt_text": ...}]
        tags: 태그 목록
        average_rating / review_count: 승인된 리뷰 기준 집계값
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    slug = Column(String(220), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    short_description = Column(String(500), nullable=True)
    price = Column(Integer, nullable=False)
    compare_at_price = Column(Integer, nullable=True)
    sku = Column(String(100), nullable=True)
    stock = Column(Integer, nullable=False, default=0)  # 현재 재고 (Redis와 동기화)
    images = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    fabric_details = Column(Text, nullable=True)
    care_instructions = Column(Text, nullable=True)
    sustainability_metrics = Column(Text, nullable=True)
    fit_guide = Column(Text, nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    average_rating = Column(Float, nullable=False, default=0.0)
    review_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    categories = relationship("Category", secondary=product_categories, backref="products")
    variants = relationship(
        "ProductVariant",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductVariant.id",
    )

    @property
    def primary_image_url(self) -> str | None:
        if self.images:
            return self.images[0].get("url")
        return None

    def __repr__(self) -> str:
        """Product 객체의 문자열 표현"""
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"

    def __str__(self) -> str:
        return f"Product: {self.name}"


class ProductVariant(Base):
    """
    상품 옵션 모델 (예: Size=M, Color=Red)

    옵션별 가격/재고를 가지며, 옵션 재고는 Redis의 stock:{product_id}:{variant_id}와 동기화됩니다.
    """

    __tablename__ = "product_variants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    value = Column(String(50), nullable=False)
    sku = Column(String(100), nullable=True)
    price = Column(Integer, nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    product = relationship("Product", back_populates="variants")

    def __repr__(self) -> str:
        return f"<ProductVariant(id={self.id}, {self.name}={self.value})>"
