"""
디자인 허브 모델 (콜라보 카테고리, 디자인 콜라보 갤러리, 주문 제작 디자인)
"""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from peakpulse.core.utils import utcnow
from peakpulse.db.database import Base


class DesignCollaborationCategory(Base):
    __tablename__ = "design_collaboration_categories"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    ai_image_prompt = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<DesignCollaborationCategory(id={self.id}, slug='{self.slug}')>"


class DesignCollaboration(Base):
    """
    아티스트 콜라보 갤러리 모델

    Attributes:
        gallery_images: 갤러리 이미지 목록 [{"url": ..., "caption": ...}]
        is_published: 공개 여부 (공개된 콜라보만 스토어프론트에 노출)
        collaboration_date: 콜라보 일자 (Nullable)
    """

    __tablename__ = "design_collaborations"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column(String(200), nullable=False)
    slug = Column(String(220), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    category_id = Column(
        Integer,
        ForeignKey("design_collaboration_categories.id", ondelete="SET NULL"),
        nullable=True,
    )
    cover_image_url = Column(String(500), nullable=True)
    artist_name = Column(String(150), nullable=True)
    artist_statement = Column(Text, nullable=True)
    gallery_images = Column(JSON, nullable=False, default=list)
    is_published = Column(Boolean, nullable=False, default=False)
    collaboration_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    category = relationship("DesignCollaborationCategory")

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category else None

    def __repr__(self) -> str:
        return f"<DesignCollaboration(id={self.id}, slug='{self.slug}')>"


class PrintOnDemandDesign(Base):
    __tablename__ = "print_on_demand_designs"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column(String(200), nullable=False)
    slug = Column(String(220), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=False)
    price = Column(Integer, nullable=False)
    is_for_sale = Column(Boolean, nullable=False, default=True)
    sku = Column(String(100), nullable=True)
    collaboration_id = Column(
        Integer, ForeignKey("design_collaborations.id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    collaboration = relationship("DesignCollaboration")

    @property
    def collaboration_title(self) -> str | None:
        return self.collaboration.title if self.collaboration else None

    def __repr__(self) -> str:
        return f"<PrintOnDemandDesign(id={self.id}, slug='{self.slug}')>"
