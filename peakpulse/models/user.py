"""
User 모델

사용자 계정 정보와 위시리스트를 저장하는 SQLAlchemy 모델입니다.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from peakpulse.core.utils import utcnow
from peakpulse.db.database import Base

ALL_ROLES = ("customer", "vip", "affiliate", "admin")
DEFAULT_ROLES = ["customer"]


class User(Base):
    """
    사용자 모델

    Attributes:
        id: 사용자 고유 ID (Primary Key)
        email: 이메일 주소 (Unique, Not Null) - 로그인 ID로 사용
        name: 표시 이름 (Nullable)
        avatar_url: 프로필 이미지 URL (Nullable)
        bio: 자기소개 (Nullable)
        roles: 역할 목록 (예: ["customer", "admin"])
        hashed_password: 해싱된 비밀번호 (Not Null)
        created_at: 생성 일시 (자동 설정)
        updated_at: 수정 일시 (자동 업데이트)
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    bio = Column(Text, nullable=True)
    roles = Column(JSON, nullable=False, default=lambda: list(DEFAULT_ROLES))
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    wishlist_items = relationship(
        "WishlistItem", back_populates="user", cascade="all, delete-orphan"
    )

    def has_role(self, role: str) -> bool:
        return role in (self.roles or [])

    @property
    def is_admin(self) -> bool:
        return self.has_role("admin")

    def __repr__(self) -> str:
        """User 객체의 문자열 표현"""
        return f"<User(id={self.id}, email='{self.email}')>"

    def __str__(self) -> str:
        return f"User: {self.email}"


class WishlistItem(Base):
    """
    위시리스트 항목 (사용자-상품 쌍, 중복 불가)
    """

    __tablename__ = "wishlist_items"
    __table_args__ = (UniqueConstraint("user_id", "product_id", name="uq_wishlist_user_product"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    user = relationship("User", back_populates="wishlist_items")
    product = relationship("Product")

    def __repr__(self) -> str:
        return f"<WishlistItem(user_id={self.user_id}, product_id={self.product_id})>"
