"""
커뮤니티 모델 (사용자 게시물, 좋아요, 북마크, 댓글)
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from peakpulse.core.utils import utcnow
from peakpulse.db.database import Base

POST_STATUSES = ("pending", "approved", "rejected")


class UserPost(Base):
    """
    사용자 게시물 모델

    Attributes:
        image_url: 게시물 이미지 URL (필수)
        caption: 본문 (Nullable)
        product_tags: 태그된 상품 slug 목록
        status: 검수 상태 (pending → approved / rejected)
        like_count: 좋아요 수 (post_likes 행 개수와 항상 일치)
    """

    __tablename__ = "user_posts"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    image_url = Column(String(500), nullable=False)
    caption = Column(Text, nullable=True)
    product_tags = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default="pending", index=True)
    like_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    user = relationship("User")
    likes = relationship("PostLike", cascade="all, delete-orphan", back_populates="post")
    bookmarks = relationship("PostBookmark", cascade="all, delete-orphan", back_populates="post")
    comments = relationship(
        "PostComment",
        cascade="all, delete-orphan",
        back_populates="post",
        order_by="PostComment.created_at",
    )

    def __repr__(self) -> str:
        return f"<UserPost(id={self.id}, user_id={self.user_id}, status='{self.status}')>"


class PostLike(Base):
    __tablename__ = "post_likes"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_like"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("user_posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    post = relationship("UserPost", back_populates="likes")


class PostBookmark(Base):
    __tablename__ = "post_bookmarks"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_bookmark"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("user_posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    post = relationship("UserPost", back_populates="bookmarks")


class PostComment(Base):
    """
    게시물 댓글 모델 (parent_comment_id로 답글 지원)
    """

    __tablename__ = "post_comments"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    post_id = Column(Integer, ForeignKey("user_posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    comment_text = Column(Text, nullable=False)
    parent_comment_id = Column(Integer, ForeignKey("post_comments.id", ondelete="CASCADE"), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    post = relationship("UserPost", back_populates="comments")
    user = relationship("User")

    def __repr__(self) -> str:
        return f"<PostComment(id={self.id}, post_id={self.post_id})>"
