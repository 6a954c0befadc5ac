"""
커뮤니티(사용자 게시물) 관련 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field


class PostCreateRequest(BaseModel):
    """
    게시물 작성 요청 스키마

    Example:
        {
            "image_url": "https://cdn.peakpulse.com/posts/1.jpg",
            "caption": "Summit day in my new hoodie",
            "product_tags": ["himalayan-hoodie"]
        }
    """

    image_url: str = Field(..., min_length=1, max_length=500, description="이미지 URL")
    caption: str | None = Field(None, description="본문")
    product_tags: list[str] = Field(default_factory=list, description="태그된 상품 slug 목록")


class PostResponse(BaseModel):
    id: int
    user_id: int
    user_name: str = Field(..., description="작성자 표시 이름")
    image_url: str
    caption: str | None = None
    product_tags: list[str] = Field(default_factory=list)
    status: str
    like_count: int = 0
    comment_count: int = 0
    liked_by_me: bool = False
    bookmarked_by_me: bool = False
    created_at: datetime


class LikeToggleResponse(BaseModel):
    liked: bool
    like_count: int


class BookmarkToggleResponse(BaseModel):
    bookmarked: bool


class CommentCreateRequest(BaseModel):
    comment_text: str = Field(..., description="댓글 내용", examples=["Love this!"])
    parent_comment_id: int | None = Field(None, description="답글 대상 댓글 ID")


class CommentResponse(BaseModel):
    id: int
    post_id: int
    user_id: int
    user_name: str
    comment_text: str
    parent_comment_id: int | None = None
    created_at: datetime


class PostAdminUpdateRequest(BaseModel):
    """관리자용 게시물 수정 요청 (status, caption 중 하나 이상 필요)"""

    status: str | None = Field(None, description="pending, approved, rejected")
    caption: str | None = None
