"""
리뷰 관련 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class ReviewCreateRequest(BaseModel):
    """
    리뷰 작성 요청 스키마

    Example:
        {
            "product_id": 1,
            "rating": 5,
            "title": "Great fit",
            "comment": "Warm and comfortable."
        }
    """

    product_id: int = Field(..., gt=0, examples=[1])
    rating: int = Field(..., ge=1, le=5, description="평점 (1~5)", examples=[5])
    title: str | None = Field(None, max_length=200)
    comment: str = Field(..., min_length=1, description="리뷰 본문")
    images: list[str] = Field(default_factory=list, description="이미지 URL 목록")


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    user_id: int
    user_name: str = Field(..., description="작성자 표시 이름")
    rating: int
    title: str | None = None
    comment: str
    images: list[str] = Field(default_factory=list)
    status: str
    created_at: datetime


class ReviewStatusUpdateRequest(BaseModel):
    status: str = Field(..., description="pending, approved, rejected", examples=["approved"])
