"""
디자인 허브 관련 Pydantic 스키마
"""

from datetime import date, datetime
from pydantic import BaseModel, Field, ConfigDict


class CollaborationCategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Thangka Art"])
    slug: str | None = Field(None, max_length=120)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    ai_image_prompt: str | None = None


class CollaborationCategoryUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    slug: str | None = Field(None, max_length=120)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    ai_image_prompt: str | None = None


class CollaborationCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None
    ai_image_prompt: str | None = None
    created_at: datetime
    updated_at: datetime


class GalleryImage(BaseModel):
    url: str = Field(..., min_length=1)
    caption: str | None = None


class CollaborationCreateRequest(BaseModel):
    """
    디자인 콜라보 생성 요청 스키마

    Example:
        {
            "title": "Mandala Series",
            "artist_name": "Sita Gurung",
            "category_id": 1,
            "is_published": true
        }
    """

    title: str = Field(..., min_length=1, max_length=200, examples=["Mandala Series"])
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    category_id: int | None = None
    cover_image_url: str | None = Field(None, max_length=500)
    artist_name: str | None = Field(None, max_length=150)
    artist_statement: str | None = None
    gallery_images: list[GalleryImage] = Field(default_factory=list)
    is_published: bool = False
    collaboration_date: date | None = None


class CollaborationUpdateRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    category_id: int | None = None
    cover_image_url: str | None = Field(None, max_length=500)
    artist_name: str | None = Field(None, max_length=150)
    artist_statement: str | None = None
    gallery_images: list[GalleryImage] | None = None
    is_published: bool | None = None
    collaboration_date: date | None = None


class CollaborationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: str | None = None
    category_id: int | None = None
    category_name: str | None = None
    cover_image_url: str | None = None
    artist_name: str | None = None
    artist_statement: str | None = None
    gallery_images: list[GalleryImage] = Field(default_factory=list)
    is_published: bool
    collaboration_date: date | None = None
    created_at: datetime
    updated_at: datetime


class PrintDesignCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200, examples=["Everest Line Art Tee"])
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    image_url: str = Field(..., min_length=1, max_length=500)
    price: int = Field(..., gt=0, examples=[2200])
    is_for_sale: bool = True
    sku: str | None = Field(None, max_length=100)
    collaboration_id: int | None = None


class PrintDesignUpdateRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    image_url: str | None = Field(None, min_length=1, max_length=500)
    price: int | None = Field(None, gt=0)
    is_for_sale: bool | None = None
    sku: str | None = Field(None, max_length=100)
    collaboration_id: int | None = None


class PrintDesignResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: str | None = None
    image_url: str
    price: int
    is_for_sale: bool
    sku: str | None = None
    collaboration_id: int | None = None
    collaboration_title: str | None = None
    created_at: datetime
    updated_at: datetime
