"""
커뮤니티 API 엔드포인트

사용자 게시물 피드, 작성, 좋아요/북마크 토글, 댓글 기능을 제공합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_user, get_current_user_optional
from peakpulse.core.exceptions import PostNotFoundException, ValidationException
from peakpulse.models.user import User
from peakpulse.schemas.community import (
    BookmarkToggleResponse,
    CommentCreateRequest,
    CommentResponse,
    LikeToggleResponse,
    PostCreateRequest,
    PostResponse,
)
from peakpulse.services.community_service import CommunityService


router = APIRouter()


@router.get("", response_model=List[PostResponse])
def get_feed(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_current_user_optional),
):
    """
    승인된 게시물 피드를 최신순으로 조회합니다.

    인증된 요청이면 liked_by_me, bookmarked_by_me가 채워집니다.
    """
    posts = CommunityService.list_feed(db, skip=skip, limit=limit)
    viewer_id = current_user.id if current_user else None
    return CommunityService.serialize_posts(posts, db, viewer_id=viewer_id)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    게시물을 작성합니다 (인증 필요). 관리자 승인 후 피드에 노출됩니다.

    Example:
        Request:
        ```json
        {
            "image_url": "https://cdn.peakpulse.com/posts/1.jpg",
            "caption": "Summit day",
            "product_tags": ["himalayan-hoodie"]
        }
        ```
    """
    post = CommunityService.create_post(current_user.id, post_data.model_dump(), db)
    return CommunityService.serialize_posts([post], db, viewer_id=current_user.id)[0]


@router.post("/{post_id}/like", response_model=LikeToggleResponse)
def toggle_like(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """좋아요를 토글합니다. 이미 좋아요한 게시물이면 취소됩니다."""
    try:
        return CommunityService.toggle_like(post_id, current_user.id, db)

    except PostNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{post_id}/bookmark", response_model=BookmarkToggleResponse)
def toggle_bookmark(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return CommunityService.toggle_bookmark(post_id, current_user.id, db)

    except PostNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{post_id}/comments", response_model=List[CommentResponse])
def list_comments(post_id: int, db: Session = Depends(get_db)):
    try:
        comments = CommunityService.list_comments(post_id, db)
    except PostNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [CommunityService.comment_to_dict(c) for c in comments]


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    post_id: int,
    comment_data: CommentCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    댓글을 작성합니다 (인증 필요).

    Raises:
        HTTPException 400: 빈 댓글이거나 부모 댓글이 다른 게시물의 댓글인 경우
        HTTPException 404: 게시물을 찾을 수 없는 경우
    """
    try:
        comment = CommunityService.add_comment(
            post_id,
            current_user.id,
            comment_data.comment_text,
            db,
            parent_comment_id=comment_data.parent_comment_id,
        )
    except PostNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return CommunityService.comment_to_dict(comment)
