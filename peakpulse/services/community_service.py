"""
커뮤니티 서비스

사용자 게시물 작성/피드 조회, 좋아요/북마크 토글, 댓글, 관리자 검수를 처리합니다.
"""

from loguru import logger
from sqlalchemy import func
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import (
    InvalidStatusException,
    NoFieldsToUpdateException,
    PostNotFoundException,
    ValidationException,
)
from peakpulse.core.utils import display_name
from peakpulse.models import PostBookmark, PostComment, PostLike, UserPost
from peakpulse.models.community import POST_STATUSES


class CommunityService:
    """커뮤니티 게시물 관련 비즈니스 로직을 처리하는 서비스 클래스"""

    @staticmethod
    def _viewer_state(post_ids: list[int], viewer_id: int | None, db: Session) -> tuple[set, set]:
        if viewer_id is None or not post_ids:
            return set(), set()
        liked = {
            row.post_id
            for row in db.query(PostLike.post_id).filter(
                PostLike.user_id == viewer_id, PostLike.post_id.in_(post_ids)
            )
        }
        bookmarked = {
            row.post_id
            for row in db.query(PostBookmark.post_id).filter(
                PostBookmark.user_id == viewer_id, PostBookmark.post_id.in_(post_ids)
            )
        }
        return liked, bookmarked

    @staticmethod
    def _comment_counts(post_ids: list[int], db: Session) -> dict[int, int]:
        if not post_ids:
            return {}
        rows = (
            db.query(PostComment.post_id, func.count(PostComment.id))
            .filter(PostComment.post_id.in_(post_ids))
            .group_by(PostComment.post_id)
            .all()
        )
        return {post_id: count for post_id, count in rows}

    @staticmethod
    def serialize_posts(
        posts: list[UserPost], db: Session, viewer_id: int | None = None
    ) -> list[dict]:
        """
        게시물 목록을 응답용 dict로 변환합니다.

        작성자 표시 이름, 댓글 수, 요청자의 좋아요/북마크 여부를 포함합니다.
        """
        post_ids = [post.id for post in posts]
        liked, bookmarked = CommunityService._viewer_state(post_ids, viewer_id, db)
        comment_counts = CommunityService._comment_counts(post_ids, db)

        return [
            {
                "id": post.id,
                "user_id": post.user_id,
                "user_name": display_name(post.user.name, post.user.email),
                "image_url": post.image_url,
                "caption": post.caption,
                "product_tags": post.product_tags or [],
                "status": post.status,
                "like_count": post.like_count,
                "comment_count": comment_counts.get(post.id, 0),
                "liked_by_me": post.id in liked,
                "bookmarked_by_me": post.id in bookmarked,
                "created_at": post.created_at,
            }
            for post in posts
        ]

    @staticmethod
    def get_post(post_id: int, db: Session) -> UserPost:
        post = db.query(UserPost).filter(UserPost.id == post_id).first()
        if post is None:
            raise PostNotFoundException(post_id)
        return post

    @staticmethod
    def create_post(user_id: int, data: dict, db: Session) -> UserPost:
        """게시물을 작성합니다. 새 게시물은 pending 상태로 검수를 기다립니다."""
        post = UserPost(
            user_id=user_id,
            image_url=data["image_url"],
            caption=data.get("caption"),
            product_tags=data.get("product_tags") or [],
            status="pending",
            like_count=0,
        )
        db.add(post)
        db.commit()
        db.refresh(post)
        logger.info("User post created: id={} user={}", post.id, user_id)
        return post

    @staticmethod
    def list_feed(db: Session, skip: int = 0, limit: int = 50) -> list[UserPost]:
        """승인된 게시물 피드 (최신순)"""
        return (
            db.query(UserPost)
            .filter(UserPost.status == "approved")
            .order_by(UserPost.created_at.desc(), UserPost.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    @staticmethod
    def toggle_like(post_id: int, user_id: int, db: Session) -> dict:
        """
        좋아요를 토글합니다. like_count는 항상 좋아요 행 개수와 같습니다.

        Returns:
            {"liked": bool, "like_count": int}

        Raises:
            PostNotFoundException: 게시물이 없는 경우
        """
        post = CommunityService.get_post(post_id, db)
        existing = (
            db.query(PostLike)
            .filter(PostLike.post_id == post_id, PostLike.user_id == user_id)
            .first()
        )
        if existing is not None:
            db.delete(existing)
            liked = False
        else:
            db.add(PostLike(post_id=post_id, user_id=user_id))
            liked = True
        db.flush()

        post.like_count = (
            db.query(func.count(PostLike.id)).filter(PostLike.post_id == post_id).scalar()
        )
        db.commit()
        return {"liked": liked, "like_count": post.like_count}

    @staticmethod
    def toggle_bookmark(post_id: int, user_id: int, db: Session) -> dict:
        CommunityService.get_post(post_id, db)
        existing = (
            db.query(PostBookmark)
            .filter(PostBookmark.post_id == post_id, PostBookmark.user_id == user_id)
            .first()
        )
        if existing is not None:
            db.delete(existing)
            bookmarked = False
        else:
            db.add(PostBookmark(post_id=post_id, user_id=user_id))
            bookmarked = True
        db.commit()
        return {"bookmarked": bookmarked}

    @staticmethod
    def list_bookmarked(user_id: int, db: Session) -> list[UserPost]:
        """사용자가 북마크한 게시물 (최근 북마크 순)"""
        return (
            db.query(UserPost)
            .join(PostBookmark, PostBookmark.post_id == UserPost.id)
            .filter(PostBookmark.user_id == user_id)
            .order_by(PostBookmark.created_at.desc(), PostBookmark.id.desc())
            .all()
        )

    @staticmethod
    def comment_to_dict(comment: PostComment) -> dict:
        return {
            "id": comment.id,
            "post_id": comment.post_id,
            "user_id": comment.user_id,
            "user_name": display_name(comment.user.name, comment.user.email),
            "comment_text": comment.comment_text,
            "parent_comment_id": comment.parent_comment_id,
            "created_at": comment.created_at,
        }

    @staticmethod
    def list_comments(post_id: int, db: Session) -> list[PostComment]:
        """댓글 목록 (오래된 순)"""
        CommunityService.get_post(post_id, db)
        return (
            db.query(PostComment)
            .filter(PostComment.post_id == post_id)
            .order_by(PostComment.created_at.asc(), PostComment.id.asc())
            .all()
        )

    @staticmethod
    def add_comment(
        post_id: int,
        user_id: int,
        comment_text: str,
        db: Session,
        parent_comment_id: int | None = None,
    ) -> PostComment:
        """
        댓글을 작성합니다.

        Raises:
            PostNotFoundException: 게시물이 없는 경우
            ValidationException: 빈 댓글이거나 부모 댓글이 같은 게시물에 없는 경우
        """
        CommunityService.get_post(post_id, db)

        text = (comment_text or "").strip()
        if not text:
            raise ValidationException("Comment text cannot be empty.")

        if parent_comment_id is not None:
            parent = (
                db.query(PostComment)
                .filter(PostComment.id == parent_comment_id, PostComment.post_id == post_id)
                .first()
            )
            if parent is None:
                raise ValidationException("Parent comment does not belong to this post.")

        comment = PostComment(
            post_id=post_id,
            user_id=user_id,
            comment_text=text,
            parent_comment_id=parent_comment_id,
        )
        db.add(comment)
        db.commit()
        db.refresh(comment)
        return comment

    @staticmethod
    def list_all(db: Session, status: str | None = None) -> list[UserPost]:
        query = db.query(UserPost)
        if status:
            query = query.filter(UserPost.status == status)
        return query.order_by(UserPost.created_at.desc(), UserPost.id.desc()).all()

    @staticmethod
    def admin_update(
        post_id: int, db: Session, status: str | None = None, caption: str | None = None
    ) -> UserPost:
        """
        관리자가 게시물 상태 또는 본문을 수정합니다.

        Raises:
            NoFieldsToUpdateException: status와 caption이 모두 없는 경우
            InvalidStatusException: 허용되지 않는 상태
        """
        if status is None and caption is None:
            raise NoFieldsToUpdateException()
        if status is not None and status not in POST_STATUSES:
            raise InvalidStatusException(status, POST_STATUSES)

        post = CommunityService.get_post(post_id, db)
        if status is not None:
            post.status = status
        if caption is not None:
            post.caption = caption
        db.commit()
        db.refresh(post)
        logger.info("User post {} updated by admin: status={}", post_id, post.status)
        return post

    @staticmethod
    def delete_post(post_id: int, db: Session) -> None:
        post = CommunityService.get_post(post_id, db)
        db.delete(post)
        db.commit()
        logger.info("User post {} deleted", post_id)
