"""
리뷰 서비스

리뷰 작성/조회와 관리자 검수를 처리합니다.
검수 상태가 바뀔 때마다 상품의 평점 집계(average_rating, review_count)를
승인된 리뷰 기준으로 다시 계산합니다.
"""

from loguru import logger
from sqlalchemy import func
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import InvalidStatusException, NotFoundException, ValidationException
from peakpulse.core.utils import display_name
from peakpulse.models import Product, Review
from peakpulse.models.review import REVIEW_STATUSES
from peakpulse.services.product_service import ProductService


class ReviewService:
    """리뷰 관련 비즈니스 로직을 처리하는 서비스 클래스"""

    @staticmethod
    def to_dict(review: Review) -> dict:
        return {
            "id": review.id,
            "product_id": review.product_id,
            "user_id": review.user_id,
            "user_name": display_name(review.user.name, review.user.email, "Anonymous"),
            "rating": review.rating,
            "title": review.title,
            "comment": review.comment,
            "images": review.images or [],
            "status": review.status,
            "created_at": review.created_at,
        }

    @staticmethod
    def list_public(db: Session, product_id: int | None = None) -> list[Review]:
        """승인된 리뷰 목록 (최신순)"""
        query = db.query(Review).filter(Review.status == "approved")
        if product_id is not None:
            query = query.filter(Review.product_id == product_id)
        return query.order_by(Review.created_at.desc(), Review.id.desc()).all()

    @staticmethod
    def list_all(db: Session, status: str | None = None) -> list[Review]:
        query = db.query(Review)
        if status:
            query = query.filter(Review.status == status)
        return query.order_by(Review.created_at.desc(), Review.id.desc()).all()

    @staticmethod
    def create_review(user_id: int, data: dict, db: Session) -> Review:
        """
        리뷰를 작성합니다. 작성된 리뷰는 pending 상태로 검수를 기다립니다.

        Raises:
            ProductNotFoundException: 상품이 없는 경우
            ValidationException: 본문이 공백뿐인 경우
        """
        ProductService.get_product_or_404(data["product_id"], db)
        if not data["comment"].strip():
            raise ValidationException("Review comment is required.")

        review = Review(
            product_id=data["product_id"],
            user_id=user_id,
            rating=data["rating"],
            title=data.get("title"),
            comment=data["comment"].strip(),
            images=data.get("images") or [],
            status="pending",
        )
        db.add(review)
        db.commit()
        db.refresh(review)
        logger.info("Review submitted: id={} product={}", review.id, review.product_id)
        return review

    @staticmethod
    def _get(review_id: int, db: Session) -> Review:
        review = db.query(Review).filter(Review.id == review_id).first()
        if review is None:
            raise NotFoundException("Review", review_id)
        return review

    @staticmethod
    def recompute_product_rating(product_id: int, db: Session) -> None:
        """승인된 리뷰 기준으로 상품 평점 집계를 다시 계산합니다 (커밋은 호출자가 담당)."""
        product = db.query(Product).filter(Product.id == product_id).first()
        if product is None:
            return

        count, average = (
            db.query(func.count(Review.id), func.avg(Review.rating))
            .filter(Review.product_id == product_id, Review.status == "approved")
            .one()
        )
        product.review_count = int(count or 0)
        product.average_rating = round(float(average), 2) if average is not None else 0.0

    @staticmethod
    def update_status(review_id: int, status: str, db: Session) -> Review:
        """
        리뷰 검수 상태를 변경합니다.

        Raises:
            InvalidStatusException: 허용되지 않는 상태
            NotFoundException: 리뷰가 없는 경우
        """
        if status not in REVIEW_STATUSES:
            raise InvalidStatusException(status, REVIEW_STATUSES)

        review = ReviewService._get(review_id, db)
        review.status = status
        db.flush()
        ReviewService.recompute_product_rating(review.product_id, db)
        db.commit()
        db.refresh(review)
        logger.info("Review {} moderated: {}", review_id, status)
        return review

    @staticmethod
    def delete_review(review_id: int, db: Session) -> None:
        review = ReviewService._get(review_id, db)
        product_id = review.product_id
        db.delete(review)
        db.flush()
        ReviewService.recompute_product_rating(product_id, db)
        db.commit()
        logger.info("Review {} deleted", review_id)
