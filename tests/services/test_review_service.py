"""Tests for ReviewService and WishlistService."""

import pytest

from peakpulse.core.exceptions import (
    InvalidStatusException,
    NotFoundException,
    ProductNotFoundException,
    ValidationException,
)
from peakpulse.models import User
from peakpulse.services.review_service import ReviewService
from peakpulse.services.wishlist_service import WishlistService


@pytest.fixture
def reviewer(test_db):
    user = User(email="trail.runner@peakpulse.com", hashed_password="x")
    test_db.add(user)
    test_db.commit()
    return user


def _review(user, product, db, rating=5, comment="Warm and comfy"):
    return ReviewService.create_review(
        user.id, {"product_id": product.id, "rating": rating, "comment": comment}, db
    )


class TestReviewService:
    def test_new_review_is_pending(self, reviewer, make_product, test_db):
        product = make_product()

        review = _review(reviewer, product, test_db, comment="  Warm and comfy  ")

        assert review.status == "pending"
        assert review.comment == "Warm and comfy"
        assert ReviewService.list_public(test_db, product.id) == []

    def test_blank_comment_rejected(self, reviewer, make_product, test_db):
        product = make_product()

        with pytest.raises(ValidationException):
            _review(reviewer, product, test_db, comment="   ")

    def test_review_unknown_product(self, reviewer, test_db):
        with pytest.raises(ProductNotFoundException):
            ReviewService.create_review(
                reviewer.id, {"product_id": 999, "rating": 4, "comment": "?"}, test_db
            )

    def test_approval_recomputes_rating(self, reviewer, make_product, test_db):
        """승인된 리뷰만 평점 집계에 반영"""
        product = make_product()
        five = _review(reviewer, product, test_db, rating=5)
        two = _review(reviewer, product, test_db, rating=2)
        pending = _review(reviewer, product, test_db, rating=1)

        ReviewService.update_status(five.id, "approved", test_db)
        ReviewService.update_status(two.id, "approved", test_db)
        test_db.refresh(product)

        assert product.review_count == 2
        assert product.average_rating == 3.5
        assert pending.status == "pending"
        assert [r.id for r in ReviewService.list_public(test_db, product.id)] == [two.id, five.id]

    def test_rejecting_and_deleting_updates_rating(self, reviewer, make_product, test_db):
        product = make_product()
        first = _review(reviewer, product, test_db, rating=4)
        second = _review(reviewer, product, test_db, rating=2)
        ReviewService.update_status(first.id, "approved", test_db)
        ReviewService.update_status(second.id, "approved", test_db)

        ReviewService.update_status(second.id, "rejected", test_db)
        test_db.refresh(product)
        assert (product.review_count, product.average_rating) == (1, 4.0)

        ReviewService.delete_review(first.id, test_db)
        test_db.refresh(product)
        assert (product.review_count, product.average_rating) == (0, 0.0)

    def test_invalid_status(self, reviewer, make_product, test_db):
        review = _review(reviewer, make_product(), test_db)

        with pytest.raises(InvalidStatusException):
            ReviewService.update_status(review.id, "published", test_db)

    def test_missing_review(self, test_db):
        with pytest.raises(NotFoundException):
            ReviewService.update_status(999, "approved", test_db)

    def test_list_all_filter(self, reviewer, make_product, test_db):
        product = make_product()
        review = _review(reviewer, product, test_db)

        assert ReviewService.list_all(test_db, status="pending") == [review]
        assert ReviewService.list_all(test_db, status="approved") == []

    def test_to_dict_user_name_fallback(self, reviewer, make_product, test_db):
        """이름이 없으면 이메일 로컬 파트를 작성자명으로 사용"""
        review = _review(reviewer, make_product(), test_db)

        assert ReviewService.to_dict(review)["user_name"] == "trail.runner"


class TestWishlistService:
    def test_add_is_idempotent(self, reviewer, make_product, test_db):
        product = make_product()

        WishlistService.add(reviewer.id, product.id, test_db)
        products = WishlistService.add(reviewer.id, product.id, test_db)

        assert products == [product]

    def test_remove(self, reviewer, make_product, test_db):
        product = make_product()
        WishlistService.add(reviewer.id, product.id, test_db)

        assert WishlistService.remove(reviewer.id, product.id, test_db) == []
        # 없는 항목 삭제도 오류 없음
        assert WishlistService.remove(reviewer.id, product.id, test_db) == []

    def test_add_unknown_product(self, reviewer, test_db):
        with pytest.raises(ProductNotFoundException):
            WishlistService.add(reviewer.id, 999, test_db)
