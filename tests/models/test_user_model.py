"""
User / WishlistItem 모델 테스트
"""

import pytest
from datetime import datetime
from sqlalchemy.exc import IntegrityError

from peakpulse.models import Product, User, WishlistItem


class TestUserModel:
    """User 모델 테스트 클래스"""

    def test_create_user_defaults(self, test_db):
        """역할 기본값과 생성/수정 일시 자동 설정 테스트"""
        user = User(email="jane@peakpulse.com", hashed_password="hashed")
        test_db.add(user)
        test_db.commit()
        test_db.refresh(user)

        assert user.id is not None
        assert user.roles == ["customer"]
        assert isinstance(user.created_at, datetime)
        assert isinstance(user.updated_at, datetime)

    def test_email_unique(self, test_db):
        """중복 이메일 저장 시 IntegrityError"""
        test_db.add(User(email="jane@peakpulse.com", hashed_password="a"))
        test_db.commit()

        test_db.add(User(email="jane@peakpulse.com", hashed_password="b"))
        with pytest.raises(IntegrityError):
            test_db.commit()
        test_db.rollback()

    def test_roles_helpers(self):
        user = User(email="owner@peakpulse.com", hashed_password="x", roles=["customer", "admin"])

        assert user.has_role("customer") is True
        assert user.has_role("vip") is False
        assert user.is_admin is True
        assert User(email="a@b.c", hashed_password="x", roles=["customer"]).is_admin is False

    def test_repr(self):
        user = User(id=1, email="jane@peakpulse.com", hashed_password="x")

        assert repr(user) == "<User(id=1, email='jane@peakpulse.com')>"
        assert str(user) == "User: jane@peakpulse.com"


class TestWishlistItemModel:
    def test_duplicate_wishlist_item_rejected(self, test_db):
        """같은 사용자-상품 쌍은 한 번만 저장 가능"""
        user = User(email="jane@peakpulse.com", hashed_password="x")
        product = Product(name="Hoodie", slug="hoodie", price=4500)
        test_db.add_all([user, product])
        test_db.commit()

        test_db.add(WishlistItem(user_id=user.id, product_id=product.id))
        test_db.commit()

        test_db.add(WishlistItem(user_id=user.id, product_id=product.id))
        with pytest.raises(IntegrityError):
            test_db.commit()
        test_db.rollback()

    def test_wishlist_deleted_with_user(self, test_db):
        user = User(email="jane@peakpulse.com", hashed_password="x")
        product = Product(name="Hoodie", slug="hoodie", price=4500)
        user.wishlist_items.append(WishlistItem(product=product))
        test_db.add(user)
        test_db.commit()

        test_db.delete(user)
        test_db.commit()

        assert test_db.query(WishlistItem).count() == 0
