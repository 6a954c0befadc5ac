"""위시리스트 서비스."""

from sqlalchemy.orm import Session

from peakpulse.models import Product, WishlistItem
from peakpulse.services.product_service import ProductService


class WishlistService:
    """사용자별 위시리스트 추가/삭제/조회 (모두 멱등)"""

    @staticmethod
    def add(user_id: int, product_id: int, db: Session) -> list[Product]:
        """
        위시리스트에 상품을 추가합니다. 이미 있으면 아무 것도 하지 않습니다.

        Raises:
            ProductNotFoundException: 상품이 없는 경우
        """
        ProductService.get_product_or_404(product_id, db)

        exists = (
            db.query(WishlistItem)
            .filter(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
            .first()
        )
        if exists is None:
            db.add(WishlistItem(user_id=user_id, product_id=product_id))
            db.commit()
        return WishlistService.list_products(user_id, db)

    @staticmethod
    def remove(user_id: int, product_id: int, db: Session) -> list[Product]:
        db.query(WishlistItem).filter(
            WishlistItem.user_id == user_id, WishlistItem.product_id == product_id
        ).delete(synchronize_session=False)
        db.commit()
        return WishlistService.list_products(user_id, db)

    @staticmethod
    def list_products(user_id: int, db: Session) -> list[Product]:
        """위시리스트 상품 목록 (최근 추가 순)"""
        return (
            db.query(Product)
            .join(WishlistItem, WishlistItem.product_id == Product.id)
            .filter(WishlistItem.user_id == user_id)
            .order_by(WishlistItem.created_at.desc(), WishlistItem.id.desc())
            .all()
        )
