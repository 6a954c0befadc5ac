"""
Order / OrderItem 모델 테스트
"""

import pytest
from sqlalchemy.exc import IntegrityError

from peakpulse.models import Order, OrderItem, User


@pytest.fixture
def customer(test_db):
    user = User(email="jane@peakpulse.com", hashed_password="x")
    test_db.add(user)
    test_db.commit()
    return user


def _order(user_id: int, order_number: str = "PP-20250122-AAAA0001") -> Order:
    return Order(
        order_number=order_number,
        user_id=user_id,
        subtotal=9000,
        shipping_cost=500,
        total_amount=9500,
        payment_method="cod",
        shipping_address={"full_name": "Jane Doe", "city": "Kathmandu"},
        items=[
            OrderItem(product_id=None, name="Himalayan Hoodie", unit_price=4500, quantity=2, line_total=9000)
        ],
    )


class TestOrderModel:
    def test_create_order_defaults(self, test_db, customer):
        order = _order(customer.id)
        test_db.add(order)
        test_db.commit()
        test_db.refresh(order)

        assert order.status == "Pending"
        assert order.payment_status == "Pending"
        assert order.currency == "NPR"
        assert order.is_international is False
        assert order.shipping_address["city"] == "Kathmandu"
        assert len(order.items) == 1
        assert order.user.orders == [order]

    def test_order_number_unique(self, test_db, customer):
        test_db.add(_order(customer.id))
        test_db.commit()

        test_db.add(_order(customer.id))
        with pytest.raises(IntegrityError):
            test_db.commit()
        test_db.rollback()

    def test_str(self, customer):
        order = _order(customer.id)
        order.currency = "NPR"

        assert str(order) == "Order PP-20250122-AAAA0001: 9500 NPR"
