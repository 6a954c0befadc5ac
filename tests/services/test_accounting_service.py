"""Tests for loans, sales reports, user roles and payment gateway settings."""

from datetime import date, datetime, timedelta

import pytest

from peakpulse.core.exceptions import (
    GatewayKeyAlreadyExistsException,
    NoFieldsToUpdateException,
    NotFoundException,
    UserNotFoundException,
    ValidationException,
)
from peakpulse.models import Order, User
from peakpulse.services.loan_service import LoanService, calculate_repayment
from peakpulse.services.payment_gateway_service import PaymentGatewayService
from peakpulse.services.sales_report_service import SalesReportService
from peakpulse.services.user_admin_service import UserAdminService

LOAN = {
    "loan_name": "Workshop expansion",
    "lender_name": "Nabil Bank",
    "principal_amount": 120000.0,
    "interest_rate": 12.0,
    "loan_term_months": 12,
    "start_date": date(2025, 1, 1),
}


class TestCalculateRepayment:
    def test_zero_interest(self):
        assert calculate_repayment(12000, 0, 12) == {
            "monthly_payment": 1000.0,
            "total_payment": 12000.0,
            "total_interest": 0.0,
        }

    def test_amortized(self):
        """연 12%, 12개월 원리금 균등 상환"""
        result = calculate_repayment(120000, 12, 12)

        assert result["monthly_payment"] == pytest.approx(10661.85, abs=0.01)
        assert result["total_interest"] == pytest.approx(7942.19, abs=0.05)


class TestLoanService:
    def test_crud_and_summary(self, test_db):
        loan = LoanService.create_loan(dict(LOAN), test_db)
        assert loan.status == "Active"

        updated = LoanService.update_loan(loan.id, {"status": "Paid Off"}, test_db)
        assert updated.status == "Paid Off"

        summary = LoanService.get_summary(loan.id, test_db)
        assert summary["loan_id"] == loan.id
        assert summary["monthly_payment"] == pytest.approx(10661.85, abs=0.01)

        LoanService.delete_loan(loan.id, test_db)
        assert LoanService.list_loans(test_db) == []

    def test_missing_loan(self, test_db):
        with pytest.raises(NotFoundException):
            LoanService.get_summary(999, test_db)

    def test_update_without_fields(self, test_db):
        loan = LoanService.create_loan(dict(LOAN), test_db)

        with pytest.raises(NoFieldsToUpdateException):
            LoanService.update_loan(loan.id, {}, test_db)

    def test_update_skips_null_required_fields(self, test_db):
        loan = LoanService.create_loan(dict(LOAN), test_db)

        updated = LoanService.update_loan(loan.id, {"loan_name": None, "notes": "Refinanced"}, test_db)
        assert (updated.loan_name, updated.notes) == ("Workshop expansion", "Refinanced")

        cleared = LoanService.update_loan(loan.id, {"notes": None}, test_db)
        assert cleared.notes is None

        with pytest.raises(NoFieldsToUpdateException):
            LoanService.update_loan(loan.id, {"loan_name": None, "status": None}, test_db)


class TestSalesReportService:
    @pytest.fixture
    def orders(self, test_db):
        user = User(email="buyer@peakpulse.com", hashed_password="x")
        test_db.add(user)
        test_db.commit()

        def order(number, created_at, total, method="cod", status="Processing"):
            return Order(
                order_number=number,
                user_id=user.id,
                subtotal=total - 500,
                shipping_cost=500,
                total_amount=total,
                payment_method=method,
                status=status,
                shipping_address={},
                created_at=created_at,
            )

        test_db.add_all(
            [
                order("PP-1", datetime(2025, 3, 1, 0, 0), 5000),
                order("PP-2", datetime(2025, 3, 31, 23, 59, 59), 3000, method="esewa", status="Pending"),
                order("PP-3", datetime(2025, 4, 1, 0, 0), 9999),
            ]
        )
        test_db.commit()

    def test_range_includes_whole_end_day(self, test_db, orders):
        report = SalesReportService.get_sales_data(date(2025, 3, 1), date(2025, 3, 31), test_db)

        assert [o.order_number for o in report["orders"]] == ["PP-2", "PP-1"]
        assert report["summary"] == {
            "order_count": 2,
            "gross_sales": 8000,
            "shipping_collected": 1000,
            "by_status": {"Pending": 1, "Processing": 1},
            "by_payment_method": {"esewa": 1, "cod": 1},
        }

    def test_start_after_end(self, test_db):
        with pytest.raises(ValidationException):
            SalesReportService.get_sales_data(date(2025, 4, 1), date(2025, 3, 1), test_db)

    def test_empty_range(self, test_db, orders):
        day = date(2024, 1, 1)
        report = SalesReportService.get_sales_data(day, day + timedelta(days=1), test_db)

        assert report["summary"]["order_count"] == 0
        assert report["summary"]["gross_sales"] == 0


class TestUserAdminService:
    @pytest.fixture
    def user(self, test_db):
        user = User(email="vip@peakpulse.com", hashed_password="x")
        test_db.add(user)
        test_db.commit()
        return user

    def test_update_roles_normalizes(self, test_db, user):
        updated = UserAdminService.update_roles(user.id, [" VIP ", "customer", "vip"], test_db)

        assert updated.roles == ["vip", "customer"]
        assert UserAdminService.list_users(test_db) == [user]

    @pytest.mark.parametrize("roles", [[], ["  "], ["superuser"]])
    def test_invalid_roles(self, test_db, user, roles):
        with pytest.raises(ValidationException):
            UserAdminService.update_roles(user.id, roles, test_db)

    def test_missing_user(self, test_db):
        with pytest.raises(UserNotFoundException):
            UserAdminService.update_roles(999, ["customer"], test_db)


class TestPaymentGatewayService:
    def test_enabled_listing_order(self, test_db):
        PaymentGatewayService.create(
            {"gateway_key": "khalti", "display_name": "Khalti", "is_enabled": True, "display_order": 2}, test_db
        )
        PaymentGatewayService.create(
            {"gateway_key": "esewa", "display_name": "eSewa", "is_enabled": True, "display_order": 1}, test_db
        )
        PaymentGatewayService.create({"gateway_key": "qr", "display_name": "QR"}, test_db)

        assert [g.gateway_key for g in PaymentGatewayService.list_enabled(test_db)] == ["esewa", "khalti"]
        assert len(PaymentGatewayService.list_all(test_db)) == 3

    def test_duplicate_key(self, test_db):
        PaymentGatewayService.create({"gateway_key": "esewa", "display_name": "eSewa"}, test_db)

        with pytest.raises(GatewayKeyAlreadyExistsException):
            PaymentGatewayService.create({"gateway_key": "esewa", "display_name": "eSewa 2"}, test_db)

    def test_update_and_delete(self, test_db):
        PaymentGatewayService.create({"gateway_key": "esewa", "display_name": "eSewa"}, test_db)

        updated = PaymentGatewayService.update("esewa", {"is_enabled": True}, test_db)
        assert updated.is_enabled is True

        PaymentGatewayService.delete("esewa", test_db)
        with pytest.raises(NotFoundException):
            PaymentGatewayService.get("esewa", test_db)

    def test_update_skips_null_required_fields(self, test_db):
        PaymentGatewayService.create({"gateway_key": "esewa", "display_name": "eSewa", "is_enabled": True}, test_db)

        updated = PaymentGatewayService.update("esewa", {"is_enabled": None, "display_order": 3}, test_db)
        assert (updated.is_enabled, updated.display_order) == (True, 3)

        with pytest.raises(NoFieldsToUpdateException):
            PaymentGatewayService.update("esewa", {"is_enabled": None}, test_db)
