"""대출 기록 서비스."""

from loguru import logger
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import NoFieldsToUpdateException, NotFoundException
from peakpulse.core.utils import drop_required_nulls
from peakpulse.models import Loan


def calculate_repayment(principal: float, annual_rate: float, term_months: int) -> dict:
    """
    원리금 균등 상환액을 계산합니다.

    월 이자율 r = annual_rate / 100 / 12 일 때
    월 상환액 = P * r / (1 - (1 + r) ** -n), 이자율이 0이면 P / n

    Args:
        principal: 원금
        annual_rate: 연 이자율 (%)
        term_months: 상환 기간 (개월)

    Returns:
        {"monthly_payment", "total_payment", "total_interest"} (소수점 둘째 자리 반올림)

    Example:
        >>> calculate_repayment(12000, 0, 12)
        {'monthly_payment': 1000.0, 'total_payment': 12000.0, 'total_interest': 0.0}
    """
    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        monthly_payment = principal / term_months
    else:
        monthly_payment = principal * monthly_rate / (1 - (1 + monthly_rate) ** -term_months)

    total_payment = monthly_payment * term_months
    return {
        "monthly_payment": round(monthly_payment, 2),
        "total_payment": round(total_payment, 2),
        "total_interest": round(total_payment - principal, 2),
    }


class LoanService:
    """대출 CRUD 및 상환 요약 서비스."""

    @staticmethod
    def list_loans(db: Session) -> list[Loan]:
        return db.query(Loan).order_by(Loan.created_at.desc(), Loan.id.desc()).all()

    @staticmethod
    def get_loan(loan_id: int, db: Session) -> Loan:
        loan = db.query(Loan).filter(Loan.id == loan_id).first()
        if loan is None:
            raise NotFoundException("Loan", loan_id)
        return loan

    @staticmethod
    def create_loan(data: dict, db: Session) -> Loan:
        loan = Loan(**data)
        db.add(loan)
        db.commit()
        db.refresh(loan)
        logger.info("Loan recorded: {} ({})", loan.loan_name, loan.lender_name)
        return loan

    @staticmethod
    def update_loan(loan_id: int, updates: dict, db: Session) -> Loan:
        updates = drop_required_nulls(Loan, updates)
        if not updates:
            raise NoFieldsToUpdateException()
        loan = LoanService.get_loan(loan_id, db)
        for field, value in updates.items():
            setattr(loan, field, value)
        db.commit()
        db.refresh(loan)
        return loan

    @staticmethod
    def delete_loan(loan_id: int, db: Session) -> None:
        loan = LoanService.get_loan(loan_id, db)
        db.delete(loan)
        db.commit()
        logger.info("Loan {} deleted", loan_id)

    @staticmethod
    def get_summary(loan_id: int, db: Session) -> dict:
        loan = LoanService.get_loan(loan_id, db)
        return {
            "loan_id": loan.id,
            "principal_amount": loan.principal_amount,
            "interest_rate": loan.interest_rate,
            "loan_term_months": loan.loan_term_months,
            **calculate_repayment(
                loan.principal_amount, loan.interest_rate, loan.loan_term_months
            ),
        }
