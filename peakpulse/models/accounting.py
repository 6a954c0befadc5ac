"""
Loan 모델
"""

from sqlalchemy import Column, Date, DateTime, Float, Integer, String, Text

from peakpulse.core.utils import utcnow
from peakpulse.db.database import Base

LOAN_STATUSES = ("Active", "Paid Off", "Defaulted", "Pending")


class Loan(Base):
    """
    사업 대출 기록 모델

    Attributes:
        principal_amount: 원금 (NPR)
        interest_rate: 연 이자율 (%, 0~100)
        loan_term_months: 상환 기간 (개월)
        start_date: 대출 시작일
        status: Active, Paid Off, Defaulted, Pending
    """

    __tablename__ = "loans"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    loan_name = Column(String(150), nullable=False)
    lender_name = Column(String(150), nullable=False)
    principal_amount = Column(Float, nullable=False)
    interest_rate = Column(Float, nullable=False)
    loan_term_months = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default="Active")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Loan(id={self.id}, loan_name='{self.loan_name}', status='{self.status}')>"
