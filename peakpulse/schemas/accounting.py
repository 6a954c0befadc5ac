"""
회계(대출, 매출 데이터) 관련 Pydantic 스키마
"""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict

LoanStatus = Literal["Active", "Paid Off", "Defaulted", "Pending"]


class LoanCreateRequest(BaseModel):
    """
    대출 등록 요청 스키마

    Example:
        {
            "loan_name": "Working capital",
            "lender_name": "Nabil Bank",
            "principal_amount": 500000,
            "interest_rate": 12.5,
            "loan_term_months": 24,
            "start_date": "2025-01-01"
        }
    """

    loan_name: str = Field(..., min_length=1, max_length=150, examples=["Working capital"])
    lender_name: str = Field(..., min_length=1, max_length=150, examples=["Nabil Bank"])
    principal_amount: float = Field(..., gt=0, description="원금", examples=[500000])
    interest_rate: float = Field(..., ge=0, le=100, description="연 이자율 (%)", examples=[12.5])
    loan_term_months: int = Field(..., gt=0, description="상환 기간 (개월)", examples=[24])
    start_date: date
    status: LoanStatus = "Active"
    notes: str | None = None


class LoanUpdateRequest(BaseModel):
    loan_name: str | None = Field(None, min_length=1, max_length=150)
    lender_name: str | None = Field(None, min_length=1, max_length=150)
    principal_amount: float | None = Field(None, gt=0)
    interest_rate: float | None = Field(None, ge=0, le=100)
    loan_term_months: int | None = Field(None, gt=0)
    start_date: date | None = None
    status: LoanStatus | None = None
    notes: str | None = None


class LoanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    loan_name: str
    lender_name: str
    principal_amount: float
    interest_rate: float
    loan_term_months: int
    start_date: date
    status: str
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class LoanSummaryResponse(BaseModel):
    """
    대출 상환 요약

    Example:
        {
            "loan_id": 1,
            "monthly_payment": 23653.63,
            "total_payment": 567687.12,
            "total_interest": 67687.12
        }
    """

    loan_id: int
    principal_amount: float
    interest_rate: float
    loan_term_months: int
    monthly_payment: float
    total_payment: float
    total_interest: float


class SalesOrderRow(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_number: str
    user_id: int
    subtotal: int
    shipping_cost: int
    total_amount: int
    status: str
    payment_method: str
    payment_status: str
    created_at: datetime


class SalesSummary(BaseModel):
    order_count: int = 0
    gross_sales: int = 0
    shipping_collected: int = 0
    by_status: dict[str, int] = Field(default_factory=dict)
    by_payment_method: dict[str, int] = Field(default_factory=dict)


class SalesDataResponse(BaseModel):
    start_date: date
    end_date: date
    orders: list[SalesOrderRow] = Field(default_factory=list)
    summary: SalesSummary
