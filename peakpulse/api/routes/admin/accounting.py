"""
관리자 회계 API 엔드포인트

대출 기록 관리, 상환 요약, 기간별 매출 데이터를 제공합니다.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_admin
from peakpulse.core.exceptions import (
    NoFieldsToUpdateException,
    NotFoundException,
    ValidationException,
)
from peakpulse.schemas.accounting import (
    LoanCreateRequest,
    LoanResponse,
    LoanSummaryResponse,
    LoanUpdateRequest,
    SalesDataResponse,
)
from peakpulse.services.loan_service import LoanService
from peakpulse.services.sales_report_service import SalesReportService


router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/loans", response_model=List[LoanResponse])
def list_loans(db: Session = Depends(get_db)):
    return LoanService.list_loans(db)


@router.post("/loans", response_model=LoanResponse, status_code=status.HTTP_201_CREATED)
def create_loan(loan_data: LoanCreateRequest, db: Session = Depends(get_db)):
    return LoanService.create_loan(loan_data.model_dump(), db)


@router.get("/loans/{loan_id}", response_model=LoanResponse)
def get_loan(loan_id: int, db: Session = Depends(get_db)):
    try:
        return LoanService.get_loan(loan_id, db)

    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/loans/{loan_id}", response_model=LoanResponse)
def update_loan(loan_id: int, loan_data: LoanUpdateRequest, db: Session = Depends(get_db)):
    try:
        return LoanService.update_loan(loan_id, loan_data.model_dump(exclude_unset=True), db)

    except NoFieldsToUpdateException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/loans/{loan_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_loan(loan_id: int, db: Session = Depends(get_db)):
    try:
        LoanService.delete_loan(loan_id, db)
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/loans/{loan_id}/summary", response_model=LoanSummaryResponse)
def get_loan_summary(loan_id: int, db: Session = Depends(get_db)):
    """
    원리금 균등 상환 기준 월 납입액, 총 상환액, 총 이자를 계산합니다.

    Example:
        Response (200):
        ```json
        {
            "loan_id": 1,
            "monthly_payment": 23653.63,
            "total_payment": 567687.12,
            "total_interest": 67687.12
        }
        ```
    """
    try:
        return LoanService.get_summary(loan_id, db)

    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/accounting/sales-data", response_model=SalesDataResponse)
def get_sales_data(
    start_date: date = Query(..., description="시작일 (YYYY-MM-DD, 포함)"),
    end_date: date = Query(..., description="종료일 (YYYY-MM-DD, 포함)"),
    db: Session = Depends(get_db),
):
    """
    기간 내 주문 목록과 매출 요약을 조회합니다.

    Raises:
        HTTPException 400: 시작일이 종료일보다 늦은 경우
    """
    try:
        return SalesReportService.get_sales_data(start_date, end_date, db)

    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
