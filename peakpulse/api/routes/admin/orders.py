"""
관리자 주문 관리 API 엔드포인트
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_admin
from peakpulse.core.exceptions import InvalidStatusException, OrderNotFoundException
from peakpulse.schemas.order import OrderResponse, OrderStatusUpdateRequest
from peakpulse.services.order_service import OrderService


router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/orders", response_model=List[OrderResponse])
def list_orders(
    order_status: str | None = Query(None, alias="status", description="주문 상태 필터"),
    db: Session = Depends(get_db),
):
    """전체 주문 목록 (최신순)"""
    return OrderService.list_orders(db, status=order_status)


@router.get("/orders/{order_id}", response_model=OrderResponse)
def get_order(order_id: int, db: Session = Depends(get_db)):
    try:
        return OrderService.get_order(order_id, db)

    except OrderNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/orders/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdateRequest,
    db: Session = Depends(get_db),
):
    """
    주문 상태를 변경합니다.

    Example:
        Request:
        ```json
        {"status": "Shipped", "tracking_number": "NP123456"}
        ```

    Raises:
        HTTPException 400: 허용되지 않는 주문/결제 상태
        HTTPException 404: 주문을 찾을 수 없는 경우
    """
    try:
        return OrderService.update_status(
            order_id,
            status_data.status,
            db,
            tracking_number=status_data.tracking_number,
            payment_status=status_data.payment_status,
        )

    except InvalidStatusException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except OrderNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
