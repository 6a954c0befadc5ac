"""
관리자 결제 게이트웨이 설정 API 엔드포인트

게이트웨이는 gateway_key(예: esewa, khalti)로 식별합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_admin
from peakpulse.core.exceptions import (
    GatewayKeyAlreadyExistsException,
    NoFieldsToUpdateException,
    NotFoundException,
)
from peakpulse.schemas.payment import (
    GatewayAdminResponse,
    GatewayCreateRequest,
    GatewayUpdateRequest,
)
from peakpulse.services.payment_gateway_service import PaymentGatewayService


router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/payment-gateways", response_model=List[GatewayAdminResponse])
def list_gateways(db: Session = Depends(get_db)):
    """비활성 게이트웨이와 인증 정보를 포함한 전체 목록"""
    return PaymentGatewayService.list_all(db)


@router.post(
    "/payment-gateways",
    response_model=GatewayAdminResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_gateway(gateway_data: GatewayCreateRequest, db: Session = Depends(get_db)):
    """
    결제 게이트웨이를 등록합니다.

    Example:
        Request:
        ```json
        {
            "gateway_key": "esewa",
            "display_name": "eSewa",
            "is_enabled": true,
            "environment": "test"
        }
        ```

    Raises:
        HTTPException 409: gateway_key가 이미 존재하는 경우
    """
    try:
        return PaymentGatewayService.create(gateway_data.model_dump(), db)

    except GatewayKeyAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/payment-gateways/{gateway_key}", response_model=GatewayAdminResponse)
def get_gateway(gateway_key: str, db: Session = Depends(get_db)):
    try:
        return PaymentGatewayService.get(gateway_key, db)

    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/payment-gateways/{gateway_key}", response_model=GatewayAdminResponse)
def update_gateway(
    gateway_key: str,
    gateway_data: GatewayUpdateRequest,
    db: Session = Depends(get_db),
):
    try:
        return PaymentGatewayService.update(
            gateway_key, gateway_data.model_dump(exclude_unset=True), db
        )

    except NoFieldsToUpdateException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/payment-gateways/{gateway_key}", status_code=status.HTTP_204_NO_CONTENT)
def delete_gateway(gateway_key: str, db: Session = Depends(get_db)):
    try:
        PaymentGatewayService.delete(gateway_key, db)
    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
