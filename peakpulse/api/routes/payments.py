"""
결제 게이트웨이 공개 API 엔드포인트
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db
from peakpulse.schemas.payment import GatewayPublicResponse
from peakpulse.services.payment_gateway_service import PaymentGatewayService


router = APIRouter()


@router.get("/payment-gateways", response_model=List[GatewayPublicResponse])
def list_enabled_gateways(db: Session = Depends(get_db)):
    """체크아웃에서 사용할 수 있는 활성 결제 게이트웨이 (인증 정보 제외)"""
    return PaymentGatewayService.list_enabled(db)
