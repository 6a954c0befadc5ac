"""
주문(체크아웃) API 엔드포인트

장바구니를 주문으로 전환합니다. Redis 비관적 락으로 재고 정합성을 보장합니다.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from redis import Redis
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_user
from peakpulse.core.config import Settings, get_settings
from peakpulse.core.exceptions import (
    EmptyCartException,
    InsufficientStockException,
    LockAcquisitionException,
    NotFoundException,
    PaymentValidationException,
)
from peakpulse.db.redis_client import get_redis_client
from peakpulse.models.user import User
from peakpulse.schemas.order import CheckoutRequest, CheckoutResponse
from peakpulse.services.order_service import OrderService


router = APIRouter()


@router.post("", response_model=CheckoutResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    checkout_data: CheckoutRequest,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(get_current_user),
):
    """
    현재 장바구니로 주문을 생성합니다 (인증 필요).

    Args:
        checkout_data: 배송지, 결제 수단, 카드 정보, 프로모션 코드
        db: 데이터베이스 세션
        redis: Redis 클라이언트
        settings: 애플리케이션 설정
        current_user: 현재 인증된 사용자

    Returns:
        CheckoutResponse: 안내 제목/메시지와 생성된 주문

    Raises:
        HTTPException 400: 빈 장바구니, 결제 정보 오류, 재고 부족
        HTTPException 404: 상품을 찾을 수 없는 경우
        HTTPException 409: 락 획득 실패

    Example:
        Request:
        ```json
        {
            "shipping_details": {
                "full_name": "Jane Doe",
                "street_address": "Thamel Marg 12",
                "city": "Kathmandu",
                "country": "Nepal",
                "postal_code": "44600"
            },
            "payment_method": "cod"
        }
        ```

        Response (201):
        ```json
        {
            "title": "COD Order Placed",
            "message": "Order for Jane Doe (Total: NPR 9,500) received. ...",
            "order": {"order_number": "PP-20250122-1A2B3C4D", ...}
        }
        ```
    """
    card_details = (
        checkout_data.card_details.model_dump() if checkout_data.card_details else None
    )
    try:
        return OrderService.create_order(
            user=current_user,
            shipping_details=checkout_data.shipping_details.model_dump(),
            payment_method=checkout_data.payment_method,
            db=db,
            redis=redis,
            settings=settings,
            card_details=card_details,
            promo_code=checkout_data.promo_code,
        )

    except (EmptyCartException, PaymentValidationException, InsufficientStockException) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    except NotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    except LockAcquisitionException as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
