"""결제 게이트웨이 설정 서비스."""

from loguru import logger
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import (
    GatewayKeyAlreadyExistsException,
    NoFieldsToUpdateException,
    NotFoundException,
)
from peakpulse.core.utils import drop_required_nulls
from peakpulse.models import PaymentGatewaySetting


class PaymentGatewayService:
    """gateway_key 기준 결제 게이트웨이 설정 CRUD 서비스."""

    @staticmethod
    def list_enabled(db: Session) -> list[PaymentGatewaySetting]:
        """체크아웃에 노출할 활성 게이트웨이 목록 (display_order, display_name 순)"""
        return (
            db.query(PaymentGatewaySetting)
            .filter(PaymentGatewaySetting.is_enabled.is_(True))
            .order_by(
                PaymentGatewaySetting.display_order.asc(),
                PaymentGatewaySetting.display_name.asc(),
            )
            .all()
        )

    @staticmethod
    def list_all(db: Session) -> list[PaymentGatewaySetting]:
        return (
            db.query(PaymentGatewaySetting)
            .order_by(
                PaymentGatewaySetting.display_order.asc(),
                PaymentGatewaySetting.display_name.asc(),
            )
            .all()
        )

    @staticmethod
    def find(gateway_key: str, db: Session) -> PaymentGatewaySetting | None:
        return (
            db.query(PaymentGatewaySetting)
            .filter(PaymentGatewaySetting.gateway_key == gateway_key)
            .first()
        )

    @staticmethod
    def get(gateway_key: str, db: Session) -> PaymentGatewaySetting:
        gateway = PaymentGatewayService.find(gateway_key, db)
        if gateway is None:
            raise NotFoundException("Payment gateway", gateway_key)
        return gateway

    @staticmethod
    def create(data: dict, db: Session) -> PaymentGatewaySetting:
        """
        게이트웨이 설정을 생성합니다.

        Raises:
            GatewayKeyAlreadyExistsException: gateway_key가 이미 존재하는 경우
        """
        if PaymentGatewayService.find(data["gateway_key"], db) is not None:
            raise GatewayKeyAlreadyExistsException(data["gateway_key"])

        gateway = PaymentGatewaySetting(**data)
        db.add(gateway)
        db.commit()
        db.refresh(gateway)
        logger.info("Payment gateway created: {} enabled={}", gateway.gateway_key, gateway.is_enabled)
        return gateway

    @staticmethod
    def update(gateway_key: str, updates: dict, db: Session) -> PaymentGatewaySetting:
        updates = drop_required_nulls(PaymentGatewaySetting, updates)
        if not updates:
            raise NoFieldsToUpdateException()

        gateway = PaymentGatewayService.get(gateway_key, db)
        for field, value in updates.items():
            setattr(gateway, field, value)
        db.commit()
        db.refresh(gateway)
        logger.info("Payment gateway updated: {} fields={}", gateway_key, sorted(updates))
        return gateway

    @staticmethod
    def delete(gateway_key: str, db: Session) -> None:
        gateway = PaymentGatewayService.get(gateway_key, db)
        db.delete(gateway)
        db.commit()
        logger.info("Payment gateway deleted: {}", gateway_key)
