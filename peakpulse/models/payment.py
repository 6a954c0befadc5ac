"""
PaymentGatewaySetting 모델
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, Text

from peakpulse.core.utils import utcnow
from peakpulse.db.database import Base


class PaymentGatewaySetting(Base):
    """
    결제 게이트웨이 설정 모델

    Attributes:
        gateway_key: 결제 수단 키 (Unique, 예: esewa, khalti, cod)
        is_enabled: 체크아웃 노출 여부
        is_domestic_only / is_international_only: 국내/해외 배송 전용 여부
        credentials_config: 게이트웨이 인증 정보 (관리자 API에서만 노출)
        environment: test 또는 live
    """

    __tablename__ = "payment_gateway_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    gateway_key = Column(String(50), unique=True, nullable=False, index=True)
    display_name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    icon_name = Column(String(50), nullable=True)
    is_enabled = Column(Boolean, nullable=False, default=False)
    is_domestic_only = Column(Boolean, nullable=False, default=True)
    is_international_only = Column(Boolean, nullable=False, default=False)
    credentials_config = Column(JSON, nullable=True)
    environment = Column(String(10), nullable=False, default="test")
    notes = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<PaymentGatewaySetting(gateway_key='{self.gateway_key}', enabled={self.is_enabled})>"
