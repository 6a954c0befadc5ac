"""
결제 게이트웨이 설정 관련 Pydantic 스키마
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict


class GatewayCreateRequest(BaseModel):
    """
    결제 게이트웨이 생성 요청 스키마

    Example:
        {
            "gateway_key": "esewa",
            "display_name": "eSewa",
            "is_enabled": true
        }
    """

    gateway_key: str = Field(
        ...,
        min_length=1,
        max_length=50,
        pattern=r"^[a-z0-9_]+$",
        description="결제 수단 키",
        examples=["esewa"],
    )
    display_name: str = Field(..., min_length=1, max_length=100, examples=["eSewa"])
    description: str | None = None
    icon_name: str | None = Field(None, max_length=50)
    is_enabled: bool = False
    is_domestic_only: bool = True
    is_international_only: bool = False
    credentials_config: dict | None = None
    environment: Literal["test", "live"] = "test"
    notes: str | None = None
    display_order: int = 0


class GatewayUpdateRequest(BaseModel):
    display_name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    icon_name: str | None = Field(None, max_length=50)
    is_enabled: bool | None = None
    is_domestic_only: bool | None = None
    is_international_only: bool | None = None
    credentials_config: dict | None = None
    environment: Literal["test", "live"] | None = None
    notes: str | None = None
    display_order: int | None = None


class GatewayPublicResponse(BaseModel):
    """체크아웃 화면용 게이트웨이 정보 (인증 정보 제외)"""

    model_config = ConfigDict(from_attributes=True)

    gateway_key: str
    display_name: str
    description: str | None = None
    icon_name: str | None = None
    is_domestic_only: bool
    is_international_only: bool
    display_order: int


class GatewayAdminResponse(GatewayPublicResponse):
    id: int
    is_enabled: bool
    credentials_config: dict | None = None
    environment: str
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
