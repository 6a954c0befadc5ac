"""
인증 및 계정 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class UserRegisterRequest(BaseModel):
    """
    회원 가입 요청 스키마

    Example:
        {
            "email": "jane@peakpulse.com",
            "password": "securePass123",
            "name": "Jane"
        }
    """

    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="이메일 주소 (로그인 ID)",
        examples=["jane@peakpulse.com"],
    )
    password: str = Field(
        ...,
        min_length=6,
        max_length=100,
        description="비밀번호 (6자 이상)",
        examples=["securePass123"],
    )
    name: str | None = Field(None, max_length=100, description="표시 이름", examples=["Jane"])


class UserLoginRequest(BaseModel):
    """
    로그인 요청 스키마

    Example:
        {
            "email": "jane@peakpulse.com",
            "password": "securePass123"
        }
    """

    email: str = Field(..., description="이메일 주소", examples=["jane@peakpulse.com"])
    password: str = Field(..., description="비밀번호", examples=["securePass123"])


class TokenResponse(BaseModel):
    """
    JWT 토큰 응답 스키마

    Example:
        {
            "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            "token_type": "bearer"
        }
    """

    access_token: str = Field(..., description="JWT 액세스 토큰")
    token_type: str = Field(default="bearer", description="토큰 타입")


class UserResponse(BaseModel):
    """
    사용자 정보 응답 스키마

    Example:
        {
            "id": 1,
            "email": "jane@peakpulse.com",
            "name": "Jane",
            "roles": ["customer"],
            "created_at": "2025-01-22T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)  # Pydantic v2에서 ORM 모델 변환 허용

    id: int = Field(..., description="사용자 ID")
    email: str = Field(..., description="이메일 주소")
    name: str | None = Field(None, description="표시 이름")
    avatar_url: str | None = Field(None, description="프로필 이미지 URL")
    bio: str | None = Field(None, description="자기소개")
    roles: list[str] = Field(default_factory=list, description="역할 목록")
    created_at: datetime = Field(..., description="가입 일시")


class UserProfileUpdateRequest(BaseModel):
    """프로필 수정 요청 스키마 (전달된 필드만 수정)"""

    name: str | None = Field(None, max_length=100, description="표시 이름")
    avatar_url: str | None = Field(None, max_length=500, description="프로필 이미지 URL")
    bio: str | None = Field(None, description="자기소개")


class UserRolesUpdateRequest(BaseModel):
    """
    관리자용 역할 변경 요청 스키마

    Example:
        {"roles": ["customer", "vip"]}
    """

    roles: list[str] = Field(
        ...,
        min_length=1,
        description="역할 목록 (customer, vip, affiliate, admin)",
        examples=[["customer", "vip"]],
    )
