"""
FastAPI 의존성 주입 함수들

데이터베이스 세션, 설정, 인증 등의 의존성을 제공합니다.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from peakpulse.core.config import Settings, get_settings
from peakpulse.core.exceptions import InvalidCredentialsException, UserNotFoundException
from peakpulse.db.database import get_db
from peakpulse.models.user import User
from peakpulse.services.auth_service import AuthService

__all__ = ["get_db", "get_current_user", "get_current_user_optional", "get_current_admin"]

# tokenUrl은 토큰을 얻기 위한 엔드포인트 경로
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    JWT 토큰으로 현재 인증된 사용자를 조회하는 의존성 함수

    Args:
        token: Bearer 토큰 (자동으로 Authorization 헤더에서 추출)
        db: 데이터베이스 세션
        settings: 애플리케이션 설정

    Returns:
        User: 인증된 사용자 객체

    Raises:
        HTTPException: 인증 실패 시 401 Unauthorized

    Example:
        @router.get("/account/profile")
        def profile(current_user: User = Depends(get_current_user)):
            return current_user
    """
    try:
        return AuthService.get_current_user(token, db, settings)

    except (InvalidCredentialsException, UserNotFoundException) as e:
        # 토큰이 유효하지 않거나, 토큰은 유효하지만 사용자가 없는 경우
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_current_user_optional(
    token: str | None = Depends(optional_oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User | None:
    """토큰이 없거나 유효하지 않으면 None을 반환합니다 (공개 피드의 좋아요 여부 표시용)."""
    if not token:
        return None
    try:
        return AuthService.get_current_user(token, db, settings)
    except (InvalidCredentialsException, UserNotFoundException):
        return None


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """
    관리자 권한을 확인하는 의존성 함수

    Raises:
        HTTPException: admin 역할이 없으면 403 Forbidden
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user
