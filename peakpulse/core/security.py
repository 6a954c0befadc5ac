"""
보안 관련 유틸리티 함수

비밀번호 해싱(bcrypt)과 Peak Pulse 액세스 토큰(JWT)의 발급/검증을 담당합니다.

토큰 클레임:
    sub      사용자 이메일 (소문자)
    user_id  users.id
    roles    발급 시점의 역할 목록 (예: ["customer", "vip"])
    iat/exp  발급/만료 시각 (UTC, jwt_expiration_minutes 후 만료)

roles 클레임은 클라이언트 표시용 스냅샷입니다. 관리자 권한 판정은 요청마다
sub로 다시 조회한 User.roles로 수행하므로, 역할이 바뀌어도 토큰을 재발급할
필요는 없습니다. (ADMIN_EMAILS는 회원가입 시 admin 역할을 부여할 때만 사용)
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Iterable
import bcrypt
import jwt

from peakpulse.core.config import Settings

# bcrypt는 입력의 앞 72바이트만 사용
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    비밀번호를 bcrypt로 해싱합니다.

    72바이트를 넘는 비밀번호는 앞 72바이트로 잘라서 해싱합니다.
    (bcrypt 5.x는 긴 입력에 ValueError를 발생시키므로 직접 자름)

    Example:
        >>> hashed = hash_password("my_password")
        >>> hashed.startswith("$2b$")
        True
    """
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호가 저장된 bcrypt 해시와 일치하는지 확인합니다."""
    return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))


def build_token_claims(email: str, user_id: int, roles: Iterable[str] | None) -> Dict[str, Any]:
    """
    로그인한 사용자의 토큰 클레임을 구성합니다.

    AuthService.login이 인증에 성공한 User의 email, id, roles로 호출합니다.
    역할은 소문자로 정규화하고 중복을 제거하며, 비어 있으면 ["customer"]를 사용합니다.

    Example:
        >>> build_token_claims("Jane@PeakPulse.com", 1, ["customer", "VIP", "vip"])
        {'sub': 'jane@peakpulse.com', 'user_id': 1, 'roles': ['customer', 'vip']}
    """
    normalized: list[str] = []
    for role in roles or ():
        role = role.strip().lower()
        if role and role not in normalized:
            normalized.append(role)

    return {
        "sub": email.strip().lower(),
        "user_id": user_id,
        "roles": normalized or ["customer"],
    }


def create_access_token(data: Dict[str, Any], settings: Settings) -> str:
    """
    JWT 액세스 토큰을 생성합니다.

    data(보통 build_token_claims의 결과)에 iat와 exp를 더해 서명합니다.
    만료 시간은 settings.jwt_expiration_minutes로 정해집니다.

    Args:
        data: 토큰에 포함할 클레임 (원본은 변경하지 않음)
        settings: 애플리케이션 설정 (jwt_secret_key, jwt_algorithm, jwt_expiration_minutes)

    Returns:
        str: 서명된 JWT 문자열
    """
    now = datetime.now(timezone.utc)
    payload = {
        **data,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expiration_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    JWT 액세스 토큰의 서명과 만료를 검증하고 클레임을 반환합니다.

    반환된 sub로 AuthService.get_current_user가 사용자를 다시 조회합니다.

    Raises:
        jwt.ExpiredSignatureError: 토큰이 만료된 경우
        jwt.InvalidTokenError: 서명이나 형식이 잘못된 경우
    """
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
