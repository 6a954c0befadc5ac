"""
인증 서비스

사용자 등록, 로그인, 토큰 기반 사용자 조회 기능을 제공합니다.
"""

import jwt
from loguru import logger
from sqlalchemy.orm import Session

from peakpulse.core.config import Settings
from peakpulse.core.security import (
    build_token_claims,
    create_access_token,
    hash_password,
    verify_access_token,
    verify_password,
)
from peakpulse.core.exceptions import (
    UserAlreadyExistsException,
    InvalidCredentialsException,
    UserNotFoundException,
)
from peakpulse.models.user import DEFAULT_ROLES, User


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스 클래스"""

    @staticmethod
    def register_user(
        email: str,
        password: str,
        db: Session,
        settings: Settings,
        name: str | None = None,
    ) -> User:
        """
        새 사용자를 등록합니다.

        이메일은 소문자로 정규화되며, settings.admin_emails에 포함된 이메일은
        admin 역할을 함께 부여받습니다.

        Args:
            email: 이메일 주소
            password: 평문 비밀번호
            db: 데이터베이스 세션
            settings: 애플리케이션 설정
            name: 표시 이름 (선택)

        Returns:
            User: 생성된 사용자 객체

        Raises:
            UserAlreadyExistsException: 이미 가입된 이메일인 경우

        Example:
            >>> user = AuthService.register_user("jane@peakpulse.com", "secret123", db, settings)
            >>> user.roles
            ['customer']
        """
        email = email.strip().lower()
        existing_user = db.query(User).filter(User.email == email).first()
        if existing_user:
            raise UserAlreadyExistsException(email)

        roles = list(DEFAULT_ROLES)
        if email in settings.admin_email_list:
            roles.append("admin")

        new_user = User(
            email=email,
            name=name,
            roles=roles,
            hashed_password=hash_password(password),
        )
        db.add(new_user)
        db.commit()
        db.refresh(new_user)

        logger.info("User registered: {} roles={}", new_user.email, new_user.roles)
        return new_user

    @staticmethod
    def authenticate_user(email: str, password: str, db: Session) -> User | None:
        """
        사용자 인증을 수행합니다.

        Args:
            email: 이메일 주소
            password: 평문 비밀번호
            db: 데이터베이스 세션

        Returns:
            User | None: 인증 성공 시 User 객체, 실패 시 None
        """
        user: User | None = (
            db.query(User).filter(User.email == email.strip().lower()).first()
        )
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    @staticmethod
    def login(email: str, password: str, db: Session, settings: Settings) -> str:
        """
        인증 후 JWT 액세스 토큰을 발급합니다.

        Raises:
            InvalidCredentialsException: 이메일 또는 비밀번호가 틀린 경우
        """
        user = AuthService.authenticate_user(email, password, db)
        if not user:
            logger.warning("Failed login attempt for {}", email)
            raise InvalidCredentialsException("Invalid email or password")

        return create_access_token(build_token_claims(user.email, user.id, user.roles), settings)

    @staticmethod
    def get_current_user(token: str, db: Session, settings: Settings) -> User:
        """
        JWT 토큰에서 현재 사용자를 조회합니다.

        Args:
            token: JWT 액세스 토큰
            db: 데이터베이스 세션
            settings: 애플리케이션 설정

        Returns:
            User: 사용자 객체

        Raises:
            InvalidCredentialsException: 토큰이 유효하지 않거나 만료된 경우
            UserNotFoundException: 토큰은 유효하지만 사용자가 없는 경우
        """
        try:
            payload = verify_access_token(token, settings)
        except jwt.ExpiredSignatureError:
            raise InvalidCredentialsException("Token has expired")
        except jwt.InvalidTokenError:
            # 잘못된 서명, 형식 등
            raise InvalidCredentialsException("Invalid token")

        email = payload.get("sub")
        if not email:
            raise InvalidCredentialsException("Token payload missing 'sub' claim")
        user = db.query(User).filter(User.email == email).first()
        if not user:
            raise UserNotFoundException(email)

        return user

    @staticmethod
    def update_profile(user: User, updates: dict, db: Session) -> User:
        """프로필(name, avatar_url, bio)을 수정합니다."""
        for field in ("name", "avatar_url", "bio"):
            if field in updates:
                setattr(user, field, updates[field])
        db.commit()
        db.refresh(user)
        return user
