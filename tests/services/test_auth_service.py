"""
인증 서비스 테스트
"""

from datetime import datetime, timedelta, timezone
import pytest
import jwt

from peakpulse.services.auth_service import AuthService
from peakpulse.core.security import verify_password, create_access_token, verify_access_token
from peakpulse.core.exceptions import (
    UserAlreadyExistsException,
    InvalidCredentialsException,
    UserNotFoundException,
)
from peakpulse.models.user import User


class TestRegisterUser:
    """회원 가입 테스트 클래스"""

    def test_register_user_success(self, test_db, settings):
        """회원 가입 성공 테스트"""
        password = "testpassword123"

        user = AuthService.register_user("Jane@PeakPulse.com ", password, test_db, settings, name="Jane")

        assert isinstance(user, User)
        assert user.id is not None
        # 이메일은 소문자로 정규화
        assert user.email == "jane@peakpulse.com"
        assert user.name == "Jane"
        assert user.roles == ["customer"]

        # 비밀번호가 해싱되어 저장되는지 확인
        assert user.hashed_password != password
        assert user.hashed_password.startswith("$2b$")
        assert verify_password(password, user.hashed_password) is True

    def test_register_admin_email_gets_admin_role(self, test_db, settings):
        """settings.admin_emails에 등록된 이메일은 admin 역할 부여"""
        user = AuthService.register_user(settings.admin_email_list[0], "password123", test_db, settings)

        assert user.roles == ["customer", "admin"]
        assert user.is_admin is True

    def test_register_user_duplicate_email(self, test_db, settings):
        """중복 이메일 등록 실패 테스트 (대소문자 무시)"""
        AuthService.register_user("dup@peakpulse.com", "password123", test_db, settings)

        with pytest.raises(UserAlreadyExistsException) as exc_info:
            AuthService.register_user("DUP@peakpulse.com", "password123", test_db, settings)

        assert "dup@peakpulse.com" in str(exc_info.value)


class TestAuthenticateUser:
    """로그인 인증 테스트 클래스"""

    def test_authenticate_user_success(self, test_db, settings):
        registered_user = AuthService.register_user("login@peakpulse.com", "securepass456", test_db, settings)

        authenticated_user = AuthService.authenticate_user("LOGIN@peakpulse.com", "securepass456", test_db)

        assert authenticated_user is not None
        assert authenticated_user.id == registered_user.id

    def test_authenticate_user_wrong_password(self, test_db, settings):
        """잘못된 비밀번호로 로그인 실패 테스트"""
        AuthService.register_user("wrongpass@peakpulse.com", "correct123", test_db, settings)

        assert AuthService.authenticate_user("wrongpass@peakpulse.com", "wrong456", test_db) is None

    def test_authenticate_user_nonexistent(self, test_db):
        assert AuthService.authenticate_user("nobody@peakpulse.com", "anypassword", test_db) is None

    def test_login_returns_token_with_roles(self, test_db, settings):
        """로그인 시 발급된 토큰에 역할 정보 포함"""
        user = AuthService.register_user("token@peakpulse.com", "password123", test_db, settings)

        token = AuthService.login("token@peakpulse.com", "password123", test_db, settings)
        payload = verify_access_token(token, settings)

        assert payload["sub"] == "token@peakpulse.com"
        assert payload["user_id"] == user.id
        assert payload["roles"] == ["customer"]

    def test_login_wrong_password(self, test_db, settings):
        AuthService.register_user("token@peakpulse.com", "password123", test_db, settings)

        with pytest.raises(InvalidCredentialsException, match="Invalid email or password"):
            AuthService.login("token@peakpulse.com", "nope", test_db, settings)


class TestGetCurrentUser:
    """토큰으로 사용자 조회 테스트 클래스"""

    def test_get_current_user_success(self, test_db, settings):
        """유효한 토큰으로 사용자 조회 성공 테스트"""
        registered_user = AuthService.register_user("me@peakpulse.com", "tokenpass789", test_db, settings)
        token = create_access_token({"sub": "me@peakpulse.com", "user_id": registered_user.id}, settings)

        current_user = AuthService.get_current_user(token, test_db, settings)

        assert current_user.id == registered_user.id

    def test_get_current_user_invalid_token(self, test_db, settings):
        """잘못된 토큰으로 조회 실패 테스트"""
        with pytest.raises(InvalidCredentialsException, match="Invalid token"):
            AuthService.get_current_user("invalid.token.string", test_db, settings)

    def test_get_current_user_expired_token(self, test_db, settings):
        """만료된 토큰으로 조회 실패 테스트"""
        AuthService.register_user("expired@peakpulse.com", "expiredpass", test_db, settings)

        # 만료된 토큰 생성 (1분 전에 만료)
        now = datetime.now(timezone.utc)
        expired_token = jwt.encode(
            {
                "sub": "expired@peakpulse.com",
                "exp": now - timedelta(minutes=1),
                "iat": now - timedelta(minutes=31),
            },
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(InvalidCredentialsException, match="expired"):
            AuthService.get_current_user(expired_token, test_db, settings)

    def test_get_current_user_missing_sub(self, test_db, settings):
        token = create_access_token({"user_id": 1}, settings)

        with pytest.raises(InvalidCredentialsException, match="sub"):
            AuthService.get_current_user(token, test_db, settings)

    def test_get_current_user_nonexistent(self, test_db, settings):
        """토큰은 유효하지만 사용자가 없는 경우 테스트"""
        token = create_access_token({"sub": "ghost@peakpulse.com"}, settings)

        with pytest.raises(UserNotFoundException) as exc_info:
            AuthService.get_current_user(token, test_db, settings)

        assert "ghost@peakpulse.com" in str(exc_info.value)


class TestUpdateProfile:
    def test_update_profile_fields(self, test_db, settings):
        user = AuthService.register_user("me@peakpulse.com", "password123", test_db, settings)

        updated = AuthService.update_profile(
            user, {"name": "Jane Doe", "bio": "Trail runner", "email": "x@y.z"}, test_db
        )

        assert updated.name == "Jane Doe"
        assert updated.bio == "Trail runner"
        # 이메일은 프로필 수정 대상이 아님
        assert updated.email == "me@peakpulse.com"
