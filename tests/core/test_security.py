"""
비밀번호 해싱 및 JWT 토큰 관련 테스트
"""

from datetime import datetime, timedelta, timezone
import pytest
import jwt

from peakpulse.core.security import (
    build_token_claims,
    create_access_token,
    hash_password,
    verify_access_token,
    verify_password,
)


class TestPasswordHashing:
    """비밀번호 해싱 테스트 클래스"""

    def test_hash_password(self):
        """비밀번호가 bcrypt로 해싱되는지 테스트"""
        hashed = hash_password("test_password_123")

        assert hashed != "test_password_123"
        assert hashed.startswith("$2b$")

    def test_verify_password(self):
        """올바른/잘못된 비밀번호 검증 테스트"""
        hashed = hash_password("correct_password")

        assert verify_password("correct_password", hashed) is True
        assert verify_password("wrong_password", hashed) is False

    def test_hash_password_different_hashes(self):
        """같은 비밀번호도 salt가 달라 매번 다른 해시값 생성"""
        hashed1 = hash_password("same_password")
        hashed2 = hash_password("same_password")

        assert hashed1 != hashed2
        assert verify_password("same_password", hashed1) is True
        assert verify_password("same_password", hashed2) is True

    def test_long_password_uses_first_72_bytes(self):
        """bcrypt 입력 한도(72바이트)를 넘는 비밀번호도 해싱 가능"""
        password = "나마스테" * 10  # 120 bytes
        hashed = hash_password(password)

        assert verify_password(password, hashed) is True
        assert verify_password(password[:24], hashed) is True
        assert verify_password(password[:23], hashed) is False


class TestJWTToken:
    """JWT 토큰 생성 및 검증 테스트 클래스"""

    def test_create_and_verify_token(self, settings):
        """토큰 페이로드에 이메일, 사용자 ID, 역할이 담기는지 테스트"""
        data = {"sub": "jane@peakpulse.com", "user_id": 1, "roles": ["customer"]}
        token = create_access_token(data, settings)

        assert len(token.split(".")) == 3

        payload = verify_access_token(token, settings)
        assert payload["sub"] == "jane@peakpulse.com"
        assert payload["user_id"] == 1
        assert payload["roles"] == ["customer"]
        assert "exp" in payload
        assert "iat" in payload

    def test_create_token_does_not_mutate_input(self, settings):
        data = {"sub": "jane@peakpulse.com"}
        create_access_token(data, settings)

        assert data == {"sub": "jane@peakpulse.com"}

    def test_verify_access_token_expired(self, settings):
        """만료된 JWT 토큰 검증 실패 테스트"""
        now = datetime.now(timezone.utc)
        expired_token = jwt.encode(
            {
                "sub": "jane@peakpulse.com",
                "exp": now - timedelta(minutes=1),
                "iat": now - timedelta(minutes=31),
            },
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(jwt.ExpiredSignatureError):
            verify_access_token(expired_token, settings)

    def test_verify_access_token_wrong_secret(self, settings):
        """다른 시크릿 키로 생성된 토큰 검증 실패 테스트"""
        wrong_token = jwt.encode(
            {"sub": "jane@peakpulse.com", "exp": datetime.now(timezone.utc) + timedelta(minutes=30)},
            "wrong_secret_key",
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(jwt.InvalidTokenError):
            verify_access_token(wrong_token, settings)

    def test_verify_access_token_invalid_format(self, settings):
        with pytest.raises(jwt.InvalidTokenError):
            verify_access_token("this.is.not.a.valid.jwt.token", settings)


class TestTokenClaims:
    def test_normalizes_email_and_roles(self):
        claims = build_token_claims(" Jane@PeakPulse.com ", 7, ["customer", "VIP", "vip", " "])

        assert claims == {"sub": "jane@peakpulse.com", "user_id": 7, "roles": ["customer", "vip"]}

    def test_empty_roles_default_to_customer(self):
        assert build_token_claims("jane@peakpulse.com", 7, None)["roles"] == ["customer"]
        assert build_token_claims("jane@peakpulse.com", 7, [])["roles"] == ["customer"]

    def test_claims_round_trip_through_token(self, settings):
        token = create_access_token(build_token_claims("jane@peakpulse.com", 7, ["admin"]), settings)

        payload = verify_access_token(token, settings)

        assert (payload["sub"], payload["user_id"], payload["roles"]) == ("jane@peakpulse.com", 7, ["admin"])
        assert payload["exp"] - payload["iat"] == settings.jwt_expiration_minutes * 60
