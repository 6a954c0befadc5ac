"""
설정(Config) 관련 테스트
"""

from peakpulse.core.config import Settings


def test_config_from_env(monkeypatch):
    """환경 변수로부터 설정을 로드하는지 테스트"""
    monkeypatch.setenv("REDIS_HOST", "test-redis")
    monkeypatch.setenv("REDIS_PORT", "6380")
    monkeypatch.setenv("JWT_SECRET_KEY", "test-secret-key")
    monkeypatch.setenv("DOMESTIC_SHIPPING_COST", "700")

    settings = Settings()

    assert settings.redis_host == "test-redis"
    assert settings.redis_port == 6380
    assert settings.jwt_secret_key == "test-secret-key"
    assert settings.domestic_shipping_cost == 700


def test_config_defaults():
    """배송비와 통화 기본값 테스트"""
    settings = Settings(_env_file=None)

    assert settings.currency == "NPR"
    assert settings.domestic_shipping_cost == 500
    assert settings.international_shipping_cost == 3000


def test_redis_url_with_and_without_password():
    assert Settings(_env_file=None, redis_host="cache", redis_port=6379, redis_db=2).redis_url == (
        "redis://cache:6379/2"
    )
    assert Settings(
        _env_file=None, redis_host="cache", redis_port=6379, redis_db=0, redis_password="pw"
    ).redis_url == "redis://:pw@cache:6379/0"


def test_admin_email_list_is_normalized():
    """관리자 이메일 목록은 공백 제거 + 소문자로 정규화"""
    settings = Settings(_env_file=None, admin_emails=" Owner@PeakPulse.com, ,ops@peakpulse.com ")

    assert settings.admin_email_list == ["owner@peakpulse.com", "ops@peakpulse.com"]


def test_cors_origin_list():
    settings = Settings(_env_file=None, cors_origins="http://localhost:3000, https://peakpulse.com")

    assert settings.cors_origin_list == ["http://localhost:3000", "https://peakpulse.com"]
