"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # 데이터베이스 설정 (운영 환경에서는 Postgres URL 사용)
    database_url: str = "sqlite:///./peakpulse.db"

    # Redis 설정 (장바구니, 실시간 재고)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: str = ""

    # JWT 설정
    jwt_secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = 60

    # 재고 락 설정
    lock_timeout_seconds: int = 10
    lock_retry_attempts: int = 3
    lock_retry_delay_ms: int = 100

    # 장바구니 / 주문 설정
    cart_ttl_seconds: int = 60 * 60 * 24 * 30
    currency: str = "NPR"
    domestic_shipping_cost: int = 500
    international_shipping_cost: int = 3000

    # 쉼표로 구분된 관리자 이메일 목록 (가입 시 admin 역할 부여)
    admin_emails: str = ""

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"
    log_file: str = ""
    cors_origins: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def redis_url(self) -> str:
        """
        Redis 연결 URL 생성

        비밀번호가 있는 경우: redis://:password@host:port/db
        비밀번호가 없는 경우: redis://host:port/db
        """
        if self.redis_password:
            return f"redis://:{self.redis_password}@{self.redis_host}:{self.redis_port}/{self.redis_db}"
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

    @property
    def admin_email_list(self) -> list[str]:
        """
        관리자 이메일 목록 파싱

        Returns:
            소문자로 정규화된 이메일 리스트 (예: ["owner@peakpulse.com"])
        """
        if not self.admin_emails:
            return []
        return [
            email.strip().lower()
            for email in self.admin_emails.split(",")
            if email.strip()
        ]

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수

    테스트에서는 app.dependency_overrides로 교체합니다.
    """
    return Settings()
