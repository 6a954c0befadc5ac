"""
pytest 픽스처 정의
"""

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

import peakpulse.models  # noqa: F401  (모든 테이블을 Base.metadata에 등록)
from peakpulse.core.config import Settings, get_settings
from peakpulse.db.database import Base, get_db
from peakpulse.db.redis_client import get_redis_client
from peakpulse.main import app
from peakpulse.services.product_service import ProductService

ADMIN_EMAIL = "admin@peakpulse.com"


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처"""
    return Settings(
        database_url="sqlite:///:memory:",
        redis_host="localhost",
        redis_port=6379,
        redis_db=1,
        redis_password="",
        jwt_secret_key="test-secret-key-for-testing",
        jwt_algorithm="HS256",
        jwt_expiration_minutes=30,
        lock_timeout_seconds=10,
        lock_retry_attempts=3,
        lock_retry_delay_ms=10,
        admin_emails=ADMIN_EMAIL,
        cors_origins="*",
    )


@pytest.fixture(scope="function")
def redis_client():
    """
    테스트용 Redis 클라이언트 픽스처

    fakeredis(Lua 지원)를 사용하므로 Redis 서버 없이 락/재고 스크립트를 검증할 수 있습니다.
    """
    client = fakeredis.FakeRedis(decode_responses=True)
    client.flushall()

    yield client

    client.flushall()
    client.close()


@pytest.fixture(scope="function")
def test_db() -> Session:
    """
    테스트용 in-memory SQLite 데이터베이스 세션 픽스처

    TestClient는 별도 스레드에서 요청을 처리하므로 StaticPool로 하나의 연결을 공유합니다.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def test_client(test_db, redis_client, settings):
    """DB, Redis, 설정 의존성을 테스트용으로 교체한 TestClient"""

    def override_get_db():
        try:
            yield test_db
        except Exception:
            test_db.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis_client] = lambda: redis_client
    app.dependency_overrides[get_settings] = lambda: settings

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


def register_and_login(client: TestClient, email: str, password: str = "password123", name=None) -> dict:
    """회원 가입 후 로그인하여 Authorization 헤더를 반환합니다."""
    client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    response = client.post(
        "/api/auth/login",
        data={"username": email, "password": password},
    )
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def login_as(test_client):
    """임의의 이메일로 가입/로그인하는 헬퍼 (여러 사용자가 필요한 테스트용)"""

    def _login(email: str, password: str = "password123", name=None) -> dict:
        return register_and_login(test_client, email, password, name)

    return _login


@pytest.fixture
def auth_headers(test_client):
    """일반 고객 인증 헤더"""
    return register_and_login(test_client, "jane@peakpulse.com", name="Jane Doe")


@pytest.fixture
def admin_headers(test_client):
    """관리자 인증 헤더 (settings.admin_emails에 등록된 이메일)"""
    return register_and_login(test_client, ADMIN_EMAIL, name="Store Admin")


@pytest.fixture
def make_product(test_db, redis_client, settings):
    """
    상품 생성 헬퍼 픽스처

    Example:
        product = make_product(name="Himalayan Hoodie", price=4500, stock=10)
    """

    def _make(**overrides):
        data = {"name": "Himalayan Hoodie", "price": 4500, "stock": 10}
        data.update(overrides)
        return ProductService.create_product(data, test_db, redis_client, settings)

    return _make
