"""
Redis 클라이언트 생성 테스트 (실제 연결 없이 연결 설정만 확인)
"""

from peakpulse.core.config import Settings
from peakpulse.db.redis_client import create_redis_client, get_redis_client


def test_create_redis_client_uses_settings():
    settings = Settings(_env_file=None, redis_host="cache", redis_port=6390, redis_db=3)

    client = create_redis_client(settings)
    kwargs = client.connection_pool.connection_kwargs

    assert kwargs["host"] == "cache"
    assert kwargs["port"] == 6390
    assert kwargs["db"] == 3
    assert kwargs["password"] is None
    assert kwargs["decode_responses"] is True
    client.close()


def test_get_redis_client_dependency_yields_client():
    """의존성 제너레이터가 클라이언트를 만들고 종료 시 닫는지 테스트"""
    settings = Settings(_env_file=None, redis_password="secret")

    generator = get_redis_client(settings)
    client = next(generator)

    assert client.connection_pool.connection_kwargs["password"] == "secret"
    generator.close()
