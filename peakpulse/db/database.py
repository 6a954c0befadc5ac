"""
SQLAlchemy 데이터베이스 설정

SQLAlchemy 엔진, 세션, Base 클래스를 정의합니다.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from peakpulse.core.config import get_settings

settings = get_settings()


def _engine_kwargs(database_url: str) -> dict:
    """
    DB 종류에 맞는 엔진 옵션을 반환합니다.

    SQLite는 스레드 검사를 끄고, 그 외(Postgres)는 connection pool을 설정합니다.
    """
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 30,
        "pool_pre_ping": True,  # connection 유효성 자동 체크
        "pool_recycle": 3600,  # 1시간마다 connection 재생성 (stale connection 방지)
    }


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db() -> None:
    """모든 모델을 import한 뒤 테이블을 생성합니다 (애플리케이션 시작 시 호출)."""
    import peakpulse.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db():
    """
    FastAPI 의존성 주입용 데이터베이스 세션 제너레이터

    사용 예:
        @router.get("/products")
        def list_products(db: Session = Depends(get_db)):
            return db.query(Product).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
