"""
로깅 설정

Loguru 싱크를 구성하고 표준 logging(uvicorn, sqlalchemy) 레코드를 Loguru로 전달합니다.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from peakpulse.core.config import Settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """표준 logging 레코드를 Loguru로 전달하는 핸들러"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # logging 모듈 내부 프레임을 건너뛰어 실제 호출 위치를 찾음
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(settings: Settings) -> None:
    """
    Loguru 로거를 설정합니다.

    - stderr: 항상 사람이 읽기 쉬운 컬러 포맷
    - 파일: settings.log_file이 지정된 경우 10MB 단위 로테이션
    - 표준 logging: InterceptHandler로 Loguru에 합류

    Args:
        settings: 애플리케이션 설정 (log_level, log_file, app_env)
    """
    is_production = settings.app_env == "production"

    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=LOG_FORMAT,
        colorize=True,
        backtrace=not is_production,
        diagnose=not is_production,
    )

    if settings.log_file:
        path = Path(settings.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            level=settings.log_level,
            format=LOG_FORMAT,
            rotation="10 MB",
            retention=5,
            compression="zip",
            enqueue=True,
            backtrace=not is_production,
            diagnose=not is_production,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.debug("Logging configured (level={}, env={})", settings.log_level, settings.app_env)
