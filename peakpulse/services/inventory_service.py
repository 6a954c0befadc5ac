"""Redis 락을 이용한 실시간 재고 관리 서비스."""

import time
import uuid
from typing import Optional

from loguru import logger
from redis import Redis

from peakpulse.core.config import Settings

# GET + 비교 + DEL을 하나의 원자적 연산으로 실행 (내가 획득한 락만 해제)
RELEASE_LOCK_SCRIPT = """
if redis.call("GET", KEYS[1]) == ARGV[1] then
    return redis.call("DEL", KEYS[1])
else
    return 0
end
"""

# 반환값: 남은 재고 (>= 0), -1 재고 부족, -2 키 없음
DECREASE_STOCK_SCRIPT = """
local current_stock = redis.call("GET", KEYS[1])
if not current_stock then
    return -2
end

current_stock = tonumber(current_stock)
local quantity = tonumber(ARGV[1])

if current_stock >= quantity then
    redis.call("DECRBY", KEYS[1], quantity)
    return current_stock - quantity
else
    return -1
end
"""


class InventoryService:
    """비관적 락을 이용한 재고 관리 서비스.

    상품 재고는 ``stock:{product_id}``, 옵션 재고는
    ``stock:{product_id}:{variant_id}`` 키에 저장됩니다.
    """

    @staticmethod
    def _get_stock_key(product_id: int, variant_id: Optional[int] = None) -> str:
        if variant_id is None:
            return f"stock:{product_id}"
        return f"stock:{product_id}:{variant_id}"

    @staticmethod
    def _get_lock_key(product_id: int, variant_id: Optional[int] = None) -> str:
        """
        재고 키의 락 키를 생성합니다.

        Args:
            product_id: 상품 ID
            variant_id: 옵션 ID (선택)

        Returns:
            락 키 문자열 (예: lock:stock:1, lock:stock:1:3)
        """
        return f"lock:{InventoryService._get_stock_key(product_id, variant_id)}"

    @staticmethod
    def initialize_stock(
        product_id: int, quantity: int, redis: Redis, variant_id: Optional[int] = None
    ) -> bool:
        """
        Redis에 재고를 초기화합니다 (키가 없을 때만).

        SETNX를 사용하여 키가 이미 존재하면 덮어쓰지 않습니다.
        여러 워커가 동시에 초기화를 시도해도 먼저 쓴 값이 유지됩니다.

        Args:
            product_id: 상품 ID
            quantity: 초기 재고 수량
            redis: Redis 클라이언트
            variant_id: 옵션 ID (선택)

        Returns:
            성공 시 True (재고 초기화됨), 이미 존재하면 False
        """
        stock_key = InventoryService._get_stock_key(product_id, variant_id)
        result = redis.set(stock_key, quantity, nx=True)
        return bool(result)

    @staticmethod
    def set_stock(
        product_id: int, quantity: int, redis: Redis, variant_id: Optional[int] = None
    ) -> None:
        """관리자가 재고를 직접 수정할 때 Redis 값을 덮어씁니다."""
        redis.set(InventoryService._get_stock_key(product_id, variant_id), quantity)
        logger.info(
            "Stock reset: product={} variant={} quantity={}", product_id, variant_id, quantity
        )

    @staticmethod
    def get_stock(
        product_id: int, redis: Redis, variant_id: Optional[int] = None
    ) -> Optional[int]:
        """
        Redis에서 현재 재고를 조회합니다.

        Args:
            product_id: 상품 ID
            redis: Redis 클라이언트
            variant_id: 옵션 ID (선택)

        Returns:
            현재 재고 수량, 키가 없으면 None
        """
        stock = redis.get(InventoryService._get_stock_key(product_id, variant_id))
        return int(stock) if stock is not None else None

    @staticmethod
    def ensure_stock(
        product_id: int, db_stock: int, redis: Redis, variant_id: Optional[int] = None
    ) -> int:
        """
        Redis 재고를 조회하고, 없으면 DB 값으로 초기화합니다.

        Args:
            product_id: 상품 ID
            db_stock: DB에 저장된 재고
            redis: Redis 클라이언트
            variant_id: 옵션 ID (선택)

        Returns:
            Redis의 현재 재고
        """
        redis_stock = InventoryService.get_stock(product_id, redis, variant_id)
        if redis_stock is not None:
            return redis_stock

        if InventoryService.initialize_stock(product_id, db_stock, redis, variant_id):
            return db_stock

        # 다른 워커가 먼저 초기화함, Redis에서 다시 읽기
        redis_stock = InventoryService.get_stock(product_id, redis, variant_id)
        return redis_stock if redis_stock is not None else db_stock

    @staticmethod
    def delete_stock(product_id: int, redis: Redis, variant_ids=()) -> None:
        """상품 삭제 시 상품/옵션 재고 키를 제거합니다."""
        keys = [InventoryService._get_stock_key(product_id)]
        keys.extend(InventoryService._get_stock_key(product_id, vid) for vid in variant_ids)
        redis.delete(*keys)

    @staticmethod
    def _acquire_lock(
        product_id: int,
        redis: Redis,
        settings: Settings,
        variant_id: Optional[int] = None,
    ) -> Optional[str]:
        """
        TTL을 설정하여 SETNX로 락을 획득합니다.

        Args:
            product_id: 상품 ID
            redis: Redis 클라이언트
            settings: 애플리케이션 설정
            variant_id: 옵션 ID (선택)

        Returns:
            획득 성공 시 락 ID (UUID), 이미 락이 점유 중이면 None
        """
        lock_key = InventoryService._get_lock_key(product_id, variant_id)
        lock_id = str(uuid.uuid4())

        # NX: 키가 없을 때만 설정, EX: 데드락 방지를 위한 만료 시간
        acquired = redis.set(
            lock_key, lock_id, nx=True, ex=settings.lock_timeout_seconds
        )

        return lock_id if acquired else None

    @staticmethod
    def _release_lock(
        product_id: int, lock_id: str, redis: Redis, variant_id: Optional[int] = None
    ) -> bool:
        """
        Lua 스크립트로 락을 해제합니다.

        락 ID가 일치하는 경우에만 해제합니다.

        Args:
            product_id: 상품 ID
            lock_id: 소유권 확인용 락 ID
            redis: Redis 클라이언트
            variant_id: 옵션 ID (선택)

        Returns:
            락 해제 성공 시 True, 실패 시 False
        """
        lock_key = InventoryService._get_lock_key(product_id, variant_id)
        result = redis.eval(RELEASE_LOCK_SCRIPT, 1, lock_key, lock_id)

        return bool(result)

    @staticmethod
    def decrease_stock(
        product_id: int,
        quantity: int,
        redis: Redis,
        settings: Settings,
        variant_id: Optional[int] = None,
    ) -> bool:
        """
        비관적 락과 재시도 메커니즘으로 재고를 감소시킵니다.

        플로우:
        1. 락 획득 시도 (재시도 포함)
        2. Lua 스크립트로 재고 확인 + 원자적 감소
        3. 락 해제

        Args:
            product_id: 상품 ID
            quantity: 감소시킬 수량
            redis: Redis 클라이언트
            settings: 애플리케이션 설정
            variant_id: 옵션 ID (선택)

        Returns:
            재고 감소 성공 시 True, 실패 시 False
            (재고 부족, 키 없음 또는 락 획득 실패)
        """
        max_retries = settings.lock_retry_attempts
        retry_delay = settings.lock_retry_delay_ms / 1000.0  # ms를 초로 변환
        stock_key = InventoryService._get_stock_key(product_id, variant_id)

        for attempt in range(max_retries):
            lock_id = InventoryService._acquire_lock(product_id, redis, settings, variant_id)

            if lock_id is not None:
                try:
                    result = redis.eval(DECREASE_STOCK_SCRIPT, 1, stock_key, quantity)
                    if result >= 0:
                        logger.debug("Stock decreased: {} -{} -> {}", stock_key, quantity, result)
                        return True
                    # -1: 재고 부족, -2: 키 없음
                    return False
                finally:
                    # 항상 락 해제
                    InventoryService._release_lock(product_id, lock_id, redis, variant_id)
            elif attempt < max_retries - 1:
                time.sleep(retry_delay)

        logger.warning("Lock acquisition failed after {} retries: {}", max_retries, stock_key)
        return False

    @staticmethod
    def increase_stock(
        product_id: int, quantity: int, redis: Redis, variant_id: Optional[int] = None
    ) -> int:
        """
        재고를 증가시킵니다 (주문 실패 시 보상 처리용).

        INCRBY는 단일 명령으로 원자적이므로 락이 필요하지 않습니다.

        Returns:
            증가 후 재고
        """
        stock_key = InventoryService._get_stock_key(product_id, variant_id)
        return int(redis.incrby(stock_key, quantity))
