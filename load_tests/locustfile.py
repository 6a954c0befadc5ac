"""
Locust 부하 테스트 시나리오: 상품 탐색 → 장바구니 → 체크아웃

테스트 시나리오:
1. 일반 쇼핑: 상품 목록/상세 조회 위주, 가끔 COD 주문
2. 한정 수량 경쟁: 다수의 구매자가 같은 상품을 빠르게 주문

검증 항목:
- 초과 판매 0건 (재고 부족은 담기 또는 주문 단계에서 400 "Insufficient stock"으로 거절되어야 함)
- DB-Redis 재고 일치 (/api/products/{id}/stock 의 synced)

사전 준비:
    python load_tests/setup_test_data.py --host=http://localhost:8080
"""

import random
from typing import Dict, Optional

from locust import HttpUser, TaskSet, between, events, task

SHIPPING = {
    "full_name": "Load Tester",
    "street_address": "Thamel Marg 1",
    "city": "Kathmandu",
    "country": "Nepal",
    "postal_code": "44600",
}

# 전역 메트릭
placed_orders = 0
rejected_orders = 0
stock_mismatches = 0


class ShopperTaskSet(TaskSet):
    """스토어프론트 고객 행동 모델"""

    def on_start(self):
        self.email = f"shopper_{random.randint(1, 10_000_000)}@loadtest.com"
        self.access_token: Optional[str] = None
        self.product_ids: list[int] = []
        self.product_slugs: list[str] = []

        self._register()
        self._login()

    def _register(self):
        with self.client.post(
            "/api/auth/register",
            json={"email": self.email, "password": "test1234"},
            name="[Auth] Register",
            catch_response=True,
        ) as response:
            if response.status_code in (201, 409):
                response.success()
            else:
                response.failure(f"Registration failed: {response.status_code}")

    def _login(self):
        with self.client.post(
            "/api/auth/login",
            data={"username": self.email, "password": "test1234"},
            name="[Auth] Login",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                self.access_token = response.json().get("access_token")
                response.success()
            else:
                response.failure(f"Login failed: {response.status_code}")

    def _headers(self) -> Dict[str, str]:
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}

    @task(4)
    def browse_products(self):
        """상품 목록 조회 (가장 빈번한 작업)"""
        with self.client.get(
            "/api/products",
            params={"sort": random.choice(["newest", "price_asc", "price_desc"])},
            name="[Catalog] List Products",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                products = response.json()
                self.product_ids = [p["id"] for p in products]
                self.product_slugs = [p["slug"] for p in products]
                response.success()
            else:
                response.failure(f"List products failed: {response.status_code}")

    @task(3)
    def view_product(self):
        if not self.product_slugs:
            return
        self.client.get(
            f"/api/products/{random.choice(self.product_slugs)}",
            name="[Catalog] Product Detail",
        )

    @task(2)
    def check_stock(self):
        """DB-Redis 재고 일치 여부 확인"""
        if not self.product_ids:
            return

        with self.client.get(
            f"/api/products/{random.choice(self.product_ids)}/stock",
            name="[Catalog] Check Stock",
            catch_response=True,
        ) as response:
            if response.status_code != 200:
                response.failure(f"Stock check failed: {response.status_code}")
                return
            data = response.json()
            if data.get("redis_stock") is not None and data["redis_stock"] < 0:
                response.failure("Negative stock detected! OVERSOLD!")
            elif not data.get("synced", True):
                global stock_mismatches
                stock_mismatches += 1
                response.success()
            else:
                response.success()

    @task(3)
    def checkout(self):
        """장바구니 담기 후 COD 주문 (핵심 동시성 경로)"""
        if not self.product_ids:
            self.browse_products()
            if not self.product_ids:
                return

        global placed_orders, rejected_orders

        with self.client.post(
            "/api/cart/items",
            json={"product_id": random.choice(self.product_ids), "quantity": 1},
            headers=self._headers(),
            name="[Cart] Add Item",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                response.success()
            elif response.status_code == 400 and "Insufficient stock" in response.json().get("detail", ""):
                # 품절된 상품은 담기 단계에서 거절됨
                rejected_orders += 1
                response.success()
                return
            else:
                response.failure(f"Add to cart failed: {response.status_code}")
                return

        with self.client.post(
            "/api/orders",
            json={"shipping_details": SHIPPING, "payment_method": "cod"},
            headers=self._headers(),
            name="[Checkout] Place Order",
            catch_response=True,
        ) as response:
            if response.status_code == 201:
                placed_orders += 1
                response.success()
            elif response.status_code == 400:
                detail = response.json().get("detail", "")
                if "Insufficient stock" in detail or "Cart is empty" in detail:
                    rejected_orders += 1
                    # 재고 소진에 따른 정상적인 거절
                    self.client.delete("/api/cart", headers=self._headers(), name="[Cart] Clear")
                    response.success()
                else:
                    response.failure(f"Checkout failed with unexpected error: {detail}")
            elif response.status_code == 409:
                # 락 획득 실패 (재시도 소진)
                rejected_orders += 1
                response.success()
            else:
                response.failure(f"Checkout failed: {response.status_code}")

    @task(1)
    def view_order_history(self):
        self.client.get("/api/account/orders", headers=self._headers(), name="[Account] Orders")


class Shopper(HttpUser):
    """일반 쇼핑객"""

    tasks = [ShopperTaskSet]
    wait_time = between(1, 3)
    host = "http://localhost:8080"


class FlashSaleBuyer(HttpUser):
    """한정 수량 경쟁 구매자"""

    tasks = [ShopperTaskSet]
    wait_time = between(0.1, 0.5)
    host = "http://localhost:8080"


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    global placed_orders, rejected_orders, stock_mismatches
    placed_orders = 0
    rejected_orders = 0
    stock_mismatches = 0
    print(f"\nLocust load test started against {environment.host}\n")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    print("\n" + "=" * 60)
    print("Test Results Summary")
    print("=" * 60)
    print(f"Placed orders: {placed_orders}")
    print(f"Rejected orders (stock exhausted / lock busy): {rejected_orders}")
    print(f"DB-Redis stock mismatches observed: {stock_mismatches}")
    print("=" * 60 + "\n")


"""
기본 실행 (웹 UI):
    locust -f load_tests/locustfile.py --host=http://localhost:8080

헤드리스 모드:
    locust -f load_tests/locustfile.py --headless --users 100 --spawn-rate 10 -t 60s --host=http://localhost:8080

한정 수량 경쟁:
    locust -f load_tests/locustfile.py --headless --users 500 --spawn-rate 50 -t 2m \
        --host=http://localhost:8080 FlashSaleBuyer
"""
