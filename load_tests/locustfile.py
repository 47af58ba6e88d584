"""
스토어 카탈로그 부하 테스트 시나리오

테스트 시나리오:
1. 쇼핑객: 상품 목록 조회, 필터/정렬, 상세 및 관련 상품 조회
2. 관리자: 로그인 후 대시보드 통계 조회, 승인 여부 토글

성능 목표:
- 응답시간: P50 < 100ms, P99 < 500ms
- 스토어 목록에 미승인 상품 노출 0건
"""

import random

from locust import HttpUser, TaskSet, task, between, events


# 전역 메트릭 수집
hidden_leaks = 0
toggles = 0

CATEGORIES = ["Electronics", "Fashion", "Home", "Sports", "Beauty"]
SORT_KEYS = ["name", "price-low", "price-high", "rating", "newest"]


class ShopperTaskSet(TaskSet):
    """스토어 방문자 행동 모델"""

    def on_start(self):
        self.product_ids: list[str] = []

    @task(5)
    def browse_products(self):
        """스토어 상품 목록 조회 (가장 빈번한 작업)"""
        params = {"sort": random.choice(SORT_KEYS)}
        if random.random() < 0.3:
            params["category"] = random.choice(CATEGORIES)
        if random.random() < 0.2:
            params["discount_only"] = "true"

        with self.client.get(
            "/api/shop/products",
            params=params,
            name="[Shop] Browse Products",
            catch_response=True,
        ) as response:
            if response.status_code != 200:
                response.failure(f"Browse failed: {response.status_code}")
                return

            products = response.json()
            if any(not p.get("approved", True) for p in products):
                global hidden_leaks
                hidden_leaks += 1
                response.failure("Hidden product visible in storefront!")
                return

            self.product_ids = [p["id"] for p in products]
            response.success()

    @task(2)
    def view_product(self):
        """상품 상세 및 관련 상품 조회"""
        if not self.product_ids:
            return

        product_id = random.choice(self.product_ids)
        self.client.get(f"/api/products/{product_id}", name="[Shop] Product Detail")
        self.client.get(
            f"/api/shop/products/{product_id}/related", name="[Shop] Related Products"
        )

    @task(1)
    def search_products(self):
        """검색"""
        self.client.get(
            "/api/shop/products",
            params={"search": random.choice(["wireless", "smart", "premium", "mat"])},
            name="[Shop] Search",
        )


class AdminTaskSet(TaskSet):
    """관리자 행동 모델"""

    def on_start(self):
        with self.client.post(
            "/api/auth",
            json={"username": "admin", "password": "password"},
            name="[Auth] Login",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Login failed: {response.status_code}")

    @task(3)
    def view_stats(self):
        """대시보드 통계 조회"""
        self.client.get("/api/admin/stats", name="[Admin] Stats")

    @task(2)
    def check_session(self):
        """세션 확인"""
        with self.client.get(
            "/api/auth/session", name="[Auth] Session", catch_response=True
        ) as response:
            if response.status_code == 200 and response.json().get("isAuthenticated"):
                response.success()
            else:
                response.failure("Session lost")

    @task(1)
    def toggle_approval(self):
        """승인 여부 토글 (두 번 반전하여 원상 복구)"""
        response = self.client.get("/api/admin/products", name="[Admin] Products")
        if response.status_code != 200 or not response.json():
            return

        product = random.choice(response.json())
        global toggles
        for approved in (not product["approved"], product["approved"]):
            self.client.put(
                f"/api/products/{product['id']}",
                json={"approved": approved},
                name="[Admin] Toggle Approval",
            )
            toggles += 1


class Shopper(HttpUser):
    """일반 쇼핑객"""

    tasks = [ShopperTaskSet]
    weight = 10
    wait_time = between(1, 3)
    host = "http://localhost:8080"


class Admin(HttpUser):
    """관리자 (소수)"""

    tasks = [AdminTaskSet]
    wait_time = between(2, 5)
    weight = 1
    host = "http://localhost:8080"


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    """테스트 시작 시 초기화"""
    global hidden_leaks, toggles
    hidden_leaks = 0
    toggles = 0

    print("\n" + "=" * 60)
    print("🚀 Locust Load Test Started")
    print("=" * 60)
    print(f"Target: {environment.host}")
    print("=" * 60 + "\n")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    """테스트 종료 시 결과 출력"""
    print("\n" + "=" * 60)
    print("📊 Test Results Summary")
    print("=" * 60)
    print(f"🔁 Approval Toggles: {toggles}")
    print(f"🚨 Hidden Products Leaked: {hidden_leaks}")
    print("=" * 60)

    if hidden_leaks > 0:
        print("❌ FAIL: Unapproved products were visible in the storefront.")
    else:
        print("✅ PASS: Storefront only showed approved products.")

    print("=" * 60 + "\n")


"""
기본 실행 (웹 UI):
    locust -f load_tests/locustfile.py --host=http://localhost:8080

헤드리스 모드 (CLI):
    locust -f load_tests/locustfile.py --headless --users 100 --spawn-rate 10 -t 60s --host=http://localhost:8080

    # 쇼핑객만
    locust -f load_tests/locustfile.py --headless --users 200 --spawn-rate 20 -t 2m --host=http://localhost:8080 Shopper
"""
