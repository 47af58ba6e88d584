#!/usr/bin/env python3
"""
테스트 데이터 초기화 스크립트

부하 테스트 실행 전 샘플 상품을 저장하고 관리자 로그인을 확인합니다.
"""

import argparse
import sys

import requests


def check_health(base_url: str) -> bool:
    """서버 헬스체크"""
    try:
        response = requests.get(f"{base_url}/health", timeout=5)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def check_db_status(base_url: str) -> dict:
    """저장소 연결 상태 확인"""
    response = requests.get(f"{base_url}/api/db-status", timeout=5)
    return response.json()


def seed_products(base_url: str) -> dict:
    """빈 저장소에 샘플 상품 저장"""
    response = requests.post(f"{base_url}/api/products/initialize", timeout=10)

    if response.status_code != 200:
        print(f"❌ Initialization failed: {response.status_code}")
        print(response.text)
        sys.exit(1)

    result = response.json()
    print(f"✅ {result['message']} (action: {result['action']})")
    return result


def create_test_products(base_url: str, count: int) -> list[str]:
    """부하 테스트용 추가 상품 생성"""
    ids = []
    for i in range(count):
        response = requests.post(
            f"{base_url}/api/products",
            json={
                "name": f"Load Test Product {i + 1}",
                "description": "Load test product",
                "category": "Load Test",
                "price": 10 + i,
                "stock": 100,
                "discount": (i * 5) % 50,
            },
            timeout=10,
        )
        if response.status_code != 201:
            print(f"❌ Product creation failed: {response.status_code}")
            print(response.text)
            sys.exit(1)
        ids.append(response.json()["id"])
    print(f"✅ Created {len(ids)} load test products")
    return ids


def check_admin_login(base_url: str, username: str, password: str) -> None:
    """관리자 로그인 및 세션 확인"""
    session = requests.Session()
    response = session.post(
        f"{base_url}/api/auth",
        json={"username": username, "password": password},
        timeout=5,
    )
    if response.status_code != 200:
        print(f"❌ Admin login failed: {response.status_code}")
        print(response.text)
        sys.exit(1)

    state = session.get(f"{base_url}/api/auth/session", timeout=5).json()
    print(f"✅ Admin session: {state}")


def main():
    parser = argparse.ArgumentParser(description="Setup test data for load testing")
    parser.add_argument(
        "--host",
        default="http://localhost:8080",
        help="API server host (default: http://localhost:8080)",
    )
    parser.add_argument(
        "--extra-products",
        type=int,
        default=0,
        help="Number of additional products to create (default: 0)",
    )
    parser.add_argument("--username", default="admin")
    parser.add_argument("--password", default="password")

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("Load Test Data Setup")
    print("=" * 60)
    print(f"Target: {args.host}")
    print("=" * 60 + "\n")

    print("Checking server health...")
    if not check_health(args.host):
        print(f"Server is not reachable at {args.host}")
        sys.exit(1)

    status = check_db_status(args.host)
    if not status.get("connected"):
        print(f"Database is not connected: {status.get('error')}")
        sys.exit(1)
    print("Server is healthy\n")

    print("Seeding sample catalog...")
    seed_products(args.host)

    if args.extra_products > 0:
        create_test_products(args.host, args.extra_products)

    print("\nChecking admin login...")
    check_admin_login(args.host, args.username, args.password)

    print("\n" + "=" * 60)
    print("✅ Test Data Setup Complete!")
    print("=" * 60)
    print("\nYou can now run Locust tests:")
    print(f"  locust -f load_tests/locustfile.py --host={args.host}")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
