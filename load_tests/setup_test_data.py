#!/usr/bin/env python3
"""
부하 테스트 데이터 초기화 스크립트

부하 테스트 실행 전 관리자 계정으로 테스트 상품과 재고를 등록합니다.
서버는 ADMIN_EMAILS에 관리자 이메일(기본: admin@loadtest.com)이 포함된 상태로 실행되어야 합니다.
"""

import argparse
import sys

import requests

ADMIN_EMAIL = "admin@loadtest.com"
ADMIN_PASSWORD = "admin1234"


def login_admin(base_url: str) -> str:
    """관리자 계정 생성(이미 있으면 무시) 후 토큰 반환"""
    register_response = requests.post(
        f"{base_url}/api/auth/register",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD, "name": "Load Test Admin"},
    )
    if register_response.status_code not in (201, 409):
        print(f"Admin registration failed: {register_response.status_code}")
        print(register_response.text)
        sys.exit(1)

    login_response = requests.post(
        f"{base_url}/api/auth/login",
        data={"username": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    if login_response.status_code != 200:
        print(f"Admin login failed: {login_response.status_code}")
        print(login_response.text)
        sys.exit(1)

    return login_response.json()["access_token"]


def create_test_product(base_url: str, token: str, name: str, stock: int, sizes: int) -> dict:
    """사이즈 variant가 있는 테스트 상품 생성"""
    variants = [
        {"name": "Size", "value": size, "price": 4500, "stock": stock}
        for size in ("S", "M", "L", "XL")[:sizes]
    ]
    response = requests.post(
        f"{base_url}/api/admin/products",
        json={
            "name": name,
            "description": f"Load test product - {stock} units available",
            "price": 4500,
            "stock": stock,
            "variants": variants,
        },
        headers={"Authorization": f"Bearer {token}"},
    )

    if response.status_code == 409:
        print(f"Product already exists: {name}")
        return {}
    if response.status_code != 201:
        print(f"Product creation failed: {response.status_code}")
        print(response.text)
        sys.exit(1)

    product = response.json()
    print(f"Product created: {product['name']} (ID: {product['id']}, Stock: {stock})")
    return product


def check_health(base_url: str) -> bool:
    try:
        response = requests.get(f"{base_url}/health", timeout=5)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def main():
    parser = argparse.ArgumentParser(description="Setup storefront data for load testing")
    parser.add_argument("--host", default="http://localhost:8080", help="API server host")
    parser.add_argument("--stock", type=int, default=100, help="Initial stock per product/variant")
    parser.add_argument("--products", type=int, default=3, help="Number of products to create")
    parser.add_argument("--sizes", type=int, default=0, choices=range(0, 5), help="Size variants per product")
    args = parser.parse_args()

    if not check_health(args.host):
        print(f"Server is not reachable at {args.host}")
        sys.exit(1)

    token = login_admin(args.host)
    for index in range(1, args.products + 1):
        create_test_product(args.host, token, f"Load Test Hoodie {index}", args.stock, args.sizes)

    print("\nYou can now run Locust tests:")
    print(f"  locust -f load_tests/locustfile.py --host={args.host}")


if __name__ == "__main__":
    main()
