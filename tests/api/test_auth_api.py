"""
인증 / 계정 API 엔드포인트 통합 테스트
"""

ADMIN_EMAIL = "admin@peakpulse.com"


class TestRegisterAPI:
    """회원 가입 API 테스트 클래스"""

    def test_register_success(self, test_client):
        """회원 가입 성공 테스트 (201 Created)"""
        response = test_client.post(
            "/api/auth/register",
            json={"email": "New@PeakPulse.com", "password": "password123", "name": "New"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "new@peakpulse.com"
        assert data["roles"] == ["customer"]
        assert "created_at" in data
        # 비밀번호는 응답에 포함되지 않아야 함
        assert "password" not in data
        assert "hashed_password" not in data

    def test_register_admin_email(self, test_client):
        response = test_client.post(
            "/api/auth/register", json={"email": ADMIN_EMAIL, "password": "password123"}
        )

        assert response.json()["roles"] == ["customer", "admin"]

    def test_register_duplicate_email(self, test_client):
        """중복 이메일 등록 실패 테스트 (409 Conflict)"""
        payload = {"email": "dup@peakpulse.com", "password": "password123"}
        assert test_client.post("/api/auth/register", json=payload).status_code == 201

        response = test_client.post("/api/auth/register", json=payload)

        assert response.status_code == 409
        assert "already exists" in response.json()["detail"].lower()

    def test_register_invalid_payload(self, test_client):
        """이메일 형식 오류, 짧은 비밀번호 (422 Validation Error)"""
        assert (
            test_client.post(
                "/api/auth/register", json={"email": "not-an-email", "password": "password123"}
            ).status_code
            == 422
        )
        assert (
            test_client.post(
                "/api/auth/register", json={"email": "a@b.c", "password": "123"}
            ).status_code
            == 422
        )


class TestLoginAPI:
    """로그인 API 테스트 클래스"""

    def test_login_with_form(self, test_client):
        """OAuth2 form (username 필드에 이메일)으로 로그인"""
        test_client.post("/api/auth/register", json={"email": "jane@peakpulse.com", "password": "password123"})

        response = test_client.post(
            "/api/auth/login", data={"username": "jane@peakpulse.com", "password": "password123"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]

    def test_login_with_json(self, test_client):
        test_client.post("/api/auth/register", json={"email": "jane@peakpulse.com", "password": "password123"})

        response = test_client.post(
            "/api/auth/login", json={"email": "jane@peakpulse.com", "password": "password123"}
        )

        assert response.status_code == 200

    def test_login_wrong_password(self, test_client):
        """잘못된 비밀번호 (401 Unauthorized)"""
        test_client.post("/api/auth/register", json={"email": "jane@peakpulse.com", "password": "password123"})

        response = test_client.post(
            "/api/auth/login", data={"username": "jane@peakpulse.com", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_login_missing_password(self, test_client):
        response = test_client.post("/api/auth/login", json={"email": "jane@peakpulse.com"})

        assert response.status_code == 422


class TestMeAPI:
    def test_me(self, test_client, auth_headers):
        response = test_client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["email"] == "jane@peakpulse.com"

    def test_me_without_token(self, test_client):
        assert test_client.get("/api/auth/me").status_code == 401

    def test_me_invalid_token(self, test_client):
        response = test_client.get("/api/auth/me", headers={"Authorization": "Bearer invalid.token"})

        assert response.status_code == 401


class TestAccountAPI:
    def test_profile_update(self, test_client, auth_headers):
        response = test_client.put(
            "/api/account/profile", json={"bio": "Trail runner"}, headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["bio"] == "Trail runner"
        assert data["name"] == "Jane Doe"

    def test_wishlist(self, test_client, auth_headers, make_product):
        product = make_product()

        added = test_client.post(f"/api/account/wishlist/{product.id}", headers=auth_headers)
        assert added.status_code == 200
        assert [p["slug"] for p in added.json()] == ["himalayan-hoodie"]

        assert [p["id"] for p in test_client.get("/api/account/wishlist", headers=auth_headers).json()] == [
            product.id
        ]

        removed = test_client.delete(f"/api/account/wishlist/{product.id}", headers=auth_headers)
        assert removed.json() == []

    def test_wishlist_unknown_product(self, test_client, auth_headers):
        assert test_client.post("/api/account/wishlist/999", headers=auth_headers).status_code == 404

    def test_account_requires_auth(self, test_client):
        assert test_client.get("/api/account/profile").status_code == 401
        assert test_client.get("/api/account/orders").status_code == 401
