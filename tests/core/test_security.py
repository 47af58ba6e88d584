"""
보안 유틸리티 테스트
"""

from datetime import datetime, timezone

import jwt
import pytest

from storefront.core.security import (
    check_admin_credentials,
    create_access_token,
    hash_password,
    verify_password,
    verify_access_token,
)


class TestPasswordHashing:
    """비밀번호 해싱 테스트 클래스"""

    def test_hash_and_verify(self):
        """해싱된 비밀번호 검증 테스트"""
        hashed = hash_password("secret-pass")

        assert hashed != "secret-pass"
        assert hashed.startswith("$2b$")
        assert verify_password("secret-pass", hashed) is True
        assert verify_password("wrong-pass", hashed) is False


class TestAdminCredentials:
    """관리자 계정 확인 테스트 클래스"""

    def test_plain_password_match(self, settings):
        assert check_admin_credentials("admin", "password", settings) is True

    def test_wrong_password(self, settings):
        assert check_admin_credentials("admin", "nope", settings) is False

    def test_wrong_username(self, settings):
        assert check_admin_credentials("root", "password", settings) is False

    def test_password_hash_takes_precedence(self, settings):
        """ADMIN_PASSWORD_HASH가 있으면 평문 비밀번호 대신 해시로 검증"""
        hashed_settings = settings.model_copy(
            update={"admin_password_hash": hash_password("hashed-secret")}
        )

        assert check_admin_credentials("admin", "hashed-secret", hashed_settings) is True
        assert check_admin_credentials("admin", "password", hashed_settings) is False


class TestAccessToken:
    """JWT 토큰 테스트 클래스"""

    def test_create_and_verify(self, settings):
        token = create_access_token({"sub": "admin"}, settings)

        payload = verify_access_token(token, settings)

        assert payload["sub"] == "admin"
        # 만료 시간은 세션 유지 기간과 같음
        assert payload["exp"] - payload["iat"] == settings.session_max_age_seconds

    def test_tampered_token_rejected(self, settings):
        token = create_access_token({"sub": "admin"}, settings)

        with pytest.raises(jwt.InvalidTokenError):
            verify_access_token(token + "x", settings)

    def test_expired_token_rejected(self, settings):
        payload = {"sub": "admin", "exp": datetime(2000, 1, 1, tzinfo=timezone.utc)}
        token = jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

        with pytest.raises(jwt.ExpiredSignatureError):
            verify_access_token(token, settings)
