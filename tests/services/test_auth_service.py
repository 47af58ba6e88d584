"""
인증 서비스 테스트
"""

from datetime import datetime, timedelta, timezone

import pytest

from storefront.core.exceptions import InvalidCredentialsException
from storefront.core.security import create_access_token, verify_access_token
from storefront.services.auth_service import AUTH_COOKIE, SESSION_COOKIE, AuthService


class TestLoginWithoutSessionStore:
    """영구 저장소가 없을 때 (auth 쿠키 모드)"""

    def test_login_issues_auth_cookie(self, settings):
        service = AuthService(settings)

        cookie = service.login("admin", "password")

        assert cookie.name == AUTH_COOKIE
        assert verify_access_token(cookie.value, settings)["sub"] == "admin"

    def test_invalid_credentials(self, settings):
        service = AuthService(settings)

        with pytest.raises(InvalidCredentialsException) as exc_info:
            service.login("admin", "wrong")

        assert str(exc_info.value) == "Invalid credentials"

    def test_check_session_with_auth_cookie(self, settings):
        service = AuthService(settings)
        token = create_access_token({"sub": "admin"}, settings)

        state = service.check_session(auth_token=token)

        assert state.is_authenticated is True
        assert state.username == "admin"

    def test_check_session_with_bad_token(self, settings):
        state = AuthService(settings).check_session(auth_token="garbage")

        assert state.is_authenticated is False
        assert state.username is None

    def test_session_cookie_ignored_without_store(self, settings):
        """세션 저장소가 없으면 sessionId 쿠키는 인증에 쓰이지 않고 정리 대상"""
        state = AuthService(settings).check_session(session_id="abc")

        assert state.is_authenticated is False
        assert state.stale_session is True


class TestSessionStore:
    """세션 문서 모드 테스트 클래스"""

    def test_login_creates_session(self, settings, store):
        service = AuthService(settings, store)

        cookie = service.login("admin", "password")

        assert cookie.name == SESSION_COOKIE
        sessions = store.collection("sessions").find({"sessionId": cookie.value})
        assert len(sessions) == 1
        assert sessions[0]["username"] == "admin"
        assert sessions[0]["expiresAt"] - sessions[0]["createdAt"] == timedelta(days=7)

    def test_check_valid_session(self, settings, store):
        service = AuthService(settings, store)
        cookie = service.login("admin", "password")

        state = service.check_session(session_id=cookie.value)

        assert state.is_authenticated is True
        assert state.username == "admin"
        assert state.stale_session is False

    def test_expired_session_is_stale(self, settings, store):
        now = datetime.now(timezone.utc)
        store.collection("sessions").insert_one(
            {
                "sessionId": "expired",
                "username": "admin",
                "createdAt": now - timedelta(days=8),
                "expiresAt": now - timedelta(days=1),
            }
        )

        state = AuthService(settings, store).check_session(session_id="expired")

        assert state.is_authenticated is False
        assert state.stale_session is True

    def test_expired_session_falls_back_to_auth_cookie(self, settings, store):
        token = create_access_token({"sub": "admin"}, settings)

        state = AuthService(settings, store).check_session(session_id="missing", auth_token=token)

        assert state.is_authenticated is True
        assert state.stale_session is False

    def test_logout_deletes_session(self, settings, store):
        service = AuthService(settings, store)
        cookie = service.login("admin", "password")

        service.logout(cookie.value)

        assert store.collection("sessions").count() == 0
        assert service.check_session(session_id=cookie.value).is_authenticated is False

    def test_logout_without_session_is_noop(self, settings, store):
        AuthService(settings, store).logout(None)

        assert store.collection("sessions").count() == 0

    def test_login_falls_back_when_store_unavailable(self, settings, unconfigured_store):
        """세션 저장 실패 시 auth 쿠키로 대체"""
        service = AuthService(settings, unconfigured_store)

        cookie = service.login("admin", "password")

        assert cookie.name == AUTH_COOKIE
        assert service.check_session(auth_token=cookie.value).is_authenticated is True

    def test_login_falls_back_with_malformed_uri(self, settings, misconfigured_store):
        """URI 형식이 잘못된 저장소에서도 로그인은 auth 쿠키로 성공"""
        service = AuthService(settings, misconfigured_store)

        cookie = service.login("admin", "password")

        assert cookie.name == AUTH_COOKIE
        state = service.check_session(session_id="stale", auth_token=cookie.value)
        assert state.is_authenticated is True
        service.logout(session_id="stale")
