"""
인증 서비스

관리자 로그인, 로그아웃, 세션 확인 기능을 제공합니다.

영구 저장소가 있으면 sessions 컬렉션에 세션 문서를 만들고 `sessionId` 쿠키를 발급합니다.
없거나 세션 저장에 실패하면 서명된 JWT를 담은 `auth` 쿠키로 대체합니다.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from storefront.core.config import Settings
from storefront.core.exceptions import InvalidCredentialsException, StoreUnavailableException
from storefront.core.security import (
    check_admin_credentials,
    create_access_token,
    verify_access_token,
)
from storefront.db.store import DocumentCollection, DocumentStore

logger = logging.getLogger(__name__)

SESSION_COOKIE = "sessionId"
AUTH_COOKIE = "auth"


@dataclass
class AuthCookie:
    """로그인 성공 시 발급할 쿠키"""

    name: str
    value: str


@dataclass
class SessionState:
    """세션 확인 결과"""

    is_authenticated: bool
    username: Optional[str] = None
    stale_session: bool = False  # sessionId 쿠키를 지워야 하는 경우


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스 클래스"""

    SESSIONS = "sessions"

    def __init__(self, settings: Settings, store: Optional[DocumentStore] = None):
        """
        Args:
            settings: 애플리케이션 설정
            store: 세션 문서를 저장할 영구 저장소 (없으면 auth 쿠키만 사용)
        """
        self._settings = settings
        self._store = store

    @property
    def uses_sessions(self) -> bool:
        return self._store is not None

    def _sessions(self) -> DocumentCollection:
        self._store.ensure_available()
        return self._store.collection(self.SESSIONS)

    def login(self, username: str, password: str) -> AuthCookie:
        """
        관리자 로그인을 수행하고 발급할 쿠키를 반환합니다.

        Raises:
            InvalidCredentialsException: 사용자명 또는 비밀번호가 틀린 경우
        """
        if not check_admin_credentials(username, password, self._settings):
            raise InvalidCredentialsException("Invalid credentials")

        if self.uses_sessions:
            try:
                return AuthCookie(SESSION_COOKIE, self._create_session(username))
            except StoreUnavailableException as e:
                # 세션 저장 실패 시 auth 쿠키로 대체
                logger.error("Session store error, falling back to auth cookie: %s", e)

        token = create_access_token({"sub": username}, self._settings)
        return AuthCookie(AUTH_COOKIE, token)

    def _create_session(self, username: str) -> str:
        session_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc)
        self._sessions().insert_one(
            {
                "sessionId": session_id,
                "username": username,
                "createdAt": now,
                "expiresAt": now + timedelta(days=self._settings.session_ttl_days),
            }
        )
        logger.info("Session created for '%s'", username)
        return session_id

    def _find_session(self, session_id: str) -> Optional[dict]:
        now = datetime.now(timezone.utc)
        for session in self._sessions().find({"sessionId": session_id}):
            if session.get("expiresAt") and session["expiresAt"] > now:
                return session
        return None

    def check_session(
        self, session_id: Optional[str] = None, auth_token: Optional[str] = None
    ) -> SessionState:
        """
        쿠키 값으로 현재 인증 상태를 확인합니다.

        세션 문서 조회가 실패하거나 만료된 경우 auth 쿠키를 확인하며,
        둘 다 유효하지 않으면 sessionId 쿠키를 정리 대상으로 표시합니다.
        """
        if session_id and self.uses_sessions:
            try:
                session = self._find_session(session_id)
                if session is not None:
                    return SessionState(True, session["username"])
            except StoreUnavailableException as e:
                logger.error("Session check error: %s", e)

        if auth_token:
            try:
                payload = verify_access_token(auth_token, self._settings)
                if payload.get("sub"):
                    return SessionState(True, payload["sub"])
            except jwt.InvalidTokenError:
                logger.debug("Invalid auth cookie")

        return SessionState(False, stale_session=bool(session_id))

    def logout(self, session_id: Optional[str] = None) -> None:
        """세션 문서를 삭제합니다. 쿠키 삭제는 호출한 쪽에서 처리합니다."""
        if not (session_id and self.uses_sessions):
            return
        try:
            sessions = self._sessions()
            for session in sessions.find({"sessionId": session_id}):
                sessions.delete_one(session["_id"])
        except StoreUnavailableException as e:
            logger.error("Logout error: %s", e)
