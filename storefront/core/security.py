"""
관리자 인증 보조 함수

- 관리자 비밀번호 확인 (평문 설정값 또는 bcrypt 해시)
- 영구 저장소가 없을 때 쓰는 서명 쿠키(auth) 토큰 발급/검증
"""

import hmac
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from storefront.core.config import Settings


def hash_password(password: str) -> str:
    """
    ADMIN_PASSWORD_HASH 환경 변수에 넣을 bcrypt 해시를 만듭니다.

    Example:
        >>> hash_password("s3cret").startswith("$2b$")
        True
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """평문 비밀번호가 bcrypt 해시와 일치하는지 확인합니다."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))


def _same(a: str, b: str) -> bool:
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def check_admin_credentials(username: str, password: str, settings: Settings) -> bool:
    """
    관리자 계정 정보를 확인합니다.

    ADMIN_PASSWORD_HASH가 있으면 bcrypt로, 없으면 ADMIN_PASSWORD와 상수 시간 비교합니다.

    Args:
        username: 입력한 사용자명
        password: 입력한 평문 비밀번호
        settings: 애플리케이션 설정

    Returns:
        관리자 계정과 일치하면 True
    """
    if not _same(username, settings.admin_username):
        return False

    if settings.admin_password_hash:
        return verify_password(password, settings.admin_password_hash)

    return _same(password, settings.admin_password)


def create_access_token(claims: dict[str, Any], settings: Settings) -> str:
    """
    auth 쿠키에 담을 서명 토큰을 발급합니다.

    만료 시간은 세션 유지 기간(SESSION_TTL_DAYS)과 같습니다.

    Example:
        >>> token = create_access_token({"sub": "admin"}, Settings())
        >>> verify_access_token(token, Settings())["sub"]
        'admin'
    """
    issued_at = datetime.now(timezone.utc)
    payload = {
        **claims,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.session_ttl_days),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    auth 쿠키 토큰의 서명과 만료를 확인하고 클레임을 반환합니다.

    Raises:
        jwt.ExpiredSignatureError: 만료된 토큰
        jwt.InvalidTokenError: 서명 또는 형식이 잘못된 토큰
    """
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
