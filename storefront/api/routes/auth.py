"""
인증 관련 API 엔드포인트

관리자 로그인, 로그아웃, 세션 확인 기능을 제공합니다.
"""

from typing import Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status

from storefront.api.deps import get_auth_service
from storefront.core.config import Settings, get_settings
from storefront.core.exceptions import InvalidCredentialsException
from storefront.schemas.auth import LoginRequest, SessionResponse
from storefront.services.auth_service import AUTH_COOKIE, SESSION_COOKIE, AuthService


router = APIRouter()


@router.post("/auth")
def login(
    credentials: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """
    관리자 로그인 후 세션 쿠키를 설정합니다.

    영구 저장소가 있으면 `sessionId`, 없으면 서명된 `auth` 쿠키를 발급합니다.

    Raises:
        HTTPException 401: 잘못된 인증 정보

    Example:
        Request:
        ```json
        {"username": "admin", "password": "password"}
        ```

        Response (200):
        ```json
        {"success": true}
        ```
    """
    try:
        cookie = auth_service.login(credentials.username, credentials.password)

    except InvalidCredentialsException as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    response.set_cookie(
        key=cookie.name,
        value=cookie.value,
        max_age=settings.session_max_age_seconds,
        path="/",
        secure=settings.cookie_secure,
        httponly=True,
        samesite="lax",
    )
    return {"success": True}


@router.delete("/auth")
def logout(
    response: Response,
    session_id: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    로그아웃: 세션 문서를 삭제하고 sessionId/auth 쿠키를 모두 지웁니다.
    """
    auth_service.logout(session_id)
    response.delete_cookie(SESSION_COOKIE, path="/")
    response.delete_cookie(AUTH_COOKIE, path="/")
    return {"success": True}


@router.get("/auth/session", response_model=SessionResponse, response_model_exclude_none=True)
def get_session(
    response: Response,
    session_id: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    auth_token: Optional[str] = Cookie(None, alias=AUTH_COOKIE),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    현재 인증 상태를 확인합니다.

    Example:
        Response (200):
        ```json
        {"isAuthenticated": true, "username": "admin"}
        ```
    """
    state = auth_service.check_session(session_id, auth_token)

    # 만료되었거나 존재하지 않는 세션 쿠키 정리
    if state.stale_session:
        response.delete_cookie(SESSION_COOKIE, path="/")

    return SessionResponse(is_authenticated=state.is_authenticated, username=state.username)
