"""
FastAPI 의존성 주입 함수들

문서 저장소, 상품 저장소, 인증 서비스, 관리자 인증 등의 의존성을 제공합니다.
"""

from typing import Optional

from fastapi import Cookie, Depends, HTTPException, Request, status

from storefront.core.config import Settings, get_settings
from storefront.db.store import DocumentStore
from storefront.services.auth_service import AuthService
from storefront.services.product_repository import ProductRepository


def get_store(request: Request) -> DocumentStore:
    """애플리케이션 시작 시 생성된 문서 저장소를 반환합니다."""
    return request.app.state.store


def get_product_repository(store: DocumentStore = Depends(get_store)) -> ProductRepository:
    return ProductRepository(store)


def get_auth_service(
    settings: Settings = Depends(get_settings),
    store: DocumentStore = Depends(get_store),
) -> AuthService:
    """
    설정에 따라 세션 저장 방식이 결정된 인증 서비스를 반환합니다.

    영구 저장소가 없으면 세션 문서 없이 auth 쿠키만 사용합니다.
    """
    return AuthService(settings, store if settings.has_persistent_store else None)


def get_current_admin(
    session_id: Optional[str] = Cookie(None, alias="sessionId"),
    auth_token: Optional[str] = Cookie(None, alias="auth"),
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """
    쿠키로 인증된 관리자 사용자명을 반환하는 의존성 함수

    Raises:
        HTTPException: 인증되지 않은 경우 401 Unauthorized

    Example:
        @router.get("/admin/stats")
        def stats(admin: str = Depends(get_current_admin)):
            ...
    """
    state = auth_service.check_session(session_id, auth_token)
    if not state.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return state.username
