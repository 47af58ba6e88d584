"""저장소 상태 확인 API 엔드포인트."""

from fastapi import APIRouter, Depends

from storefront.api.deps import get_store
from storefront.db.store import DocumentStore
from storefront.schemas.catalog import DbStatus


router = APIRouter()


@router.get("/db-status", response_model=DbStatus)
def db_status(store: DocumentStore = Depends(get_store)):
    """
    문서 저장소 연결 상태를 확인합니다.

    Example:
        Response (200):
        ```json
        {"connected": false, "error": "MongoDB URI not configured"}
        ```
    """
    return DbStatus(**store.ping())
