"""
문서 저장소 게이트웨이

카탈로그 계층은 저장소를 "식별자로 조회/저장하는 문서 컬렉션"으로만 다룹니다.
구현체는 두 가지입니다.

- MongoDocumentStore: MongoDB (영구 저장소, MONGODB_URI 설정 시)
- SqlDocumentStore: SQLAlchemy 기반 로컬 대체 저장소 (기본값 인메모리 SQLite)

반환되는 문서의 식별자는 항상 `_id` 키에 문자열로 담깁니다.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from storefront.core.config import Settings


class DocumentCollection(ABC):
    """식별자 기반 문서 컬렉션 인터페이스."""

    @abstractmethod
    def find(self, filter: Optional[dict[str, Any]] = None) -> list[dict]:
        """필드 동등 비교 필터로 문서 목록을 조회합니다."""

    @abstractmethod
    def find_one(self, doc_id: str) -> Optional[dict]:
        """식별자로 문서를 조회합니다. 없으면 None."""

    @abstractmethod
    def insert_one(self, document: dict) -> str:
        """문서를 저장하고 할당된 식별자를 반환합니다."""

    @abstractmethod
    def insert_many(self, documents: list[dict]) -> list[str]:
        """여러 문서를 저장하고 식별자 목록을 순서대로 반환합니다."""

    @abstractmethod
    def update_one(self, doc_id: str, patch: dict) -> int:
        """patch 필드를 병합하고 일치한 문서 수(0 또는 1)를 반환합니다."""

    @abstractmethod
    def delete_one(self, doc_id: str) -> int:
        """문서를 삭제하고 삭제된 문서 수(0 또는 1)를 반환합니다."""

    @abstractmethod
    def count(self, filter: Optional[dict[str, Any]] = None) -> int:
        """필터와 일치하는 문서 수를 반환합니다."""


class DocumentStore(ABC):
    """문서 저장소 인터페이스."""

    backend: str = "unknown"

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """저장소 연결 정보가 설정되어 있는지 여부"""

    @abstractmethod
    def ensure_available(self) -> None:
        """
        작업 전에 저장소를 사용할 수 있는지 확인합니다.

        Raises:
            StoreUnavailableException: 설정되지 않았거나 연결할 수 없는 경우
        """

    @abstractmethod
    def ping(self) -> dict:
        """연결 상태를 {"connected": bool, "error": str | None} 형태로 반환합니다."""

    @abstractmethod
    def collection(self, name: str) -> DocumentCollection:
        """컬렉션 핸들을 반환합니다."""

    def close(self) -> None:
        """저장소 연결을 정리합니다."""


def create_document_store(settings: Settings) -> DocumentStore:
    """
    설정에 따라 저장소 구현체를 선택합니다.

    Args:
        settings: 애플리케이션 설정

    Returns:
        MONGODB_URI가 있으면 MongoDocumentStore, 없으면 SqlDocumentStore
    """
    if settings.has_persistent_store:
        from storefront.db.mongodb import MongoDocumentStore

        return MongoDocumentStore(settings)

    from storefront.db.local_store import SqlDocumentStore

    return SqlDocumentStore.from_url(settings.database_url)
