"""
MongoDB 문서 저장소

pymongo 클라이언트를 감싸 DocumentStore 인터페이스를 제공합니다.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from bson import ObjectId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from storefront.core.config import Settings
from storefront.core.exceptions import StoreUnavailableException
from storefront.db.store import DocumentCollection, DocumentStore

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "MongoDB not configured. Please set up your database connection."


@contextmanager
def _translate_errors() -> Iterator[None]:
    """pymongo 예외를 StoreUnavailableException으로 변환"""
    try:
        yield
    except PyMongoError as e:
        logger.error("MongoDB operation failed: %s", e)
        raise StoreUnavailableException(f"Database error: {e}") from e


def _public(document: Optional[dict]) -> Optional[dict]:
    if document is None:
        return None
    document["_id"] = str(document["_id"])
    return document


def _normalize_filter(filter: Optional[dict[str, Any]]) -> dict[str, Any]:
    query = dict(filter or {})
    if "_id" in query:
        query["_id"] = ObjectId(query["_id"])
    return query


class MongoCollection(DocumentCollection):
    """pymongo Collection 어댑터."""

    def __init__(self, collection: Collection):
        self._collection = collection

    def find(self, filter: Optional[dict[str, Any]] = None) -> list[dict]:
        with _translate_errors():
            return [_public(doc) for doc in self._collection.find(_normalize_filter(filter))]

    def find_one(self, doc_id: str) -> Optional[dict]:
        with _translate_errors():
            return _public(self._collection.find_one({"_id": ObjectId(doc_id)}))

    def insert_one(self, document: dict) -> str:
        with _translate_errors():
            # insert_one은 인자 딕셔너리에 _id를 추가하므로 복사본 전달
            result = self._collection.insert_one(dict(document))
        return str(result.inserted_id)

    def insert_many(self, documents: list[dict]) -> list[str]:
        with _translate_errors():
            result = self._collection.insert_many([dict(doc) for doc in documents])
        return [str(inserted_id) for inserted_id in result.inserted_ids]

    def update_one(self, doc_id: str, patch: dict) -> int:
        with _translate_errors():
            result = self._collection.update_one({"_id": ObjectId(doc_id)}, {"$set": patch})
        return result.matched_count

    def delete_one(self, doc_id: str) -> int:
        with _translate_errors():
            result = self._collection.delete_one({"_id": ObjectId(doc_id)})
        return result.deleted_count

    def count(self, filter: Optional[dict[str, Any]] = None) -> int:
        with _translate_errors():
            return self._collection.count_documents(_normalize_filter(filter))


class MongoDocumentStore(DocumentStore):
    """MongoDB 기반 영구 저장소."""

    backend = "mongodb"

    def __init__(self, settings: Settings, client: Optional[MongoClient] = None):
        self._uri = settings.mongodb_uri
        self._db_name = settings.mongodb_db_name
        self._timeout_ms = settings.mongodb_timeout_ms
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self._uri) or self._client is not None

    def _get_client(self) -> MongoClient:
        if self._client is None:
            # 클라이언트는 지연 연결하므로 생성 자체는 네트워크 I/O 없음
            # 잘못된 URI는 생성 시점에 ValueError/ConfigurationError로 실패
            try:
                self._client = MongoClient(
                    self._uri,
                    serverSelectionTimeoutMS=self._timeout_ms,
                    tz_aware=True,
                )
            except (PyMongoError, ValueError) as e:
                logger.error("Invalid MongoDB configuration: %s", e)
                raise StoreUnavailableException(f"Invalid MongoDB configuration: {e}") from e
        return self._client

    def ensure_available(self) -> None:
        if not self.is_configured:
            raise StoreUnavailableException(NOT_CONFIGURED_MESSAGE)
        self._get_client()

    def ping(self) -> dict:
        if not self.is_configured:
            return {"connected": False, "error": "MongoDB URI not configured"}
        try:
            self._get_client().admin.command("ping")
            return {"connected": True, "error": None}
        except StoreUnavailableException as e:
            return {"connected": False, "error": str(e)}
        except PyMongoError as e:
            logger.error("MongoDB connection error: %s", e)
            return {"connected": False, "error": str(e)}

    def collection(self, name: str) -> MongoCollection:
        self.ensure_available()
        return MongoCollection(self._get_client()[self._db_name][name])

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
