"""
로컬 대체 문서 저장소

MONGODB_URI가 없을 때 사용하는 SQLAlchemy 기반 저장소입니다.
모든 컬렉션의 문서를 하나의 documents 테이블에 JSON 본문으로 저장합니다.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from bson import ObjectId
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.core.exceptions import StoreUnavailableException
from storefront.db.database import Base, create_local_engine, create_session_factory
from storefront.db.store import DocumentCollection, DocumentStore
from storefront.models import DocumentRecord

logger = logging.getLogger(__name__)


def _matches(document: dict, filter: dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in filter.items())


class SqlCollection(DocumentCollection):
    """documents 테이블 위의 컬렉션 뷰."""

    def __init__(self, name: str, session_factory: sessionmaker):
        self.name = name
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Local store operation failed on '%s': %s", self.name, e)
            raise StoreUnavailableException(f"Database error: {e}") from e
        finally:
            db.close()

    def _records(self, db: Session) -> list[DocumentRecord]:
        return (
            db.query(DocumentRecord)
            .filter(DocumentRecord.collection == self.name)
            .order_by(DocumentRecord.inserted_at, DocumentRecord.id)
            .all()
        )

    def find(self, filter: Optional[dict[str, Any]] = None) -> list[dict]:
        with self._session() as db:
            documents = [record.to_document() for record in self._records(db)]
        return [doc for doc in documents if _matches(doc, filter or {})]

    def find_one(self, doc_id: str) -> Optional[dict]:
        with self._session() as db:
            record = db.get(DocumentRecord, doc_id)
            if record is None or record.collection != self.name:
                return None
            return record.to_document()

    def insert_one(self, document: dict) -> str:
        return self.insert_many([document])[0]

    def insert_many(self, documents: list[dict]) -> list[str]:
        ids = []
        with self._session() as db:
            for document in documents:
                body = {k: v for k, v in document.items() if k != "_id"}
                doc_id = str(ObjectId())
                db.add(DocumentRecord(id=doc_id, collection=self.name, data=body))
                ids.append(doc_id)
            db.commit()
        return ids

    def update_one(self, doc_id: str, patch: dict) -> int:
        with self._session() as db:
            record = db.get(DocumentRecord, doc_id)
            if record is None or record.collection != self.name:
                return 0
            # JSON 컬럼 변경 감지를 위해 새 딕셔너리로 교체
            record.data = {**record.data, **patch}
            db.commit()
            return 1

    def delete_one(self, doc_id: str) -> int:
        with self._session() as db:
            record = db.get(DocumentRecord, doc_id)
            if record is None or record.collection != self.name:
                return 0
            db.delete(record)
            db.commit()
            return 1

    def count(self, filter: Optional[dict[str, Any]] = None) -> int:
        return len(self.find(filter))


class SqlDocumentStore(DocumentStore):
    """SQLAlchemy 기반 로컬 저장소 (기본: 인메모리 SQLite)."""

    backend = "local"

    def __init__(self, engine: Engine):
        self._engine = engine
        self._session_factory = create_session_factory(engine)
        Base.metadata.create_all(bind=engine)

    @classmethod
    def from_url(cls, database_url: str) -> "SqlDocumentStore":
        return cls(create_local_engine(database_url))

    @property
    def is_configured(self) -> bool:
        return True

    def ensure_available(self) -> None:
        # 로컬 저장소는 항상 설정되어 있으며, 연결 오류는 각 작업에서 변환됩니다
        return None

    def ping(self) -> dict:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return {"connected": True, "error": None}
        except SQLAlchemyError as e:
            logger.error("Local store connection error: %s", e)
            return {"connected": False, "error": str(e)}

    def collection(self, name: str) -> SqlCollection:
        return SqlCollection(name, self._session_factory)

    def close(self) -> None:
        self._engine.dispose()
