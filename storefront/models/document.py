"""
Document 모델

로컬 대체 저장소에서 컬렉션 문서를 저장하는 SQLAlchemy 모델입니다.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, JSON
from storefront.db.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentRecord(Base):
    """
    문서 레코드 모델

    Attributes:
        id: 문서 식별자 (Primary Key, 24자리 16진수 ObjectId 문자열)
        collection: 컬렉션 이름 (예: products, sessions)
        data: 문서 본문 (_id 제외)
        inserted_at: 레코드 삽입 일시 (자동 설정)
    """

    __tablename__ = "documents"

    id = Column(String(24), primary_key=True)
    collection = Column(String(50), nullable=False, index=True)
    data = Column(JSON, nullable=False)
    inserted_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    def __repr__(self) -> str:
        """DocumentRecord 객체의 문자열 표현"""
        return f"<DocumentRecord(id='{self.id}', collection='{self.collection}')>"

    def to_document(self) -> dict:
        """_id를 포함한 문서 딕셔너리로 변환"""
        return {"_id": self.id, **(self.data or {})}
