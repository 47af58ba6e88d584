"""
SQLAlchemy 데이터베이스 설정

로컬 대체 저장소에서 사용하는 엔진, 세션, Base 클래스를 정의합니다.
"""

from functools import partial

from bson import json_util
from bson.json_util import JSONOptions
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()

# 문서 본문의 datetime/ObjectId를 MongoDB Extended JSON으로 직렬화
JSON_OPTIONS = JSONOptions(tz_aware=True)


def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def create_local_engine(database_url: str) -> Engine:
    """
    로컬 저장소용 SQLAlchemy 엔진 생성

    인메모리 SQLite는 모든 세션이 같은 연결을 공유해야 하므로 StaticPool을 사용합니다.

    Args:
        database_url: SQLAlchemy 데이터베이스 URL

    Returns:
        Engine 인스턴스
    """
    options = {
        "json_serializer": partial(json_util.dumps, json_options=JSON_OPTIONS),
        "json_deserializer": partial(json_util.loads, json_options=JSON_OPTIONS),
    }

    if database_url.startswith("sqlite"):
        # SQLite 사용 시 check_same_thread 비활성화
        options["connect_args"] = {"check_same_thread": False}
        if _is_memory_url(database_url):
            options["poolclass"] = StaticPool
    else:
        options["pool_pre_ping"] = True  # connection 유효성 자동 체크

    return create_engine(database_url, **options)


def create_session_factory(engine: Engine) -> sessionmaker:
    """엔진에 바인딩된 세션 팩토리를 생성합니다."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
