"""
pytest 픽스처 정의
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from storefront.api.deps import get_store
from storefront.core.config import Settings, get_settings
from storefront.db.local_store import SqlDocumentStore
from storefront.db.mongodb import MongoDocumentStore
from storefront.main import app
from storefront.services import product_repository
from storefront.services.product_repository import ProductRepository


def _settings(**overrides) -> Settings:
    values = {
        "mongodb_uri": None,
        "admin_username": "admin",
        "admin_password": "password",
        "admin_password_hash": None,
        "jwt_secret_key": "test-secret-key-for-testing",
        "jwt_algorithm": "HS256",
        "session_ttl_days": 7,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처 (영구 저장소 없음: auth 쿠키 모드)"""
    return _settings()


@pytest.fixture(scope="session")
def persistent_settings():
    """
    영구 저장소가 설정된 것으로 취급하는 설정 픽스처 (세션 문서 모드)

    실제 MongoDB에는 연결하지 않고, 저장소는 store 픽스처로 대체합니다.
    """
    return _settings(mongodb_uri="mongodb://localhost:27017/?serverSelectionTimeoutMS=100")


@pytest.fixture(scope="function")
def store():
    """
    테스트용 인메모리 SQLite 문서 저장소 픽스처

    각 테스트 함수마다 새로운 저장소를 생성하고, 종료 후 연결을 정리합니다.
    """
    document_store = SqlDocumentStore.from_url("sqlite://")
    try:
        yield document_store
    finally:
        document_store.close()


@pytest.fixture(scope="function")
def unconfigured_store(settings):
    """연결 정보가 없는 MongoDB 저장소 (네트워크 I/O 없음)"""
    return MongoDocumentStore(settings)


@pytest.fixture(scope="function")
def repository(store):
    return ProductRepository(store)


def _client(store, settings):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_client(store, settings):
    """인메모리 저장소와 auth 쿠키 인증을 사용하는 TestClient 픽스처"""
    yield from _client(store, settings)


@pytest.fixture(scope="function")
def session_client(store, persistent_settings):
    """세션 문서 인증을 사용하는 TestClient 픽스처 (저장소는 인메모리)"""
    yield from _client(store, persistent_settings)


@pytest.fixture(scope="function")
def unavailable_client(unconfigured_store, settings):
    """저장소가 설정되지 않은 상태의 TestClient 픽스처"""
    yield from _client(unconfigured_store, settings)


@pytest.fixture(scope="function")
def product_fields():
    """생성 가능한 최소 상품 필드"""
    return {
        "name": "Yoga Mat Premium",
        "price": 79.99,
        "description": "Non-slip premium yoga mat",
        "category": "Sports",
        "stock": 14,
    }


@pytest.fixture(scope="function")
def misconfigured_store(settings):
    """URI 형식이 잘못된 MongoDB 저장소 (클라이언트 생성 단계에서 실패)"""
    return MongoDocumentStore(settings.model_copy(update={"mongodb_uri": "mongodb://localhost:notaport"}))


@pytest.fixture(scope="function")
def fixed_clock(monkeypatch):
    """호출할 때마다 1분씩 증가하는 저장소 시계"""
    start = datetime(2025, 1, 22, 10, 0, tzinfo=timezone.utc)
    ticks = iter(range(1000))
    monkeypatch.setattr(
        product_repository, "_utcnow", lambda: start + timedelta(minutes=next(ticks))
    )
    return start


@pytest.fixture(scope="function")
def misconfigured_client(misconfigured_store, settings):
    """URI 형식이 잘못된 저장소를 사용하는 TestClient 픽스처"""
    yield from _client(misconfigured_store, settings)
