"""
MongoDB 저장소 테스트 (연결 정보 미설정 / 연결 실패 경로)
"""

from unittest.mock import MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from storefront.core.exceptions import StoreUnavailableException
from storefront.db.mongodb import NOT_CONFIGURED_MESSAGE, MongoDocumentStore


class TestUnconfiguredStore:
    """MONGODB_URI가 없는 경우"""

    def test_ping_reports_not_configured(self, unconfigured_store):
        assert unconfigured_store.ping() == {
            "connected": False,
            "error": "MongoDB URI not configured",
        }

    def test_operations_raise_store_unavailable(self, unconfigured_store):
        with pytest.raises(StoreUnavailableException) as exc_info:
            unconfigured_store.ensure_available()

        assert exc_info.value.message == NOT_CONFIGURED_MESSAGE

        with pytest.raises(StoreUnavailableException):
            unconfigured_store.collection("products")


class TestClientErrors:
    """pymongo 오류가 StoreUnavailableException으로 변환되는지 테스트"""

    def _store(self, settings, client):
        return MongoDocumentStore(settings, client=client)

    def test_ping_failure(self, settings):
        client = MagicMock()
        client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")

        status = self._store(settings, client).ping()

        assert status["connected"] is False
        assert "no servers" in status["error"]

    def test_ping_success(self, settings):
        client = MagicMock()

        assert self._store(settings, client).ping() == {"connected": True, "error": None}
        client.admin.command.assert_called_once_with("ping")

    def test_find_failure_translated(self, settings):
        client = MagicMock()
        collection = client.__getitem__.return_value.__getitem__.return_value
        collection.find.side_effect = ServerSelectionTimeoutError("timed out")

        products = self._store(settings, client).collection("products")

        with pytest.raises(StoreUnavailableException) as exc_info:
            products.find()
        assert "timed out" in str(exc_info.value)

    def test_find_returns_string_ids(self, settings):
        client = MagicMock()
        collection = client.__getitem__.return_value.__getitem__.return_value
        collection.find.return_value = [{"_id": 123, "name": "Lamp"}]

        documents = self._store(settings, client).collection("products").find()

        assert documents == [{"_id": "123", "name": "Lamp"}]


class TestMalformedUri:
    """URI 형식이 잘못된 경우 (클라이언트 생성 실패)"""

    def test_ping_reports_error(self, misconfigured_store):
        status = misconfigured_store.ping()

        assert status["connected"] is False
        assert status["error"].startswith("Invalid MongoDB configuration")

    def test_operations_raise_store_unavailable(self, misconfigured_store):
        with pytest.raises(StoreUnavailableException) as exc_info:
            misconfigured_store.ensure_available()

        assert "Invalid MongoDB configuration" in exc_info.value.message

        with pytest.raises(StoreUnavailableException):
            misconfigured_store.collection("products")
