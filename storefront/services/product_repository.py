"""상품 저장소 서비스."""

import copy
import logging
from datetime import datetime, timezone

from bson import ObjectId

from storefront.core.exceptions import (
    InvalidProductIdException,
    ProductNotFoundException,
)
from storefront.db.store import DocumentCollection, DocumentStore
from storefront.schemas.catalog import DbStatus
from storefront.schemas.product import InitializeResponse, Product, ProductDraft
from storefront.services.sample_catalog import SAMPLE_PRODUCTS

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _created_at(document: dict) -> datetime:
    return document.get("createdAt") or _EPOCH


class ProductRepository:
    """
    카탈로그 작업을 문서 저장소 호출로 변환하는 서비스.

    모든 작업은 저장소가 설정되어 있고 사용 가능한지 먼저 확인하며,
    그렇지 않으면 저장소 호출 전에 StoreUnavailableException을 발생시킵니다.
    """

    COLLECTION = "products"

    def __init__(self, store: DocumentStore):
        self._store = store

    def _collection(self) -> DocumentCollection:
        self._store.ensure_available()
        return self._store.collection(self.COLLECTION)

    @staticmethod
    def _check_id(product_id: str) -> None:
        if not isinstance(product_id, str) or not ObjectId.is_valid(product_id):
            raise InvalidProductIdException(product_id)

    def check_status(self) -> DbStatus:
        """저장소 연결 상태를 확인합니다."""
        return DbStatus(**self._store.ping())

    def list_products(self) -> list[Product]:
        """
        모든 상품을 최신 생성순으로 조회합니다.

        Returns:
            Product 리스트 (내부 _id는 공개 id 필드로만 노출)

        Raises:
            StoreUnavailableException: 저장소를 사용할 수 없는 경우
        """
        documents = self._collection().find()
        documents.sort(key=_created_at, reverse=True)
        logger.debug("Found %d products", len(documents))
        return [Product.from_document(document) for document in documents]

    def create_product(self, fields: ProductDraft | dict) -> Product:
        """
        상품을 생성합니다.

        필수 필드(name, price, description, category, stock)를 순서대로 확인한 뒤
        생략된 선택 필드에 기본값을 적용하고 createdAt/updatedAt을 기록합니다.

        Args:
            fields: 상품 필드 (id, createdAt, updatedAt은 무시)

        Returns:
            저장소가 할당한 id를 포함한 Product

        Raises:
            StoreUnavailableException: 저장소를 사용할 수 없는 경우
            ProductValidationException: 필수 필드 누락 또는 잘못된 값 (저장 전 거부)
        """
        collection = self._collection()
        document = ProductDraft.parse(fields).to_product_fields()

        now = _utcnow()
        document["createdAt"] = now
        document["updatedAt"] = now

        product_id = collection.insert_one(document)
        logger.info("Product '%s' created with id %s", document["name"], product_id)

        return Product.from_document({"_id": product_id, **document})

    def get_product(self, product_id: str) -> Product:
        """
        상품 ID로 상품을 조회합니다.

        Raises:
            StoreUnavailableException: 저장소를 사용할 수 없는 경우
            InvalidProductIdException: ID 형식이 잘못된 경우
            ProductNotFoundException: 상품이 없는 경우
        """
        collection = self._collection()
        self._check_id(product_id)

        document = collection.find_one(product_id)
        if document is None:
            raise ProductNotFoundException(product_id)
        return Product.from_document(document)

    def update_product(self, product_id: str, fields: ProductDraft | dict) -> Product:
        """
        전달된 필드만 기존 상품에 병합하고 updatedAt을 갱신합니다.

        Returns:
            병합이 완료된 전체 Product

        Raises:
            StoreUnavailableException: 저장소를 사용할 수 없는 경우
            InvalidProductIdException: ID 형식이 잘못된 경우
            ProductNotFoundException: 상품이 없는 경우
            ProductValidationException: 잘못된 필드 값
        """
        collection = self._collection()
        self._check_id(product_id)

        patch = ProductDraft.parse(fields).to_patch()
        patch["updatedAt"] = _utcnow()

        if collection.update_one(product_id, patch) == 0:
            raise ProductNotFoundException(product_id)
        logger.info("Product %s updated: %s", product_id, sorted(patch))

        document = collection.find_one(product_id)
        if document is None:
            # 업데이트 직후 다른 요청이 삭제한 경우
            raise ProductNotFoundException(product_id)
        return Product.from_document(document)

    def delete_product(self, product_id: str) -> bool:
        """
        상품을 삭제합니다.

        Returns:
            성공 시 True

        Raises:
            StoreUnavailableException: 저장소를 사용할 수 없는 경우
            InvalidProductIdException: ID 형식이 잘못된 경우
            ProductNotFoundException: 상품이 없는 경우
        """
        collection = self._collection()
        self._check_id(product_id)

        if collection.delete_one(product_id) == 0:
            raise ProductNotFoundException(product_id)
        logger.info("Product %s deleted", product_id)
        return True

    def seed_if_empty(self) -> InitializeResponse:
        """
        저장소가 비어 있을 때만 샘플 상품 10종을 저장합니다.

        이미 상품이 있으면 아무것도 쓰지 않고 기존 개수와 함께 skipped를 반환합니다.
        """
        collection = self._collection()

        existing_count = collection.count()
        if existing_count > 0:
            logger.info("Database already has %d products", existing_count)
            return InitializeResponse(
                message=f"Database already initialized with {existing_count} products",
                products_count=existing_count,
                action="skipped",
            )

        now = _utcnow()
        documents = [
            {**copy.deepcopy(product), "createdAt": now, "updatedAt": now}
            for product in SAMPLE_PRODUCTS
        ]
        inserted_ids = collection.insert_many(documents)
        logger.info("Inserted %d products into database", len(inserted_ids))

        return InitializeResponse(
            message=f"Successfully initialized database with {len(inserted_ids)} products",
            products_count=len(inserted_ids),
            action="initialized",
            inserted_ids=inserted_ids,
        )
