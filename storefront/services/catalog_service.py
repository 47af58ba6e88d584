"""
카탈로그 서비스

전체 상품 목록과 저장소 연결 상태를 메모리에 보관하고,
스토어/관리자 화면에서 사용하는 파생 뷰(승인 상품, 필터/정렬, 통계)를 제공합니다.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Optional, Protocol

from storefront.core.exceptions import (
    DisconnectedException,
    InvalidProductIdException,
    ProductNotFoundException,
    ProductValidationException,
    StoreUnavailableException,
)
from storefront.schemas.catalog import (
    LOW_STOCK_THRESHOLD,
    CatalogQuery,
    CatalogStats,
    DbStatus,
)
from storefront.schemas.product import InitializeResponse, Product, ProductDraft

logger = logging.getLogger(__name__)

# 카탈로그 서비스 경계에서 오류 메시지로 변환되는 예외
CATALOG_ERRORS = (
    StoreUnavailableException,
    ProductValidationException,
    ProductNotFoundException,
    InvalidProductIdException,
)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class CatalogBackend(Protocol):
    """카탈로그 서비스가 사용하는 상품 저장소 (ProductRepository, HttpCatalogClient)."""

    def check_status(self) -> DbStatus: ...

    def list_products(self) -> list[Product]: ...

    def create_product(self, fields: ProductDraft | dict) -> Product: ...

    def update_product(self, product_id: str, fields: ProductDraft | dict) -> Product: ...

    def delete_product(self, product_id: str) -> bool: ...

    def seed_if_empty(self) -> InitializeResponse: ...


class ConnectionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    CHECKING = "checking"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


# ---------------------------
# 순수 함수 (파생 뷰)
# ---------------------------
def approved_only(products: Iterable[Product]) -> list[Product]:
    """승인된 상품만 원래 순서대로 반환합니다."""
    return [product for product in products if product.approved is True]


def _name_key(product: Product) -> tuple[str, str]:
    # 대소문자를 무시한 사전순, 동률이면 원문 기준
    return (product.name.casefold(), product.name)


def _created_key(product: Product) -> datetime:
    return product.created_at or _EPOCH


def sort_products(products: Iterable[Product], sort_key: str) -> list[Product]:
    """
    스토어 정렬 기준으로 정렬합니다.

    - name: 이름 오름차순
    - price-low / price-high: 할인가 기준
    - rating: 평점 내림차순
    - newest: 생성일 내림차순
    - 그 외: name
    """
    items = list(products)
    if sort_key == "price-low":
        return sorted(items, key=lambda p: p.discounted_price)
    if sort_key == "price-high":
        return sorted(items, key=lambda p: p.discounted_price, reverse=True)
    if sort_key == "rating":
        return sorted(items, key=lambda p: p.rating, reverse=True)
    if sort_key == "newest":
        return sorted(items, key=_created_key, reverse=True)
    return sorted(items, key=_name_key)


def matches_query(product: Product, query: CatalogQuery) -> bool:
    """상품이 검색어, 카테고리, 가격, 할인 조건을 모두 만족하는지 확인합니다."""
    if query.search_text:
        needle = query.search_text.lower()
        if needle not in product.name.lower() and needle not in product.description.lower():
            return False

    if query.categories and product.category not in query.categories:
        return False

    # 기본 가격 범위는 필터 없음으로 취급
    if not query.has_default_price_range:
        low, high = query.price_range
        if not low <= product.discounted_price <= high:
            return False

    if query.discount_only and not product.discount:
        return False

    return True


def filter_and_sort(products: Iterable[Product], query: CatalogQuery) -> list[Product]:
    """
    조건에 맞는 상품을 정렬하여 반환합니다.

    승인 여부로는 거르지 않습니다. 스토어 화면은 approved_only() 결과를 전달합니다.
    """
    return sort_products((p for p in products if matches_query(p, query)), query.sort_key)


def admin_sort(products: Iterable[Product], sort_key: str) -> list[Product]:
    """
    관리자 목록 정렬 (name, price, category 오름차순 / stock 내림차순).

    알 수 없는 기준이면 원래 순서를 유지합니다.
    """
    items = list(products)
    if sort_key == "name":
        return sorted(items, key=_name_key)
    if sort_key == "price":
        return sorted(items, key=lambda p: p.price)
    if sort_key == "category":
        return sorted(items, key=lambda p: p.category.casefold())
    if sort_key == "stock":
        return sorted(items, key=lambda p: p.stock, reverse=True)
    return items


def compute_stats(products: Iterable[Product]) -> CatalogStats:
    """관리자 대시보드 통계 (전체, 승인, 숨김, 재고 부족)."""
    items = list(products)
    approved = len(approved_only(items))
    return CatalogStats(
        total=len(items),
        approved=approved,
        hidden=len(items) - approved,
        low_stock=sum(1 for p in items if p.stock < LOW_STOCK_THRESHOLD),
    )


def related_products(products: Iterable[Product], product: Product, limit: int = 4) -> list[Product]:
    """같은 카테고리의 다른 상품을 최대 limit개 반환합니다."""
    related = [p for p in products if p.id != product.id and p.category == product.category]
    return related[:limit]


def list_categories(products: Iterable[Product]) -> list[str]:
    """필터 패싯용 카테고리 목록 (중복 제거, 정렬)."""
    return sorted({p.category for p in products}, key=str.casefold)


# ---------------------------
# 상태 보관 서비스
# ---------------------------
class CatalogService:
    """
    프로세스/세션 단위 카탈로그 상태 보관 서비스.

    공개 메서드는 예외를 밖으로 던지지 않습니다. 실패 시 None(또는 False)을 반환하고
    error에 사용자용 메시지, last_exception에 원인 예외를 기록합니다.
    변경 작업은 저장소가 성공을 확인한 뒤에만 메모리 목록에 반영됩니다.
    """

    def __init__(self, backend: CatalogBackend, auto_refresh: bool = True):
        self._backend = backend
        self.products: list[Product] = []
        self.db_status = DbStatus()
        self.connection_state = ConnectionState.UNINITIALIZED
        self.load_state = LoadState.IDLE
        self.error: Optional[str] = None
        self.last_exception: Optional[Exception] = None
        self._generation = 0

        if auto_refresh:
            self.refresh()

    @property
    def connected(self) -> bool:
        return self.db_status.connected

    @property
    def loading(self) -> bool:
        return self.load_state == LoadState.LOADING

    def _fail(self, action: str, error: Exception) -> None:
        self.last_exception = error
        self.error = f"Failed to {action}: {error}"
        logger.warning(self.error)

    def _reset_error(self) -> None:
        self.error = None
        self.last_exception = None

    def _check_connection(self) -> DbStatus:
        self.connection_state = ConnectionState.CHECKING
        try:
            status = self._backend.check_status()
        except StoreUnavailableException as e:
            status = DbStatus(connected=False, error=str(e))
        return status

    def _apply_status(self, status: DbStatus) -> None:
        self.db_status = status
        self.connection_state = (
            ConnectionState.CONNECTED if status.connected else ConnectionState.DISCONNECTED
        )

    def check_connection(self) -> bool:
        """저장소 연결 상태만 다시 확인합니다."""
        self._apply_status(self._check_connection())
        return self.connected

    def refresh(self) -> bool:
        """
        연결 확인 후 전체 상품을 다시 불러옵니다.

        겹치는 호출은 마지막 호출 결과만 반영됩니다.
        실패 시 목록을 비우고 error를 기록합니다.

        Returns:
            최신 호출이 성공적으로 반영되면 True
        """
        self._generation += 1
        generation = self._generation
        self.load_state = LoadState.LOADING
        self._reset_error()

        try:
            status = self._check_connection()
            if generation != self._generation:
                return False
            self._apply_status(status)
            if not status.connected:
                raise StoreUnavailableException(
                    "Database is not connected. Please configure your database connection."
                )
            products = self._backend.list_products()
        except CATALOG_ERRORS as e:
            if generation == self._generation:
                self.products = []
                self.load_state = LoadState.ERROR
                self._fail("load products", e)
            return False

        if generation != self._generation:
            return False

        self.products = products
        self.load_state = LoadState.READY
        if not products:
            logger.info("No products found, database may need initialization")
        return True

    def initialize_database(self) -> Optional[InitializeResponse]:
        """빈 저장소에 샘플 상품을 저장하고 목록을 다시 불러옵니다."""
        self._reset_error()
        try:
            result = self._backend.seed_if_empty()
        except CATALOG_ERRORS as e:
            self._fail("initialize database", e)
            return None

        self.refresh()
        return result

    def _require_connection(self, action: str) -> bool:
        if self.connected:
            return True
        self._fail(action, DisconnectedException(action))
        return False

    def add_product(self, fields: ProductDraft | dict) -> Optional[Product]:
        """상품을 생성하고 성공 시 목록 끝에 추가합니다."""
        self._reset_error()
        if not self._require_connection("add product"):
            return None

        try:
            product = self._backend.create_product(fields)
        except CATALOG_ERRORS as e:
            self._fail("add product", e)
            return None

        self.products = [*self.products, product]
        return product

    def update_product(self, product_id: str, fields: ProductDraft | dict) -> Optional[Product]:
        """상품을 수정하고 성공 시 저장소가 돌려준 전체 상품으로 교체합니다."""
        self._reset_error()
        if not self._require_connection("update product"):
            return None

        try:
            updated = self._backend.update_product(product_id, fields)
        except CATALOG_ERRORS as e:
            self._fail("update product", e)
            return None

        self.products = [updated if p.id == product_id else p for p in self.products]
        return updated

    def delete_product(self, product_id: str) -> bool:
        """상품을 삭제하고 성공 시 목록에서 제거합니다."""
        self._reset_error()
        if not self._require_connection("delete product"):
            return False

        try:
            self._backend.delete_product(product_id)
        except CATALOG_ERRORS as e:
            self._fail("delete product", e)
            return False

        self.products = [p for p in self.products if p.id != product_id]
        return True

    def toggle_approval(self, product_id: str) -> Optional[Product]:
        """
        승인 여부를 반전합니다.

        메모리 목록에서 먼저 찾으며, 없으면 저장소 상태와 무관하게 실패합니다.
        """
        self._reset_error()
        if not self._require_connection("update product"):
            return None

        current = self.get(product_id)
        if current is None:
            self._fail("update product", ProductNotFoundException(product_id))
            return None

        return self.update_product(product_id, {"approved": not current.approved})

    def get(self, product_id: str) -> Optional[Product]:
        """메모리 목록에서 상품을 찾습니다."""
        return next((p for p in self.products if p.id == product_id), None)

    def approved_only(self) -> list[Product]:
        return approved_only(self.products)

    def filter_and_sort(self, query: CatalogQuery) -> list[Product]:
        return filter_and_sort(self.products, query)

    def admin_sorted(self, sort_key: str) -> list[Product]:
        return admin_sort(self.products, sort_key)

    def stats(self) -> CatalogStats:
        return compute_stats(self.products)

    def related_products(self, product: Product, limit: int = 4) -> list[Product]:
        return related_products(self.approved_only(), product, limit)

    def categories(self) -> list[str]:
        return list_categories(self.approved_only())
