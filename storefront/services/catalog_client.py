"""
HTTP 카탈로그 클라이언트

상품 API를 호출하여 CatalogService의 저장소 역할을 합니다.
오류 응답은 ProductRepository와 같은 도메인 예외로 변환합니다.
"""

import logging
from typing import Optional

import httpx

from storefront.core.exceptions import (
    InvalidProductIdException,
    ProductNotFoundException,
    ProductValidationException,
    StoreUnavailableException,
)
from storefront.schemas.catalog import DbStatus
from storefront.schemas.product import InitializeResponse, Product, ProductDraft

logger = logging.getLogger(__name__)

MISSING_FIELD_PREFIX = "Missing required field: "
INVALID_FIELD_PREFIX = "Invalid field "


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"{response.status_code} {response.reason_phrase}"


def _error_field(message: str) -> str:
    """오류 메시지에서 문제 필드 이름을 추출합니다."""
    if message.startswith(MISSING_FIELD_PREFIX):
        return message[len(MISSING_FIELD_PREFIX):]
    if message.startswith(INVALID_FIELD_PREFIX):
        return message[len(INVALID_FIELD_PREFIX):].split(":", 1)[0]
    return "unknown"


def _payload(fields: ProductDraft | dict, partial: bool) -> dict:
    draft = ProductDraft.parse(fields)
    if partial:
        return draft.to_patch()
    return draft.model_dump(exclude_none=True)


class HttpCatalogClient:
    """상품 API용 httpx 클라이언트 래퍼."""

    def __init__(self, client: httpx.Client, prefix: str = "/api"):
        """
        Args:
            client: base_url이 설정된 httpx.Client (테스트에서는 TestClient)
            prefix: API 경로 접두사
        """
        self._client = client
        self._prefix = prefix

    def _request(
        self, method: str, path: str, product_id: Optional[str] = None, **kwargs
    ) -> httpx.Response:
        try:
            response = self._client.request(method, f"{self._prefix}{path}", **kwargs)
        except httpx.HTTPError as e:
            logger.error("Catalog API request failed: %s %s: %s", method, path, e)
            raise StoreUnavailableException(f"Request failed: {e}") from e

        if response.is_success:
            return response

        message = _error_message(response)
        if response.status_code == 404:
            raise ProductNotFoundException(product_id or "")
        if response.status_code == 400 and message == InvalidProductIdException("").message:
            raise InvalidProductIdException(product_id or "")
        if response.status_code in (400, 422):
            raise ProductValidationException(_error_field(message), message)
        raise StoreUnavailableException(message)

    def check_status(self) -> DbStatus:
        try:
            response = self._request("GET", "/db-status")
        except StoreUnavailableException as e:
            return DbStatus(connected=False, error=str(e))
        return DbStatus.model_validate(response.json())

    def list_products(self) -> list[Product]:
        response = self._request("GET", "/products")
        data = response.json()
        if not isinstance(data, list):
            raise StoreUnavailableException("Invalid response format from products API")
        return [Product.model_validate(item) for item in data]

    def create_product(self, fields: ProductDraft | dict) -> Product:
        response = self._request("POST", "/products", json=_payload(fields, partial=False))
        return Product.model_validate(response.json())

    def get_product(self, product_id: str) -> Product:
        response = self._request("GET", f"/products/{product_id}", product_id=product_id)
        return Product.model_validate(response.json())

    def update_product(self, product_id: str, fields: ProductDraft | dict) -> Product:
        response = self._request(
            "PUT",
            f"/products/{product_id}",
            product_id=product_id,
            json=_payload(fields, partial=True),
        )
        return Product.model_validate(response.json())

    def delete_product(self, product_id: str) -> bool:
        response = self._request("DELETE", f"/products/{product_id}", product_id=product_id)
        return bool(response.json().get("deleted"))

    def seed_if_empty(self) -> InitializeResponse:
        response = self._request("POST", "/products/initialize")
        return InitializeResponse.model_validate(response.json())
