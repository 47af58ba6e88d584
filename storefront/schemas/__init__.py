"""
Pydantic 스키마 모듈
"""

from storefront.schemas.product import (
    Product,
    ProductDraft,
    DeleteProductResponse,
    InitializeResponse,
)
from storefront.schemas.catalog import CatalogQuery, CatalogStats, DbStatus
from storefront.schemas.cart import CartLineItem
from storefront.schemas.auth import LoginRequest, SessionResponse

__all__ = [
    "Product",
    "ProductDraft",
    "DeleteProductResponse",
    "InitializeResponse",
    "CatalogQuery",
    "CatalogStats",
    "DbStatus",
    "CartLineItem",
    "LoginRequest",
    "SessionResponse",
]
