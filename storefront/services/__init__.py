"""비즈니스 로직 서비스."""

from storefront.services.auth_service import AuthService
from storefront.services.cart_service import CartService
from storefront.services.catalog_client import HttpCatalogClient
from storefront.services.catalog_service import CatalogService
from storefront.services.product_repository import ProductRepository

__all__ = [
    "AuthService",
    "CartService",
    "CatalogService",
    "HttpCatalogClient",
    "ProductRepository",
]
