"""
스토어 및 관리자 대시보드 API 엔드포인트

스토어: 승인된 상품의 필터/정렬 목록, 관련 상품, 카테고리 패싯
관리자: 대시보드 통계, 정렬된 전체 상품 목록 (인증 필요)
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.api.deps import get_current_admin, get_product_repository
from storefront.core.exceptions import (
    InvalidProductIdException,
    ProductNotFoundException,
    StoreUnavailableException,
)
from storefront.schemas.catalog import DEFAULT_PRICE_RANGE, CatalogQuery, CatalogStats
from storefront.schemas.product import Product
from storefront.services.catalog_service import (
    admin_sort,
    approved_only,
    compute_stats,
    filter_and_sort,
    list_categories,
    related_products,
)
from storefront.services.product_repository import ProductRepository


router = APIRouter()


def _load_products(repository: ProductRepository) -> list[Product]:
    try:
        return repository.list_products()
    except StoreUnavailableException as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


@router.get("/shop/products", response_model=List[Product])
def shop_products(
    search: str = "",
    category: List[str] = Query(default=[]),
    min_price: float = DEFAULT_PRICE_RANGE[0],
    max_price: float = DEFAULT_PRICE_RANGE[1],
    discount_only: bool = False,
    sort: str = "name",
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    승인된 상품을 조건에 맞게 필터링/정렬하여 반환합니다.

    Example:
        Request:
        ```
        GET /api/shop/products?search=wireless&category=Electronics&sort=price-low
        ```
    """
    query = CatalogQuery(
        search_text=search,
        categories=frozenset(category),
        price_range=(min_price, max_price),
        discount_only=discount_only,
        sort_key=sort,
    )
    return filter_and_sort(approved_only(_load_products(repository)), query)


@router.get("/shop/categories", response_model=List[str])
def shop_categories(repository: ProductRepository = Depends(get_product_repository)):
    """승인된 상품의 카테고리 목록 (필터 패싯용)."""
    return list_categories(approved_only(_load_products(repository)))


@router.get("/shop/products/{product_id}/related", response_model=List[Product])
def shop_related_products(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    같은 카테고리의 승인된 상품을 최대 4개 반환합니다.

    Raises:
        HTTPException 400: ID 형식이 잘못된 경우
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    try:
        product = repository.get_product(product_id)

    except InvalidProductIdException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    except StoreUnavailableException as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    return related_products(approved_only(_load_products(repository)), product)


@router.get("/admin/stats", response_model=CatalogStats)
def admin_stats(
    repository: ProductRepository = Depends(get_product_repository),
    admin: str = Depends(get_current_admin),
):
    """
    관리자 대시보드 통계 (인증 필요).

    Example:
        Response (200):
        ```json
        {"total": 10, "approved": 9, "hidden": 1, "lowStock": 2}
        ```
    """
    return compute_stats(_load_products(repository))


@router.get("/admin/products", response_model=List[Product])
def admin_products(
    sort: str = "name",
    repository: ProductRepository = Depends(get_product_repository),
    admin: str = Depends(get_current_admin),
):
    """
    승인 여부와 무관한 전체 상품 목록 (인증 필요).

    sort: name | price | category | stock (그 외에는 최신순 유지)
    """
    return admin_sort(_load_products(repository), sort)
