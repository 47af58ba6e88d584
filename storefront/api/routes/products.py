"""
상품 관리 API 엔드포인트

상품 목록/상세 조회, 생성, 수정, 삭제, 샘플 데이터 초기화 기능을 제공합니다.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from storefront.api.deps import get_product_repository
from storefront.core.exceptions import (
    InvalidProductIdException,
    ProductNotFoundException,
    ProductValidationException,
    StoreUnavailableException,
)
from storefront.schemas.product import (
    DeleteProductResponse,
    InitializeResponse,
    Product,
)
from storefront.services.product_repository import ProductRepository


router = APIRouter()


def _unavailable(e: StoreUnavailableException) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


@router.get("/products", response_model=List[Product])
def list_products(repository: ProductRepository = Depends(get_product_repository)):
    """
    모든 상품을 최신 생성순으로 조회합니다 (관리자 화면용, 승인 여부 무관).

    Raises:
        HTTPException 503: 저장소를 사용할 수 없는 경우

    Example:
        Response (200):
        ```json
        [
            {
                "id": "6650f0c2a1b2c3d4e5f60718",
                "name": "Premium Wireless Headphones",
                "price": 299.99,
                "discount": 20,
                "stock": 15,
                "approved": true,
                "createdAt": "2025-01-22T10:30:00Z",
                "updatedAt": "2025-01-22T10:30:00Z"
            }
        ]
        ```
    """
    try:
        return repository.list_products()

    except StoreUnavailableException as e:
        raise _unavailable(e)


@router.post("/products", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    fields: dict = Body(...),
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    새 상품을 생성합니다.

    Args:
        fields: 상품 필드 (name, price, description, category, stock 필수)

    Raises:
        HTTPException 400: 필수 필드 누락 또는 필드 값이 잘못된 경우
        HTTPException 503: 저장소를 사용할 수 없는 경우

    Example:
        Request:
        ```json
        {
            "name": "Yoga Mat Premium",
            "price": 79.99,
            "description": "Non-slip premium yoga mat",
            "category": "Sports",
            "stock": 14
        }
        ```

        Response (400):
        ```json
        {"error": "Missing required field: stock"}
        ```
    """
    try:
        return repository.create_product(fields)

    except ProductValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    except StoreUnavailableException as e:
        raise _unavailable(e)


@router.post("/products/initialize", response_model=InitializeResponse)
def initialize_products(repository: ProductRepository = Depends(get_product_repository)):
    """
    저장소가 비어 있으면 샘플 상품 10종을 저장합니다.

    Example:
        Response (200):
        ```json
        {
            "success": true,
            "message": "Database already initialized with 10 products",
            "productsCount": 10,
            "action": "skipped",
            "insertedIds": null
        }
        ```
    """
    try:
        return repository.seed_if_empty()

    except StoreUnavailableException as e:
        raise _unavailable(e)


@router.get("/products/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    특정 상품의 상세 정보를 조회합니다.

    Raises:
        HTTPException 400: ID 형식이 잘못된 경우
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    try:
        return repository.get_product(product_id)

    except InvalidProductIdException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    except StoreUnavailableException as e:
        raise _unavailable(e)


@router.put("/products/{product_id}", response_model=Product)
def update_product(
    product_id: str,
    patch: dict = Body(...),
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    전달된 필드만 수정하고 병합된 전체 상품을 반환합니다.

    Raises:
        HTTPException 400: ID 형식이 잘못되었거나 필드 값이 잘못된 경우
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    try:
        return repository.update_product(product_id, patch)

    except (InvalidProductIdException, ProductValidationException) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    except StoreUnavailableException as e:
        raise _unavailable(e)


@router.delete("/products/{product_id}", response_model=DeleteProductResponse)
def delete_product(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    상품을 삭제합니다.

    Example:
        Response (200):
        ```json
        {"id": "6650f0c2a1b2c3d4e5f60718", "deleted": true}
        ```
    """
    try:
        repository.delete_product(product_id)
        return DeleteProductResponse(id=product_id)

    except InvalidProductIdException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    except StoreUnavailableException as e:
        raise _unavailable(e)
