"""
상품 관련 Pydantic 스키마

저장된 상품(Product)과 관리자 폼 입력(ProductDraft)을 정의합니다.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from storefront.core.exceptions import ProductValidationException
from storefront.core.pricing import discounted_price

PLACEHOLDER_IMAGE = "/placeholder.svg?height=400&width=400"

# 생성 시 검사 순서가 고정된 필수 필드
REQUIRED_FIELDS = ("name", "price", "description", "category", "stock")

# 호출자가 생략한 경우 적용되는 기본값
PRODUCT_DEFAULTS: dict[str, Any] = {
    "rating": 4.0,
    "reviews": 0,
    "tags": [],
    "approved": True,
    "discount": 0,
    "image": PLACEHOLDER_IMAGE,
}


class Product(BaseModel):
    """
    상품 응답 스키마

    Example:
        {
            "id": "6650f0c2a1b2c3d4e5f60718",
            "name": "Premium Wireless Headphones",
            "price": 299.99,
            "image": "/placeholder.svg?height=400&width=400",
            "description": "High-quality wireless headphones",
            "category": "Electronics",
            "discount": 20,
            "stock": 15,
            "rating": 4.8,
            "reviews": 124,
            "tags": ["Popular", "Hot Deal"],
            "approved": true,
            "createdAt": "2025-01-22T10:30:00Z",
            "updatedAt": "2025-01-22T10:30:00Z"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="상품 ID (저장소가 할당)")
    name: str = Field(..., description="상품명")
    price: float = Field(..., description="할인 전 가격")
    image: str = Field(PLACEHOLDER_IMAGE, description="이미지 URL 또는 경로")
    description: str = Field(..., description="상품 설명")
    category: str = Field(..., description="카테고리")
    discount: Optional[int] = Field(0, description="할인율 (0-100)")
    stock: int = Field(..., description="재고 수량")
    rating: float = Field(4.0, description="평점 (표시용)")
    reviews: int = Field(0, description="리뷰 수 (표시용)")
    tags: list[str] = Field(default_factory=list, description="배지 태그")
    approved: bool = Field(True, description="스토어 노출 여부")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @property
    def discounted_price(self) -> float:
        return discounted_price(self.price, self.discount)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @classmethod
    def from_document(cls, document: dict) -> "Product":
        """저장소 문서(_id 포함)를 공개 id 필드를 가진 Product로 변환"""
        data = {k: v for k, v in document.items() if k != "_id"}
        data["id"] = str(document["_id"])
        return cls.model_validate(data)


class ProductDraft(BaseModel):
    """
    상품 작성/수정 폼 입력 스키마

    모든 필드가 선택 사항이며, 생성 시 to_product_fields()에서 한 번에 검증합니다.
    수정 요청에서는 전달된 필드만 부분 업데이트에 사용됩니다.

    Example:
        {
            "name": "Yoga Mat Premium",
            "price": 79.99,
            "description": "Non-slip premium yoga mat",
            "category": "Sports",
            "stock": 14,
            "tags": "Premium, Non-slip"
        }
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, max_length=200, examples=["Yoga Mat Premium"])
    price: Optional[float] = Field(None, ge=0, examples=[79.99])
    image: Optional[str] = Field(None, examples=[PLACEHOLDER_IMAGE])
    description: Optional[str] = Field(None, examples=["Non-slip premium yoga mat"])
    category: Optional[str] = Field(None, examples=["Sports"])
    discount: Optional[int] = Field(None, ge=0, le=100, examples=[10])
    stock: Optional[int] = Field(None, ge=0, examples=[14])
    rating: Optional[float] = Field(None, ge=0, le=5, examples=[4.7])
    reviews: Optional[int] = Field(None, ge=0, examples=[186])
    tags: Optional[list[str]] = Field(None, examples=[["Premium", "Non-slip"]])
    approved: Optional[bool] = Field(None, examples=[True])

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, value: Any) -> Any:
        """폼에서 입력한 "a, b, c" 형태의 문자열을 태그 목록으로 변환"""
        if isinstance(value, str):
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        return value

    @classmethod
    def parse(cls, fields: "ProductDraft | dict") -> "ProductDraft":
        """
        딕셔너리 또는 ProductDraft를 검증된 ProductDraft로 변환합니다.

        Raises:
            ProductValidationException: 필드 타입/범위가 잘못된 경우 (첫 번째 오류 필드)
        """
        if isinstance(fields, ProductDraft):
            return fields
        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else "unknown"
            raise ProductValidationException(field, f"Invalid field {field}: {error['msg']}") from e

    def to_product_fields(self) -> dict:
        """
        생성용 필드 딕셔너리를 반환합니다.

        필수 필드를 고정된 순서로 확인하고, 생략된 선택 필드에 기본값을 적용합니다.
        0과 False는 값이 있는 것으로 취급합니다.

        Raises:
            ProductValidationException: 첫 번째로 누락된 필수 필드
        """
        for field in REQUIRED_FIELDS:
            value = getattr(self, field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ProductValidationException(field)

        fields = self.model_dump(exclude_none=True)
        for key, default in PRODUCT_DEFAULTS.items():
            if key not in fields:
                fields[key] = list(default) if isinstance(default, list) else default
        return fields

    def to_patch(self) -> dict:
        """
        부분 업데이트용 필드 딕셔너리 (전달된 필드만)

        Raises:
            ProductValidationException: 필수 필드를 빈 문자열로 바꾸려는 경우
        """
        patch = self.model_dump(exclude_unset=True, exclude_none=True)
        for field in REQUIRED_FIELDS:
            value = patch.get(field)
            if isinstance(value, str) and not value.strip():
                raise ProductValidationException(field)
        return patch

    def preview(self) -> Product:
        """저장 전 미리보기용 Product (검증 없이 표시용 기본값을 채움)"""
        return Product(
            id="preview",
            name=self.name or "Product Name",
            price=self.price or 0,
            image=self.image or PLACEHOLDER_IMAGE,
            description=self.description or "Product description will appear here...",
            category=self.category or "Category",
            discount=self.discount or 0,
            stock=self.stock or 0,
            rating=self.rating or 4.0,
            reviews=self.reviews or 0,
            tags=self.tags or [],
            approved=True if self.approved is None else self.approved,
        )


class DeleteProductResponse(BaseModel):
    """상품 삭제 응답 스키마"""

    id: str
    deleted: bool = True


class InitializeResponse(BaseModel):
    """
    샘플 데이터 초기화 응답 스키마

    Example:
        {
            "success": true,
            "message": "Successfully initialized database with 10 products",
            "productsCount": 10,
            "action": "initialized",
            "insertedIds": ["..."]
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    products_count: int = Field(..., alias="productsCount")
    action: str = Field(..., description="initialized 또는 skipped")
    inserted_ids: Optional[list[str]] = Field(None, alias="insertedIds")
