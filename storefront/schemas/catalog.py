"""
카탈로그 조회 관련 Pydantic 스키마

스토어 필터/정렬 조건, 관리자 통계, 저장소 연결 상태를 정의합니다.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# 스토어 가격 슬라이더의 기본 범위. 이 범위이면 가격 필터를 적용하지 않음
DEFAULT_PRICE_RANGE: tuple[float, float] = (0, 1000)

SORT_KEYS = ("name", "price-low", "price-high", "rating", "newest")
ADMIN_SORT_KEYS = ("name", "price", "category", "stock")

LOW_STOCK_THRESHOLD = 10


class CatalogQuery(BaseModel):
    """
    스토어 상품 필터/정렬 조건

    Example:
        {
            "search_text": "wireless",
            "categories": ["Electronics"],
            "price_range": [0, 300],
            "discount_only": true,
            "sort_key": "price-low"
        }
    """

    model_config = ConfigDict(frozen=True)

    search_text: str = Field("", description="이름/설명 부분 일치 검색어 (대소문자 무시)")
    categories: frozenset[str] = Field(frozenset(), description="비어 있으면 전체")
    price_range: tuple[float, float] = Field(DEFAULT_PRICE_RANGE, description="할인가 기준 [min, max]")
    discount_only: bool = Field(False, description="할인 상품만 표시")
    sort_key: str = Field("name", description="name | price-low | price-high | rating | newest")

    @property
    def has_default_price_range(self) -> bool:
        return tuple(self.price_range) == DEFAULT_PRICE_RANGE


class CatalogStats(BaseModel):
    """
    관리자 대시보드 통계

    Example:
        {"total": 10, "approved": 9, "hidden": 1, "lowStock": 3}
    """

    model_config = ConfigDict(populate_by_name=True)

    total: int
    approved: int
    hidden: int
    low_stock: int = Field(..., alias="lowStock", description=f"재고 {LOW_STOCK_THRESHOLD}개 미만")


class DbStatus(BaseModel):
    """
    저장소 연결 상태

    Example:
        {"connected": true, "error": null}
    """

    connected: bool = False
    error: Optional[str] = None
