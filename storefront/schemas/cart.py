"""
장바구니 관련 Pydantic 스키마
"""

from typing import Optional

from pydantic import BaseModel, Field

from storefront.core.pricing import discounted_price
from storefront.schemas.product import PLACEHOLDER_IMAGE, Product


class CartLineItem(BaseModel):
    """
    장바구니 항목

    담을 때의 가격/할인율 스냅샷을 보관하며, 이후 상품이 수정되어도 갱신되지 않습니다.
    """

    product_id: str
    name: str
    price: float
    image: str = PLACEHOLDER_IMAGE
    discount: Optional[int] = 0
    quantity: int = Field(1, ge=1)

    @property
    def unit_price(self) -> float:
        return discounted_price(self.price, self.discount)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity

    @classmethod
    def snapshot(cls, product: Product) -> "CartLineItem":
        """상품에서 장바구니용 스냅샷 생성 (수량 1)"""
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            image=product.image,
            discount=product.discount,
        )
