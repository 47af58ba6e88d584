"""장바구니 서비스."""

from typing import Optional

from storefront.schemas.cart import CartLineItem
from storefront.schemas.product import Product


class CartService:
    """
    세션 단위 장바구니.

    저장소와 통신하지 않는 로컬 상태이며, 항목은 담을 때의 가격/할인율 스냅샷을 유지합니다.
    """

    def __init__(self):
        self.items: list[CartLineItem] = []
        self.is_open = False

    def _find(self, product_id: str) -> Optional[CartLineItem]:
        return next((item for item in self.items if item.product_id == product_id), None)

    def add_item(self, snapshot: CartLineItem | Product) -> CartLineItem:
        """
        상품을 장바구니에 담습니다.

        같은 상품이 이미 있으면 수량만 1 증가시키고 기존 가격 스냅샷은 유지합니다.

        Args:
            snapshot: 장바구니 항목 스냅샷 또는 Product

        Returns:
            추가되거나 수량이 증가한 항목
        """
        if isinstance(snapshot, Product):
            snapshot = CartLineItem.snapshot(snapshot)

        existing = self._find(snapshot.product_id)
        if existing is not None:
            existing.quantity += 1
            return existing

        item = snapshot.model_copy(update={"quantity": 1})
        self.items.append(item)
        return item

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """수량을 지정한 값으로 설정합니다. 0 이하이면 항목을 제거합니다."""
        if quantity <= 0:
            self.remove_item(product_id)
            return

        item = self._find(product_id)
        if item is not None:
            item.quantity = quantity

    def remove_item(self, product_id: str) -> None:
        """항목을 제거합니다. 없으면 아무것도 하지 않습니다."""
        self.items = [item for item in self.items if item.product_id != product_id]

    def clear(self) -> None:
        self.items = []

    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    def total_price(self) -> float:
        """할인가 x 수량의 합계"""
        return sum(item.line_total for item in self.items)

    def toggle_open(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open
