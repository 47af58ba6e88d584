"""
장바구니 서비스 테스트
"""

import pytest

from storefront.schemas.cart import CartLineItem
from storefront.schemas.product import Product
from storefront.services.cart_service import CartService


@pytest.fixture
def headphones():
    return Product(
        id="6650f0c2a1b2c3d4e5f60718",
        name="Premium Wireless Headphones",
        price=299.99,
        description="High-quality wireless headphones",
        category="Electronics",
        discount=20,
        stock=15,
    )


@pytest.fixture
def shirt():
    return CartLineItem(product_id="shirt", name="Organic Cotton T-Shirt", price=29.99)


class TestAddItem:
    """장바구니 담기 테스트 클래스"""

    def test_add_same_product_twice(self, headphones):
        """같은 상품을 두 번 담으면 항목 1개, 수량 2"""
        cart = CartService()

        cart.add_item(headphones)
        cart.add_item(headphones)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.total_items() == 2
        assert cart.total_price() == pytest.approx(2 * 239.992)

    def test_add_ignores_snapshot_quantity(self, shirt):
        cart = CartService()

        item = cart.add_item(shirt.model_copy(update={"quantity": 5}))

        assert item.quantity == 1

    def test_existing_snapshot_price_kept(self, headphones):
        """이미 담긴 항목의 가격 스냅샷은 다시 담아도 바뀌지 않음"""
        cart = CartService()
        cart.add_item(headphones)

        repriced = headphones.model_copy(update={"price": 100.0, "discount": 0})
        cart.add_item(repriced)

        assert cart.items[0].price == 299.99
        assert cart.items[0].quantity == 2


class TestQuantity:
    """수량 변경 테스트 클래스"""

    def test_update_quantity(self, headphones, shirt):
        cart = CartService()
        cart.add_item(headphones)
        cart.add_item(shirt)

        cart.update_quantity("shirt", 3)

        assert cart.total_items() == 4
        assert cart.total_price() == pytest.approx(239.992 + 3 * 29.99)

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_removes(self, shirt, quantity):
        cart = CartService()
        cart.add_item(shirt)

        cart.update_quantity("shirt", quantity)

        assert cart.items == []
        assert cart.total_items() == 0

    def test_update_unknown_item_is_noop(self, shirt):
        cart = CartService()
        cart.add_item(shirt)

        cart.update_quantity("missing", 7)

        assert cart.total_items() == 1


class TestRemoveAndClear:
    """항목 삭제 테스트 클래스"""

    def test_remove_item(self, headphones, shirt):
        cart = CartService()
        cart.add_item(headphones)
        cart.add_item(shirt)

        cart.remove_item(headphones.id)
        cart.remove_item("missing")

        assert [item.product_id for item in cart.items] == ["shirt"]

    def test_clear(self, headphones):
        cart = CartService()
        cart.add_item(headphones)

        cart.clear()

        assert cart.items == []
        assert cart.total_price() == 0

    def test_toggle_open(self):
        cart = CartService()

        assert cart.toggle_open() is True
        assert cart.toggle_open() is False
