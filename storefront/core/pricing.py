"""할인 가격 계산."""

from typing import Optional


def discounted_price(price: float, discount: Optional[float]) -> float:
    """
    할인율이 적용된 가격을 계산합니다.

    목록, 필터, 정렬, 장바구니, 통계 모두 이 함수 하나를 사용합니다.

    Args:
        price: 할인 전 가격
        discount: 할인율 (0-100, None 또는 0이면 할인 없음)

    Returns:
        discount > 0이면 price * (1 - discount / 100), 아니면 price

    Example:
        >>> round(discounted_price(299.99, 20), 3)
        239.992
        >>> discounted_price(29.99, None)
        29.99
    """
    if discount:
        return price * (1 - discount / 100)
    return price
