"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
"""


class StoreUnavailableException(Exception):
    """
    문서 저장소가 설정되지 않았거나 연결할 수 없을 때 발생하는 예외

    HTTP Status Code: 503 Service Unavailable
    """

    def __init__(self, message: str = "Database is not configured or unreachable"):
        self.message = message
        super().__init__(self.message)


class DisconnectedException(StoreUnavailableException):
    """
    카탈로그 서비스가 연결 끊김 상태에서 변경 작업을 시도할 때 발생하는 예외

    저장소 호출 전에 즉시 발생합니다.
    """

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Database is not connected. Cannot {action}.")


class ProductValidationException(Exception):
    """
    상품 생성 시 필수 필드가 누락되었을 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        self.message = message or f"Missing required field: {field}"
        super().__init__(self.message)


class ProductNotFoundException(Exception):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, product_id: str):
        self.product_id = product_id
        self.message = "Product not found"
        super().__init__(self.message)


class InvalidProductIdException(Exception):
    """
    상품 ID 형식이 저장소의 식별자 규칙에 맞지 않을 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, product_id: str):
        self.product_id = product_id
        self.message = "Invalid product ID format"
        super().__init__(self.message)


class InvalidCredentialsException(Exception):
    """
    인증 실패 시 발생하는 예외 (잘못된 비밀번호, 유효하지 않은 쿠키 등)

    HTTP Status Code: 401 Unauthorized
    """

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(self.message)
