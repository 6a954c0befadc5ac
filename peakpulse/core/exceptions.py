"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
라우터에서 HTTPException으로 변환됩니다.
"""


class UserAlreadyExistsException(Exception):
    """
    이미 가입된 이메일로 회원 가입을 시도할 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, email: str):
        self.email = email
        self.message = f"User with email '{email}' already exists"
        super().__init__(self.message)


class InvalidCredentialsException(Exception):
    """
    인증 실패 시 발생하는 예외 (잘못된 비밀번호, 유효하지 않은 토큰 등)

    HTTP Status Code: 401 Unauthorized
    """

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(self.message)


class PermissionDeniedException(Exception):
    """
    필요한 역할이 없는 사용자가 접근할 때 발생하는 예외

    HTTP Status Code: 403 Forbidden
    """

    def __init__(self, message: str = "You do not have permission to perform this action"):
        self.message = message
        super().__init__(self.message)


class NotFoundException(Exception):
    """
    리소스를 찾을 수 없을 때 발생하는 예외의 기본 클래스

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, resource: str, identifier):
        self.resource = resource
        self.identifier = identifier
        self.message = f"{resource} '{identifier}' not found"
        super().__init__(self.message)


class UserNotFoundException(NotFoundException):
    def __init__(self, identifier):
        super().__init__("User", identifier)


class ProductNotFoundException(NotFoundException):
    def __init__(self, identifier):
        super().__init__("Product", identifier)


class VariantNotFoundException(NotFoundException):
    def __init__(self, identifier):
        super().__init__("Product variant", identifier)


class CategoryNotFoundException(NotFoundException):
    def __init__(self, identifier):
        super().__init__("Category", identifier)


class OrderNotFoundException(NotFoundException):
    def __init__(self, identifier):
        super().__init__("Order", identifier)


class PostNotFoundException(NotFoundException):
    def __init__(self, identifier):
        super().__init__("Post", identifier)


class SlugAlreadyExistsException(Exception):
    """
    slug 유니크 제약 위반 시 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, resource: str, slug: str):
        self.resource = resource
        self.slug = slug
        self.message = f"{resource} with slug '{slug}' already exists"
        super().__init__(self.message)


class GatewayKeyAlreadyExistsException(Exception):
    """
    중복된 gateway_key로 결제 게이트웨이 설정을 생성할 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, gateway_key: str):
        self.gateway_key = gateway_key
        self.message = f"Payment gateway '{gateway_key}' already exists"
        super().__init__(self.message)


class InsufficientStockException(Exception):
    """
    재고 부족 시 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, product_id: int, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        self.message = (
            f"Insufficient stock for product {product_id}: "
            f"requested {requested}, available {available}"
        )
        super().__init__(self.message)


class LockAcquisitionException(Exception):
    """
    락 획득 실패 시 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, resource: str, message: str = "Failed to acquire lock"):
        self.resource = resource
        self.message = f"{message} for resource: {resource}"
        super().__init__(self.message)


class EmptyCartException(Exception):
    """
    빈 장바구니로 주문을 시도할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self):
        self.message = "Cart is empty."
        super().__init__(self.message)


class PaymentValidationException(Exception):
    """
    결제 수단 또는 카드 정보 검증 실패 시 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidStatusException(Exception):
    """
    허용되지 않은 상태 값으로 변경하려 할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, status: str, allowed):
        self.status = status
        self.allowed = list(allowed)
        self.message = f"Invalid status '{status}'. Allowed: {', '.join(self.allowed)}"
        super().__init__(self.message)


class NoFieldsToUpdateException(Exception):
    """
    수정할 필드가 하나도 없을 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self):
        self.message = "No valid fields to update provided."
        super().__init__(self.message)


class ValidationException(Exception):
    """
    비즈니스 규칙 검증 실패 (스키마 검증으로 잡을 수 없는 경우)

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
