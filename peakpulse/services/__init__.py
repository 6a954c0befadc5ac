"""비즈니스 로직 서비스."""

from peakpulse.services.auth_service import AuthService
from peakpulse.services.cart_service import CartService
from peakpulse.services.category_service import CategoryService
from peakpulse.services.inventory_service import InventoryService
from peakpulse.services.order_service import OrderService
from peakpulse.services.product_service import ProductService

__all__ = [
    "AuthService",
    "CartService",
    "CategoryService",
    "InventoryService",
    "OrderService",
    "ProductService",
]
