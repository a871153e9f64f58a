"""Domain models package."""

from .product import Product
from .cart import CartItem, CartStore, CART_SESSION_KEY
from .coupon import Coupon, AppliedCoupon, COUPONS, apply_coupon
from .customer import Customer, CUSTOMER_FIELDS
from .order import Order, OrderLine

__all__ = [
    'Product',
    'CartItem',
    'CartStore',
    'CART_SESSION_KEY',
    'Coupon',
    'AppliedCoupon',
    'COUPONS',
    'apply_coupon',
    'Customer',
    'CUSTOMER_FIELDS',
    'Order',
    'OrderLine',
]
