"""Coupon codes and coupon application."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coupon:
    """Discount coupon."""
    code: str
    discount_type: str  # percentage, fixed
    discount_value: float
    description: str = ''
    
    def calculate_discount(self, order_amount):
        """Calculate discount amount."""
        if self.discount_type == 'percentage':
            return (order_amount * self.discount_value) / 100
        else:  # fixed
            return self.discount_value
    
    def __repr__(self):
        return f'<Coupon {self.code}>'


COUPONS = {
    coupon.code: coupon for coupon in (
        Coupon('SAVE10', 'percentage', 10, '10% off your order'),
        Coupon('SAVE20', 'percentage', 20, '20% off your order'),
        Coupon('FLAT50', 'fixed', 50, '$50 off your order'),
    )
}


@dataclass(frozen=True)
class AppliedCoupon:
    """Coupon currently applied at checkout."""
    code: str
    discount: float
    
    @classmethod
    def from_dict(cls, data):
        if not data:
            return None
        return cls(code=data['code'], discount=float(data['discount']))
    
    def to_dict(self):
        return {'code': self.code, 'discount': self.discount}


def _parse_amount(raw):
    try:
        amount = float(raw)
    except ValueError:
        return None
    if math.isfinite(amount) and amount > 0:
        return amount
    return None


def _amount_label(amount):
    if amount.is_integer():
        return str(int(amount))
    return repr(amount)


def apply_coupon(raw_input, subtotal, current=None):
    """Resolve coupon input against the current subtotal.
    
    Blank input leaves ``current`` untouched. A positive number is taken
    as a flat discount labelled ``FLAT-<amount>``; anything else is looked
    up in ``COUPONS`` (case-insensitive). Unknown codes return ``None``,
    which clears whatever coupon was applied.
    
    The discount never exceeds the subtotal and is rounded to cents.
    """
    raw = (raw_input or '').strip()
    if not raw:
        return current
    
    amount = _parse_amount(raw)
    if amount is not None:
        code = f'FLAT-{_amount_label(amount)}'
        discount = amount
    else:
        coupon = COUPONS.get(raw.upper())
        if coupon is None:
            return None
        code = coupon.code
        discount = coupon.calculate_discount(subtotal)
    
    discount = max(0.0, min(discount, subtotal))
    return AppliedCoupon(code=code, discount=round(discount, 2))
