"""Checkout price computation."""

import math
from dataclasses import dataclass
from typing import Optional

MIN_TAX_PCT = 0
MAX_TAX_PCT = 30


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: float
    discount: float
    tax_pct: float
    tax: float
    total: float
    coupon_code: Optional[str] = None
    
    def to_dict(self):
        return {
            'subtotal': round(self.subtotal, 2),
            'discount': round(self.discount, 2),
            'taxPct': self.tax_pct,
            'tax': round(self.tax, 2),
            'total': round(self.total, 2),
            'couponCode': self.coupon_code,
        }


def subtotal(items):
    """Sum of unit price times quantity over cart items."""
    return sum(item.product.price * item.qty for item in items)


def clamp_tax_pct(value, maximum=MAX_TAX_PCT):
    """Coerce tax input to a number within [0, maximum]; junk becomes 0."""
    try:
        pct = float(value)
    except (TypeError, ValueError):
        pct = 0.0
    if math.isnan(pct):
        pct = 0.0
    return max(MIN_TAX_PCT, min(maximum, pct))


def tax(amount_after_discount, tax_pct):
    return max(0, amount_after_discount) * (tax_pct / 100)


def total(subtotal, discount, tax_pct):
    after_discount = subtotal - discount
    return max(0, after_discount) + max(0, after_discount * (tax_pct / 100))


def price_breakdown(items, coupon=None, tax_pct=0):
    """Full breakdown for a cart, an optional applied coupon and a tax rate.
    
    The coupon discount is clamped again to the current subtotal since the
    cart may have shrunk after the coupon was applied.
    """
    amount = subtotal(items)
    discount = 0.0
    if coupon is not None:
        discount = round(max(0.0, min(coupon.discount, amount)), 2)
    return PriceBreakdown(
        subtotal=amount,
        discount=discount,
        tax_pct=tax_pct,
        tax=tax(amount - discount, tax_pct),
        total=total(amount, discount, tax_pct),
        coupon_code=coupon.code if coupon is not None else None
    )


def format_currency(amount):
    """Render an amount as dollars with two decimals."""
    return f'${(amount or 0):.2f}'
