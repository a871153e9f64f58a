import pytest

from shophub.models import AppliedCoupon, CartItem, Product, apply_coupon
from shophub.utils.pricing import (clamp_tax_pct, format_currency, price_breakdown,
                                   subtotal, tax, total)


def item(price, qty, product_id=1):
    return CartItem(product=Product(id=product_id, name=f'P{product_id}', price=price), qty=qty)


@pytest.mark.parametrize('code, amount, expected', [
    ('SAVE10', 100.00, 10.00),
    ('SAVE20', 40.00, 8.00),
    ('FLAT50', 30.00, 30.00),
    ('FLAT50', 120.00, 50.00),
])
def test_table_coupons(code, amount, expected):
    coupon = apply_coupon(code, amount)
    assert coupon.code == code
    assert coupon.discount == expected


def test_codes_are_case_insensitive_and_trimmed():
    assert apply_coupon('  save10 ', 80.0) == AppliedCoupon('SAVE10', 8.0)


def test_numeric_input_is_a_flat_discount():
    assert apply_coupon('25', 100.0) == AppliedCoupon('FLAT-25', 25.0)
    assert apply_coupon('12.5', 100.0) == AppliedCoupon('FLAT-12.5', 12.5)


def test_numeric_discount_is_clamped_to_subtotal():
    assert apply_coupon('500', 42.0) == AppliedCoupon('FLAT-500', 42.0)


def test_discount_is_rounded_to_cents():
    assert apply_coupon('SAVE10', 33.33).discount == 3.33


def test_unknown_code_clears_applied_coupon():
    current = AppliedCoupon('SAVE10', 10.0)
    assert apply_coupon('BOGUS', 100.0, current=current) is None


@pytest.mark.parametrize('raw', ['-5', '0', 'nan', 'inf'])
def test_non_positive_or_non_finite_numbers_are_not_discounts(raw):
    assert apply_coupon(raw, 100.0) is None


def test_blank_input_keeps_current_coupon():
    current = AppliedCoupon('SAVE20', 20.0)
    assert apply_coupon('   ', 100.0, current=current) is current
    assert apply_coupon('', 100.0) is None


def test_subtotal_sums_price_times_quantity():
    assert subtotal([item(25.0, 2), item(7.5, 3, product_id=2)]) == pytest.approx(72.5)
    assert subtotal([]) == 0


def test_tax_and_total():
    assert tax(100 - 10, 8) == pytest.approx(7.20)
    assert total(100, 10, 8) == pytest.approx(97.20)
    assert format_currency(total(100, 10, 8)) == '$97.20'


def test_tax_never_negative():
    assert tax(-5, 10) == 0
    assert total(10, 10, 8) == 0


@pytest.mark.parametrize('raw, expected', [
    (45, 30),
    ('45', 30),
    (-3, 0),
    ('abc', 0),
    ('', 0),
    (None, 0),
    ('12.5', 12.5),
    (8, 8),
    ('nan', 0),
    (float('nan'), 0),
])
def test_clamp_tax_pct(raw, expected):
    assert clamp_tax_pct(raw) == expected


def test_breakdown_reclamps_stale_discount():
    # coupon applied when the cart was larger
    coupon = AppliedCoupon('FLAT50', 50.0)
    breakdown = price_breakdown([item(30.0, 1)], coupon, 8)
    assert breakdown.discount == 30.0
    assert breakdown.tax == 0
    assert breakdown.total == 0
    assert breakdown.coupon_code == 'FLAT50'


def test_breakdown_without_coupon():
    breakdown = price_breakdown([item(50.0, 2)], None, 8)
    assert breakdown.discount == 0
    assert breakdown.total == pytest.approx(108.0)
    assert breakdown.to_dict()['total'] == 108.0
    assert breakdown.coupon_code is None


def test_format_currency():
    assert format_currency(7.2) == '$7.20'
    assert format_currency(None) == '$0.00'
