"""JSON API endpoints for AJAX operations."""

from flask import Blueprint, jsonify, request, current_app
from shophub.extensions import product_service
from shophub.models import Product, apply_coupon
from shophub.services import ServiceError
from shophub.utils.pricing import clamp_tax_pct, price_breakdown, subtotal
from shophub.utils.session import get_cart, get_applied_coupon, get_tax_pct

api_bp = Blueprint('api', __name__)


def _cart_payload(cart):
    items = cart.display_list()
    return {
        'items': [item.to_dict() for item in items],
        'cart_count': sum(item.qty for item in items),
        'cart_total': round(subtotal(items), 2),
    }


@api_bp.route('/cart')
def get_cart_contents():
    """Current cart lines and totals."""
    return jsonify(_cart_payload(get_cart()))


@api_bp.route('/cart/add', methods=['POST'])
def add_to_cart():
    """Add product to cart via AJAX."""
    data = request.get_json(silent=True) or {}
    product_id = data.get('product_id')
    if not isinstance(product_id, int) or isinstance(product_id, bool):
        return jsonify({'success': False, 'message': 'product_id is required'}), 400
    
    product = Product.from_card(product_id, data)
    if product is None:
        try:
            product = product_service.get_product(product_id)
        except ServiceError:
            return jsonify({'success': False, 'message': 'Product catalogue unavailable'}), 502
    
    if product is None:
        return jsonify({'success': False, 'message': 'Product not available'}), 404
    
    cart = get_cart()
    cart.add_to_cart(product)
    
    payload = _cart_payload(cart)
    payload.update(success=True, message=f'{product.name} added to cart!')
    return jsonify(payload)


@api_bp.route('/cart/<int:product_id>/increment', methods=['POST'])
def increment(product_id):
    cart = get_cart()
    cart.increment_qty(product_id)
    return jsonify(dict(_cart_payload(cart), success=True))


@api_bp.route('/cart/<int:product_id>/decrement', methods=['POST'])
def decrement(product_id):
    cart = get_cart()
    cart.decrement_qty(product_id)
    return jsonify(dict(_cart_payload(cart), success=True))


@api_bp.route('/cart/count')
def cart_count():
    """Get cart item count."""
    return jsonify({'count': get_cart().count()})


@api_bp.route('/coupon/validate', methods=['POST'])
def validate_coupon():
    """Quote a coupon and tax rate against the current cart.
    
    Nothing is stored; the checkout page applies coupons itself.
    """
    data = request.get_json(silent=True) or {}
    items = get_cart().display_list()
    current = get_applied_coupon()
    
    if data.get('tax_pct') is not None:
        tax_pct = clamp_tax_pct(data['tax_pct'], current_app.config['MAX_TAX_PCT'])
    else:
        tax_pct = get_tax_pct()
    
    code = str(data.get('code') or '')
    coupon = apply_coupon(code, subtotal(items), current=current)
    valid = coupon is not None
    breakdown = price_breakdown(items, coupon, tax_pct)
    
    if valid:
        message = f'Coupon applied! You save ${breakdown.discount:.2f}'
    else:
        message = 'Invalid coupon code'
    
    return jsonify({
        'valid': valid,
        'message': message,
        'coupon': coupon.code if valid else None,
        'discount': breakdown.discount,
        'breakdown': breakdown.to_dict(),
    })
