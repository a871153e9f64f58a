"""Cart routes."""

from flask import Blueprint, render_template, redirect, url_for, flash, request, jsonify
from shophub.extensions import product_service
from shophub.models import Product
from shophub.services import ServiceError
from shophub.utils.pricing import subtotal
from shophub.utils.session import get_cart

cart_bp = Blueprint('cart', __name__)


def _wants_json():
    return request.headers.get('X-Requested-With') == 'XMLHttpRequest'


def _back():
    return redirect(request.referrer or url_for('cart.view_cart'))


@cart_bp.route('/')
def view_cart():
    """View shopping cart."""
    cart_items = get_cart().display_list()
    return render_template('cart/view.html',
                         cart_items=cart_items,
                         cart_total=subtotal(cart_items))


@cart_bp.route('/add', methods=['GET', 'POST'])
def add_to_cart():
    """Add product to cart."""
    # If accessed via GET, redirect to cart
    if request.method == 'GET':
        return redirect(url_for('cart.view_cart'))
    
    product_id = request.form.get('product_id', type=int)
    if product_id is None:
        flash('This product is not available.', 'danger')
        return redirect(request.referrer or url_for('main.index'))
    
    product = Product.from_card(product_id, request.form)
    if product is None:
        # Card fields missing; fall back to the catalogue
        try:
            product = product_service.get_product(product_id)
        except ServiceError:
            flash('Could not reach the product catalogue. Please try again.', 'danger')
            return redirect(request.referrer or url_for('main.index'))
    
    if product is None:
        flash('This product is not available.', 'danger')
        return redirect(request.referrer or url_for('main.index'))
    
    cart = get_cart()
    cart.add_to_cart(product)
    
    # Return JSON for AJAX requests
    if _wants_json():
        return jsonify({'success': True, 'cart_count': cart.count()})
    
    flash(f'{product.name} added to cart!', 'success')
    return redirect(request.referrer or url_for('main.index'))


@cart_bp.route('/<int:product_id>/increment', methods=['POST'])
def increment(product_id):
    """Add one more unit of a cart line."""
    cart = get_cart()
    cart.increment_qty(product_id)
    if _wants_json():
        return jsonify({'success': True, 'cart_count': cart.count()})
    return _back()


@cart_bp.route('/<int:product_id>/decrement', methods=['POST'])
def decrement(product_id):
    """Remove one unit of a cart line; the line goes away at zero."""
    cart = get_cart()
    cart.decrement_qty(product_id)
    if _wants_json():
        return jsonify({'success': True, 'cart_count': cart.count()})
    return _back()


@cart_bp.route('/checkout', methods=['POST'])
def proceed_to_checkout():
    """Hand the cart over to the checkout page."""
    cart = get_cart()
    if cart.is_empty():
        flash('Your cart is empty!', 'warning')
        return redirect(request.referrer or url_for('main.index'))
    
    cart.save()
    return redirect(url_for('orders.checkout'))
