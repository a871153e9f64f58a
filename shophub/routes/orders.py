"""Order routes: checkout, order summary and order history."""

import logging
from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from shophub.extensions import product_service, customer_service
from shophub.forms.checkout import CheckoutForm
from shophub.models import apply_coupon
from shophub.services import ServiceError
from shophub.utils.decorators import cart_required
from shophub.utils.messages import flash_errors
from shophub.utils.pricing import price_breakdown, subtotal
from shophub.utils.session import (get_cart, get_applied_coupon, set_applied_coupon,
                                   get_tax_pct, set_tax_pct, get_last_customer_id,
                                   remember_order, pop_last_order)

logger = logging.getLogger(__name__)

orders_bp = Blueprint('orders', __name__)


def _format_pct(pct):
    return f'{pct:g}'


def _default_customer(customers):
    """Last customer used at checkout, else the first one listed."""
    last_id = get_last_customer_id()
    for customer in customers:
        if customer.id == last_id:
            return customer
    return customers[0] if customers else None


@orders_bp.route('/checkout', methods=['GET', 'POST'])
@cart_required
def checkout():
    """Checkout page."""
    cart = get_cart()
    
    # Customers are optional: without them the shipping fields are typed by hand
    customers = []
    customers_error = None
    try:
        customers = customer_service.list_customers()
    except ServiceError:
        customers_error = 'Could not load customers.'
    
    form = CheckoutForm()
    form.set_customers(customers)
    coupon = get_applied_coupon()
    
    if request.method == 'GET':
        tax_pct = get_tax_pct()
        customer = _default_customer(customers)
        if customer is not None:
            form.prefill(customer)
    else:
        if (form.tax_pct.data or '').strip():
            tax_pct = set_tax_pct(form.tax_pct.data)
        else:
            tax_pct = get_tax_pct()
        
        action = request.form.get('action', 'place_order')
        
        if action == 'apply_coupon':
            coupon = apply_coupon(form.coupon_code.data,
                                  subtotal(cart.display_list()),
                                  current=coupon)
            set_applied_coupon(coupon)
        
        elif action == 'select_customer':
            customer = next((c for c in customers if c.id == form.customer_id.data), None)
            if customer is not None:
                form.prefill(customer)
            else:
                form.ship_name.data = form.ship_email.data = form.ship_address.data = ''
        
        elif action == 'place_order':
            response = _place_order(form, cart, coupon, tax_pct)
            if response is not None:
                return response
    
    form.tax_pct.data = _format_pct(tax_pct)
    cart_items = cart.display_list()
    
    return render_template('orders/checkout.html',
                         form=form,
                         cart_items=cart_items,
                         coupon=coupon,
                         breakdown=price_breakdown(cart_items, coupon, tax_pct),
                         customers_error=customers_error,
                         max_tax_pct=current_app.config['MAX_TAX_PCT'])


def _place_order(form, cart, coupon, tax_pct):
    """Validate and submit the order; returns a redirect on success."""
    if not form.validate():
        flash_errors(form)
        return None
    
    cart_items = cart.display_list()
    if not cart_items:
        flash('Your cart is empty!', 'warning')
        return redirect(url_for('main.index'))
    
    breakdown = price_breakdown(cart_items, coupon, tax_pct)
    customer_id = form.customer_id.data
    
    try:
        order = product_service.place_order(
            customer_id=customer_id,
            product_ids=cart.product_ids(),
            coupon_code=breakdown.coupon_code,
            tax_pct=tax_pct,
            discount=breakdown.discount
        )
    except ServiceError:
        flash('An error occurred during checkout.', 'danger')
        return None
    
    logger.info('Order %s placed for customer %s', order.id, customer_id)
    remember_order(order, customer_id)
    flash('Order placed successfully!', 'success')
    return redirect(url_for('orders.order_summary'))


@orders_bp.route('/summary')
def order_summary():
    """Summary of the order that was just placed."""
    order = pop_last_order()
    return render_template('orders/summary.html', order=order)


@orders_bp.route('/')
def order_history():
    """Order history."""
    customer_id = (request.args.get('customer_id', type=int)
                   or get_last_customer_id()
                   or current_app.config['DEFAULT_CUSTOMER_ID'])
    
    orders = []
    error = None
    try:
        orders = product_service.orders_for_customer(customer_id)
    except ServiceError:
        error = 'Failed to fetch orders.'
    
    # Product details are best-effort; unresolved lines show the bare id
    products_by_id = {}
    if orders:
        try:
            products_by_id = {p.id: p for p in product_service.list_products()}
        except ServiceError:
            logger.warning('Order history rendered without product details')
    
    order_lines = [(order, order.lines(products_by_id)) for order in orders]
    
    return render_template('orders/history.html',
                         customer_id=customer_id,
                         order_lines=order_lines,
                         error=error)
