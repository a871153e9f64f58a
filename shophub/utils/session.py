"""Helpers for state carried in the browser session between pages."""

import json
import logging
from flask import current_app, g, session
from shophub.models import AppliedCoupon, CartStore, Order
from .pricing import clamp_tax_pct

logger = logging.getLogger(__name__)

ORDER_SESSION_KEY = 'order'
LAST_CUSTOMER_SESSION_KEY = 'lastCustomerId'
COUPON_SESSION_KEY = 'coupon'
TAX_SESSION_KEY = 'taxPct'


def get_cart():
    """Return the request's cart store, hydrated once per request.
    
    ``g.cart_exists`` records whether a snapshot was present at all.
    """
    if 'cart' not in g:
        cart = CartStore(session)
        g.cart_exists = cart.load() is not None
        g.cart = cart
    return g.cart


def get_applied_coupon():
    try:
        return AppliedCoupon.from_dict(session.get(COUPON_SESSION_KEY))
    except (KeyError, TypeError, ValueError):
        logger.warning('Ignoring malformed coupon in session')
        return None


def set_applied_coupon(coupon):
    if coupon is None:
        session.pop(COUPON_SESSION_KEY, None)
    else:
        session[COUPON_SESSION_KEY] = coupon.to_dict()


def get_tax_pct():
    maximum = current_app.config['MAX_TAX_PCT']
    return clamp_tax_pct(session.get(TAX_SESSION_KEY, current_app.config['DEFAULT_TAX_PCT']), maximum)


def set_tax_pct(value):
    pct = clamp_tax_pct(value, current_app.config['MAX_TAX_PCT'])
    session[TAX_SESSION_KEY] = pct
    return pct


def get_last_customer_id():
    value = session.get(LAST_CUSTOMER_SESSION_KEY)
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def remember_order(order, customer_id):
    """Cache the placed order for the summary page and reset checkout state."""
    session[ORDER_SESSION_KEY] = json.dumps(order.to_dict())
    session[LAST_CUSTOMER_SESSION_KEY] = str(customer_id)
    session.pop(COUPON_SESSION_KEY, None)
    session.pop(TAX_SESSION_KEY, None)
    get_cart().clear()


def pop_last_order():
    """Return the cached order once; later calls get ``None``."""
    raw = session.pop(ORDER_SESSION_KEY, None)
    if raw is None:
        return None
    try:
        return Order.from_dict(json.loads(raw))
    except (TypeError, ValueError):
        logger.warning('Discarding malformed order snapshot')
        return None
