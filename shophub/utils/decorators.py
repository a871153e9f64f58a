"""View decorators."""

from functools import wraps
from flask import g, redirect, url_for
from .session import get_cart


def cart_required(f):
    """Decorator to require a cart snapshot in the session.
    
    Checkout only makes sense after a cart has been established on the
    product list; without one the visitor is sent back there.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        get_cart()
        if not g.cart_exists:
            return redirect(url_for('main.index'))
        return f(*args, **kwargs)
    return decorated_function
