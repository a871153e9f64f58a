"""Routes package - register all blueprints."""

from flask import Flask


def register_blueprints(app: Flask):
    """Register all blueprints with the application."""
    from .main import main_bp
    from .cart import cart_bp
    from .orders import orders_bp
    from .customers import customers_bp
    from .api import api_bp
    
    app.register_blueprint(main_bp)
    app.register_blueprint(cart_bp, url_prefix='/cart')
    app.register_blueprint(orders_bp, url_prefix='/orders')
    app.register_blueprint(customers_bp, url_prefix='/customers')
    app.register_blueprint(api_bp, url_prefix='/api')
