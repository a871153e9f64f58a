"""Flask application factory."""

import logging
import os
from flask import Flask, render_template
from .config import config
from .extensions import csrf, product_service, customer_service


def create_app(config_name=None, test_config=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')
    
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    if test_config:
        app.config.update(test_config)
    
    logging.basicConfig(format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    logging.getLogger('shophub').setLevel(app.config['LOG_LEVEL'])
    
    # Initialize extensions
    csrf.init_app(app)
    product_service.init_app(app)
    customer_service.init_app(app)
    
    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)
    
    # Template helpers
    from .utils.pricing import format_currency
    app.add_template_filter(format_currency, 'currency')
    
    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404
    
    @app.errorhandler(500)
    def internal_error(error):
        return render_template('errors/500.html'), 500
    
    # Context processors
    @app.context_processor
    def inject_globals():
        from .utils.session import get_cart
        return dict(cart_count=get_cart().count())
    
    return app
