"""Flask extensions and backend clients, bound to the app in create_app."""

from flask_wtf.csrf import CSRFProtect
from .services import CustomerService, ProductService

csrf = CSRFProtect()
product_service = ProductService()
customer_service = CustomerService()
