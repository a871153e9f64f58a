"""Backend service clients."""

from .client import ServiceClient, ServiceError
from .products import ProductService
from .customers import CustomerService

__all__ = [
    'ServiceClient',
    'ServiceError',
    'ProductService',
    'CustomerService',
]
