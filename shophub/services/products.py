"""Product and order service client."""

from typing import List, Optional
from shophub.models import Order, Product
from .client import ServiceClient, ServiceError, parse_record, parse_records

PRODUCT_FIELDS = ('name', 'description', 'price', 'imageUrl', 'stock', 'category')


class ProductService(ServiceClient):
    """Client for the product/order backend."""
    name = 'products'
    url_config_key = 'PRODUCT_SERVICE_URL'
    
    def list_products(self) -> List[Product]:
        return parse_records(self.get('/products'), Product.from_dict, self.name)
    
    def create_product(self, payload: dict) -> Optional[dict]:
        body = {field: payload.get(field) for field in PRODUCT_FIELDS}
        return self.post('/products', body)
    
    def orders_for_customer(self, customer_id: int) -> List[Order]:
        data = self.get(f'/orders/customer/{customer_id}')
        return parse_records(data, Order.from_dict, self.name)
    
    def place_order(self, customer_id: int, product_ids: List[int],
                    coupon_code: Optional[str] = None, tax_pct: float = 0,
                    discount: float = 0) -> Order:
        """Submit an order. Not idempotent: each call may create an order."""
        body = {
            'customerId': customer_id,
            'productIds': list(product_ids),
            'taxPct': tax_pct,
            'discount': discount or 0,
        }
        if coupon_code:
            body['couponCode'] = coupon_code
        data = self.post('/orders', body)
        if not isinstance(data, dict):
            raise ServiceError('products returned no order')
        return parse_record(data, Order.from_dict, self.name)
    
    def get_product(self, product_id: int) -> Optional[Product]:
        """Look a product up in the catalogue; ``None`` if it is not listed."""
        for product in self.list_products():
            if product.id == product_id:
                return product
        return None
