"""Order model."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class OrderLine:
    """One grouped row of an order: product id, resolved product and quantity."""
    product_id: int
    quantity: int
    product: Optional[object] = None
    
    @property
    def subtotal(self):
        if self.product is not None:
            return self.product.price * self.quantity
        return 0


@dataclass
class Order:
    """Order as returned by the order service."""
    id: int
    total: float = 0.0
    product_ids: List[int] = field(default_factory=list)
    customer_id: Optional[int] = None
    coupon_code: Optional[str] = None
    tax_pct: float = 0.0
    discount: float = 0.0
    status: str = ''
    created_at: str = ''
    
    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get('id'),
            total=float(data.get('total') or 0),
            product_ids=list(data.get('productIds') or []),
            customer_id=data.get('customerId'),
            coupon_code=data.get('couponCode'),
            tax_pct=float(data.get('taxPct') or 0),
            discount=float(data.get('discount') or 0),
            status=data.get('status') or '',
            created_at=data.get('createdAt') or ''
        )
    
    def to_dict(self):
        return {
            'id': self.id,
            'total': self.total,
            'productIds': self.product_ids,
            'customerId': self.customer_id,
            'couponCode': self.coupon_code,
            'taxPct': self.tax_pct,
            'discount': self.discount,
            'status': self.status,
            'createdAt': self.created_at,
        }
    
    def lines(self, products_by_id=None):
        """Group the flat product id list into quantity-counted lines.
        
        Ids keep first-seen order. Products missing from ``products_by_id``
        are left unresolved so the view can show the bare id.
        """
        products_by_id = products_by_id or {}
        counts = {}
        for product_id in self.product_ids:
            counts[product_id] = counts.get(product_id, 0) + 1
        return [
            OrderLine(product_id=pid, quantity=qty, product=products_by_id.get(pid))
            for pid, qty in counts.items()
        ]
    
    @property
    def item_count(self):
        return len(self.product_ids)
    
    def __repr__(self):
        return f'<Order {self.id}>'
