"""Product model."""

import math
from dataclasses import dataclass

# Fields a cart line needs to render and total itself.
CART_FIELDS = ('id', 'name', 'price', 'imageUrl')


@dataclass(frozen=True)
class Product:
    """Product snapshot as served by the product service."""
    id: int
    name: str
    price: float
    image_url: str = ''
    stock: int = 0
    category: str = ''
    description: str = ''
    
    @classmethod
    def from_dict(cls, data):
        """Build a product from its JSON representation."""
        return cls(
            id=int(data['id']),
            name=data.get('name') or '',
            price=float(data.get('price') or 0),
            image_url=data.get('imageUrl') or '',
            stock=int(data.get('stock') or 0),
            category=data.get('category') or '',
            description=data.get('description') or ''
        )
    
    @classmethod
    def from_card(cls, product_id, data):
        """Build a product from the fields posted by a product card.
        
        Returns ``None`` when the name or a usable price is missing.
        """
        name = str(data.get('name') or '').strip()
        try:
            price = float(data.get('price'))
        except (TypeError, ValueError):
            return None
        if not name or not math.isfinite(price) or price < 0:
            return None
        return cls(id=product_id, name=name, price=price,
                   image_url=str(data.get('imageUrl') or ''))
    
    def to_dict(self):
        """Serialize back to the wire shape (camelCase keys)."""
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'imageUrl': self.image_url,
            'stock': self.stock,
            'category': self.category,
            'description': self.description,
        }
    
    def cart_dict(self):
        """Trimmed wire shape stored in cart lines."""
        data = self.to_dict()
        return {key: data[key] for key in CART_FIELDS}
    
    def __repr__(self):
        return f'<Product {self.name}>'
