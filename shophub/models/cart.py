"""Session-backed shopping cart.

The cart lives in session-scoped storage as a JSON list of
``{"product": {...}, "qty": n}`` entries. Older sessions stored a flat list
of products with one entry per unit; those are migrated when first read.
Only the product fields a line needs are kept, since the snapshot travels
in the session cookie.
"""

import json
import logging
from dataclasses import dataclass
from numbers import Number

from .product import CART_FIELDS, Product

logger = logging.getLogger(__name__)

CART_SESSION_KEY = 'cart'


@dataclass
class CartItem:
    """Shopping cart item: a product snapshot and a quantity."""
    product: Product
    qty: int
    
    @property
    def subtotal(self):
        """Calculate subtotal for this cart item."""
        return self.product.price * self.qty
    
    def to_dict(self):
        return {'product': self.product.cart_dict(), 'qty': self.qty}
    
    def __repr__(self):
        return f'<CartItem {self.product.id} x {self.qty}>'


def _product_id(entry):
    if isinstance(entry, dict) and isinstance(entry.get('product'), dict):
        return entry['product'].get('id')
    return None


def _is_number(value):
    return isinstance(value, Number) and not isinstance(value, bool)


def _is_cart_entry(entry):
    return isinstance(entry, dict) and 'product' in entry and 'qty' in entry


def normalize_legacy(products):
    """Group a flat list of products into quantity-counted cart entries."""
    by_id = {}
    for product in products:
        if not isinstance(product, dict):
            continue
        product_id = product.get('id')
        if product_id in by_id:
            by_id[product_id]['qty'] += 1
        else:
            by_id[product_id] = {
                'product': {key: product[key] for key in CART_FIELDS if key in product},
                'qty': 1,
            }
    return list(by_id.values())


class CartStore:
    """Cart state mirrored to a session-like mapping.
    
    Every mutation updates ``items`` first and then writes the snapshot
    back. Write failures are logged and ignored; the in-memory items stay
    authoritative for the rest of the request.
    """
    
    def __init__(self, storage, key=CART_SESSION_KEY):
        self.storage = storage
        self.key = key
        self.items = []
    
    def load(self):
        """Hydrate from storage.
        
        Returns the raw entries, or ``None`` when no snapshot exists.
        """
        raw = self.storage.get(self.key)
        if raw is None:
            self.items = []
            return None
        
        try:
            parsed = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        except ValueError:
            logger.warning('Discarding undecodable cart snapshot')
            parsed = []
        
        if not isinstance(parsed, list) or not parsed:
            self.items = []
        elif _is_cart_entry(parsed[0]):
            self.items = parsed
        else:
            self.items = normalize_legacy(parsed)
            logger.info('Migrated legacy cart snapshot (%d products, %d lines)',
                        len(parsed), len(self.items))
            self.save()
        return self.items
    
    def add_to_cart(self, product):
        """Add one unit of ``product``, merging with an existing line."""
        for entry in self.items:
            if _product_id(entry) == product.id:
                qty = entry.get('qty')
                entry['qty'] = qty + 1 if _is_number(qty) else 1
                break
        else:
            self.items.append({'product': product.cart_dict(), 'qty': 1})
        self.save()

    def increment_qty(self, product_id):
        self._adjust(product_id, 1)
        self.save()

    def decrement_qty(self, product_id):
        self._adjust(product_id, -1)
        self.items = [
            entry for entry in self.items
            if not (_is_number(entry.get('qty')) and entry['qty'] <= 0)
        ]
        self.save()

    def _adjust(self, product_id, delta):
        for entry in self.items:
            if _product_id(entry) == product_id and _is_number(entry.get('qty')):
                entry['qty'] += delta
    
    def display_list(self):
        """Return well-formed items as ``CartItem`` objects.
        
        Entries without a product, with a non-integer product id or with a
        non-numeric quantity are skipped.
        """
        items = []
        for entry in self.items:
            if not isinstance(entry, dict) or not isinstance(entry.get('product'), dict):
                continue
            product_id = _product_id(entry)
            qty = entry.get('qty')
            if not isinstance(product_id, int) or isinstance(product_id, bool):
                continue
            if not _is_number(qty) or qty < 1:
                continue
            try:
                product = Product.from_dict(entry['product'])
            except (KeyError, TypeError, ValueError):
                continue
            items.append(CartItem(product=product, qty=int(qty)))
        return items
    
    def count(self):
        """Total units in the cart."""
        return sum(item.qty for item in self.display_list())
    
    def product_ids(self):
        """Flat product id list, each id repeated once per unit."""
        ids = []
        for item in self.display_list():
            ids.extend([item.product.id] * item.qty)
        return ids
    
    def is_empty(self):
        return not self.display_list()
    
    def clear(self):
        """Drop the cart snapshot from storage."""
        self.items = []
        try:
            self.storage.pop(self.key, None)
        except RuntimeError as exc:
            logger.warning('Could not clear cart snapshot: %s', exc)
    
    def save(self):
        """Write the snapshot back to storage; failures are logged only."""
        try:
            self.storage[self.key] = json.dumps(self.items)
        except (TypeError, ValueError, RuntimeError) as exc:
            logger.warning('Could not persist cart snapshot: %s', exc)
    
    def __len__(self):
        return len(self.items)
    
    def __repr__(self):
        return f'<CartStore {len(self.items)} lines>'
