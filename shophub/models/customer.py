"""Customer model."""

from dataclasses import dataclass

# Fields accepted by POST/PUT /customers
CUSTOMER_FIELDS = ('name', 'email', 'phone', 'address', 'city', 'state', 'postalCode')


@dataclass
class Customer:
    """Customer record owned by the customer service."""
    id: int
    name: str
    email: str
    phone: str = ''
    address: str = ''
    city: str = ''
    state: str = ''
    postal_code: str = ''
    
    @classmethod
    def from_dict(cls, data):
        return cls(
            id=int(data['id']),
            name=data.get('name') or '',
            email=data.get('email') or '',
            phone=data.get('phone') or '',
            address=data.get('address') or '',
            city=data.get('city') or '',
            state=data.get('state') or '',
            postal_code=data.get('postalCode') or ''
        )
    
    @property
    def shipping_address(self):
        """Single-line address used to prefill the checkout form."""
        parts = [self.address, self.city, self.state, self.postal_code.strip()]
        return ', '.join(part for part in parts if part)
    
    @property
    def location(self):
        """City and state for list views, e.g. 'Austin, TX'."""
        return ', '.join(part for part in (self.city, self.state) if part)
    
    def __repr__(self):
        return f'<Customer {self.email}>'
