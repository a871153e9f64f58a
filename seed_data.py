"""Seed script to populate the backend services with sample data."""

from shophub import create_app
from shophub.extensions import customer_service, product_service
from shophub.services import ServiceError

PRODUCTS = [
    {'name': 'Wireless Headphones', 'price': 129.99, 'category': 'Electronics', 'stock': 25,
     'description': 'Over-ear, noise cancelling, 30h battery', 'imageUrl': '/static/img/headphones.jpg'},
    {'name': 'Mechanical Keyboard', 'price': 89.0, 'category': 'Electronics', 'stock': 40,
     'description': 'Hot-swappable switches, aluminium case', 'imageUrl': '/static/img/keyboard.jpg'},
    {'name': 'Ceramic Pour-Over Set', 'price': 45.5, 'category': 'Kitchen', 'stock': 15,
     'description': 'Dripper, carafe and two cups', 'imageUrl': '/static/img/pour-over.jpg'},
    {'name': 'Linen Throw Blanket', 'price': 59.0, 'category': 'Home', 'stock': 30,
     'description': 'Stonewashed linen, 130 x 170 cm', 'imageUrl': '/static/img/throw.jpg'},
    {'name': 'Hardcover Notebook', 'price': 12.0, 'category': 'Office', 'stock': 120,
     'description': 'A5, dotted, 192 pages', 'imageUrl': '/static/img/notebook.jpg'},
]

CUSTOMERS = [
    {'name': 'John Doe', 'email': 'john@example.com', 'phone': '555-0101',
     'address': '221 Market St', 'city': 'San Francisco', 'state': 'CA', 'postalCode': '94105'},
    {'name': 'Jane Smith', 'email': 'jane@example.com', 'phone': '555-0102',
     'address': '48 Elm Ave', 'city': 'Austin', 'state': 'TX', 'postalCode': '73301'},
]


def seed_services(app):
    """Create sample products and customers that are not there yet.
    
    Returns the number of (products, customers) created.
    """
    created_products = created_customers = 0
    with app.app_context():
        existing = {p.name for p in product_service.list_products()}
        for product in PRODUCTS:
            if product['name'] not in existing:
                product_service.create_product(product)
                created_products += 1
        
        emails = {c.email for c in customer_service.list_customers()}
        for customer in CUSTOMERS:
            if customer['email'] not in emails:
                customer_service.create_customer(customer)
                created_customers += 1
    return created_products, created_customers


if __name__ == '__main__':
    try:
        products, customers = seed_services(create_app())
    except ServiceError as e:
        print(f'Seeding failed: {e}')
    else:
        print(f'Seeded {products} products and {customers} customers.')
        print('\nCoupon codes: SAVE10, SAVE20, FLAT50')
