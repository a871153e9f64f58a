"""Shared fixtures: an app wired to an in-process fake of both backends."""

import json

import httpx
import pytest

from shophub import create_app

LAMP = {'id': 1, 'name': 'Desk Lamp', 'description': 'Brass lamp', 'price': 25.0,
        'imageUrl': '/img/lamp.png', 'stock': 5, 'category': 'Home'}
NOTEBOOK = {'id': 2, 'name': 'Notebook', 'description': 'A5 dotted', 'price': 7.5,
            'imageUrl': '/img/notebook.png', 'stock': 40, 'category': 'Office'}

ADA = {'id': 1, 'name': 'Ada Lovelace', 'email': 'ada@example.com', 'phone': '555-0100',
       'address': '12 Analytical Way', 'city': 'London', 'state': '', 'postalCode': 'N1 '}
GRACE = {'id': 2, 'name': 'Grace Hopper', 'email': 'grace@example.com', 'phone': '',
         'address': '', 'city': 'Arlington', 'state': 'VA', 'postalCode': '22201'}


class FakeBackend:
    """Minimal stand-in for the product/order and customer services."""
    
    def __init__(self):
        self.products = [dict(LAMP), dict(NOTEBOOK)]
        self.customers = [dict(ADA), dict(GRACE)]
        self.orders = [
            {'id': 7, 'customerId': 1, 'productIds': [1, 2, 1], 'total': 57.5,
             'createdAt': '2026-10-01T10:00:00Z', 'status': 'DELIVERED'},
        ]
        self.requests = []
        self.down = set()      # hosts that refuse connections
        self.failing = set()   # (method, path) pairs answered with 500
    
    def handler(self, request):
        body = json.loads(request.content) if request.content else None
        self.requests.append((request.method, request.url.host, request.url.path, body))
        
        if request.url.host in self.down:
            raise httpx.ConnectError('connection refused', request=request)
        if (request.method, request.url.path) in self.failing:
            return httpx.Response(500, text='boom')
        
        if request.url.host == 'products.test':
            return self._products(request.method, request.url.path, body)
        return self._customers(request.method, request.url.path, body)
    
    def _products(self, method, path, body):
        if path == '/products' and method == 'GET':
            return httpx.Response(200, json=self.products)
        if path == '/products' and method == 'POST':
            product = dict(body, id=len(self.products) + 1)
            self.products.append(product)
            return httpx.Response(201, json=product)
        if path.startswith('/orders/customer/') and method == 'GET':
            customer_id = int(path.rsplit('/', 1)[1])
            return httpx.Response(200, json=[o for o in self.orders if o['customerId'] == customer_id])
        if path == '/orders' and method == 'POST':
            order = dict(body, id=100 + len(self.orders), total=42.0, status='PENDING')
            self.orders.append(order)
            return httpx.Response(201, json=order)
        return httpx.Response(404)
    
    def _customers(self, method, path, body):
        if path == '/customers' and method == 'GET':
            return httpx.Response(200, json=self.customers)
        if path == '/customers' and method == 'POST':
            customer = dict(body, id=len(self.customers) + 1)
            self.customers.append(customer)
            return httpx.Response(201, json=customer)
        
        customer_id = int(path.rsplit('/', 1)[1])
        customer = next((c for c in self.customers if c['id'] == customer_id), None)
        if customer is None:
            return httpx.Response(404, text='Customer not found')
        if method == 'GET':
            return httpx.Response(200, json=customer)
        if method == 'PUT':
            customer.update(body)
            return httpx.Response(200, json=customer)
        if method == 'DELETE':
            self.customers.remove(customer)
            return httpx.Response(204)
        return httpx.Response(405)
    
    def calls(self, method, path):
        return [r for r in self.requests if r[0] == method and r[2] == path]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def app(backend):
    app = create_app('testing', {'HTTP_TRANSPORT': httpx.MockTransport(backend.handler)})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed_cart(client):
    """Put a cart snapshot straight into the session."""
    def _seed(entries):
        with client.session_transaction() as sess:
            sess['cart'] = json.dumps(entries)
    return _seed


@pytest.fixture
def read_session(client):
    """Read a key back out of the test client's session."""
    def _read(key):
        with client.session_transaction() as sess:
            return sess.get(key)
    return _read
