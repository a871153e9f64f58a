from conftest import LAMP


def test_add_and_count(client):
    response = client.post('/api/cart/add', json={'product_id': 1})
    data = response.get_json()
    assert data['success'] is True
    assert data['message'] == 'Desk Lamp added to cart!'
    
    client.post('/api/cart/add', json={'product_id': 1})
    assert client.get('/api/cart/count').get_json() == {'count': 2}


def test_add_requires_product_id(client):
    response = client.post('/api/cart/add', json={})
    assert response.status_code == 400


def test_add_unknown_product(client):
    response = client.post('/api/cart/add', json={'product_id': 99})
    assert response.status_code == 404


def test_add_when_catalogue_is_down(client, backend):
    backend.down.add('products.test')
    response = client.post('/api/cart/add', json={'product_id': 1})
    assert response.status_code == 502


def test_cart_contents_and_quantity_changes(client, seed_cart):
    seed_cart([{'product': LAMP, 'qty': 1}])
    
    data = client.post('/api/cart/1/increment').get_json()
    assert data['cart_count'] == 2
    assert data['cart_total'] == 50.0
    
    client.post('/api/cart/1/decrement')
    data = client.post('/api/cart/1/decrement').get_json()
    assert data['items'] == []
    assert data['cart_count'] == 0


def test_coupon_quote(client, seed_cart, read_session):
    seed_cart([{'product': LAMP, 'qty': 4}])
    data = client.post('/api/coupon/validate', json={'code': 'SAVE10', 'tax_pct': 8}).get_json()
    
    assert data['valid'] is True
    assert data['coupon'] == 'SAVE10'
    assert data['discount'] == 10.0
    assert data['breakdown']['total'] == 97.2
    assert read_session('coupon') is None


def test_coupon_quote_rejects_unknown_code(client, seed_cart):
    seed_cart([{'product': LAMP, 'qty': 1}])
    data = client.post('/api/coupon/validate', json={'code': 'BOGUS', 'tax_pct': 45}).get_json()
    
    assert data['valid'] is False
    assert data['discount'] == 0
    assert data['breakdown']['taxPct'] == 30


def test_add_with_card_fields_when_catalogue_is_down(client, backend):
    backend.down.add('products.test')
    response = client.post('/api/cart/add', json={
        'product_id': 2, 'name': 'Notebook', 'price': 7.5, 'imageUrl': '/img/notebook.png',
    })
    
    data = response.get_json()
    assert response.status_code == 200
    assert data['cart_total'] == 7.5
    assert data['items'][0]['product'] == {
        'id': 2, 'name': 'Notebook', 'price': 7.5, 'imageUrl': '/img/notebook.png',
    }
