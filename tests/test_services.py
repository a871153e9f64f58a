import pytest

from shophub.extensions import customer_service, product_service
from shophub.services import ServiceError


def test_list_products_maps_wire_fields(app):
    with app.app_context():
        products = product_service.list_products()
    assert [p.name for p in products] == ['Desk Lamp', 'Notebook']
    assert products[0].image_url == '/img/lamp.png'
    assert products[1].price == 7.5


def test_get_product_returns_none_when_not_listed(app):
    with app.app_context():
        assert product_service.get_product(2).name == 'Notebook'
        assert product_service.get_product(99) is None


def test_place_order_sends_flat_product_ids(app, backend):
    with app.app_context():
        order = product_service.place_order(1, [1, 1, 2], coupon_code='SAVE10',
                                            tax_pct=8, discount=5.75)
    
    (_, host, _, body), = backend.calls('POST', '/orders')
    assert host == 'products.test'
    assert body == {'customerId': 1, 'productIds': [1, 1, 2], 'couponCode': 'SAVE10',
                    'taxPct': 8, 'discount': 5.75}
    assert order.product_ids == [1, 1, 2]
    assert order.total == 42.0


def test_place_order_omits_coupon_code_when_none_applied(app, backend):
    with app.app_context():
        product_service.place_order(2, [2], tax_pct=0, discount=0)
    
    body = backend.calls('POST', '/orders')[0][3]
    assert 'couponCode' not in body
    assert body['discount'] == 0


def test_error_status_raises_service_error(app, backend):
    backend.failing.add(('GET', '/customers'))
    with app.app_context():
        with pytest.raises(ServiceError) as excinfo:
            customer_service.list_customers()
    assert excinfo.value.status_code == 500
    assert str(excinfo.value) == 'boom'


def test_transport_failure_raises_service_error(app, backend):
    backend.down.add('products.test')
    with app.app_context():
        with pytest.raises(ServiceError) as excinfo:
            product_service.list_products()
    assert excinfo.value.status_code is None


def test_update_customer_puts_full_snapshot(app, backend):
    with app.app_context():
        customer_service.update_customer(2, {'name': 'Grace B. Hopper', 'email': 'grace@example.com'})
    
    body = backend.calls('PUT', '/customers/2')[0][3]
    assert body == {'name': 'Grace B. Hopper', 'email': 'grace@example.com', 'phone': '',
                    'address': '', 'city': '', 'state': '', 'postalCode': ''}


def test_delete_customer_with_empty_response(app, backend):
    with app.app_context():
        customer_service.delete_customer(1)
        remaining = customer_service.list_customers()
    assert [c.id for c in remaining] == [2]


def test_missing_customer_is_404(app):
    with app.app_context():
        with pytest.raises(ServiceError) as excinfo:
            customer_service.get_customer(42)
    assert excinfo.value.status_code == 404
