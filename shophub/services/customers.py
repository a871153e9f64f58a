"""Customer service client."""

from typing import List
from shophub.models import Customer, CUSTOMER_FIELDS
from .client import ServiceClient, parse_record, parse_records


def _customer_body(payload):
    return {field: payload.get(field) or '' for field in CUSTOMER_FIELDS}


class CustomerService(ServiceClient):
    """Client for the customer backend."""
    name = 'customers'
    url_config_key = 'CUSTOMER_SERVICE_URL'
    
    def list_customers(self) -> List[Customer]:
        return parse_records(self.get('/customers'), Customer.from_dict, self.name)
    
    def get_customer(self, customer_id: int) -> Customer:
        data = self.get(f'/customers/{customer_id}')
        return parse_record(data, Customer.from_dict, self.name)
    
    def create_customer(self, payload: dict):
        return self.post('/customers', _customer_body(payload))
    
    def update_customer(self, customer_id: int, payload: dict):
        return self.put(f'/customers/{customer_id}', _customer_body(payload))
    
    def delete_customer(self, customer_id: int):
        self.delete(f'/customers/{customer_id}')
