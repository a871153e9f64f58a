"""Checkout form."""

from flask_wtf import FlaskForm
from wtforms import SelectField, StringField, TextAreaField
from wtforms.validators import DataRequired, Email, Optional


def _customer_id(value):
    if value in (None, ''):
        return None
    return int(value)


class CheckoutForm(FlaskForm):
    """Shipping details, coupon and tax inputs."""
    customer_id = SelectField('Select Customer', coerce=_customer_id, validators=[
        DataRequired(message='Please select a customer')
    ])
    ship_name = StringField('Full Name', validators=[
        DataRequired(message='Name is required')
    ])
    ship_email = StringField('Email Address', validators=[
        DataRequired(message='Valid email is required'),
        Email(message='Valid email is required')
    ])
    ship_address = TextAreaField('Shipping Address', validators=[
        DataRequired(message='Shipping address is required')
    ])
    coupon_code = StringField('Coupon', validators=[Optional()])
    tax_pct = StringField('Tax %', validators=[Optional()])
    
    def set_customers(self, customers, placeholder='Select a customer'):
        self.customer_id.choices = [('', placeholder)] + [
            (customer.id, customer.name) for customer in customers
        ]
    
    def prefill(self, customer):
        """Copy a customer's contact details into the shipping fields."""
        self.customer_id.data = customer.id
        self.ship_name.data = customer.name
        self.ship_email.data = customer.email
        self.ship_address.data = customer.shipping_address
