"""Customer forms."""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Email, Length, Optional


class CustomerForm(FlaskForm):
    """Create/edit customer form."""
    name = StringField('Full Name', validators=[
        DataRequired(message='Name is required'),
        Length(max=100)
    ])
    email = StringField('Email', validators=[
        DataRequired(message='Valid email is required'),
        Email(message='Valid email is required')
    ])
    phone = StringField('Phone Number', validators=[
        Optional(),
        Length(max=20)
    ])
    address = TextAreaField('Address', validators=[
        Optional(),
        Length(max=500)
    ])
    city = StringField('City', validators=[Optional(), Length(max=100)])
    state = StringField('State', validators=[Optional(), Length(max=100)])
    postal_code = StringField('Postal Code', validators=[Optional(), Length(max=20)])
    
    def to_payload(self):
        """Body for the customer service (camelCase keys)."""
        return {
            'name': self.name.data.strip(),
            'email': self.email.data.strip(),
            'phone': self.phone.data or '',
            'address': self.address.data or '',
            'city': self.city.data or '',
            'state': self.state.data or '',
            'postalCode': self.postal_code.data or '',
        }
    
    def fill_from(self, customer):
        """Prefill the form from an existing customer."""
        self.name.data = customer.name
        self.email.data = customer.email
        self.phone.data = customer.phone
        self.address.data = customer.address
        self.city.data = customer.city
        self.state.data = customer.state
        self.postal_code.data = customer.postal_code
