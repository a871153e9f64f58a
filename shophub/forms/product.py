"""Product forms."""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, FloatField, IntegerField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional


class ProductForm(FlaskForm):
    """Add product form."""
    name = StringField('Product Name', validators=[
        DataRequired(message='Product name is required'),
        Length(max=150)
    ])
    description = TextAreaField('Description', validators=[
        Optional(),
        Length(max=1000)
    ])
    price = FloatField('Price', validators=[
        InputRequired(message='Price is required'),
        NumberRange(min=0, message='Price cannot be negative')
    ])
    image_url = StringField('Image URL', validators=[Optional(), Length(max=500)])
    stock = IntegerField('Stock', default=0, validators=[
        Optional(),
        NumberRange(min=0, message='Stock cannot be negative')
    ])
    category = StringField('Category', validators=[Optional(), Length(max=100)])
    
    def to_payload(self):
        return {
            'name': self.name.data.strip(),
            'description': self.description.data or '',
            'price': self.price.data,
            'imageUrl': self.image_url.data or '',
            'stock': self.stock.data or 0,
            'category': self.category.data or '',
        }
