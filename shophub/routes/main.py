"""Main public routes."""

from flask import Blueprint, render_template, redirect, url_for, flash, request
from shophub.extensions import product_service
from shophub.forms.product import ProductForm
from shophub.services import ServiceError
from shophub.utils.messages import flash_errors
from shophub.utils.pricing import subtotal
from shophub.utils.session import get_cart

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Product list with the cart drawer."""
    products = []
    error = None
    try:
        products = product_service.list_products()
    except ServiceError:
        error = 'Failed to load products.'
    
    # Optional category filter
    category = request.args.get('category', '')
    categories = sorted({p.category for p in products if p.category})
    if category:
        products = [p for p in products if p.category == category]
    
    cart_items = get_cart().display_list()
    
    return render_template('main/index.html',
                         products=products,
                         categories=categories,
                         category=category,
                         error=error,
                         cart_items=cart_items,
                         cart_total=subtotal(cart_items))


@main_bp.route('/products/new', methods=['GET', 'POST'])
def add_product():
    """Add a product to the catalogue."""
    form = ProductForm()
    
    if form.validate_on_submit():
        try:
            product_service.create_product(form.to_payload())
        except ServiceError:
            flash('Failed to add product.', 'danger')
        else:
            flash('Product added successfully!', 'success')
            return redirect(url_for('main.index'))
    elif request.method == 'POST':
        flash_errors(form)
    
    return render_template('main/product_form.html', form=form)
