"""Customer routes."""

from flask import Blueprint, render_template, redirect, url_for, flash, request
from shophub.extensions import customer_service
from shophub.forms.customer import CustomerForm
from shophub.services import ServiceError
from shophub.utils.messages import flash_errors

customers_bp = Blueprint('customers', __name__)


@customers_bp.route('/')
def list_customers():
    """List all customers."""
    customers = []
    error = None
    try:
        customers = customer_service.list_customers()
    except ServiceError:
        error = 'Failed to fetch customers'
    
    return render_template('customers/list.html', customers=customers, error=error)


@customers_bp.route('/new', methods=['GET', 'POST'])
def new_customer():
    """Create a customer."""
    form = CustomerForm()
    
    if form.validate_on_submit():
        try:
            customer_service.create_customer(form.to_payload())
        except ServiceError:
            flash('Could not create customer', 'danger')
        else:
            flash('Customer created', 'success')
            return redirect(url_for('customers.list_customers'))
    elif request.method == 'POST':
        flash_errors(form)
    
    return render_template('customers/form.html', form=form, customer=None)


@customers_bp.route('/<int:customer_id>', methods=['GET', 'POST'])
def customer_detail(customer_id):
    """View and edit a customer."""
    try:
        customer = customer_service.get_customer(customer_id)
    except ServiceError as exc:
        if exc.status_code == 404:
            flash('Customer not found.', 'warning')
            return redirect(url_for('customers.list_customers'))
        flash('Unable to load customer', 'danger')
        return render_template('customers/form.html', form=None, customer=None)
    
    form = CustomerForm()
    
    if request.method == 'GET':
        form.fill_from(customer)
    elif form.validate():
        try:
            customer_service.update_customer(customer_id, form.to_payload())
        except ServiceError:
            flash('Failed to update', 'danger')
        else:
            flash('Customer updated', 'success')
            return redirect(url_for('customers.customer_detail', customer_id=customer_id))
    else:
        flash_errors(form)
    
    return render_template('customers/form.html', form=form, customer=customer)


@customers_bp.route('/<int:customer_id>/delete', methods=['POST'])
def delete_customer(customer_id):
    """Delete a customer."""
    try:
        customer_service.delete_customer(customer_id)
    except ServiceError:
        flash('Failed to delete customer.', 'danger')
        return redirect(url_for('customers.customer_detail', customer_id=customer_id))
    
    flash('Customer has been deleted.', 'success')
    return redirect(url_for('customers.list_customers'))
