"""
Customer routes.
Customer list and search, best customers report, detail page, and CRUD.
"""

from flask import render_template, redirect, url_for, flash, request, abort, current_app

from models.customer import (
    Customer, get_all_customers, get_customer_by_id, search_customers,
    get_best_customers, get_customer_reservations, save_customer, delete_customer
)
from utils.messages import get_message


def add_reservation_counts(customers: list) -> list:
    """Set reservation_count on each customer from their fetched reservations."""
    for customer in customers:
        customer.reservation_count = len(get_customer_reservations(customer))
    return customers


def require_form_body():
    """Abort with 400 when a POST arrives without form data."""
    if not request.form:
        abort(400, description=get_message('body_required'))


def register_routes(bp):
    """Register customer routes on the blueprint."""

    @bp.route('/')
    def customer_list():
        """List customers, optionally filtered by ?search=."""
        search = request.args.get('search', '').strip()

        if search:
            customers = search_customers(search)
        else:
            customers = get_all_customers()

        return render_template('customer_list.html', customers=customers, search=search)

    @bp.route('/top-ten/')
    def top_ten():
        """List the customers with the most reservations."""
        limit = current_app.config.get('TOP_CUSTOMERS_LIMIT', 10)
        customers = add_reservation_counts(get_best_customers(limit))
        return render_template('customer_best_list.html', customers=customers)

    @bp.route('/add/', methods=['GET', 'POST'])
    def customer_add():
        """Show the new customer form, or create the customer."""
        if request.method == 'POST':
            require_form_body()

            customer = Customer(
                first_name=request.form.get('first_name', '').strip(),
                last_name=request.form.get('last_name', '').strip(),
                phone=request.form.get('phone', '').strip(),
                notes=request.form.get('notes', '').strip()
            )
            save_customer(customer)

            flash(get_message('customer_created', name=customer.full_name), 'success')
            return redirect(url_for('customers.customer_detail', customer_id=customer.id))

        return render_template('customer_new_form.html')

    @bp.route('/<int:customer_id>/')
    def customer_detail(customer_id):
        """Show a customer and their reservations."""
        customer = get_customer_by_id(customer_id)
        reservations = get_customer_reservations(customer)
        return render_template('customer_detail.html', customer=customer,
                               reservations=reservations)

    @bp.route('/<int:customer_id>/edit/', methods=['GET', 'POST'])
    def customer_edit(customer_id):
        """Show the edit form, or update the customer."""
        if request.method == 'POST':
            require_form_body()

        customer = get_customer_by_id(customer_id)

        if request.method == 'POST':
            customer.first_name = request.form.get('first_name', '').strip()
            customer.last_name = request.form.get('last_name', '').strip()
            customer.phone = request.form.get('phone', '').strip()
            customer.notes = request.form.get('notes', '').strip()
            save_customer(customer)

            flash(get_message('customer_updated', name=customer.full_name), 'success')
            return redirect(url_for('customers.customer_detail', customer_id=customer.id))

        return render_template('customer_edit_form.html', customer=customer)

    @bp.route('/<int:customer_id>/delete/', methods=['POST'])
    def customer_delete(customer_id):
        """Delete a customer and all of their reservations."""
        customer = get_customer_by_id(customer_id)
        delete_customer(customer.id)

        current_app.logger.info(f'Customer {customer.id} deleted')
        flash(get_message('customer_deleted', name=customer.full_name), 'success')
        return redirect(url_for('customers.customer_list'))
