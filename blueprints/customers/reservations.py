"""
Reservation routes.
Create, edit and delete reservations belonging to a customer.
"""

from flask import render_template, redirect, url_for, flash, request

from models.customer import get_customer_by_id
from models.errors import ValidationError
from models.reservation import (
    Reservation, get_reservation_by_id, save_reservation, delete_reservation
)
from utils.helpers import parse_start_at
from utils.messages import get_message
from blueprints.customers.customers import require_form_body


def register_routes(bp):
    """Register reservation routes on the blueprint."""

    @bp.route('/<int:customer_id>/add-reservation/', methods=['POST'])
    def reservation_add(customer_id):
        """Create a reservation for the customer."""
        require_form_body()

        customer = get_customer_by_id(customer_id)

        start_at_text = request.form.get('start_at', '').strip()
        start_at = parse_start_at(start_at_text)
        if start_at_text and start_at is None:
            raise ValidationError({'start_at': get_message('invalid_start_at')})

        reservation = Reservation(
            customer_id=customer.id,
            start_at=start_at,
            num_guests=request.form.get('num_guests', ''),
            notes=request.form.get('notes', '').strip()
        )
        save_reservation(reservation)

        flash(get_message('reservation_created'), 'success')
        return redirect(url_for('customers.customer_detail', customer_id=customer.id))

    @bp.route('/<int:reservation_id>/edit-reservation/', methods=['GET', 'POST'])
    def reservation_edit(reservation_id):
        """Show the edit form, or update guest count and notes."""
        if request.method == 'POST':
            require_form_body()

        reservation = get_reservation_by_id(reservation_id)

        if request.method == 'POST':
            reservation.num_guests = request.form.get('num_guests', '')
            reservation.notes = request.form.get('notes', '').strip()
            save_reservation(reservation)

            flash(get_message('reservation_updated'), 'success')
            return redirect(url_for('customers.customer_detail',
                                    customer_id=reservation.customer_id))

        customer = get_customer_by_id(reservation.customer_id)
        return render_template('reservation_edit.html', reservation=reservation,
                               customer=customer)

    @bp.route('/<int:reservation_id>/delete-reservation', methods=['POST'])
    def reservation_delete(reservation_id):
        """Delete a reservation and return to its customer."""
        reservation = get_reservation_by_id(reservation_id)
        customer_id = reservation.customer_id
        delete_reservation(reservation.id)

        flash(get_message('reservation_deleted'), 'success')
        return redirect(url_for('customers.customer_detail', customer_id=customer_id))
