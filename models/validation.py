"""
Entity validation.
Every customer and reservation passes through these checks before it is
inserted or updated.
"""

from datetime import datetime

from .errors import ValidationError


def clean_num_guests(value) -> int:
    """
    Coerce a guest count to int.

    Args:
        value: Raw value (int or numeric string from a form)

    Returns:
        Guest count as int

    Raises:
        ValidationError if the value is not an integer of at least 1
    """
    not_whole = ValidationError({'num_guests': 'Number of guests must be a whole number.'})

    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise not_whole

    try:
        num_guests = int(value.strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError):
        raise not_whole

    if num_guests < 1:
        raise ValidationError({'num_guests': 'Not a valid number of guests.'})

    return num_guests


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def validate_customer(customer) -> None:
    """
    Check a customer before it is saved.
    Phone is free text and is not checked.

    Raises:
        ValidationError listing every invalid field
    """
    errors = {}

    if _is_blank(customer.first_name):
        errors['first_name'] = 'First name is required.'
    if _is_blank(customer.last_name):
        errors['last_name'] = 'Last name is required.'

    if errors:
        raise ValidationError(errors)


def validate_reservation(reservation) -> None:
    """
    Check a reservation before it is saved.

    Raises:
        ValidationError listing every invalid field
    """
    errors = {}

    if reservation.customer_id is None:
        errors['customer_id'] = 'A reservation must belong to a customer.'

    if not isinstance(reservation.start_at, datetime):
        errors['start_at'] = 'Start time is required.'

    try:
        clean_num_guests(reservation.num_guests)
    except ValidationError as e:
        errors.update(e.errors)

    if errors:
        raise ValidationError(errors)
