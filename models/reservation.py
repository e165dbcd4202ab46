"""
Reservation data access functions.
Handles reservation CRUD operations scoped to a customer.
"""

import logging
from datetime import datetime

from database import get_db
from utils.helpers import format_start_at
from .errors import NotFoundError
from .validation import clean_num_guests, validate_reservation

logger = logging.getLogger(__name__)

RESERVATION_COLUMNS = 'id, customer_id, start_at, num_guests, notes'


class Reservation:
    """
    A reservation for a party.

    customer_id is fixed at construction and has no setter. num_guests is
    checked on every assignment, and falsy notes are stored as ''.
    """

    def __init__(self, customer_id, start_at: datetime = None, num_guests=1, notes='', id=None):
        self._id = id
        self._customer_id = customer_id
        self.start_at = start_at
        self.num_guests = num_guests
        self.notes = notes

    @classmethod
    def from_row(cls, row) -> 'Reservation':
        """Build a Reservation from a database row."""
        return cls(
            id=row['id'],
            customer_id=row['customer_id'],
            start_at=row['start_at'],
            num_guests=row['num_guests'],
            notes=row['notes'],
        )

    @property
    def id(self):
        return self._id

    @property
    def customer_id(self):
        return self._customer_id

    @property
    def num_guests(self) -> int:
        return self._num_guests

    @num_guests.setter
    def num_guests(self, value):
        self._num_guests = clean_num_guests(value)

    @property
    def notes(self) -> str:
        return self._notes

    @notes.setter
    def notes(self, value):
        self._notes = value or ''

    @property
    def formatted_start_at(self) -> str:
        """Start time for display, e.g. 'May 1st 2024, 6:30 pm'."""
        return format_start_at(self.start_at)

    def __repr__(self):
        return f'<Reservation {self.id} customer={self.customer_id} guests={self.num_guests}>'


# =============================================================================
# READ OPERATIONS
# =============================================================================

def get_reservation_by_id(reservation_id: int) -> Reservation:
    """
    Get reservation by ID.

    Raises:
        NotFoundError if no reservation has this ID
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT {RESERVATION_COLUMNS} FROM reservations WHERE id = ?',
                   (reservation_id,))
    row = cursor.fetchone()

    if row is None:
        raise NotFoundError(f'No such reservation: {reservation_id}')

    return Reservation.from_row(row)


def get_reservations_for_customer(customer_id: int) -> list:
    """
    Get all reservations of a customer.

    Args:
        customer_id: Owning customer ID

    Returns:
        List of Reservation objects (empty if there are none)
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'''
        SELECT {RESERVATION_COLUMNS}
        FROM reservations
        WHERE customer_id = ?
    ''', (customer_id,))
    return [Reservation.from_row(row) for row in cursor.fetchall()]


# =============================================================================
# CREATE / UPDATE / DELETE
# =============================================================================

def save_reservation(reservation: Reservation) -> Reservation:
    """
    Insert a new reservation or update an existing one.
    Updates only change the guest count and notes; customer and start time
    are fixed once the reservation exists.

    Args:
        reservation: Reservation to save

    Returns:
        The same Reservation

    Raises:
        ValidationError if the reservation data is invalid
    """
    validate_reservation(reservation)

    db = get_db()
    cursor = db.cursor()

    if reservation.id is None:
        cursor.execute('''
            INSERT INTO reservations (customer_id, start_at, num_guests, notes)
            VALUES (?, ?, ?, ?)
        ''', (reservation.customer_id, reservation.start_at, reservation.num_guests,
              reservation.notes))
        reservation._id = cursor.lastrowid
        logger.debug('Created reservation %s for customer %s', reservation.id,
                     reservation.customer_id)
    else:
        cursor.execute('''
            UPDATE reservations
            SET num_guests = ?,
                notes = ?
            WHERE id = ?
        ''', (reservation.num_guests, reservation.notes, reservation.id))
        logger.debug('Updated reservation %s', reservation.id)

    db.commit()
    return reservation


def delete_reservation(reservation_id: int) -> bool:
    """
    Delete a reservation.

    Returns:
        True if deleted

    Raises:
        NotFoundError if no reservation has this ID
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('DELETE FROM reservations WHERE id = ?', (reservation_id,))

    if cursor.rowcount == 0:
        db.rollback()
        raise NotFoundError(f'No such reservation: {reservation_id}')

    db.commit()
    logger.info('Deleted reservation %s', reservation_id)
    return True
