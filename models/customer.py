"""
Customer data access functions.
Handles customer CRUD operations, name search, and the best customers report.
"""

import logging

from database import get_db
from utils.helpers import fold_case
from .errors import NotFoundError
from .reservation import get_reservations_for_customer
from .validation import validate_customer

logger = logging.getLogger(__name__)

CUSTOMER_COLUMNS = 'id, first_name, last_name, phone, notes'


class Customer:
    """
    Customer of the restaurant.
    Wraps a customers row; id is None until the customer is first saved.
    """

    def __init__(self, first_name=None, last_name=None, phone=None, notes=None,
                 id=None, reservation_count=None):
        self._id = id
        self.first_name = first_name
        self.last_name = last_name
        self.phone = phone
        self.notes = notes
        self.reservation_count = reservation_count

    @classmethod
    def from_row(cls, row) -> 'Customer':
        """Build a Customer from a database row."""
        data = dict(row)
        return cls(
            id=data['id'],
            first_name=data['first_name'],
            last_name=data['last_name'],
            phone=data['phone'],
            notes=data['notes'],
            reservation_count=data.get('reservation_count'),
        )

    @property
    def id(self):
        return self._id

    @property
    def full_name(self) -> str:
        """First and last name, space separated."""
        return f'{self.first_name} {self.last_name}'

    def __repr__(self):
        return f'<Customer {self.id} {self.full_name!r}>'


# =============================================================================
# READ OPERATIONS
# =============================================================================

def get_all_customers() -> list:
    """
    Get all customers ordered by last name, then first name.

    Returns:
        List of Customer objects (empty if there are none)
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'''
        SELECT {CUSTOMER_COLUMNS}
        FROM customers
        ORDER BY last_name, first_name
    ''')
    return [Customer.from_row(row) for row in cursor.fetchall()]


def get_customer_by_id(customer_id: int) -> Customer:
    """
    Get customer by ID.

    Args:
        customer_id: Customer ID

    Returns:
        Customer

    Raises:
        NotFoundError if no customer has this ID
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT {CUSTOMER_COLUMNS} FROM customers WHERE id = ?', (customer_id,))
    row = cursor.fetchone()

    if row is None:
        raise NotFoundError(f'No such customer: {customer_id}')

    return Customer.from_row(row)


def _like_pattern(term: str) -> str:
    """Build a LIKE substring pattern that matches % and _ literally."""
    escaped = fold_case(term).replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'


def search_customers(term: str) -> list:
    """
    Search customers by first or last name (case-insensitive substring).

    Args:
        term: Text to look for in either name

    Returns:
        List of matching Customer objects, ordered like get_all_customers

    Raises:
        NotFoundError if nothing matches
    """
    pattern = _like_pattern(term)

    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'''
        SELECT {CUSTOMER_COLUMNS}
        FROM customers
        WHERE FOLD_CASE(first_name) LIKE ? ESCAPE '\\'
           OR FOLD_CASE(last_name) LIKE ? ESCAPE '\\'
        ORDER BY last_name, first_name
    ''', (pattern, pattern))
    rows = cursor.fetchall()

    if not rows:
        raise NotFoundError(f'No customers matching: {term}')

    return [Customer.from_row(row) for row in rows]


def get_best_customers(limit: int = 10) -> list:
    """
    Get the customers with the most reservations.
    Customers without reservations are never included.

    Args:
        limit: Maximum number of customers

    Returns:
        List of Customer objects with reservation_count set, busiest first
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT c.id, c.first_name, c.last_name, c.phone, c.notes,
               COUNT(r.id) AS reservation_count
        FROM customers AS c
        JOIN reservations AS r ON r.customer_id = c.id
        GROUP BY c.id
        ORDER BY reservation_count DESC
        LIMIT ?
    ''', (limit,))
    return [Customer.from_row(row) for row in cursor.fetchall()]


def get_customer_reservations(customer: Customer) -> list:
    """Get all reservations for this customer."""
    return get_reservations_for_customer(customer.id)


# =============================================================================
# CREATE / UPDATE / DELETE
# =============================================================================

def save_customer(customer: Customer) -> Customer:
    """
    Insert a new customer or update an existing one.
    New customers get their generated ID assigned.

    Args:
        customer: Customer to save

    Returns:
        The same Customer

    Raises:
        ValidationError if the customer data is invalid
    """
    validate_customer(customer)

    db = get_db()
    cursor = db.cursor()

    if customer.id is None:
        cursor.execute('''
            INSERT INTO customers (first_name, last_name, phone, notes)
            VALUES (?, ?, ?, ?)
        ''', (customer.first_name, customer.last_name, customer.phone, customer.notes))
        customer._id = cursor.lastrowid
        logger.debug('Created customer %s', customer.id)
    else:
        cursor.execute('''
            UPDATE customers
            SET first_name = ?,
                last_name = ?,
                phone = ?,
                notes = ?
            WHERE id = ?
        ''', (customer.first_name, customer.last_name, customer.phone, customer.notes,
              customer.id))
        logger.debug('Updated customer %s', customer.id)

    db.commit()
    return customer


def delete_customer(customer_id: int) -> bool:
    """
    Delete a customer together with all of their reservations.
    Both deletes run in one transaction.

    Args:
        customer_id: Customer ID to delete

    Returns:
        True if deleted

    Raises:
        NotFoundError if no customer has this ID
    """
    db = get_db()
    cursor = db.cursor()

    try:
        db.execute('BEGIN IMMEDIATE')

        cursor.execute('DELETE FROM reservations WHERE customer_id = ?', (customer_id,))
        removed_reservations = cursor.rowcount

        cursor.execute('DELETE FROM customers WHERE id = ?', (customer_id,))
        if cursor.rowcount == 0:
            raise NotFoundError(f'No such customer: {customer_id}')

        db.commit()

    except Exception:
        db.rollback()
        raise

    logger.info('Deleted customer %s and %s reservation(s)', customer_id, removed_reservations)
    return True
