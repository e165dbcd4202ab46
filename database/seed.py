"""
Database seed data.
Sample customers and reservations for development installations.
"""

from datetime import datetime


def seed_database(db):
    """Insert sample seed data."""

    # 1. Customers
    customers_data = [
        ('Anthony', 'Gonzales', '761-777-2376', 'Regular at the bar.'),
        ('Christina', 'Chavez', '(211) 123-4567', ''),
        ('Michael', 'Nelson', '+1-620-301-2225', 'Prefers the patio.'),
        ('Brenda', 'Ward', '993.855.2313', ''),
        ('Jennifer', 'Jackson', '555-867-5309', 'Allergic to shellfish.'),
    ]

    customer_ids = []
    for first_name, last_name, phone, notes in customers_data:
        cursor = db.execute('''
            INSERT INTO customers (first_name, last_name, phone, notes)
            VALUES (?, ?, ?, ?)
        ''', (first_name, last_name, phone, notes))
        customer_ids.append(cursor.lastrowid)

    # 2. Reservations (customer index, start, guests, notes)
    reservations_data = [
        (0, datetime(2024, 3, 1, 19, 0), 2, ''),
        (0, datetime(2024, 4, 12, 20, 30), 4, 'Birthday dinner.'),
        (0, datetime(2024, 6, 2, 12, 15), 3, ''),
        (1, datetime(2024, 3, 14, 18, 45), 6, 'Window table if possible.'),
        (1, datetime(2024, 5, 9, 13, 0), 2, ''),
        (2, datetime(2024, 7, 21, 19, 30), 8, 'Company dinner.'),
        (4, datetime(2024, 8, 30, 21, 0), 2, ''),
    ]

    for customer_index, start_at, num_guests, notes in reservations_data:
        db.execute('''
            INSERT INTO reservations (customer_id, start_at, num_guests, notes)
            VALUES (?, ?, ?, ?)
        ''', (customer_ids[customer_index], start_at, num_guests, notes))
