"""
Database schema definitions.
Table creation, indexes, and structure management.
"""


def drop_tables(db):
    """Drop all existing tables."""
    # Disable foreign key constraints before dropping
    db.execute('PRAGMA foreign_keys = OFF')

    tables = [
        'reservations',
        'customers',
    ]

    for table in tables:
        db.execute(f'DROP TABLE IF EXISTS {table}')

    # Re-enable foreign key constraints
    db.execute('PRAGMA foreign_keys = ON')


def create_tables(db):
    """Create all database tables."""

    db.execute('''
        CREATE TABLE customers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            phone TEXT,
            notes TEXT DEFAULT ''
        )
    ''')

    db.execute('''
        CREATE TABLE reservations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            customer_id INTEGER NOT NULL REFERENCES customers(id),
            start_at TIMESTAMP NOT NULL,
            num_guests INTEGER NOT NULL CHECK (num_guests >= 1),
            notes TEXT NOT NULL DEFAULT ''
        )
    ''')


def create_indexes(db):
    """Create indexes for listing order and per-customer lookups."""
    db.execute('CREATE INDEX idx_customers_name ON customers(last_name, first_name)')
    db.execute('CREATE INDEX idx_reservations_customer ON reservations(customer_id)')
