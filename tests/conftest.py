"""
Pytest configuration and fixtures.
Ensures tests use an isolated test database, not the development database.
"""

import os
import pytest
from datetime import datetime


@pytest.fixture(scope='session', autouse=True)
def setup_test_environment():
    """Set up test environment before any tests run."""
    os.environ['FLASK_ENV'] = 'test'
    yield


@pytest.fixture
def app(tmp_path):
    """Create test application with an empty, isolated database."""
    from app import create_app
    from database import init_db

    app = create_app('test')
    app.config['TESTING'] = True
    app.config['WTF_CSRF_ENABLED'] = False
    app.config['DATABASE_PATH'] = str(tmp_path / 'lunchly_test.db')

    with app.app_context():
        init_db()
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def make_customer(app):
    """Factory fixture that saves and returns a customer."""
    from models.customer import Customer, save_customer

    def _make_customer(first_name='Ana', last_name='Lee', phone='555-1111', notes=''):
        return save_customer(Customer(
            first_name=first_name, last_name=last_name, phone=phone, notes=notes
        ))

    return _make_customer


@pytest.fixture
def make_reservation(app):
    """Factory fixture that saves and returns a reservation."""
    from models.reservation import Reservation, save_reservation

    def _make_reservation(customer, num_guests=2, start_at=None, notes=''):
        return save_reservation(Reservation(
            customer_id=customer.id,
            start_at=start_at or datetime(2024, 5, 1, 18, 30),
            num_guests=num_guests,
            notes=notes
        ))

    return _make_reservation
