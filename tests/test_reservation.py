"""
Tests for reservation model and routes.
"""

import pytest
from datetime import datetime

from models.errors import NotFoundError, ValidationError
from models.reservation import (
    Reservation, get_reservation_by_id, get_reservations_for_customer,
    save_reservation, delete_reservation
)


class TestReservationModel:
    """Test the Reservation entity and reservation model functions."""

    def test_num_guests_coerced_from_form_text(self):
        """Test that numeric text is stored as an int."""
        reservation = Reservation(customer_id=1, num_guests='4')
        assert reservation.num_guests == 4

    @pytest.mark.parametrize('value', [0, -1, '0', '-3'])
    def test_invalid_num_guests_keeps_previous_value(self, value):
        """Test that a guest count below one is rejected immediately."""
        reservation = Reservation(customer_id=1, num_guests=3)

        with pytest.raises(ValidationError) as exc_info:
            reservation.num_guests = value

        assert 'num_guests' in exc_info.value.errors
        assert reservation.num_guests == 3

    @pytest.mark.parametrize('value', ['', 'two', None, 2.5])
    def test_non_numeric_num_guests_rejected(self, value):
        """Test that non-integer guest counts are rejected."""
        reservation = Reservation(customer_id=1, num_guests=2)
        with pytest.raises(ValidationError):
            reservation.num_guests = value
        assert reservation.num_guests == 2

    def test_num_guests_rejected_at_construction(self):
        """Test that a reservation cannot be built with zero guests."""
        with pytest.raises(ValidationError):
            Reservation(customer_id=1, num_guests=0)

    def test_valid_num_guests_accepted(self):
        """Test that one or more guests is accepted."""
        reservation = Reservation(customer_id=1, num_guests=2)
        reservation.num_guests = 1
        assert reservation.num_guests == 1
        reservation.num_guests = 12
        assert reservation.num_guests == 12

    @pytest.mark.parametrize('value', [None, ''])
    def test_falsy_notes_become_empty_string(self, value):
        """Test that falsy notes are normalized."""
        reservation = Reservation(customer_id=1, notes='Window')
        reservation.notes = value
        assert reservation.notes == ''
        assert Reservation(customer_id=1, notes=value).notes == ''

    def test_customer_id_cannot_be_reassigned(self):
        """Test that customer_id has no setter."""
        reservation = Reservation(customer_id=1)

        with pytest.raises(AttributeError):
            reservation.customer_id = 2

        assert reservation.customer_id == 1

    def test_formatted_start_at(self):
        """Test the display format of the start time."""
        reservation = Reservation(customer_id=1, start_at=datetime(2024, 5, 1, 18, 30))
        assert reservation.formatted_start_at == 'May 1st 2024, 6:30 pm'

        reservation = Reservation(customer_id=1, start_at=datetime(2024, 12, 22, 0, 5))
        assert reservation.formatted_start_at == 'December 22nd 2024, 12:05 am'

    def test_create_reservation_round_trip(self, make_customer):
        """Test that a saved reservation reads back unchanged."""
        ana = make_customer()
        start_at = datetime(2024, 5, 1, 18, 30)
        reservation = save_reservation(Reservation(
            customer_id=ana.id, start_at=start_at, num_guests=4, notes='Birthday'
        ))
        assert reservation.id is not None

        fetched = get_reservation_by_id(reservation.id)
        assert fetched.customer_id == ana.id
        assert fetched.start_at == start_at
        assert fetched.num_guests == 4
        assert fetched.notes == 'Birthday'

    def test_get_reservation_by_id_missing(self, app):
        """Test lookup of an unknown ID."""
        with pytest.raises(NotFoundError):
            get_reservation_by_id(404)

    def test_get_reservations_for_customer(self, make_customer, make_reservation):
        """Test three reservations come back with their guest counts."""
        ana = make_customer()
        for num_guests in (2, 4, 6):
            make_reservation(ana, num_guests=num_guests)

        reservations = get_reservations_for_customer(ana.id)
        assert len(reservations) == 3
        assert sorted(r.num_guests for r in reservations) == [2, 4, 6]
        assert all(r.customer_id == ana.id for r in reservations)

    def test_get_reservations_for_customer_empty(self, make_customer):
        """Test a customer without reservations."""
        assert get_reservations_for_customer(make_customer().id) == []

    def test_update_changes_only_guests_and_notes(self, make_customer, make_reservation):
        """Test that an update leaves customer and start time alone."""
        ana = make_customer()
        start_at = datetime(2024, 5, 1, 18, 30)
        reservation = make_reservation(ana, num_guests=2, start_at=start_at)

        reservation.num_guests = 5
        reservation.notes = 'Moved to the terrace'
        reservation.start_at = datetime(2030, 1, 1, 12, 0)
        save_reservation(reservation)

        fetched = get_reservation_by_id(reservation.id)
        assert fetched.num_guests == 5
        assert fetched.notes == 'Moved to the terrace'
        assert fetched.start_at == start_at
        assert fetched.customer_id == ana.id

    def test_save_requires_start_and_customer(self, app):
        """Test that validation reports every missing field before saving."""
        with pytest.raises(ValidationError) as exc_info:
            save_reservation(Reservation(customer_id=None, start_at=None, num_guests=2))
        assert set(exc_info.value.errors) == {'customer_id', 'start_at'}

    def test_delete_reservation(self, make_customer, make_reservation):
        """Test deleting a reservation."""
        ana = make_customer()
        reservation = make_reservation(ana)

        assert delete_reservation(reservation.id) is True
        with pytest.raises(NotFoundError):
            get_reservation_by_id(reservation.id)

    def test_delete_missing_reservation(self, app):
        """Test deleting an unknown reservation."""
        with pytest.raises(NotFoundError):
            delete_reservation(404)


class TestReservationRoutes:
    """Test reservation routes."""

    def test_add_reservation(self, client, make_customer):
        """Test adding a reservation from the customer page form."""
        ana = make_customer()

        response = client.post(f'/{ana.id}/add-reservation/', data={
            'start_at': '2024-05-01T18:30',
            'num_guests': '4',
            'notes': ''
        })
        assert response.status_code == 302
        assert response.headers['Location'].endswith(f'/{ana.id}/')

        reservations = get_reservations_for_customer(ana.id)
        assert len(reservations) == 1
        assert reservations[0].num_guests == 4
        assert reservations[0].start_at == datetime(2024, 5, 1, 18, 30)
        assert reservations[0].notes == ''

    def test_add_reservation_space_separated_start(self, client, make_customer):
        """Test the 'YYYY-MM-DD HH:MM' start format."""
        ana = make_customer()

        response = client.post(f'/{ana.id}/add-reservation/', data={
            'start_at': '2024-05-01 18:30',
            'num_guests': '2'
        })
        assert response.status_code == 302
        assert get_reservations_for_customer(ana.id)[0].start_at == datetime(2024, 5, 1, 18, 30)

    def test_add_reservation_without_body(self, client, make_customer):
        """Test an empty POST is rejected."""
        ana = make_customer()

        response = client.post(f'/{ana.id}/add-reservation/')
        assert response.status_code == 400
        assert get_reservations_for_customer(ana.id) == []

    def test_add_reservation_invalid_guests(self, client, make_customer):
        """Test zero guests is rejected with a 400."""
        ana = make_customer()

        response = client.post(f'/{ana.id}/add-reservation/', data={
            'start_at': '2024-05-01T18:30',
            'num_guests': '0'
        })
        assert response.status_code == 400
        assert b'Not a valid number of guests' in response.data
        assert get_reservations_for_customer(ana.id) == []

    def test_add_reservation_bad_start(self, client, make_customer):
        """Test an unparseable start time is rejected."""
        ana = make_customer()

        response = client.post(f'/{ana.id}/add-reservation/', data={
            'start_at': 'tomorrow evening',
            'num_guests': '2'
        })
        assert response.status_code == 400
        assert get_reservations_for_customer(ana.id) == []

    def test_add_reservation_unknown_customer(self, client):
        """Test adding a reservation for an unknown customer is a 404."""
        response = client.post('/404/add-reservation/', data={
            'start_at': '2024-05-01T18:30',
            'num_guests': '2'
        })
        assert response.status_code == 404

    def test_edit_form(self, client, make_customer, make_reservation):
        """Test the edit form shows the reservation and its customer."""
        ana = make_customer('Ana', 'Lee')
        reservation = make_reservation(ana, num_guests=3)

        response = client.get(f'/{reservation.id}/edit-reservation/')
        assert response.status_code == 200
        assert b'Ana Lee' in response.data
        assert b'value="3"' in response.data
        assert b'2024-05-01T18:30' in response.data

    def test_edit_reservation(self, client, make_customer, make_reservation):
        """Test updating a reservation redirects to its customer."""
        ana = make_customer()
        reservation = make_reservation(ana, num_guests=2, notes='Window')

        response = client.post(f'/{reservation.id}/edit-reservation/', data={
            'num_guests': '6',
            'notes': ''
        })
        assert response.status_code == 302
        assert response.headers['Location'].endswith(f'/{ana.id}/')

        fetched = get_reservation_by_id(reservation.id)
        assert fetched.num_guests == 6
        assert fetched.notes == ''

    def test_edit_reservation_invalid_guests(self, client, make_customer, make_reservation):
        """Test a negative guest count leaves the reservation unchanged."""
        ana = make_customer()
        reservation = make_reservation(ana, num_guests=2)

        response = client.post(f'/{reservation.id}/edit-reservation/', data={
            'num_guests': '-1',
            'notes': 'ignored'
        })
        assert response.status_code == 400
        assert get_reservation_by_id(reservation.id).num_guests == 2

    def test_edit_reservation_without_body(self, client, make_customer, make_reservation):
        """Test an empty edit POST is rejected."""
        reservation = make_reservation(make_customer())

        response = client.post(f'/{reservation.id}/edit-reservation/')
        assert response.status_code == 400

    def test_edit_missing_reservation(self, client):
        """Test editing an unknown reservation is a 404."""
        response = client.get('/404/edit-reservation/')
        assert response.status_code == 404

    def test_delete_reservation(self, client, make_customer, make_reservation):
        """Test deleting a reservation redirects to its customer."""
        ana = make_customer()
        reservation = make_reservation(ana)

        response = client.post(f'/{reservation.id}/delete-reservation')
        assert response.status_code == 302
        assert response.headers['Location'].endswith(f'/{ana.id}/')
        assert get_reservations_for_customer(ana.id) == []

    def test_delete_missing_reservation(self, client):
        """Test deleting an unknown reservation is a 404."""
        response = client.post('/404/delete-reservation')
        assert response.status_code == 404
