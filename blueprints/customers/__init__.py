"""
Customer blueprint.
Registers customer and reservation pages at the site root.

Route logic is split by entity:
- customers.py - Customer list, best customers, detail and CRUD
- reservations.py - Reservation CRUD under a customer
"""

from flask import Blueprint

# Create the customers blueprint
customers_bp = Blueprint('customers', __name__)

# Import and register routes from submodules
from blueprints.customers import customers
from blueprints.customers import reservations

customers.register_routes(customers_bp)
reservations.register_routes(customers_bp)
