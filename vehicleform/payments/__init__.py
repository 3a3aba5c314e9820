# vehicleform/payments/__init__.py
from flask import Blueprint

# Checkout session verification, deployed next to the renderer.
bp = Blueprint('payments', __name__)

from vehicleform.payments import routes
