# vehicleform/main/__init__.py
from flask import Blueprint

# Vehicle render endpoint and the sketch generation pipeline.
bp = Blueprint('main', __name__)

# Import the routes module to link the views to the blueprint.
# This is imported at the bottom to avoid circular dependencies.
from vehicleform.main import routes
