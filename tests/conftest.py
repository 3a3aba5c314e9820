# This file is part of VehicleForm.
#
# VehicleForm is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# VehicleForm is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with VehicleForm.  If not, see <https://www.gnu.org/licenses/>.

import pytest

from config import Config
from vehicleform import create_app


class TestConfig(Config):
    TESTING = True
    CACHE_TYPE = "SimpleCache"
    ENABLE_RENDER_CACHE = True
    RENDER_MAX_AGE = 86400
    RENDER_FALLBACK_CACHE_CONTROL = "no-store"
    RENDER_MAX_FIELD_LENGTH = 120
    STRIPE_SECRET_KEY = "sk_test_123"
    STRIPE_API_BASE = "https://stripe.test/v1"


@pytest.fixture
def app():
    """Create and configure a new app instance for each test."""
    app = create_app(TestConfig)

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()
