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
from flask import Flask
from flask_caching import Cache

from config import Config

# Initialize extensions
cache = Cache()


def create_app(config_class=Config):
    """
    The application factory.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Module loggers under "vehicleform" propagate to the app logger.
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Initialize extensions with the app
    cache.init_app(app)

    # Register blueprints
    from vehicleform.main import bp as main_bp
    from vehicleform.payments import bp as payments_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(payments_bp)

    return app
