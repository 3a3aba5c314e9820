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

import os

from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, ".env"))


class Config:
    """Base config."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "you-will-never-guess")
    FLASK_DEBUG = os.environ.get("FLASK_DEBUG", "False").lower() in ("true", "1", "t")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # --- Caching Configuration ---
    # Only successful renders are stored; fallback documents never are.
    CACHE_TYPE = os.environ.get("CACHE_TYPE", "SimpleCache")
    CACHE_DEFAULT_TIMEOUT = int(os.environ.get("CACHE_DEFAULT_TIMEOUT", 86400))
    ENABLE_RENDER_CACHE = os.environ.get("ENABLE_RENDER_CACHE", "True").lower() in ("true", "1", "t")

    # --- Vehicle Render ---
    RENDER_MAX_AGE = int(os.environ.get("RENDER_MAX_AGE", 86400))
    RENDER_FALLBACK_CACHE_CONTROL = os.environ.get("RENDER_FALLBACK_CACHE_CONTROL", "no-store")
    try:
        RENDER_MAX_FIELD_LENGTH = int(os.environ.get("RENDER_MAX_FIELD_LENGTH", 120))
    except ValueError:
        print("WARNING: RENDER_MAX_FIELD_LENGTH is malformed. Using default.")
        RENDER_MAX_FIELD_LENGTH = 120

    # --- Stripe Checkout Verification ---
    STRIPE_SECRET_KEY = os.environ.get("STRIPE_SECRET_KEY")
    STRIPE_API_BASE = os.environ.get("STRIPE_API_BASE", "https://api.stripe.com/v1").rstrip("/")
    STRIPE_TIMEOUT = int(os.environ.get("STRIPE_TIMEOUT", 10))
