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

import hashlib
import json

from flask import current_app, request

from vehicleform.main.vehicle_generator import VehicleDescriptor

# Query parameter -> descriptor field
QUERY_FIELDS = (
    ("make", "make"),
    ("model", "model"),
    ("year", "year"),
    ("bodyClass", "body_class"),
    ("vehicleType", "vehicle_type"),
)


def get_config(key):
    """Helper to safely get config values."""
    return current_app.config.get(key, "")


def get_descriptor_from_request():
    """Builds a VehicleDescriptor from the query string, absent fields as ''."""
    max_length = get_config("RENDER_MAX_FIELD_LENGTH")
    fields = {}
    for param, field in QUERY_FIELDS:
        value = request.args.get(param, "").strip()
        fields[field] = value[:max_length] if max_length else value
    return VehicleDescriptor(**fields)


def render_cache_key(descriptor):
    digest = hashlib.sha256(json.dumps(list(descriptor)).encode("utf-8")).hexdigest()
    return f"vehicle-render:{digest}"


def cache_control_for(rendering):
    if rendering.fallback:
        return get_config("RENDER_FALLBACK_CACHE_CONTROL")
    return f"public, max-age={get_config('RENDER_MAX_AGE')}"
