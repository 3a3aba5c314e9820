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

from flask import Response, current_app

from vehicleform import cache
from vehicleform.main import bp
from vehicleform.main.helpers import cache_control_for, get_config, get_descriptor_from_request, render_cache_key
from vehicleform.main.vehicle_generator import render_vehicle

SVG_CONTENT_TYPE = "image/svg+xml; charset=utf-8"


@bp.route("/vehicle-render")
@bp.route("/vehicle-render.svg")
def vehicle_render():
    """Returns the representative sketch for the identity in the query string."""
    descriptor = get_descriptor_from_request()
    use_cache = get_config("ENABLE_RENDER_CACHE")
    cache_key = render_cache_key(descriptor)

    rendering = cache.get(cache_key) if use_cache else None
    if rendering is None:
        rendering = render_vehicle(descriptor)
        if rendering.fallback:
            current_app.logger.warning("Served fallback vehicle render for %s", descriptor._asdict())
        elif use_cache:
            cache.set(cache_key, rendering)

    return Response(
        rendering.document,
        status=200,
        content_type=SVG_CONTENT_TYPE,
        headers={"Cache-Control": cache_control_for(rendering), "X-Vehicle-Kind": rendering.kind},
    )
