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
#
# This is the entry point for a WSGI server like Gunicorn or uWSGI.
# Example usage: gunicorn --bind 0.0.0.0:8000 wsgi:application
import click

from vehicleform import create_app
from vehicleform.main.vehicle_generator import VehicleDescriptor, render_vehicle

application = create_app()


@application.cli.command("render-vehicle")
@click.option("--make", default="", help="Manufacturer, e.g. Toyota.")
@click.option("--model", default="", help="Model name, e.g. Camry.")
@click.option("--year", default="", help="Model year.")
@click.option("--body-class", default="", help="Body class as decoded from the VIN.")
@click.option("--vehicle-type", default="", help="Vehicle type as decoded from the VIN.")
@click.option("-o", "--output", type=click.File("w", encoding="utf-8"), default="-", help="Target file.")
def render_vehicle_command(make, model, year, body_class, vehicle_type, output):
    """Writes the sketch SVG for a vehicle identity."""
    rendering = render_vehicle(VehicleDescriptor(make, model, year, body_class, vehicle_type))
    output.write(rendering.document)
    if rendering.fallback:
        click.echo("WARNING: generation failed, wrote the fallback silhouette.", err=True)
    else:
        click.echo(f"Rendered {rendering.label} as {rendering.kind} (seed {rendering.seed}).", err=True)


# You can also run this file directly for development:
if __name__ == "__main__":
    # Note: The reloader and debugger should be disabled in production.
    application.run(host="0.0.0.0")
