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

from flask import current_app, jsonify, request
from requests.exceptions import RequestException

from vehicleform.main.helpers import get_config
from vehicleform.payments import bp
from vehicleform.payments.stripe_api import StripeError, fetch_checkout_session


@bp.route("/verify-session", methods=["GET"])
def verify_session():
    """Reports whether a Stripe Checkout Session has been paid."""
    secret_key = get_config("STRIPE_SECRET_KEY")
    if not secret_key:
        return jsonify({"error": "Missing STRIPE_SECRET_KEY in environment variables."}), 500

    session_id = request.args.get("session_id", "").strip()
    if not session_id:
        return jsonify({"error": "Missing session_id"}), 400

    try:
        summary = fetch_checkout_session(
            session_id, secret_key, get_config("STRIPE_API_BASE"), timeout=get_config("STRIPE_TIMEOUT")
        )
    except StripeError as e:
        current_app.logger.warning("Stripe rejected session lookup (%s): %s", e.status_code, e.message)
        return jsonify({"error": e.message, "details": e.details}), e.status_code
    except (RequestException, ValueError) as e:
        current_app.logger.error("Could not verify checkout session: %s", e)
        return jsonify({"error": "Server error verifying session."}), 500

    return jsonify(summary)
