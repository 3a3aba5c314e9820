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

from urllib.parse import quote

import requests


class StripeError(Exception):
    """The Stripe API answered with an error status."""

    def __init__(self, status_code, message, details=None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details


def summarize_session(data):
    """Reduces a Checkout Session object to what the site needs to unlock a tier."""
    if not isinstance(data, dict):
        raise ValueError("Unexpected checkout session payload")

    customer_details = data.get("customer_details") or {}
    metadata = data.get("metadata") or {}
    return {
        "paid": data.get("payment_status") == "paid",
        "session_id": data.get("id"),
        "payment_status": data.get("payment_status"),
        "amount_total": data.get("amount_total"),
        "currency": data.get("currency"),
        "customer_email": customer_details.get("email") or data.get("customer_email") or None,
        "rid": metadata.get("rid") or None,
    }


def fetch_checkout_session(session_id, secret_key, api_base, timeout=10):
    """
    Retrieves a Checkout Session with its payment intent expanded.

    Raises StripeError for non-2xx answers and requests exceptions for
    transport or decoding problems.
    """
    url = f"{api_base}/checkout/sessions/{quote(session_id, safe='')}"
    response = requests.get(
        url,
        params={"expand[]": "payment_intent"},
        headers={"Authorization": f"Bearer {secret_key}"},
        timeout=timeout,
    )
    data = response.json()
    if not response.ok:
        error = data.get("error") if isinstance(data, dict) else None
        message = (error or {}).get("message") or "Stripe error"
        raise StripeError(response.status_code, message, data)
    return summarize_session(data)
