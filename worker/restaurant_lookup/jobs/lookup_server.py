"""HTTP entrypoint for restaurant lookups (serverless/Cloud Run friendly)."""

from __future__ import annotations

import logging
from typing import Any, Optional

from flask import Flask, jsonify, request

from restaurant_lookup.core.config import get_settings
from restaurant_lookup.core.errors import InvalidInput, RestaurantLookupError
from restaurant_lookup.jobs.fetch_restaurant import fetch_restaurant_data

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)

_CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}

# ---------- Routes ----------


@app.get("/healthz")
def healthcheck() -> Any:
    settings = get_settings()
    return jsonify({"status": "ok", "api_key_configured": bool(settings.google_places_api_key)}), 200


@app.post("/")
@app.post("/fetch-restaurant-data")
def fetch_restaurant() -> Any:
    """
    Look up a restaurant and return its normalized details.
    Required JSON field: restaurantName
    Optional: city, state
    """
    payload = request.get_json(silent=True)
    settings = get_settings()

    try:
        if not isinstance(payload, dict):
            raise InvalidInput("request body must be a JSON object")
        record = fetch_restaurant_data(
            _optional_str(payload.get("restaurantName")),
            _optional_str(payload.get("city")),
            _optional_str(payload.get("state")),
            api_key=settings.google_places_api_key,
            timeout=settings.request_timeout,
        )
    except RestaurantLookupError as exc:
        if exc.http_status >= 500:
            logger.error("Restaurant lookup failed (%s): %s", exc.kind, exc)
        return jsonify(exc.to_payload()), exc.http_status

    return jsonify({"success": True, "data": record.to_payload()}), 200, _CORS_HEADERS


@app.errorhandler(405)
def method_not_allowed(_error: Exception) -> Any:
    return jsonify({"error": "Method not allowed"}), 405


# ---------- Internals ----------


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def main() -> None:
    port = get_settings().port
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
