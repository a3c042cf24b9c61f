"""Client utilities for the Google Places API."""

import logging
from typing import Any, Dict, Optional

import requests

from restaurant_lookup.core.errors import NotFoundError, ParseError, RemoteAPIError, TransportError
from restaurant_lookup.models import PlaceCandidate

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://maps.googleapis.com/maps/api/place"
_SUCCESS_STATUSES = {"OK", "ZERO_RESULTS"}

DETAILS_FIELDS = (
    "name",
    "formatted_address",
    "formatted_phone_number",
    "website",
    "opening_hours",
    "rating",
    "user_ratings_total",
    "geometry",
    "address_components",
)


def _get_json(path: str, params: Dict[str, Any], timeout: Optional[float] = None) -> Dict[str, Any]:
    """Issue a GET against the Places API and classify the payload by its status."""
    try:
        response = _SESSION.get(f"{_BASE_URL}{path}", params=params, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Places request to %s failed: %s", path, exc)
        raise TransportError(str(exc)) from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise ParseError(f"Malformed response body from {path}") from exc
    if not isinstance(payload, dict):
        raise ParseError(f"Unexpected response body from {path}")

    status = payload.get("status")
    if status not in _SUCCESS_STATUSES:
        error_message = payload.get("error_message")
        logger.error("%s failed: status=%s, error_message=%s", path, status, error_message)
        raise RemoteAPIError(str(status) if status is not None else "UNKNOWN", error_message)
    return payload


def text_search(query: str, api_key: str, timeout: Optional[float] = None) -> Dict[str, Any]:
    params = {"query": query, "key": api_key}
    return _get_json("/textsearch/json", params, timeout=timeout)


def resolve_place(query: str, api_key: str, timeout: Optional[float] = None) -> PlaceCandidate:
    """Run a text search and return the first candidate, unranked."""
    payload = text_search(query, api_key, timeout=timeout)
    results = payload.get("results") or []
    if not results:
        logger.warning("No Places results for query=%s", query)
        raise NotFoundError(f'Could not find "{query}" on Google Places', query=query)

    first = results[0]
    place_id = first.get("place_id") if isinstance(first, dict) else None
    if not place_id:
        raise ParseError("Search result is missing a place_id")
    return PlaceCandidate(place_id=place_id, name=first.get("name") or "")


def place_details(place_id: str, api_key: str, timeout: Optional[float] = None) -> Dict[str, Any]:
    params = {"place_id": place_id, "key": api_key, "fields": ",".join(DETAILS_FIELDS)}
    payload = _get_json("/details/json", params, timeout=timeout)
    result = payload.get("result")
    if not result:
        logger.warning("No Places details for place_id=%s", place_id)
        raise NotFoundError(error="Could not fetch place details")
    if not isinstance(result, dict):
        raise ParseError("Details result is not an object")
    return result
