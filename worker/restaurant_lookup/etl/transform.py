"""Utilities for transforming Google Places responses into restaurant records."""

import logging
from typing import Any, Dict, Iterable, Optional, Sequence

from restaurant_lookup.core.errors import InvalidInput
from restaurant_lookup.models import AddressComponent, NormalizedAddress, PlaceDetails, RestaurantRecord

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip()


def build_search_query(name: Optional[str], city: Optional[str] = None, state: Optional[str] = None) -> str:
    """Join name, city and state with single spaces, skipping blank optional parts."""
    name = _clean(name)
    if not name:
        raise InvalidInput("restaurantName is required")
    return " ".join(part for part in (name, _clean(city), _clean(state)) if part)


def normalize_address(components: Iterable[AddressComponent]) -> NormalizedAddress:
    """Flatten Places address components into discrete fields.

    Components are visited in provider order and each one feeds at most one
    field. Repeated tags overwrite earlier values, except route names, which
    accumulate after the street number.
    """
    street_number = ""
    route = ""
    city = ""
    state = ""
    zip_code = ""
    county = ""

    for component in components or []:
        types = set(component.types)
        if "street_number" in types:
            street_number = component.long_name
        elif "route" in types:
            route += component.long_name
        elif "locality" in types:
            city = component.long_name
        elif "administrative_area_level_1" in types:
            state = component.short_name
        elif "postal_code" in types:
            zip_code = component.long_name
        elif "administrative_area_level_2" in types:
            county = component.long_name

    address = f"{street_number} {route}".strip()
    return NormalizedAddress(address=address, city=city, state=state, zip=zip_code, county=county)


def format_hours(weekday_text: Optional[Sequence[str]]) -> str:
    if not weekday_text:
        return ""
    return ", ".join(weekday_text)


def format_rating(rating: Optional[float]) -> str:
    """Render a rating the way it reads in JSON: 4.0 becomes "4"."""
    if rating is None:
        return ""
    if float(rating).is_integer():
        return str(int(rating))
    return str(rating)


def _safe_float(value: Any) -> Optional[float]:
    try:
        if value is None or isinstance(value, bool):
            return None
        return float(value)
    except (TypeError, ValueError):
        return None


def _safe_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_place_details(result: Dict[str, Any]) -> PlaceDetails:
    """Resolve every optional field of a Place Details result once."""
    location = (result.get("geometry") or {}).get("location") or {}
    opening_hours = result.get("opening_hours") or {}
    weekday_text = opening_hours.get("weekday_text")

    components = [
        AddressComponent.from_raw(raw)
        for raw in result.get("address_components") or []
        if isinstance(raw, dict)
    ]

    return PlaceDetails(
        name=_clean(result.get("name")),
        formatted_address=_clean(result.get("formatted_address")),
        phone=_clean(result.get("formatted_phone_number")),
        website=_clean(result.get("website")),
        weekday_text=list(weekday_text) if weekday_text is not None else None,
        rating=_safe_float(result.get("rating")),
        user_ratings_total=_safe_int(result.get("user_ratings_total")),
        latitude=_safe_float(location.get("lat")),
        longitude=_safe_float(location.get("lng")),
        address_components=components,
    )


def to_restaurant_record(details: PlaceDetails) -> RestaurantRecord:
    address = normalize_address(details.address_components)
    return RestaurantRecord(
        name=details.name,
        address=address.address,
        city=address.city,
        state=address.state,
        zip=address.zip,
        county=address.county,
        phone=details.phone,
        website_url=details.website,
        hours_of_operation=format_hours(details.weekday_text),
        yelp_rating=format_rating(details.rating),
        google_rating=details.rating,
        total_ratings=details.user_ratings_total,
        latitude=details.latitude,
        longitude=details.longitude,
    )
