"""Data models shared by the restaurant lookup pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class PlaceCandidate:
    """First entry of a text search result list."""

    place_id: str
    name: str = ""


@dataclass(frozen=True, slots=True)
class AddressComponent:
    types: Tuple[str, ...]
    long_name: str = ""
    short_name: str = ""

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "AddressComponent":
        return cls(
            types=tuple(raw.get("types") or ()),
            long_name=raw.get("long_name") or "",
            short_name=raw.get("short_name") or "",
        )


@dataclass(frozen=True, slots=True)
class NormalizedAddress:
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    county: str = ""


@dataclass(slots=True)
class PlaceDetails:
    """Place Details payload with optional fields resolved once at parse time."""

    name: str = ""
    formatted_address: str = ""
    phone: str = ""
    website: str = ""
    weekday_text: Optional[List[str]] = None
    rating: Optional[float] = None
    user_ratings_total: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address_components: List[AddressComponent] = field(default_factory=list)


@dataclass(slots=True)
class RestaurantRecord:
    """Normalized restaurant record returned to callers."""

    name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    county: str = ""
    phone: str = ""
    website_url: str = ""
    hours_of_operation: str = ""
    yelp_rating: str = ""
    google_rating: Optional[float] = None
    total_ratings: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys of the public response.

        Numeric fields the provider omitted are left out rather than zeroed.
        """
        payload = {
            "name": self.name,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "county": self.county,
            "phone": self.phone,
            "websiteURL": self.website_url,
            "hoursOfOperation": self.hours_of_operation,
            "yelpRating": self.yelp_rating,
            "googleRating": self.google_rating,
            "totalRatings": self.total_ratings,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
        return {key: value for key, value in payload.items() if value is not None}
