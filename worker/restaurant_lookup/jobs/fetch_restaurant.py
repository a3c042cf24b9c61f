"""Resolve a restaurant through Google Places and normalize its details."""

import argparse
import json
import logging
import sys
from typing import Optional

from restaurant_lookup.core.config import get_settings
from restaurant_lookup.core.errors import MissingConfig, RestaurantLookupError
from restaurant_lookup.etl.transform import build_search_query, parse_place_details, to_restaurant_record
from restaurant_lookup.models import RestaurantRecord
from restaurant_lookup.vendors import google_places

logger = logging.getLogger(__name__)


def fetch_restaurant_data(
    restaurant_name: Optional[str],
    city: Optional[str] = None,
    state: Optional[str] = None,
    *,
    api_key: Optional[str],
    timeout: Optional[float] = None,
) -> RestaurantRecord:
    """Search for a restaurant, fetch its details and return a normalized record.

    The search and details requests run strictly in that order; any failure
    aborts the lookup with a :class:`RestaurantLookupError` subclass.
    """
    if not api_key:
        raise MissingConfig()

    query = build_search_query(restaurant_name, city, state)
    logger.info("Searching for: %s", query)

    candidate = google_places.resolve_place(query, api_key, timeout=timeout)
    logger.info("Resolved query=%s to place_id=%s", query, candidate.place_id)

    result = google_places.place_details(candidate.place_id, api_key, timeout=timeout)
    return to_restaurant_record(parse_place_details(result))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up a restaurant on Google Places")
    parser.add_argument("--name", dest="restaurant_name", required=True, help="Restaurant name")
    parser.add_argument("--city", dest="city", help="City to narrow the search")
    parser.add_argument("--state", dest="state", help="State to narrow the search")
    return parser


def main(argv: Optional[list] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    args = build_parser().parse_args(argv)
    settings = get_settings()

    try:
        record = fetch_restaurant_data(
            args.restaurant_name,
            args.city,
            args.state,
            api_key=settings.google_places_api_key,
            timeout=settings.request_timeout,
        )
    except MissingConfig as exc:
        logger.error("Configuration error: %s", exc)
        print(json.dumps(exc.to_payload()), file=sys.stderr)
        return 2
    except RestaurantLookupError as exc:
        logger.error("Lookup failed (%s): %s", exc.kind, exc)
        print(json.dumps(exc.to_payload()), file=sys.stderr)
        return 1

    print(json.dumps({"success": True, "data": record.to_payload()}, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
