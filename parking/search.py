import logging
from dataclasses import dataclass
from datetime import datetime

from .listings import ListingAvailability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParkingMatch:
    listing: ListingAvailability
    address: str
    price: float


def _weekday_index(value):
    # 0=Sunday..6=Saturday
    return value.isoweekday() % 7


def _matches_location(listing, location):
    needle = (location or "").lower()
    return (
        needle in listing.street.lower()
        or needle in listing.city.lower()
        or needle in listing.region.lower()
        or (location or "") in listing.postal_code
    )


def _availability_bounds(listing, window_start):
    day = window_start.date()
    return (
        datetime.combine(day, listing.daily_open),
        datetime.combine(day, listing.daily_close),
    )


def get_available_listings(location, window_start, window_end, listings):
    weekday = _weekday_index(window_start)
    matches = []
    for listing in listings:
        if not _matches_location(listing, location):
            continue
        if weekday not in listing.weekday_mask:
            continue
        available_from, available_to = _availability_bounds(listing, window_start)
        if available_from <= window_start and available_to >= window_end:
            matches.append(
                ParkingMatch(
                    listing=listing,
                    address=listing.full_address,
                    price=listing.hourly_rate,
                )
            )
    logger.debug(
        "%d of %d listings match %r between %s and %s",
        len(matches),
        len(listings),
        location,
        window_start.isoformat(),
        window_end.isoformat(),
    )
    return matches
