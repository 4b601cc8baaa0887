import csv
import logging
from dataclasses import dataclass
from datetime import time
from typing import FrozenSet, Union

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "y", "t"}


class ListingError(ValueError):
    pass


@dataclass(frozen=True)
class ListingAvailability:
    identifier: Union[int, str]
    street: str
    city: str
    region: str
    postal_code: str
    daily_open: time
    daily_close: time
    weekday_mask: FrozenSet[int]
    hourly_rate: float

    @property
    def full_address(self):
        return f"{self.street}, {self.city}, {self.region} {self.postal_code}"


def parse_clock(value):
    text = (value or "").strip()
    hour_text, sep, minute_text = text.partition(":")
    if not sep:
        raise ListingError(f"Expected HH:MM, got {value!r}")
    try:
        return time(int(hour_text), int(minute_text))
    except ValueError as exc:
        raise ListingError(f"Invalid time {value!r}") from exc


def parse_weekdays(value):
    days = set()
    for part in (value or "").split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or int(part) > 6:
            raise ListingError(f"Invalid weekday {part!r}")
        days.add(int(part))
    return frozenset(days)


def _parse_identifier(value):
    text = (value or "").strip()
    return int(text) if text.isdigit() else text


def _is_active(row):
    value = (row.get("is_active") or "").strip().lower()
    return not value or value in _TRUTHY


def listing_from_row(row):
    daily_open = parse_clock(row.get("availability_start_time"))
    daily_close = parse_clock(row.get("availability_end_time"))
    if daily_open > daily_close:
        raise ListingError(
            "Opening time {open} is after closing time {close}".format(
                open=daily_open.strftime("%H:%M"), close=daily_close.strftime("%H:%M")
            )
        )
    try:
        hourly_rate = float(row.get("price_hourly") or "")
    except ValueError as exc:
        raise ListingError(f"Invalid hourly price {row.get('price_hourly')!r}") from exc
    if hourly_rate < 0:
        raise ListingError(f"Negative hourly price {hourly_rate}")

    return ListingAvailability(
        identifier=_parse_identifier(row.get("id")),
        street=(row.get("address") or "").strip(),
        city=(row.get("city") or "").strip(),
        region=(row.get("state") or "").strip(),
        postal_code=(row.get("zip_code") or "").strip(),
        daily_open=daily_open,
        daily_close=daily_close,
        weekday_mask=parse_weekdays(row.get("available_weekdays")),
        hourly_rate=hourly_rate,
    )


def load_listings(csv_path):
    listings = []
    with open(csv_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        for line_number, row in enumerate(reader, start=2):
            if not _is_active(row):
                continue
            try:
                listings.append(listing_from_row(row))
            except ListingError as exc:
                logger.warning("Skipping listing on line %d of %s: %s", line_number, csv_path, exc)
    return tuple(listings)
