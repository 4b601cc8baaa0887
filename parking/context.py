import logging
from datetime import date, datetime, time

from .parsing import extract_date, extract_location, extract_time
from .search import get_available_listings

logger = logging.getLogger(__name__)

START_OF_DAY = time(0, 0, 0)
END_OF_DAY = time(23, 59, 59)
NO_PARKING_MESSAGE = "No, there is no parking available at that time and location."
SEVERAL_HEADER = "Yes, there are several parking spaces available:\n"


def _format_price(price):
    return f"${price:.2f}"


def format_response(matches):
    if not matches:
        return NO_PARKING_MESSAGE
    if len(matches) == 1:
        match = matches[0]
        return "Yes, there is parking available at {address} for {price} per hour.".format(
            address=match.address, price=_format_price(match.price)
        )
    lines = [
        "{index}. {address} for {price} per hour".format(
            index=index, address=match.address, price=_format_price(match.price)
        )
        for index, match in enumerate(matches, start=1)
    ]
    return SEVERAL_HEADER + "\n".join(lines)


def resolve_window(target_date, start, end):
    if start is None or end is None:
        return (
            datetime.combine(target_date, START_OF_DAY),
            datetime.combine(target_date, END_OF_DAY),
        )
    return datetime.combine(target_date, start), datetime.combine(target_date, end)


def resolve_query(raw_query, listings, today=None):
    today = today or date.today()
    location = extract_location(raw_query)
    target_date = extract_date(raw_query, today=today)
    start, end = extract_time(raw_query)

    window_start, window_end = resolve_window(target_date, start, end)
    matches = get_available_listings(location, window_start, window_end, listings)
    logger.info(
        "Resolved parking query location=%r window=%s..%s matches=%d",
        location,
        window_start.isoformat(),
        window_end.isoformat(),
        len(matches),
    )
    return format_response(matches)
