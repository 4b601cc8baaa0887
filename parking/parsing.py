import logging
import re
from datetime import date, datetime, time, timedelta

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "downtown"
DEFAULT_DURATION = timedelta(hours=2)
LOCATION_KEYWORDS = ("near", "around", "at", "in")
LOCATION_FALLBACK_KEYWORD = "address"
TIME_KEYWORDS = ("at", "between", "from", "to")

_DATE_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")
_TIME_TOKEN_RE = re.compile(r"\d{1,2}(?::\d{2})?(?:[ap]m)?", re.IGNORECASE)
_DIGITS_RE = re.compile(r"[^0-9:]")


def _text_after(lowered, keyword):
    # text between the first and second occurrence of the keyword
    if keyword not in lowered:
        return None
    return lowered.split(keyword)[1]


def _first_token(text):
    tokens = text.strip().split()
    return tokens[0] if tokens else ""


def extract_location(query):
    lowered = (query or "").lower()
    for keyword in LOCATION_KEYWORDS + (LOCATION_FALLBACK_KEYWORD,):
        remainder = _text_after(lowered, keyword)
        if remainder is None:
            continue
        token = _first_token(remainder)
        if token:
            return token
        break
    logger.debug("No location in %r, using %r", query, DEFAULT_LOCATION)
    return DEFAULT_LOCATION


def extract_date(query, today=None):
    today = today or date.today()
    lowered = (query or "").lower()
    if "tomorrow" in lowered:
        return today + timedelta(days=1)
    if "today" in lowered:
        return today

    match = _DATE_RE.search(lowered)
    if match:
        month, day, year = (int(group) for group in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            logger.debug("Unparseable date %r, using today", match.group(0))
            return today
    return today


def parse_time_token(token):
    """Parse ``2pm``, ``1:30pm``, ``14`` or ``13:45`` into a ``time``.

    Out-of-range hours or minutes are clamped to zero.
    """
    normalized = token.lower().strip()
    is_12_hour = "am" in normalized or "pm" in normalized
    digits = _DIGITS_RE.sub("", normalized) if is_12_hour else normalized
    hour_text, _, minute_text = digits.partition(":")
    try:
        hours = int(hour_text)
    except ValueError:
        hours = 0
    try:
        minutes = int(minute_text) if minute_text else 0
    except ValueError:
        minutes = 0

    if is_12_hour:
        is_pm = "pm" in normalized
        if is_pm and hours < 12:
            hours += 12
        if not is_pm and hours == 12:
            hours = 0

    if hours < 0 or hours > 23:
        hours = 0
    if minutes < 0 or minutes > 59:
        minutes = 0
    return time(hours, minutes)


def _add_duration(start, duration):
    shifted = datetime.combine(date.min, start) + duration
    return shifted.time()


def extract_time(query):
    lowered = (query or "").lower()
    found = None
    for keyword in TIME_KEYWORDS:
        found = _text_after(lowered, keyword)
        if found is not None:
            break
    if found is None:
        return None, None

    tokens = _TIME_TOKEN_RE.findall(found)
    if not tokens:
        logger.debug("No time tokens after anchor in %r", query)
        return None, None

    start = parse_time_token(tokens[0])
    if len(tokens) == 1:
        return start, _add_duration(start, DEFAULT_DURATION)
    return start, parse_time_token(tokens[1])
