import random
from datetime import date, datetime, time, timedelta

import pytest

from parking.search import get_available_listings


def _window(day, start, end):
    return datetime.combine(day, start), datetime.combine(day, end)


def test_matches_listing_containing_window(make_listing, today):
    listing = make_listing()
    start, end = _window(today, time(10, 0), time(12, 0))
    matches = get_available_listings("market", start, end, [listing])
    assert len(matches) == 1
    match = matches[0]
    assert match.listing is listing
    assert match.address == "1720 Market Street, San Francisco, CA 94102"
    assert match.price == 9.5


@pytest.mark.parametrize("location", ["MARKET", "san fran", "ca", "9410"])
def test_location_matches_any_component(make_listing, today, location):
    start, end = _window(today, time(10, 0), time(12, 0))
    assert get_available_listings(location, start, end, [make_listing()])


def test_location_mismatch(make_listing, today):
    start, end = _window(today, time(10, 0), time(12, 0))
    assert get_available_listings("brooklyn", start, end, [make_listing()]) == []


def test_weekday_outside_mask_is_rejected(make_listing, today):
    weekdays_only = make_listing(weekday_mask={1, 2, 3, 4, 5})
    saturday = today + timedelta(days=5)
    start, end = _window(saturday, time(10, 0), time(12, 0))
    assert get_available_listings("market", start, end, [weekdays_only]) == []

    start, end = _window(today, time(10, 0), time(12, 0))
    assert get_available_listings("market", start, end, [weekdays_only])


def test_sunday_is_weekday_zero(make_listing):
    sunday_only = make_listing(weekday_mask={0})
    start, end = _window(date(2026, 10, 18), time(10, 0), time(12, 0))
    assert get_available_listings("market", start, end, [sunday_only])


def test_partial_overlap_is_rejected(make_listing, today):
    office_hours = make_listing(daily_open=time(9, 0), daily_close=time(17, 0))
    start, end = _window(today, time(16, 0), time(18, 0))
    assert get_available_listings("market", start, end, [office_hours]) == []


def test_window_touching_bounds_is_accepted(make_listing, today):
    office_hours = make_listing(daily_open=time(9, 0), daily_close=time(17, 0))
    start, end = _window(today, time(9, 0), time(17, 0))
    assert get_available_listings("market", start, end, [office_hours])


def test_window_crossing_midnight_is_rejected(make_listing, today):
    late = make_listing(daily_open=time(0, 0), daily_close=time(23, 59))
    start = datetime.combine(today, time(23, 0))
    end = start + timedelta(hours=2)
    assert get_available_listings("market", start, end, [late]) == []


def test_preserves_input_order_without_mutating(make_listing, today):
    listings = (
        make_listing(identifier=3, hourly_rate=12),
        make_listing(identifier=1, hourly_rate=4),
        make_listing(identifier=2, weekday_mask={6}),
        make_listing(identifier=5, hourly_rate=8),
    )
    snapshot = tuple(listings)
    start, end = _window(today, time(8, 0), time(9, 0))
    matches = get_available_listings("market", start, end, listings)
    assert [match.listing.identifier for match in matches] == [3, 1, 5]
    assert listings == snapshot


def test_invariants_hold_across_random_listings(make_listing):
    rng = random.Random(20261019)
    for _ in range(300):
        day = date(2026, 1, 1) + timedelta(days=rng.randrange(365))
        open_hour = rng.randrange(0, 23)
        close_hour = rng.randrange(open_hour, 24)
        listing = make_listing(
            weekday_mask={index for index in range(7) if rng.random() < 0.5},
            daily_open=time(open_hour, rng.choice((0, 30))),
            daily_close=time(close_hour, 59) if close_hour == 23 else time(close_hour, 0),
        )
        start_hour = rng.randrange(0, 23)
        start = datetime.combine(day, time(start_hour, rng.choice((0, 15, 30))))
        end = start + timedelta(minutes=rng.randrange(15, 240))

        matches = get_available_listings("market", start, end, [listing])

        weekday = start.isoweekday() % 7
        for match in matches:
            assert weekday in match.listing.weekday_mask
            assert datetime.combine(start.date(), match.listing.daily_open) <= start
            assert datetime.combine(start.date(), match.listing.daily_close) >= end
        if weekday not in listing.weekday_mask:
            assert matches == []
