import os
from datetime import date, time

import pytest

from app import config as app_config
from app.app_factory import create_app
from parking.listings import ListingAvailability

DATA_CSV = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "driveway_listings.csv")
ALL_DAYS = frozenset(range(7))


@pytest.fixture
def today():
    # A Monday
    return date(2026, 10, 19)


@pytest.fixture
def make_listing():
    def _make(identifier=1, street="1720 Market Street", city="San Francisco",
              region="CA", postal_code="94102", daily_open=time(7, 0),
              daily_close=time(22, 0), weekday_mask=ALL_DAYS, hourly_rate=9.5):
        return ListingAvailability(
            identifier=identifier,
            street=street,
            city=city,
            region=region,
            postal_code=postal_code,
            daily_open=daily_open,
            daily_close=daily_close,
            weekday_mask=frozenset(weekday_mask),
            hourly_rate=hourly_rate,
        )

    return _make


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setattr(app_config, "DB_PATH", str(tmp_path / "chat.db"))
    monkeypatch.setattr(app_config, "LISTINGS_CSV_PATH", DATA_CSV)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
