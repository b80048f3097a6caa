from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from journey.app import create_app
from journey.config import Settings
from journey.models import Account, Currency


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, log_level="WARNING")


@pytest.fixture()
def app(settings):
    flask_app = create_app(settings)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def mixed_accounts() -> list[Account]:
    return [
        Account(name="Brokerage", balance=40_000, currency=Currency.USD, is_investment=True),
        Account(name="Checking", balance=5_000, currency=Currency.USD),
        Account(
            name="Euro savings",
            balance=9_200,
            currency=Currency.EUR,
            interest_rate_pa=3.0,
        ),
    ]
