from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from compound_interest.app import create_app
from compound_interest.core.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(history_max_items=3, history_path=None)


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
