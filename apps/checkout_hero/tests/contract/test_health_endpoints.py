from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from checkout_hero.api.app import create_app
from checkout_hero.core.settings import Settings
from checkout_hero.domain.errors import InvalidLocaleError


def test_health_live_returns_alive(client: TestClient) -> None:
    response = client.get("/health/live")

    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


def test_health_ready_returns_ready(client: TestClient) -> None:
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "default_locale": "en_US"}


def test_create_app_rejects_unknown_default_locale() -> None:
    settings = Settings(DEFAULT_LOCALE="zz_ZZ")

    with pytest.raises(InvalidLocaleError):
        create_app(settings)
