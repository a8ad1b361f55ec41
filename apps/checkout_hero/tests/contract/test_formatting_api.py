from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.mark.parametrize(
    ("params", "formatted", "position"),
    [
        ({"amount": "1234.5", "symbol": "$", "locale": "en_US"}, "$1,234.50", "prefix"),
        ({"amount": "1234.5", "symbol": "€", "locale": "de_DE"}, "1.234,50 €", "suffix"),
        (
            {"amount": "1234.5", "symbol": "$", "locale": "en_US", "style": "whole"},
            "$1,235",
            "prefix",
        ),
        (
            {"amount": "1500", "symbol": "$", "locale": "en_US", "style": "compact"},
            "$1.5K",
            "prefix",
        ),
    ],
)
def test_format_renders_amount(
    client: TestClient, params: dict[str, str], formatted: str, position: str
) -> None:
    response = client.get("/v1/format", params=params)

    body = response.json()
    assert response.status_code == 200
    assert body["formatted"] == formatted
    assert body["symbol_position"] == position
    assert body["style"] == params.get("style", "standard")


def test_format_uses_configured_default_locale(client: TestClient) -> None:
    response = client.get("/v1/format", params={"amount": "3", "symbol": "$"})

    assert response.json()["locale"] == "en_US"
    assert response.json()["formatted"] == "$3.00"


def test_format_rejects_unknown_locale(client: TestClient) -> None:
    response = client.get(
        "/v1/format", params={"amount": "3", "symbol": "$", "locale": "zz_ZZ"}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_LOCALE"


def test_format_rejects_non_numeric_amount(client: TestClient) -> None:
    response = client.get("/v1/format", params={"amount": "ten", "symbol": "$"})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"


def test_parse_returns_plain_amount(client: TestClient) -> None:
    response = client.get(
        "/v1/parse", params={"text": "R$ 1.234,50", "locale": "pt_BR"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "text": "R$ 1.234,50",
        "locale": "pt_BR",
        "amount": "1234.50",
    }


def test_parse_returns_null_without_digits(client: TestClient) -> None:
    response = client.get("/v1/parse", params={"text": "abc", "locale": "en_US"})

    assert response.status_code == 200
    assert response.json()["amount"] is None


def test_currencies_lists_common_currencies(client: TestClient) -> None:
    response = client.get("/v1/currencies")

    currencies = response.json()["currencies"]
    assert response.status_code == 200
    assert len(currencies) == 20
    assert {"symbol": "€", "name": "Euro", "code": "EUR"} in currencies
