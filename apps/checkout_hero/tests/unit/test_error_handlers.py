from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from checkout_hero.api.error_handlers import register_error_handlers
from checkout_hero.domain.errors import ShoppingListNotFoundError


def test_domain_error_handler_returns_error_shape() -> None:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    def boom() -> None:
        raise ShoppingListNotFoundError(message="Missing list")

    client = TestClient(app)
    response = client.get("/boom")

    assert response.status_code == 404
    assert response.json() == {
        "code": "SHOPPING_LIST_NOT_FOUND",
        "message": "Missing list",
    }


def test_unexpected_error_handler_hides_details() -> None:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/crash")
    def crash() -> None:
        raise RuntimeError("secret")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/crash")

    assert response.status_code == 500
    body = response.json()
    assert body["code"] == "INTERNAL_SERVER_ERROR"
    assert body["details"] == {"error_type": "RuntimeError"}


def test_integrity_error_maps_named_constraint_to_domain_error() -> None:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/negative")
    def negative() -> None:
        raise IntegrityError(
            "UPDATE shopping_items",
            {},
            Exception("CHECK constraint failed: ck_shopping_items_price_non_negative"),
        )

    client = TestClient(app)
    response = client.get("/negative")

    assert response.status_code == 422
    assert response.json()["code"] == "ITEM_PRICE_NEGATIVE"
    assert response.json()["details"] == {
        "constraint": "ck_shopping_items_price_non_negative"
    }


def test_unknown_integrity_error_returns_persistence_error() -> None:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/fk")
    def fk() -> None:
        raise IntegrityError(
            "INSERT INTO shopping_items", {}, Exception("FOREIGN KEY constraint failed")
        )

    client = TestClient(app)
    response = client.get("/fk")

    assert response.status_code == 422
    assert response.json()["code"] == "PERSISTENCE_ERROR"
