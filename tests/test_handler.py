import json
import random

import pytest

from app import handler
from app.handler import CORS_HEADERS, handle, lambda_handler
from domain.associations import Bar
from domain.models import Ingredient, Recipe


def assert_cors(headers: dict[str, str]) -> None:
    for key in (
        "Access-Control-Allow-Origin",
        "Access-Control-Allow-Methods",
        "Access-Control-Allow-Headers",
    ):
        assert headers[key] == "*"


def test_handle(bar: Bar) -> None:
    resp = handle(bar, rng=random.Random(7))

    assert resp.status_code == 200
    assert_cors(resp.headers)
    assert resp.headers["Content-Type"] == "application/json"

    body = json.loads(resp.body)
    assert set(body) == {"name", "ingredients"}
    assert 2 <= len(body["ingredients"]) <= 5
    assert all(isinstance(i, str) for i in body["ingredients"])


def test_handle_empty_bar() -> None:
    resp = handle(Bar([]))

    assert resp.status_code == 500
    assert_cors(resp.headers)
    assert "Content-Type" not in resp.headers
    assert resp.body


def test_handle_too_few_ingredients() -> None:
    bar = Bar(
        [
            Recipe(
                name="Salted Gin",
                ingredients=(Ingredient(ingredient="Gin"), Ingredient(special="Salt")),
            )
        ]
    )

    resp = handle(bar)

    assert resp.status_code == 500
    assert "ingredients" in resp.body


def test_handle_keeps_going(bar: Bar) -> None:
    assert handle(Bar([])).status_code == 500
    assert handle(bar).status_code == 200


def test_cors_headers_not_shared(bar: Bar) -> None:
    resp = handle(bar)
    resp.headers["X-Extra"] = "1"
    assert "X-Extra" not in CORS_HEADERS
    assert "Content-Type" not in CORS_HEADERS


def test_lambda_handler(monkeypatch: pytest.MonkeyPatch, bar: Bar) -> None:
    monkeypatch.setattr(handler, "default_bar", lambda: bar)

    got = lambda_handler({}, None)

    assert got["statusCode"] == 200
    assert_cors(got["headers"])
    assert json.loads(got["body"])["name"]


def test_default_bar_loads_once() -> None:
    handler.default_bar.cache_clear()
    try:
        first = handler.default_bar()
        assert handler.default_bar() is first
        assert len(first.recipes) > 0
    finally:
        handler.default_bar.cache_clear()
