import json
from pathlib import Path

import pytest
from starlette.testclient import TestClient

from app import app as app_module
from app.app import app, lifespan
from domain.repository import CorpusError


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


@pytest.mark.parametrize("path", ("/", "/cocktail"))
def test_cocktail(client: TestClient, path: str) -> None:
    resp = client.get(path)

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-methods"] == "*"
    assert resp.headers["access-control-allow-headers"] == "*"
    assert resp.headers["content-type"] == "application/json"

    body = json.loads(resp.text)
    assert body["name"]
    assert 2 <= len(body["ingredients"]) <= 5


def test_cocktail_detail(client: TestClient) -> None:
    resp = client.get("/cocktail.html")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "<li>" in resp.text


@pytest.mark.asyncio
async def test_lifespan_loads_bar() -> None:
    async with lifespan(app):
        assert len(app.state.bar.recipes) > 0
        assert len(app.state.bar.associations) > 0


@pytest.mark.asyncio
async def test_lifespan_bad_recipes(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    path = tmp_path / "recipes.json"
    path.write_text('[{"name": "Negroni", "rating": 5}]')
    monkeypatch.setattr(app_module.CONFIG, "recipes_path", path)

    with pytest.raises(CorpusError):
        async with lifespan(app):
            pass
