from pathlib import Path

import pytest

from domain.associations import Bar
from domain.models import Recipe
from domain.repository import RecipeFileRepository


RECIPES_PATH = Path(__file__).resolve().parent.parent / "assets" / "recipes.json"


@pytest.fixture(scope="session")
def recipes() -> tuple[Recipe, ...]:
    return RecipeFileRepository(path=RECIPES_PATH).list()


@pytest.fixture(scope="session")
def bar(recipes: tuple[Recipe, ...]) -> Bar:
    return Bar(recipes)
