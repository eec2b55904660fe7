import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from domain.models import Recipe


logger = logging.getLogger(__name__)


RECIPES = TypeAdapter(tuple[Recipe, ...])


class CorpusError(Exception):
    pass


class RecipeFileRepository:
    """Read-only book of recipes, loaded from a JSON file exactly once."""

    def __init__(self, *, path: Path) -> None:
        self.recipes = load_recipes(path)

    def list(self) -> tuple[Recipe, ...]:
        return self.recipes


def parse_recipes(data: str | bytes) -> tuple[Recipe, ...]:
    """Unknown fields and type mismatches are errors. Ints pass as amounts."""
    try:
        return RECIPES.validate_json(data, strict=True)
    except ValidationError as e:
        raise CorpusError(f"Invalid recipes: {e}") from e


def load_recipes(path: Path) -> tuple[Recipe, ...]:
    logger.info("Loading recipes from %s", path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise CorpusError(f"Could not read {path}") from e

    recipes = parse_recipes(data)
    logger.info("Loaded %d recipes.", len(recipes))
    return recipes
