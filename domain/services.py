from collections.abc import Sequence
import logging
import random

from domain.associations import AssociationIndex, Bar
from domain.models import Cocktail, Ingredient, Recipe


logger = logging.getLogger(__name__)


MIN_INGREDIENTS = 2
MAX_EXTRA_INGREDIENTS = 3
MIN_NAME_PARTS = 2


class SynthesisError(Exception):
    pass


def permutation(n: int, rng: random.Random) -> list[int]:
    order = list(range(n))
    rng.shuffle(order)
    return order


def pick_ingredient(
    choices: Sequence[Ingredient],
    chosen: Sequence[Ingredient],
    rng: random.Random,
) -> Ingredient | None:
    """First choice, in random order, that is not special and not already in."""
    taken = {i.printed_name for i in chosen}
    for idx in permutation(len(choices), rng):
        choice = choices[idx]
        if not choice.identity:
            continue
        if choice.printed_name in taken:
            continue
        return choice
    return None


def candidates(
    associations: AssociationIndex,
    parts: Sequence[str],
) -> list[Ingredient]:
    """Associates of every part, repeats included. Repeats weight the draw."""
    return [choice for part in parts for choice in associations[part]]


def expand_ingredients(
    associations: AssociationIndex,
    *,
    rng: random.Random,
) -> list[Ingredient]:
    """Random walk over the association index.

    Rounds that find nothing new are not retried, so the result may hold
    anywhere between zero and five ingredients.
    """
    if not associations:
        raise SynthesisError("No ingredients to choose from.")

    parts = [rng.choice(associations.identities)]
    count = MIN_INGREDIENTS + rng.randint(0, MAX_EXTRA_INGREDIENTS)

    ingredients: list[Ingredient] = []
    for _ in range(count):
        choices = candidates(associations, parts)
        choice = pick_ingredient(choices, ingredients, rng)
        if choice is None:
            continue
        ingredients.append(choice)
        parts.append(choice.identity)

    return ingredients


def name_part(
    ingredient: Ingredient,
    recipes: Sequence[Recipe],
    rng: random.Random,
) -> str | None:
    """A word from the name of a random recipe that uses the ingredient."""
    for idx in permutation(len(recipes), rng):
        recipe = recipes[idx]
        if any(i.printed_name == ingredient.printed_name for i in recipe.ingredients):
            return rng.choice(recipe.name.split(" "))
    return None


def cocktail_name(
    ingredients: Sequence[Ingredient],
    recipes: Sequence[Recipe],
    *,
    rng: random.Random,
) -> str:
    if len(ingredients) < MIN_NAME_PARTS:
        raise SynthesisError(
            f"Need at least {MIN_NAME_PARTS} ingredients to name a cocktail, "
            f"got {len(ingredients)}."
        )

    n = MIN_NAME_PARTS + rng.randint(0, len(ingredients) - MIN_NAME_PARTS)
    parts: list[str] = []
    for _ in range(n):
        part = name_part(rng.choice(ingredients), recipes, rng)
        if part is not None:
            parts.append(part)
    return " ".join(parts)


def random_cocktail(bar: Bar, *, rng: random.Random | None = None) -> Cocktail:
    rng = random.Random() if rng is None else rng
    ingredients = expand_ingredients(bar.associations, rng=rng)
    name = cocktail_name(ingredients, bar.recipes, rng=rng)
    cocktail = Cocktail(name=name, ingredients=ingredients)
    logger.debug("Mixed %r from %d ingredients.", cocktail, len(ingredients))
    return cocktail
