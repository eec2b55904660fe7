"""Ingredient co-occurrence across the recipe book."""

from collections.abc import Iterable, Iterator, Mapping
import logging

from domain.models import Ingredient, Recipe


logger = logging.getLogger(__name__)


class AssociationIndex(Mapping[str, tuple[Ingredient, ...]]):
    """Maps an ingredient identity to everything it shares a recipe with.

    Associates are kept in recipe order and are not deduplicated, so an
    ingredient that is mixed with another in several recipes is listed once
    per recipe. Sampling from the list is therefore weighted by popularity.
    """

    def __init__(self, associations: Mapping[str, Iterable[Ingredient]]) -> None:
        self._associations = {k: tuple(v) for k, v in associations.items()}

    @classmethod
    def from_recipes(cls, recipes: Iterable[Recipe]) -> "AssociationIndex":
        associations: dict[str, list[Ingredient]] = {}
        for recipe in recipes:
            for i, src in enumerate(recipe.ingredients):
                if not src.identity:
                    continue

                others = associations.setdefault(src.identity, [])
                others.extend(
                    dst for j, dst in enumerate(recipe.ingredients) if i != j
                )

        logger.info("Indexed %d ingredients.", len(associations))
        return cls(associations)

    def __getitem__(self, identity: str) -> tuple[Ingredient, ...]:
        return self._associations[identity]

    def __iter__(self) -> Iterator[str]:
        return iter(self._associations)

    def __len__(self) -> int:
        return len(self._associations)

    @property
    def identities(self) -> list[str]:
        return list(self._associations)


class Bar:
    """The recipe book and its association index, built once and shared."""

    def __init__(self, recipes: Iterable[Recipe]) -> None:
        self.recipes = tuple(recipes)
        self.associations = AssociationIndex.from_recipes(self.recipes)

    def __repr__(self) -> str:
        return f"<Bar(recipes={len(self.recipes)}, ingredients={len(self.associations)})>"
