from markdown2 import (  # pyright: ignore[reportMissingTypeStubs]
    markdown,  # pyright: ignore[reportUnknownVariableType]
)
from pydantic import BaseModel, ConfigDict


CENTILITRE = "cl"
MILLILITRE = "ml"


def format_amount(amount: float) -> str:
    """Fewest digits that read back as the same float.

    Plain notation for exponents from -4 to 5, scientific otherwise, so
    `20`, `7.5`, `0.0001`, `1e-05` and `1.234567e+06`.
    """
    for precision in range(17):
        sci = f"{amount:.{precision}e}"
        if float(sci) == amount:
            break

    exp = int(sci.split("e")[1])
    if -4 <= exp < 6:
        return f"{amount:.{max(precision - exp, 0)}f}"
    return sci


class Ingredient(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    unit: str = ""
    amount: float = 0
    label: str = ""
    ingredient: str = ""
    special: str = ""

    @property
    def identity(self) -> str:
        """Key used for the association index. Empty for special items."""
        return self.ingredient

    @property
    def printed_name(self) -> str:
        if self.special:
            return self.special
        if self.label:
            return self.label
        return self.ingredient

    def __str__(self) -> str:
        if self.special:
            return self.special

        amount, unit = self.amount, self.unit
        if unit == CENTILITRE:
            amount, unit = amount * 10, MILLILITRE

        return f"{format_amount(amount)} {unit} {self.printed_name}"


class Recipe(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = ""
    glass: str = ""
    category: str = ""
    garnish: str = ""
    preparation: str = ""
    ingredients: tuple[Ingredient, ...] = ()

    def __repr__(self) -> str:
        return f"<Recipe(name={self.name})>"


class Cocktail:
    """A synthesized recipe. Only has a name and ingredients."""

    def __init__(
        self,
        *,
        name: str,
        ingredients: list[Ingredient],
    ) -> None:
        self.name = name
        self.ingredients = ingredients

    def __repr__(self) -> str:
        return f"<Cocktail(name={self.name})>"

    def __str__(self) -> str:
        lines = [f"{self.name}:"]
        lines += [f"  - {i}" for i in self.ingredients]
        return "\n".join(lines) + "\n"

    @property
    def markdown(self) -> str:
        lines = [f"### {self.name}", ""]
        lines += [f"- {i}" for i in self.ingredients]
        return "\n".join(lines) + "\n"

    @property
    def html(self) -> str:
        return markdown(  # pyright: ignore[reportUnknownVariableType]
            self.markdown
        )

    def as_recipe(self) -> Recipe:
        return Recipe(name=self.name, ingredients=tuple(self.ingredients))

    def to_dict(self) -> dict[str, str | list[str]]:
        return {
            "name": self.name,
            "ingredients": [str(i) for i in self.ingredients],
        }
