from jinja2 import Environment
from markupsafe import Markup

from domain.models import Cocktail


class CocktailDetail:
    def __init__(
        self,
        cocktail: Cocktail,
        *,
        environment: Environment,
        template_name: str = "cocktail-detail.html",
    ) -> None:
        self.cocktail = cocktail
        self.env = environment
        self.name = template_name

    @property
    def title(self) -> str:
        return self.cocktail.name or "Untitled"

    @property
    def content(self) -> str:
        return Markup(self.cocktail.html)

    def render(self) -> str:
        return self.env.get_template(self.name).render(cocktail=self)
