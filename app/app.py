import contextlib
import functools
import logging
from typing import Any, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, Response
from starlette.routing import Route

from app import config
from app.handler import handle
from app.html.cocktail_detail import CocktailDetail
from domain.associations import Bar
from domain.repository import RecipeFileRepository
from domain.services import random_cocktail


CONFIG = config.Config()


logging.basicConfig(
    level=CONFIG.log_level,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


@contextlib.asynccontextmanager
async def lifespan(app: Starlette):
    # No bar, no service. A broken recipe book stops startup here.
    repo = RecipeFileRepository(path=CONFIG.recipes_path)
    app.state.bar = Bar(repo.list())
    logger.info("Bar open: %r", app.state.bar)
    yield


async def cocktail(request: Request) -> Response:
    bar: Bar = request.app.state.bar
    resp = handle(bar)
    return Response(resp.body, status_code=resp.status_code, headers=resp.headers)


@aHTMLResponse
async def cocktail_detail(request: Request) -> str | tuple[str, int]:
    bar: Bar = request.app.state.bar
    try:
        drink = random_cocktail(bar)
    except Exception:
        logger.exception("Could not mix a cocktail.")
        return "Could not mix a cocktail.", 500
    return CocktailDetail(drink, environment=TEMPLATES).render()


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/", cocktail),
        Route("/cocktail", cocktail),
        Route("/cocktail.html", cocktail_detail),
    ],
    lifespan=lifespan,
)
