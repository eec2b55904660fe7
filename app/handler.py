"""One cocktail per invocation.

`handle` never raises: any fault becomes a 500 response. Loading the bar for
`lambda_handler` can still fail, and that failure is left to the host.
"""

from dataclasses import dataclass, field
import functools
import json
import logging
import random
from typing import Any

from app import config
from domain.associations import Bar
from domain.repository import RecipeFileRepository
from domain.services import random_cocktail


logger = logging.getLogger(__name__)


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
    "Access-Control-Allow-Headers": "*",
}


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    def to_dict(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": self.headers,
            "body": self.body,
        }


def handle(bar: Bar, *, rng: random.Random | None = None) -> HandlerResponse:
    try:
        cocktail = random_cocktail(bar, rng=rng)
        body = json.dumps(cocktail.to_dict())
    except Exception as e:
        logger.exception("Could not mix a cocktail.")
        return HandlerResponse(status_code=500, body=str(e))

    logger.info(cocktail.to_dict())
    return HandlerResponse(
        status_code=200,
        body=body,
        headers=CORS_HEADERS | {"Content-Type": "application/json"},
    )


@functools.cache
def default_bar() -> Bar:
    # Loaded once per process. A bad corpus raises here, before any request.
    settings = config.Config()
    repo = RecipeFileRepository(path=settings.recipes_path)
    return Bar(repo.list())


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:
    return handle(default_bar()).to_dict()
