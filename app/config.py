from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings


ROOT = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    html_dir: Path = ROOT / "assets" / "html"
    recipes_path: Path = ROOT / "assets" / "recipes.json"
    log_level: str = "INFO"
