from enum import Enum
from pathlib import Path
from typing import Self

from pydantic import model_validator
from pydantic_settings import BaseSettings


ROOT = Path(__file__).resolve().parent.parent

LOCAL_SESSION_SECRET = "taco-cloud-local-secret"


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    html_dir: Path = ROOT / "assets" / "html"
    assets_dir: Path = ROOT / "assets"
    session_secret: str = LOCAL_SESSION_SECRET
    session_max_age: int = 60 * 60 * 24
    order_ttl_seconds: int = 60 * 30
    log_level: str = "INFO"

    @model_validator(mode="after")
    def secret_outside_local(self) -> Self:
        if self.env != Env.local and self.session_secret == LOCAL_SESSION_SECRET:
            raise ValueError(f"SESSION_SECRET must be set when env={self.env.value}.")
        return self
