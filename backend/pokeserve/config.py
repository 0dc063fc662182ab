"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - pokeapi_base_url never ends with "/"

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: `python -m pokeserve` works with no .env
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # PokeAPI
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    pokeapi_timeout_seconds: float = 10.0
    pokeapi_max_retries: int = Field(2, ge=0)
    pokeapi_base_delay_ms: int = 250
    pokeapi_max_delay_ms: int = 4000

    @field_validator("pokeapi_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Random picks are drawn from 1..pokemon_max_id
    pokemon_max_id: int = Field(1017, ge=1)

    # Static assets (paths relative to the working directory)
    static_dir: str = "static"
    dist_dir: str = "dist"

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
