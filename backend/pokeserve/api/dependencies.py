"""Route Dependencies — shared toggle, PokeAPI client, and template renderer.

Invariants:
    - One ContentToggle per process (module-level)
    - One ResilientPokeAPIClient per process, created lazily or by the lifespan
    - Lifespan shutdown closes whichever client is current
    - Tests replace these via app.dependency_overrides

Design Decisions:
    - Module-level singletons: single-process uvicorn, state lost on restart is acceptable
      for a toggle that only drives a demo snippet
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from pokeserve.config import get_settings
from pokeserve.core.toggle import ContentToggle
from pokeserve.infrastructure.pokeapi_client import ResilientPokeAPIClient

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_toggle = ContentToggle()
_pokeapi_client: ResilientPokeAPIClient | None = None


def build_pokeapi_client() -> ResilientPokeAPIClient:
    settings = get_settings()
    return ResilientPokeAPIClient(
        base_url=settings.pokeapi_base_url,
        max_retries=settings.pokeapi_max_retries,
        base_delay_ms=settings.pokeapi_base_delay_ms,
        max_delay_ms=settings.pokeapi_max_delay_ms,
        timeout_seconds=settings.pokeapi_timeout_seconds,
    )


def set_pokeapi_client(client: ResilientPokeAPIClient | None) -> None:
    global _pokeapi_client
    _pokeapi_client = client


def get_pokeapi_client() -> ResilientPokeAPIClient:
    global _pokeapi_client
    if _pokeapi_client is None:
        _pokeapi_client = build_pokeapi_client()
    return _pokeapi_client


async def close_pokeapi_client() -> None:
    """Close the current client (lifespan-built or lazily built) and forget it."""
    global _pokeapi_client
    client, _pokeapi_client = _pokeapi_client, None
    if client is not None:
        await client.aclose()


def get_toggle() -> ContentToggle:
    return _toggle
