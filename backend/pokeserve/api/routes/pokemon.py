"""Pokemon Cards — fetch from PokeAPI and render the card fragment.

Invariants:
    - Routes only fetch + render; mapping lives in core/pokemon.py
    - Upstream failures propagate as PokeServeError to the global handler
    - /pokemon/random declared before /pokemon/{identifier} so "random" is never a name

Design Decisions:
    - rng as a dependency: tests pin the random id without monkeypatching the module
"""

import logging
import random

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import HTMLResponse

from pokeserve.api.dependencies import get_pokeapi_client, templates
from pokeserve.config import Settings, get_settings
from pokeserve.core.pokemon import build_card, pick_random_id
from pokeserve.infrastructure.pokeapi_client import ResilientPokeAPIClient

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/pokemon", tags=["pokemon"])

_rng = random.Random()  # nosec B311


def get_rng() -> random.Random:
    return _rng


async def _render_card(
    request: Request, client: ResilientPokeAPIClient, identifier: int | str,
):
    payload = await client.get_pokemon(identifier)
    card = build_card(payload)
    logger.info(
        f"Rendering card for {card.name}",
        extra={"pokemon_id": str(payload.id)},
    )
    return templates.TemplateResponse(
        request, "fragments/pokemon_card.html", {"card": card},
    )


@router.get("/random", response_class=HTMLResponse)
async def random_pokemon(
    request: Request,
    client: ResilientPokeAPIClient = Depends(get_pokeapi_client),
    settings: Settings = Depends(get_settings),
    rng: random.Random = Depends(get_rng),
):
    """Card for a uniformly random Pokémon id in 1..pokemon_max_id."""
    pokemon_id = pick_random_id(settings.pokemon_max_id, rng)
    return await _render_card(request, client, pokemon_id)


@router.get("/{identifier}", response_class=HTMLResponse)
async def pokemon_by_identifier(
    request: Request,
    identifier: str = Path(
        min_length=1, max_length=64, pattern=r"^[A-Za-z0-9-]+$",
    ),
    client: ResilientPokeAPIClient = Depends(get_pokeapi_client),
):
    """Card for a Pokémon by name ("pikachu") or numeric id ("25")."""
    return await _render_card(request, client, identifier)
