"""API test fixtures — FastAPI test client wired to a fake PokeAPI.

Invariants:
    - Every test gets a fresh ContentToggle (starts hidden)
    - get_pokeapi_client overridden with a MockTransport-backed client
    - get_rng overridden with a seeded Random so /pokemon/random is reproducible

Design Decisions:
    - ASGITransport does not run the lifespan: dependencies are overridden instead
"""

import random

import pytest
from httpx import ASGITransport, AsyncClient

from pokeserve.api.dependencies import get_pokeapi_client, get_toggle
from pokeserve.api.routes.pokemon import get_rng
from pokeserve.core.toggle import ContentToggle
from pokeserve.main import app
from tests.fake_pokeapi import FakePokeAPI, mr_mime_payload, pikachu_payload


@pytest.fixture
def fake_pokeapi():
    fake = FakePokeAPI()
    fake.add_pokemon(pikachu_payload())
    fake.add_pokemon(mr_mime_payload())
    return fake


@pytest.fixture
def toggle():
    return ContentToggle()


@pytest.fixture
async def client(fake_pokeapi, toggle):
    """FastAPI test client with PokeAPI, toggle, and rng overridden."""
    pokeapi = fake_pokeapi.build_client(max_retries=1)
    app.dependency_overrides[get_pokeapi_client] = lambda: pokeapi
    app.dependency_overrides[get_toggle] = lambda: toggle
    app.dependency_overrides[get_rng] = lambda: random.Random(0)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    await pokeapi.client.aclose()
