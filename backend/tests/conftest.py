"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach the real PokeAPI
os.environ.setdefault("POKEAPI_BASE_URL", "http://pokeapi.test/api/v2")
os.environ.setdefault("POKEAPI_BASE_DELAY_MS", "0")
os.environ.setdefault("POKEAPI_MAX_DELAY_MS", "0")
