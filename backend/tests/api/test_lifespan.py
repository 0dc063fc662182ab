"""Lifespan — the PokeAPI client is built on startup and closed on every shutdown path."""

import logging

import pytest

import pokeserve.api.dependencies as deps
from pokeserve.main import app, lifespan


@pytest.fixture(autouse=True)
def restore_state():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    deps.set_pokeapi_client(None)
    yield
    deps.set_pokeapi_client(None)
    logging.root.handlers = handlers
    logging.root.setLevel(level)


async def test_lifespan_closes_client_on_clean_shutdown():
    async with lifespan(app):
        client = deps.get_pokeapi_client()
        assert client.client.is_closed is False

    assert client.client.is_closed is True
    assert deps._pokeapi_client is None


async def test_lifespan_closes_client_when_shutdown_raises():
    with pytest.raises(RuntimeError):
        async with lifespan(app):
            client = deps.get_pokeapi_client()
            raise RuntimeError("server crashed")

    assert client.client.is_closed is True


async def test_close_handles_lazily_built_client():
    client = deps.get_pokeapi_client()

    await deps.close_pokeapi_client()

    assert client.client.is_closed is True
    assert deps._pokeapi_client is None


async def test_close_without_client_is_noop():
    await deps.close_pokeapi_client()
    assert deps._pokeapi_client is None
