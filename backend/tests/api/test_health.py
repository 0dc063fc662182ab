"""Health probes — liveness always 200, readiness follows PokeAPI reachability."""

import httpx

from pokeserve import __version__


async def test_liveness_returns_healthy(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "pokeserve", "version": __version__,
    }


async def test_readiness_ok_when_pokeapi_answers(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["pokeapi"] == "healthy"


async def test_readiness_503_when_pokeapi_down(client, fake_pokeapi):
    fake_pokeapi.queue("1", httpx.ConnectError("refused"))
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "pokeapi_unavailable"
