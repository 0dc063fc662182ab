"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if PokeAPI is unreachable (readiness)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pokeserve import __version__
from pokeserve.api.dependencies import get_pokeapi_client
from pokeserve.infrastructure.pokeapi_client import ResilientPokeAPIClient

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "pokeserve",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(
    client: ResilientPokeAPIClient = Depends(get_pokeapi_client),
):
    """Readiness probe — includes PokeAPI reachability."""
    if not await client.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "pokeapi_unavailable",
            },
        )
    return {"status": "ready", "checks": {"pokeapi": "healthy"}}
