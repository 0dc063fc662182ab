"""Pages — full-page renders (everything else returns fragments)."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from pokeserve.api.dependencies import templates

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Main page: HTMX buttons for the toggle and the random Pokémon card."""
    return templates.TemplateResponse(request, "index.html")
