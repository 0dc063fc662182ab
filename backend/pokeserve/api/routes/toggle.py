"""Toggle — POST /toggle flips the process-wide flag and returns the matching snippet.

Invariants:
    - Every POST flips exactly once; first POST after startup returns the visible text
    - Response body is the bare snippet (text/html), swapped in by HTMX
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from pokeserve.api.dependencies import get_toggle
from pokeserve.core.toggle import ContentToggle, content_for

logger = logging.getLogger(__name__)
router = APIRouter(tags=["toggle"])


@router.post("/toggle", response_class=HTMLResponse)
async def toggle_content(toggle: ContentToggle = Depends(get_toggle)):
    visible = toggle.flip()
    logger.debug(f"Toggle flipped, visible={visible}")
    return HTMLResponse(content_for(visible))
