"""PokeAPI Schemas — the subset of GET /pokemon/{id} the server reads.

Invariants:
    - Unknown upstream fields are ignored (extra="ignore")
    - Sprites may be null upstream (many forms ship no shiny art)
    - height is decimeters, weight is hectograms (PokeAPI units)
"""

from pydantic import BaseModel, ConfigDict, Field


class Sprites(BaseModel):
    model_config = ConfigDict(extra="ignore")

    front_default: str | None = None
    front_shiny: str | None = None


class PokemonPayload(BaseModel):
    """Validated /pokemon/{id} response."""
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str = Field(min_length=1)
    height: int = Field(ge=0)
    weight: int = Field(ge=0)
    sprites: Sprites = Field(default_factory=Sprites)
