"""Pokemon Card — pure mapping from a PokeAPI payload to what the card fragment shows.

Invariants:
    - weight_kg = weight (hectograms) / 10, height_m = height (decimeters) / 10
    - Names are title-cased per word; letters after the first are left untouched
    - Random ids are drawn from 1..max_id (PokeAPI has no Pokémon 0)
"""

import random
import re
from dataclasses import dataclass

from pokeserve.schemas.pokeapi import PokemonPayload

# A word starts after any character that is not a letter, digit or underscore
_WORD_START = re.compile(r"(^|\W)(\w)")


@dataclass(frozen=True)
class PokemonCard:
    """Display-ready Pokémon data for fragments/pokemon_card.html."""
    name: str
    image_url: str | None
    shiny_image_url: str | None
    weight_kg: float
    height_m: float

    @property
    def weight_label(self) -> str:
        return format_measure(self.weight_kg)

    @property
    def height_label(self) -> str:
        return format_measure(self.height_m)


def title_case(name: str) -> str:
    """Upper-case the first letter of every word ("mr-mime" -> "Mr-Mime")."""
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), name)


def format_measure(value: float) -> str:
    """Shortest decimal form, no trailing ".0" (6.9 -> "6.9", 1.0 -> "1")."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def pick_random_id(max_id: int, rng: random.Random | None = None) -> int:
    if max_id < 1:
        raise ValueError("max_id must be >= 1")
    return (rng or random).randint(1, max_id)  # nosec B311


def build_card(payload: PokemonPayload) -> PokemonCard:
    return PokemonCard(
        name=title_case(payload.name),
        image_url=payload.sprites.front_default,
        shiny_image_url=payload.sprites.front_shiny,
        weight_kg=payload.weight / 10,
        height_m=payload.height / 10,
    )
