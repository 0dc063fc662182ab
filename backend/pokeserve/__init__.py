"""PokeServe — HTMX fragment server for toggles and PokeAPI cards.

Invariants:
    - Package root holds only the version (no import side-effects)
"""

__version__ = "1.0.0"
