"""Pydantic Schemas — validation of upstream PokeAPI responses."""
