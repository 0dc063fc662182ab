"""Settings — defaults and environment overrides."""

from pokeserve.config import Settings


def test_defaults_match_public_pokeapi(monkeypatch):
    monkeypatch.delenv("POKEAPI_BASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.pokeapi_base_url == "https://pokeapi.co/api/v2"
    assert settings.pokemon_max_id == 1017
    assert settings.port == 8080


def test_trailing_slash_stripped(monkeypatch):
    monkeypatch.setenv("POKEAPI_BASE_URL", "http://localhost:9000/api/v2/")
    assert Settings(_env_file=None).pokeapi_base_url == "http://localhost:9000/api/v2"


def test_env_overrides_are_case_insensitive(monkeypatch):
    monkeypatch.setenv("pokemon_max_id", "151")
    assert Settings(_env_file=None).pokemon_max_id == 151
