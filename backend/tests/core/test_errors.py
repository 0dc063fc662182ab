"""Tests for the error hierarchy — codes, statuses, and public messages."""

from pokeserve.core.errors import (
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    PokeAPIError,
    PokemonNotFoundError,
    PokemonPayloadError,
    PokeServeError,
)


def test_not_found_is_404_with_identifier():
    err = PokemonNotFoundError("missingno")
    assert err.http_status == 404
    assert err.code == "POKEMON_NOT_FOUND"
    assert err.context.pokemon_id == "missingno"
    assert "missingno" in err.public_message


def test_payload_error_hides_details_from_client():
    err = PokemonPayloadError("expected object, got list")
    assert err.http_status == 400
    assert err.code == "API_ERROR"
    assert err.public_message == "API error"
    assert "expected object" in err.message


def test_pokeapi_error_is_502_external():
    err = PokeAPIError("refused", "connection_error")
    assert err.http_status == 502
    assert err.category == ErrorCategory.EXTERNAL_API
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.public_message == "API error"


def test_pokeapi_timeout_is_categorized_as_timeout():
    assert PokeAPIError("slow", "timeout").category == ErrorCategory.TIMEOUT


def test_pokeapi_error_carries_retry_after():
    err = PokeAPIError("429", "rate_limit", retry_after_ms=3000)
    assert err.to_response()["error"]["context"]["retry_after_ms"] == 3000


def test_to_response_envelope_shape():
    err = PokeServeError(
        "boom", "SOMETHING", ErrorCategory.INTERNAL,
        context=ErrorContext(pokemon_id="25"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "SOMETHING"
    assert body["category"] == "internal"
    assert body["severity"] == "error"
    assert body["context"]["pokemon_id"] == "25"
    assert "timestamp" in body


def test_user_message_overrides_public_message():
    ctx = ErrorContext(user_message="Try again later")
    err = PokeAPIError("refused", "connection_error", context=ctx)
    assert err.public_message == "Try again later"
