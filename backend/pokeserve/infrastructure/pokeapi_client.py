"""Resilient PokeAPI Client — wraps httpx.AsyncClient with retry, backoff, and error mapping.

Invariants:
    - Rate limits (429): exponential backoff with jitter, respects Retry-After header
    - Retry-After beyond max_delay_ms fails at once (requests never wait on it)
    - Transient errors (5xx, connection): max_retries retries with exponential backoff
    - Timeouts: immediate failure, no retry
    - 404 → PokemonNotFoundError; other 4xx → PokeAPIError("client_error")
    - Body that is not JSON, or lacks the expected fields → PokemonPayloadError

Design Decisions:
    - Wrapper over raw client: routes never see httpx exceptions
    - ±25% jitter on backoff: avoids synchronized retries against a public API
    - Injectable httpx.AsyncClient: tests pass one built on httpx.MockTransport
"""

import asyncio
import logging
import random

import httpx
from pydantic import ValidationError

from pokeserve.core.errors import (
    ErrorContext,
    PokeAPIError,
    PokemonNotFoundError,
    PokemonPayloadError,
)
from pokeserve.schemas.pokeapi import PokemonPayload

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({500, 502, 503, 504})


class ResilientPokeAPIClient:
    """Wraps httpx.AsyncClient with retry logic, timeouts, and error mapping."""

    def __init__(
        self,
        base_url: str = "https://pokeapi.co/api/v2",
        max_retries: int = 2,
        base_delay_ms: int = 250,
        max_delay_ms: int = 4000,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def get_pokemon(self, identifier: int | str) -> PokemonPayload:
        """Fetch one Pokémon by numeric id or name."""
        key = str(identifier).strip().lower()
        context = ErrorContext(pokemon_id=key)
        response = await self._get_with_retry(f"/pokemon/{key}", context)

        if response.status_code == 404:
            raise PokemonNotFoundError(key, context=context)
        if response.status_code >= 400:
            raise PokeAPIError(
                f"HTTP {response.status_code}", "client_error", context=context,
            )
        return self._parse_pokemon(response, context)

    async def ping(self) -> bool:
        """True if PokeAPI answers with a non-5xx status."""
        try:
            response = await self.client.get(f"{self.base_url}/pokemon/1")
        except httpx.HTTPError as e:
            logger.warning(f"PokeAPI ping failed: {e}")
            return False
        return response.status_code < 500

    async def _get_with_retry(
        self, path: str, context: ErrorContext,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        for attempt in range(self.max_retries + 1):
            try:
                response = await self.client.get(url)
            except httpx.TimeoutException:
                raise PokeAPIError(
                    "request timed out", "timeout", context=context,
                )
            except httpx.TransportError as e:
                await self._handle_transient_error(e, attempt, context)
                continue

            if response.status_code == 429:
                await self._handle_rate_limit(response, attempt, context)
                continue
            if response.status_code in _RETRYABLE_STATUS:
                await self._handle_transient_error(
                    f"HTTP {response.status_code}", attempt, context,
                )
                continue

            self._log_response(response, attempt, context)
            return response
        # Unreachable: the handlers raise on the last attempt
        raise PokeAPIError("retries exhausted", "connection_error", context=context)

    def _parse_pokemon(
        self, response: httpx.Response, context: ErrorContext,
    ) -> PokemonPayload:
        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                f"could not unmarshal json: {e}",
                extra={"pokemon_id": context.pokemon_id},
            )
            raise PokemonPayloadError("body is not JSON", context=context) from e
        try:
            return PokemonPayload.model_validate(data)
        except ValidationError as e:
            raise PokemonPayloadError(str(e), context=context) from e

    def _log_response(
        self, response: httpx.Response, attempt: int, context: ErrorContext,
    ) -> None:
        logger.info(
            "PokeAPI response",
            extra={
                "attempt": attempt + 1,
                "pokemon_id": context.pokemon_id,
                "status_code": response.status_code,
            },
        )

    async def _handle_rate_limit(
        self, response: httpx.Response, attempt: int, context: ErrorContext,
    ) -> None:
        """Sleep before retrying a 429, or raise on the last attempt."""
        retry_after_ms = self._extract_retry_after(response)
        if attempt >= self.max_retries:
            raise PokeAPIError(
                "Rate limit exceeded after retries",
                "rate_limit",
                retry_after_ms=retry_after_ms,
                context=context,
            )
        if retry_after_ms is not None and retry_after_ms > self.max_delay_ms:
            raise PokeAPIError(
                "Retry-After exceeds max delay",
                "rate_limit",
                retry_after_ms=retry_after_ms,
                context=context,
            )
        delay = retry_after_ms if retry_after_ms is not None else self._backoff(attempt)
        logger.warning(
            f"Rate limit hit, retry after {delay}ms (attempt {attempt + 1})",
        )
        await asyncio.sleep(delay / 1000)

    async def _handle_transient_error(
        self, e: object, attempt: int, context: ErrorContext,
    ) -> None:
        """Sleep before retrying a transient failure, or raise on the last attempt."""
        if attempt >= self.max_retries:
            raise PokeAPIError(
                f"Transient failure after {self.max_retries} retries: {e}",
                "connection_error",
                context=context,
            )
        delay = self._backoff(attempt)
        logger.warning(f"Transient error, retry after {delay}ms: {e}")
        await asyncio.sleep(delay / 1000)

    def _backoff(self, attempt: int) -> int:
        """Exponential backoff with ±25% jitter."""
        delay = min(self.max_delay_ms, (2 ** attempt) * self.base_delay_ms)
        return int(delay * random.uniform(0.75, 1.25))  # nosec B311

    def _extract_retry_after(self, response: httpx.Response) -> int | None:
        """Retry-After header in milliseconds (seconds form only)."""
        val = response.headers.get("retry-after")
        if val and val.strip().isdigit():
            return int(val) * 1000
        return None
