"""Error Hierarchy — typed, categorized exceptions for PokeServe failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - public_message is what the browser sees; message is what the logs see
    - Upstream failures never leak upstream bodies to the client

Design Decisions:
    - Single hierarchy with PokeServeError base: one global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    pokemon_id: str | None = None
    path: str | None = None
    user_message: str | None = None
    retry_after_ms: int | None = None
    debug_info: dict[str, Any] | None = None


class PokeServeError(Exception):
    """Base exception for all PokeServe errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def public_message(self) -> str:
        return self.context.user_message or self.message

    def to_response(self) -> dict:
        """Convert to standardized JSON error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.public_message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "pokemon_id": self.context.pokemon_id,
                    "retry_after_ms": self.context.retry_after_ms,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class PokemonNotFoundError(PokeServeError):
    """PokeAPI has no Pokémon for the requested name or id."""
    def __init__(self, identifier: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.pokemon_id = ctx.pokemon_id or identifier
        super().__init__(
            f"Pokemon '{identifier}' not found",
            "POKEMON_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class PokemonPayloadError(PokeServeError):
    """Upstream body was not JSON or did not carry the expected fields."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "API error"
        super().__init__(
            f"Invalid PokeAPI payload: {message}",
            "API_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PokeAPIError(PokeServeError):
    """PokeAPI call failed (transport, timeout, or unexpected status)."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        retry_after_ms: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_ms = retry_after_ms
        ctx.user_message = ctx.user_message or "API error"
        category = (
            ErrorCategory.TIMEOUT if api_error_type == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            f"PokeAPI error ({api_error_type}): {message}",
            "POKEAPI_ERROR", category,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
        self.api_error_type = api_error_type
