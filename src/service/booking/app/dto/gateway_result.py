"""Commerce gateway result DTOs"""

from enum import StrEnum
from typing import Any, Optional

import attrs


class GatewayFailureKind(StrEnum):
    HTTP = 'http'
    GRAPHQL = 'graphql'
    NETWORK = 'network'
    DECODE = 'decode'
    NOT_CONFIGURED = 'not_configured'


@attrs.define(frozen=True)
class GatewayResult:
    """
    Outcome of one read call against the commerce platform.

    Exactly one of `data` / `error` is meaningful, selected by `success`.
    Transport problems never escape as exceptions; they arrive here as a
    failure kind plus a single human-readable message.
    """

    success: bool
    data: Any = None
    error: Optional[str] = None
    failure_kind: Optional[GatewayFailureKind] = None
    status_code: Optional[int] = None

    @classmethod
    def ok(cls, data: Any, *, status_code: Optional[int] = None) -> 'GatewayResult':
        return cls(success=True, data=data, status_code=status_code)

    @classmethod
    def fail(
        cls, kind: GatewayFailureKind, error: str, *, status_code: Optional[int] = None
    ) -> 'GatewayResult':
        return cls(success=False, error=error, failure_kind=kind, status_code=status_code)


@attrs.define(frozen=True)
class CheckoutResult:
    success: bool
    checkout_id: Optional[str] = None
    checkout_url: Optional[str] = None
    checkout_token: Optional[str] = None
    error: Optional[str] = None
    failure_kind: Optional[GatewayFailureKind] = None

    @classmethod
    def from_failure(cls, result: GatewayResult) -> 'CheckoutResult':
        return cls(success=False, error=result.error, failure_kind=result.failure_kind)


NOT_CONFIGURED_MESSAGE = 'Shopify not configured'
