from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

import requests

from authform.domain.entities import ApiErrorItem, ApiErrorResponse

# Error codes a browser wallet provider uses for rejected or invalid requests.
WALLET_ERROR_CODES = frozenset({4001, 32602, 32603})


class AuthApiError(RuntimeError):
    """Base class for auth API adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.payload = payload
        self.context = context


class ApiResponseError(AuthApiError):
    """Structured error response carrying one or more ``ApiErrorItem``."""

    def __init__(
        self,
        message: str,
        *,
        items: Iterable[ApiErrorItem] = (),
        status: Optional[int] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        self.response = ApiErrorResponse.of(items)
        first_code = self.response.items[0].code if self.response.items else None
        super().__init__(
            message,
            status=status,
            code=first_code,
            payload=payload,
            context=context,
        )

    @property
    def errors(self) -> Tuple[ApiErrorItem, ...]:
        return self.response.items

    @classmethod
    def from_payload(
        cls,
        status: Optional[int],
        payload: Any,
        *,
        context: Optional[str] = None,
    ) -> "ApiResponseError":
        items = parse_error_items(payload)
        return cls(
            build_error_message(context or "auth request", status, items),
            items=items,
            status=status,
            payload=payload,
            context=context,
        )


class WalletError(AuthApiError):
    """Single opaque failure surfaced by a browser wallet integration."""

    def __init__(self, message: str, *, code: Optional[int] = None) -> None:
        super().__init__(message, code=None if code is None else str(code))
        self.message = message
        self.provider_code = code


def is_api_response_error(err: Any) -> bool:
    return isinstance(err, ApiResponseError)


def is_wallet_error(err: Any) -> bool:
    """Return True for ``WalletError`` or a provider error shaped like one.

    Provider errors raised by third-party wallet bridges are accepted when they
    expose an integer ``code`` from ``WALLET_ERROR_CODES`` and a string
    ``message``.
    """
    if isinstance(err, WalletError):
        return True
    code = getattr(err, "code", None)
    message = getattr(err, "message", None)
    if isinstance(code, bool) or not isinstance(code, int):
        return False
    return code in WALLET_ERROR_CODES and isinstance(message, str)


def is_known_error(err: Any) -> bool:
    return is_wallet_error(err) or is_api_response_error(err)


def parse_error_payload(resp: Any) -> Any:
    """Best-effort extraction of error payload without raising."""
    try:
        return resp.json()
    except Exception:
        snippet = getattr(resp, "text", "")
        if not snippet:
            return None
        return snippet[:400]


def parse_error_items(payload: Any) -> List[ApiErrorItem]:
    """Extract ``ApiErrorItem`` entries from ``{"errors": [...]}``.

    Entries that are not JSON objects are skipped; any other payload shape
    yields an empty list.
    """
    if not isinstance(payload, Mapping):
        return []
    raw_errors = payload.get("errors")
    if not isinstance(raw_errors, list):
        return []
    return [ApiErrorItem.from_payload(entry) for entry in raw_errors if isinstance(entry, Mapping)]


def build_error_message(ctx: str, status: Optional[int], items: List[ApiErrorItem]) -> str:
    detail = next((item.message for item in items if item.message.strip()), None)
    suffix = f" (HTTP {status})" if status else ""
    if detail:
        return f"{ctx}: {detail.strip()}{suffix}"
    return f"{ctx}: request failed{suffix}"


def ensure_ok(resp: requests.Response, ctx: str) -> None:
    """Raise ``ApiResponseError`` for any non-2xx auth API response."""
    if 200 <= resp.status_code < 300:
        return
    payload = parse_error_payload(resp)
    raise ApiResponseError.from_payload(resp.status_code, payload, context=ctx)


__all__ = [
    "ApiResponseError",
    "AuthApiError",
    "WALLET_ERROR_CODES",
    "WalletError",
    "build_error_message",
    "ensure_ok",
    "is_api_response_error",
    "is_known_error",
    "is_wallet_error",
    "parse_error_items",
    "parse_error_payload",
]
