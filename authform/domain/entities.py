from __future__ import annotations

"""Domain value objects for auth API errors and their routing results."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ApiErrorItem:
    """One atomic error reported by the auth API."""

    code: str
    """Machine-readable error code, e.g. ``form_password_pwned``."""

    message: str
    """Short human-readable message."""

    long_message: Optional[str] = None
    """Longer message suitable for display, when the API provides one."""

    param_name: Optional[str] = None
    """Request parameter the error refers to; absent for form-wide errors."""

    meta: Mapping[str, Any] = field(default_factory=dict, compare=False)
    """Remaining metadata sent alongside the error, read-only."""

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise TypeError("ApiErrorItem.code must be a string.")
        if not isinstance(self.message, str):
            raise TypeError("ApiErrorItem.message must be a string.")
        object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ApiErrorItem":
        """Build an item from the API JSON shape.

        ``{"code": ..., "message": ..., "long_message": ..., "meta": {"param_name": ...}}``
        Missing strings become empty; a blank ``param_name`` is kept as-is so
        partitioning can decide on it.
        """
        raw_meta = payload.get("meta")
        meta = dict(raw_meta) if isinstance(raw_meta, Mapping) else {}
        param_name = meta.pop("param_name", None)
        if param_name is not None and not isinstance(param_name, str):
            param_name = str(param_name)
        long_message = payload.get("long_message")
        return cls(
            code=_as_text(payload.get("code")),
            message=_as_text(payload.get("message")),
            long_message=long_message if isinstance(long_message, str) else None,
            param_name=param_name,
            meta=meta,
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class ApiErrorResponse:
    """Ordered collection of errors from a single failed API call."""

    items: Tuple[ApiErrorItem, ...] = ()

    @classmethod
    def of(cls, items: Optional[Iterable[ApiErrorItem]]) -> "ApiErrorResponse":
        return cls(items=tuple(items or ()))

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Partition:
    """Field-scoped and global errors, each in original response order."""

    field_errors: Tuple[ApiErrorItem, ...] = ()
    global_errors: Tuple[ApiErrorItem, ...] = ()


class ErrorKind(Enum):
    UNKNOWN = "unknown"
    WALLET = "wallet"
    API_RESPONSE = "api_response"


@dataclass(frozen=True)
class Classification:
    """Tagged result of classifying an arbitrary raised value.

    ``response`` is only set for ``API_RESPONSE`` and ``message`` only for
    ``WALLET``; ``error`` is always the original object.
    """

    kind: ErrorKind
    error: BaseException
    response: Optional[ApiErrorResponse] = None
    message: Optional[str] = None

    @property
    def is_known(self) -> bool:
        return self.kind is not ErrorKind.UNKNOWN


class DispatchOutcome(Enum):
    """What a dispatch pass did with the error."""

    RETHROW = "rethrow"
    WALLET = "wallet"
    API_RESPONSE = "api_response"


__all__ = [
    "ApiErrorItem",
    "ApiErrorResponse",
    "Classification",
    "DispatchOutcome",
    "ErrorKind",
    "Partition",
]
