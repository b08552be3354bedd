"""Domain package exports for auth error value objects and naming rules."""

from .entities import (
    ApiErrorItem,
    ApiErrorResponse,
    Classification,
    DispatchOutcome,
    ErrorKind,
    Partition,
)
from .naming import PASSWORD_FIELD_IDS, is_password_param, matches_field, normalize_param_name

__all__ = [
    "ApiErrorItem",
    "ApiErrorResponse",
    "Classification",
    "DispatchOutcome",
    "ErrorKind",
    "PASSWORD_FIELD_IDS",
    "Partition",
    "is_password_param",
    "matches_field",
    "normalize_param_name",
]
