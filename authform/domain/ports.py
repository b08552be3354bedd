from __future__ import annotations
from typing import Any, Callable, Optional, Protocol, Sequence, Union

from .entities import ApiErrorItem

FieldError = Union[ApiErrorItem, str, None]


# ---- Ports (collaborators owned by the surrounding UI) ----
class FormField(Protocol):
    """A live form control with a single error slot."""

    id: str

    def set_error(self, value: FieldError) -> None: ...  # None clears the slot


GlobalErrorSink = Callable[[FieldError], None]


class PasswordFormatter(Protocol):
    """Combine password-related errors into one display message, or None."""

    def __call__(
        self, errors: Sequence[ApiErrorItem], localization_config: Optional[Any] = None
    ) -> Optional[str]: ...


ErrorPredicate = Callable[[BaseException], bool]


__all__ = [
    "ErrorPredicate",
    "FieldError",
    "FormField",
    "GlobalErrorSink",
    "PasswordFormatter",
]
