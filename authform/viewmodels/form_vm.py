from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from ..domain.entities import ApiErrorItem, DispatchOutcome
from ..domain.ports import FieldError
from ..usecases.handle_error import HandleAuthError, error_message
from ..usecases.password_errors import LocalizationConfig

T = TypeVar("T")


@dataclass
class FieldState:
    """Value and error slot of one form control."""

    id: str
    value: str = ""
    error: FieldError = None

    def set_value(self, value: str) -> None:
        self.value = value

    def set_error(self, value: FieldError) -> None:
        self.error = value

    @property
    def error_text(self) -> str:
        return _display_text(self.error)

    @property
    def has_error(self) -> bool:
        return self.error is not None


@dataclass
class FormVM:
    """Form state for an auth card: field slots plus one global error slot.

    - `fields`: live controls keyed by id, in declaration order
    - `global_error`: form-wide notice (API error item or wallet message)
    - `submit()`: runs the submission and routes its failure into the slots
    """

    fields: Dict[str, FieldState] = field(default_factory=dict)
    global_error: FieldError = None
    localization: Optional[LocalizationConfig] = None
    handler: HandleAuthError = field(default_factory=HandleAuthError)

    @classmethod
    def with_fields(cls, field_ids: Iterable[str], **kwargs) -> "FormVM":
        return cls(fields={fid: FieldState(fid) for fid in field_ids}, **kwargs)

    # ---------- Live form API ----------
    def get(self, field_id: str) -> FieldState:
        try:
            return self.fields[field_id]
        except KeyError:
            raise KeyError(f"Unknown form field '{field_id}'") from None

    def set_field(self, field_id: str, value: str) -> None:
        self.get(field_id).set_value(value)

    def set_global_error(self, value: FieldError) -> None:
        self.global_error = value

    @property
    def global_error_text(self) -> str:
        return _display_text(self.global_error)

    def errors(self) -> Dict[str, str]:
        """Return the display text of every field currently in error."""
        return {fid: st.error_text for fid, st in self.fields.items() if st.has_error}

    def clear_errors(self) -> None:
        for state in self.fields.values():
            state.set_error(None)
        self.global_error = None

    # ---------- Submission ----------
    def handle(self, err: BaseException) -> DispatchOutcome:
        """Route ``err`` into this form; unknown errors are re-raised."""
        states: List[FieldState] = list(self.fields.values())
        outcome = self.handler.dispatch(err, states, self.set_global_error, self.localization)
        if outcome is DispatchOutcome.RETHROW:
            raise err
        return outcome

    def submit(self, action: Callable[[Dict[str, str]], T]) -> Optional[T]:
        """Run ``action`` with the current values.

        On success all errors are cleared and the action's result returned.
        Recognized auth errors are routed into the form and ``None`` returned.
        """
        values = {fid: st.value for fid, st in self.fields.items()}
        try:
            result = action(values)
        except Exception as exc:
            self.handle(exc)
            return None
        self.clear_errors()
        return result


def _display_text(value: FieldError) -> str:
    if value is None:
        return ""
    if isinstance(value, ApiErrorItem):
        return error_message(value)
    return str(value)


__all__ = ["FieldState", "FormVM"]
