from __future__ import annotations

from typing import List, Optional

from authform.adapters.api_errors import ApiResponseError
from authform.domain.entities import ApiErrorItem
from authform.domain.ports import FieldError


class RecordingField:
    """FormField double that keeps every value written to its slot."""

    def __init__(self, field_id: str, error: FieldError = None) -> None:
        self.id = field_id
        self.error = error
        self.calls: List[FieldError] = []

    def set_error(self, value: FieldError) -> None:
        self.calls.append(value)
        self.error = value


class RecordingSink:
    def __init__(self) -> None:
        self.calls: List[FieldError] = []

    def __call__(self, value: FieldError) -> None:
        self.calls.append(value)

    @property
    def current(self) -> FieldError:
        return self.calls[-1] if self.calls else None


def make_item(
    param_name: Optional[str] = None,
    code: str = "form_param_format_invalid",
    message: str = "is invalid",
    long_message: Optional[str] = None,
) -> ApiErrorItem:
    return ApiErrorItem(
        code=code,
        message=message,
        long_message=long_message,
        param_name=param_name,
    )


def make_api_error(*items: ApiErrorItem, status: int = 422) -> ApiResponseError:
    return ApiResponseError("auth request failed", items=items, status=status)


__all__ = ["RecordingField", "RecordingSink", "make_api_error", "make_item"]
