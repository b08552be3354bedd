"""Route auth API failures into form field and global error slots.

The entry point classifies the raised value, then either forwards a wallet
message to the global sink or partitions a structured API response and routes
each half. Anything unrecognized is handed back to the caller untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from authform.domain.entities import ApiErrorItem, DispatchOutcome, ErrorKind, Partition
from authform.domain.ports import FormField, GlobalErrorSink, PasswordFormatter
from authform.usecases.classify_error import ErrorClassifier
from authform.usecases.partition_errors import partition_errors
from authform.usecases.route_field_errors import RouteFieldErrors
from authform.usecases.route_global_error import route_global_error
from authform.usecases.password_errors import format_password_errors


@dataclass
class HandleAuthError:
    """Dispatch a failed auth call to the form that issued it.

    Attributes:
        classifier: Decides whether the error is a wallet error, a structured
            API response error, or unknown.
        password_formatter: Builds the single message shown on a password
            field from all password-related errors.
    """

    classifier: ErrorClassifier = field(default_factory=ErrorClassifier)
    password_formatter: PasswordFormatter = format_password_errors
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), init=False, repr=False
    )

    def __call__(
        self,
        err: BaseException,
        fields: Sequence[FormField],
        set_global_error: Optional[GlobalErrorSink] = None,
        localization_config: Optional[Any] = None,
    ) -> None:
        """Route ``err``; re-raise it unchanged when it is not recognized.

        Raises:
            BaseException: The original ``err`` object for unknown errors.
        """
        outcome = self.dispatch(err, fields, set_global_error, localization_config)
        if outcome is DispatchOutcome.RETHROW:
            raise err

    def dispatch(
        self,
        err: BaseException,
        fields: Sequence[FormField],
        set_global_error: Optional[GlobalErrorSink] = None,
        localization_config: Optional[Any] = None,
    ) -> DispatchOutcome:
        """Route ``err`` without raising and report what was done.

        Returns ``DispatchOutcome.RETHROW`` for unknown errors; in that case no
        field or sink has been touched.
        """
        classification = self.classifier(err)

        if classification.kind is ErrorKind.WALLET:
            self._log.debug("Wallet error routed to global slot: %s", classification.message)
            if set_global_error is not None:
                set_global_error(classification.message)
            return DispatchOutcome.WALLET

        if classification.kind is ErrorKind.API_RESPONSE:
            parts = partition_errors(classification.response.items)
            self._log.debug(
                "API error response: %d field error(s), %d global error(s), %d field(s)",
                len(parts.field_errors),
                len(parts.global_errors),
                len(fields),
            )
            route_fields = RouteFieldErrors(password_formatter=self.password_formatter)
            route_fields(fields, parts.field_errors, localization_config)
            route_global_error(parts.global_errors, set_global_error)
            return DispatchOutcome.API_RESPONSE

        self._log.debug("Unrecognized error %s left for the caller", type(err).__name__)
        return DispatchOutcome.RETHROW

    def partition(self, err: BaseException) -> Optional[Partition]:
        """Return the partition of a structured API error, else ``None``."""
        classification = self.classifier(err)
        if classification.kind is not ErrorKind.API_RESPONSE:
            return None
        return partition_errors(classification.response.items)


_DEFAULT_HANDLER = HandleAuthError()


def handle_error(
    err: BaseException,
    fields: Sequence[FormField],
    set_global_error: Optional[GlobalErrorSink] = None,
    localization_config: Optional[Any] = None,
) -> None:
    _DEFAULT_HANDLER(err, fields, set_global_error, localization_config)


def get_global_error(err: BaseException) -> Optional[ApiErrorItem]:
    """Return the first global API error, or None if there is none."""
    parts = _DEFAULT_HANDLER.partition(err)
    if parts is None or not parts.global_errors:
        return None
    return parts.global_errors[0]


def get_field_error(err: BaseException) -> Optional[ApiErrorItem]:
    """Return the first field API error, or None if there is none."""
    parts = _DEFAULT_HANDLER.partition(err)
    if parts is None or not parts.field_errors:
        return None
    return parts.field_errors[0]


def error_message(err: ApiErrorItem) -> str:
    return err.long_message or err.message


__all__ = [
    "HandleAuthError",
    "error_message",
    "get_field_error",
    "get_global_error",
    "handle_error",
]
