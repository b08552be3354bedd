from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from authform.domain.entities import ApiErrorItem
from authform.domain.naming import PASSWORD_FIELD_IDS, is_password_param, matches_field
from authform.domain.ports import FormField, PasswordFormatter
from authform.usecases.password_errors import format_password_errors


@dataclass
class RouteFieldErrors:
    """Push field-scoped API errors into the matching form fields.

    Every field is written on each pass: either its matching error, the
    combined password message, or ``None`` to clear a stale error.
    """

    password_formatter: PasswordFormatter = format_password_errors
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), init=False, repr=False
    )

    def __call__(
        self,
        fields: Sequence[FormField],
        field_errors: Sequence[ApiErrorItem],
        localization_config: Optional[Any] = None,
    ) -> None:
        password_errors = [err for err in field_errors if is_password_param(err.param_name)]
        other_errors = [err for err in field_errors if not is_password_param(err.param_name)]
        routed: List[ApiErrorItem] = []

        for form_field in fields:
            if form_field.id in PASSWORD_FIELD_IDS and password_errors:
                message = self.password_formatter(password_errors, localization_config)
                form_field.set_error(message or None)
                routed.extend(password_errors)
                continue

            match = next(
                (err for err in other_errors if matches_field(err.param_name, form_field.id)),
                None,
            )
            form_field.set_error(match)
            if match is not None:
                routed.append(match)

        if self._log.isEnabledFor(logging.DEBUG):
            for err in field_errors:
                if not any(err is seen for seen in routed):
                    self._log.debug(
                        "Dropping field error %s: no live field for param %r",
                        err.code,
                        err.param_name,
                    )


__all__ = ["RouteFieldErrors"]
