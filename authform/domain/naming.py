"""Naming helpers that map API parameter names onto form field identifiers."""

from __future__ import annotations

import re
from typing import Optional

PASSWORD_FIELD_IDS: tuple[str, ...] = ("password", "newPassword")

_SEPARATED_LOWER = re.compile(r"[-_][a-z]")


def normalize_param_name(name: str) -> str:
    """Convert ``snake_case`` / ``kebab-case`` API names to ``camelCase``.

    ``new_password`` -> ``newPassword``, ``first-name`` -> ``firstName``. Only a
    lowercase letter directly after ``_`` or ``-`` is joined and upper-cased;
    any other separator stays (``a_1`` is unchanged). The output contains no
    separator followed by a lowercase letter, so normalizing twice is a no-op.
    """
    if not name:
        return ""
    return _SEPARATED_LOWER.sub(lambda match: match.group(0)[1].upper(), name)


def matches_field(param_name: Optional[str], field_id: str) -> bool:
    """Return True when the raw or normalized ``param_name`` equals ``field_id``."""
    if not param_name:
        return False
    return param_name == field_id or normalize_param_name(param_name) == field_id


def is_password_param(param_name: Optional[str]) -> bool:
    return any(matches_field(param_name, field_id) for field_id in PASSWORD_FIELD_IDS)


__all__ = [
    "PASSWORD_FIELD_IDS",
    "is_password_param",
    "matches_field",
    "normalize_param_name",
]
