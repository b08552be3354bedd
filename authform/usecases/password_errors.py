from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from authform.domain.entities import ApiErrorItem

Translate = Callable[[str], Optional[str]]

# Codes that replace the whole complexity sentence with their own message.
_STANDALONE_CODES = (
    "form_password_pwned",
    "form_password_size_in_bytes_exceeded",
    "form_password_validation_failed",
)

# code -> (translation key, default phrase, PasswordSettings attribute for {length})
_COMPLEXITY_PHRASES: Dict[str, tuple[str, str, Optional[str]]] = {
    "form_password_length_too_short": (
        "passwordComplexity.minimumLength",
        "{length} or more characters",
        "min_length",
    ),
    "form_password_length_too_long": (
        "passwordComplexity.maximumLength",
        "less than {length} characters",
        "max_length",
    ),
    "form_password_no_uppercase": (
        "passwordComplexity.requireUppercase",
        "an uppercase letter",
        None,
    ),
    "form_password_no_lowercase": (
        "passwordComplexity.requireLowercase",
        "a lowercase letter",
        None,
    ),
    "form_password_no_number": ("passwordComplexity.requireNumbers", "a number", None),
    "form_password_no_special_char": (
        "passwordComplexity.requireSpecialCharacter",
        "a special character",
        None,
    ),
}

_SENTENCE_PREFIX = ("passwordComplexity.sentencePrefix", "Your password must contain")
_CONJUNCTION = ("passwordComplexity.conjunction", "and")


@dataclass(frozen=True)
class PasswordSettings:
    """Password policy values interpolated into complexity messages."""

    min_length: int = 8
    max_length: int = 72


@dataclass
class LocalizationConfig:
    """Locale and policy inputs for building password error messages."""

    password_settings: PasswordSettings = field(default_factory=PasswordSettings)
    locale: str = "en-US"
    translate: Optional[Translate] = None

    @classmethod
    def from_dict(
        cls, payload: Mapping[str, Any], *, translate: Optional[Translate] = None
    ) -> "LocalizationConfig":
        """Build a config from flat keys ``locale``, ``min_length``, ``max_length``."""
        if not isinstance(payload, Mapping):
            raise ValueError("Localization payload must be a mapping of flat keys.")

        allowed = {"locale", "min_length", "max_length"}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(
                f"Unsupported localization keys: {', '.join(sorted(str(key) for key in unknown))}"
            )

        settings = PasswordSettings()
        if "min_length" in payload:
            settings = replace(settings, min_length=_coerce_length("min_length", payload["min_length"]))
        if "max_length" in payload:
            settings = replace(settings, max_length=_coerce_length("max_length", payload["max_length"]))

        locale = payload.get("locale", "en-US")
        if not isinstance(locale, str) or not locale.strip():
            raise ValueError("locale must be a non-empty string.")

        return cls(password_settings=settings, locale=locale.strip(), translate=translate)

    def t(self, key: str, default: str) -> str:
        if self.translate is None:
            return default
        return self.translate(key) or default


def _coerce_length(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, (int, float)):
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    else:
        raise ValueError(f"{name} must be an integer.")
    if coerced < 0:
        raise ValueError(f"{name} must be non-negative.")
    return coerced


def as_localization_config(value: Any) -> Optional[LocalizationConfig]:
    """Accept a ``LocalizationConfig``, a flat mapping for ``from_dict``, or None."""
    if value is None or isinstance(value, LocalizationConfig):
        return value
    if isinstance(value, Mapping):
        return LocalizationConfig.from_dict(value)
    raise TypeError(
        f"localization_config must be a LocalizationConfig or a mapping, not {type(value).__name__}"
    )


def format_password_errors(
    errors: Sequence[ApiErrorItem],
    localization_config: Union[LocalizationConfig, Mapping[str, Any], None] = None,
) -> Optional[str]:
    """Combine password errors into a single sentence for the password field.

    Without a localization config the first error's own long message is used.
    Breach and size errors stand alone; complexity errors are merged into
    "Your password must contain a, b, and c."

    Raises:
        TypeError: ``localization_config`` is neither a config nor a mapping.
        ValueError: a mapping config holds unsupported keys or bad values.
    """
    cfg = as_localization_config(localization_config)
    if not errors:
        return None
    first = errors[0]
    if cfg is None:
        return first.long_message or first.message or None

    if first.code in _STANDALONE_CODES:
        return cfg.t(f"errors.{first.code}", first.long_message or first.message) or None

    phrases: List[str] = []
    for err in errors:
        phrase = _COMPLEXITY_PHRASES.get(err.code)
        if phrase is None:
            text = err.message
        else:
            key, default, setting = phrase
            length = getattr(cfg.password_settings, setting) if setting else None
            text = cfg.t(key, default).replace("{length}", str(length))
        if text and text not in phrases:
            phrases.append(text)
    if not phrases:
        return None

    prefix = cfg.t(*_SENTENCE_PREFIX)
    return _add_full_stop(f"{prefix} {join_list(phrases, cfg.t(*_CONJUNCTION))}")


def join_list(items: Sequence[str], conjunction: str = "and") -> str:
    """Join ``items`` as an English list: ``a``, ``a and b``, ``a, b, and c``."""
    if len(items) <= 1:
        return "".join(items)
    if len(items) == 2:
        return f"{items[0]} {conjunction} {items[1]}"
    return f"{', '.join(items[:-1])}, {conjunction} {items[-1]}"


def _add_full_stop(text: str) -> str:
    text = text.strip()
    return text if text.endswith(".") else f"{text}."


__all__ = [
    "LocalizationConfig",
    "PasswordSettings",
    "as_localization_config",
    "format_password_errors",
    "join_list",
]
