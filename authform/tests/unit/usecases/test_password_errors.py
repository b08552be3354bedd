from __future__ import annotations

import pytest

from authform.tests.unit.helpers import make_item
from authform.usecases.password_errors import (
    LocalizationConfig,
    PasswordSettings,
    as_localization_config,
    format_password_errors,
    join_list,
)


def _cfg(**kwargs) -> LocalizationConfig:
    return LocalizationConfig(password_settings=PasswordSettings(min_length=10, max_length=64), **kwargs)


def test_no_errors_yields_no_message():
    assert format_password_errors([], _cfg()) is None


def test_without_config_uses_first_long_message():
    errors = [
        make_item("password", message="is too short", long_message="Passwords must be 8 characters or more."),
        make_item("password", message="needs a number"),
    ]

    assert format_password_errors(errors) == "Passwords must be 8 characters or more."


def test_complexity_errors_merge_into_one_sentence():
    errors = [
        make_item("password", code="form_password_length_too_short"),
        make_item("new_password", code="form_password_no_uppercase"),
        make_item("password", code="form_password_no_number"),
    ]

    message = format_password_errors(errors, _cfg())

    assert message == "Your password must contain 10 or more characters, an uppercase letter, and a number."


def test_two_requirements_use_plain_conjunction():
    errors = [
        make_item("password", code="form_password_length_too_long"),
        make_item("password", code="form_password_no_special_char"),
    ]

    assert (
        format_password_errors(errors, _cfg())
        == "Your password must contain less than 64 characters and a special character."
    )


def test_pwned_error_stands_alone():
    errors = [
        make_item(
            "password",
            code="form_password_pwned",
            message="is pwned",
            long_message="Password has been found in an online data breach.",
        ),
        make_item("password", code="form_password_no_number"),
    ]

    assert format_password_errors(errors, _cfg()) == "Password has been found in an online data breach."


def test_translate_hook_overrides_phrases():
    catalog = {
        "passwordComplexity.sentencePrefix": "Ihr Passwort muss",
        "passwordComplexity.requireLowercase": "einen Kleinbuchstaben",
        "passwordComplexity.minimumLength": "{length} oder mehr Zeichen",
        "passwordComplexity.conjunction": "und",
    }
    errors = [
        make_item("password", code="form_password_length_too_short"),
        make_item("password", code="form_password_no_lowercase"),
    ]

    message = format_password_errors(errors, _cfg(locale="de-DE", translate=catalog.get))

    assert message == "Ihr Passwort muss 10 oder mehr Zeichen und einen Kleinbuchstaben."


def test_unknown_codes_contribute_their_own_message():
    errors = [make_item("password", code="form_password_mystery", message="something unusual")]

    assert format_password_errors(errors, _cfg()) == "Your password must contain something unusual."


@pytest.mark.parametrize(
    "items,expected",
    [
        ([], ""),
        (["a"], "a"),
        (["a", "b"], "a and b"),
        (["a", "b", "c"], "a, b, and c"),
    ],
)
def test_join_list(items, expected):
    assert join_list(items) == expected


def test_from_dict_coerces_lengths():
    cfg = LocalizationConfig.from_dict({"locale": " fr-FR ", "min_length": "12", "max_length": 100})

    assert cfg.locale == "fr-FR"
    assert cfg.password_settings == PasswordSettings(min_length=12, max_length=100)
    assert cfg.translate is None


@pytest.mark.parametrize(
    "payload",
    [
        {"min_length": "many"},
        {"max_length": True},
        {"min_length": -1},
        {"locale": ""},
        {"colour": "blue"},
    ],
)
def test_from_dict_rejects_bad_values(payload):
    with pytest.raises(ValueError):
        LocalizationConfig.from_dict(payload)


def test_mapping_config_is_converted_before_formatting():
    errors = [make_item("password", code="form_password_length_too_short")]

    message = format_password_errors(errors, {"locale": "en-US", "min_length": 12})

    assert message == "Your password must contain 12 or more characters."


def test_as_localization_config_passes_configs_through():
    cfg = _cfg()

    assert as_localization_config(cfg) is cfg
    assert as_localization_config(None) is None


@pytest.mark.parametrize("config", ["en-US", 42, ["locale"]])
def test_unsupported_config_type_raises_type_error(config):
    with pytest.raises(TypeError):
        format_password_errors([make_item("password")], config)
