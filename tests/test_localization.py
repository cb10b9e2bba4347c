import pytest

from business_directory_api.app.core.errors import AuthError, AuthErrorKind
from business_directory_api.app.core.localization import (
    DEFAULT_LANGUAGE,
    TRANSLATIONS,
    Language,
    localize,
    parse_language,
    table,
)
from business_directory_api.app.schemas.business import BusinessCategory, BusinessFilter


def test_every_key_is_translated_in_both_languages():
    for key, values in TRANSLATIONS.items():
        for language in Language:
            assert values.get(language), f"{key} missing {language.value}"


def test_localize():
    assert localize("login_button", Language.english) == "LOGIN"
    assert localize("login_button", Language.spanish) == "INICIAR SESIÓN"
    assert localize("no_such_key", Language.english) == ""


def test_table_is_flat():
    strings = table(Language.english)
    assert strings["category_food"] == "Food & Drinks"
    assert set(strings) == set(TRANSLATIONS)


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, DEFAULT_LANGUAGE),
        ("", DEFAULT_LANGUAGE),
        ("en", Language.english),
        ("en-US,en;q=0.9", Language.english),
        ("es-MX,es;q=0.9,en;q=0.8", Language.spanish),
        ("fr-FR, en;q=0.5", Language.english),
        ("en;q=0.3, es;q=0.7", Language.spanish),
        ("de, fr", DEFAULT_LANGUAGE),
    ],
)
def test_parse_language(header, expected):
    assert parse_language(header) == expected


def test_parse_language_uses_given_default():
    assert parse_language("de", Language.english) == Language.english


def test_auth_error_messages():
    error = AuthError(AuthErrorKind.invalid_credentials)
    assert error.message(Language.spanish) == "Correo electrónico o contraseña incorrectos"
    assert error.message(Language.english) == "Incorrect email or password"
    for kind in AuthErrorKind:
        assert AuthError(kind).message(Language.english)


def test_category_and_filter_names():
    assert BusinessCategory.retail.localized_name(Language.spanish) == "Comercio"
    assert BusinessFilter.top_rated.title(Language.spanish) == "Mejor valorados"
    assert BusinessFilter.nearest.title(Language.english) == "Nearest"
