"""
Exception types shared by the services.

``StoreError`` wraps failures of the embedded database so callers can
tell an I/O problem apart from "not found" (which is reported as
``None``).  ``AuthError`` carries one of the fixed authentication
failure kinds; each kind has a localized user-facing message.
"""

from enum import Enum

from .localization import DEFAULT_LANGUAGE, Language, localize


class StoreError(Exception):
    """Raised when the entity store cannot read or write a record."""


class AuthErrorKind(str, Enum):
    invalid_credentials = "invalid_credentials"
    network_error = "network_error"
    server_error = "server_error"
    user_already_exists = "user_already_exists"


class AuthError(Exception):
    """Authentication or registration failure."""

    def __init__(self, kind: AuthErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    def message(self, language: Language = DEFAULT_LANGUAGE) -> str:
        return localize(f"auth_{self.kind.value}", language)
