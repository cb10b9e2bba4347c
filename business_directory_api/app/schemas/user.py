"""
Pydantic models for user data.

``UserCreate`` and ``UserLogin`` validate the registration and login
payloads with the same rules the mobile forms applied.  ``UserRead`` is
what the API returns; ``UserRecord`` is the stored row including the
password and never leaves the service layer.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..core.localization import Language, localize

EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")
MIN_PASSWORD_LENGTH = 6


def _check_email(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(localize("empty_fields", Language.english))
    if not EMAIL_PATTERN.fullmatch(v):
        raise ValueError(localize("invalid_email", Language.english))
    return v


class UserLogin(BaseModel):
    """Login payload.

    Password length is not checked here so that a short wrong password
    fails the same way as any other wrong password.
    """

    email: str = Field(..., examples=["ana@example.com"])
    password: str = Field(..., examples=["secret1"])

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_present(cls, v: str) -> str:
        if not v:
            raise ValueError(localize("empty_fields", Language.english))
        return v


class UserCreate(BaseModel):
    """Registration payload."""

    email: str = Field(..., examples=["ana@example.com"])
    password: str = Field(..., examples=["secret1"])
    full_name: str = Field(..., examples=["Ana García"])
    confirm_password: Optional[str] = Field(None, examples=["secret1"])

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("full_name")
    @classmethod
    def name_present(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(localize("empty_name", Language.english))
        return v

    @field_validator("password")
    @classmethod
    def long_enough(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(localize("invalid_password", Language.english))
        return v

    @model_validator(mode="after")
    def passwords_match(self) -> "UserCreate":
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise ValueError(localize("passwords_do_not_match", Language.english))
        return self


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    email: str
    name: str = ""
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class UserRecord(UserRead):
    """Stored user row, password included."""

    password: str

    def public(self) -> UserRead:
        return UserRead(id=self.id, email=self.email, name=self.name, created_at=self.created_at)


class SessionRead(BaseModel):
    """Current authentication state of the service."""

    is_authenticated: bool
    user: Optional[UserRead] = None
