"""
Business logic for login and registration.

``AuthService`` validates credentials against the entity store and keeps
one session per instance (``is_authenticated`` / ``current_user``).  An
unknown e-mail and a wrong password fail with the same
``invalid_credentials`` error so the response does not reveal which
addresses are registered.

Passwords are compared as stored unless the service is built with
``hash_passwords=True``; plain-text storage matches the mobile client
and must not be used for a real deployment.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from ..core.errors import AuthError, AuthErrorKind, StoreError
from ..core.security import check_password, hash_password
from ..schemas.user import SessionRead, UserRead
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class AuthService:
    """Single-session authentication against an ``EntityStore``."""

    def __init__(
        self,
        store: EntityStore,
        delay_seconds: float = 0.0,
        sleep: Sleep = asyncio.sleep,
        hash_passwords: bool = False,
    ):
        self.store = store
        self.delay_seconds = delay_seconds
        self._sleep = sleep
        self.hash_passwords = hash_passwords
        self.is_authenticated = False
        self.current_user: Optional[UserRead] = None
        # Checked in place of a stored password when the e-mail is unknown.
        self._decoy_password = hash_password("") if hash_passwords else ""

    async def _wait(self) -> None:
        if self.delay_seconds > 0:
            await self._sleep(self.delay_seconds)

    def _start_session(self, user: UserRead) -> None:
        self.is_authenticated = True
        self.current_user = user

    async def login(self, email: str, password: str) -> UserRead:
        """Authenticate ``email``/``password`` and open the session.

        Raises ``AuthError(invalid_credentials)`` for an unknown e-mail or
        a wrong password and ``AuthError(server_error)`` when the store
        cannot be read.  The session is left untouched on failure.
        """
        await self._wait()
        try:
            record = self.store.fetch_user(email)
        except StoreError as e:
            logger.error("Login for %s failed, store unavailable: %s", email, e)
            raise AuthError(AuthErrorKind.server_error) from e
        if record is None:
            # Same verification work as a wrong password for a known address.
            check_password(password, self._decoy_password, self.hash_passwords)
            logger.info("Rejected login for %s", email)
            raise AuthError(AuthErrorKind.invalid_credentials)
        if not check_password(password, record.password, self.hash_passwords):
            logger.info("Rejected login for %s", email)
            raise AuthError(AuthErrorKind.invalid_credentials)
        user = record.public()
        self._start_session(user)
        logger.info("User %s logged in", user.email)
        return user

    async def register(self, email: str, password: str, full_name: str) -> UserRead:
        """Create an account and log it in.

        Raises ``AuthError(user_already_exists)`` when the e-mail is taken
        (the existing record is not modified) and
        ``AuthError(server_error)`` when the user could not be stored.
        """
        await self._wait()
        logger.info("Registering user %s", email)
        try:
            if self.store.fetch_user(email) is not None:
                raise AuthError(AuthErrorKind.user_already_exists)
            stored_password = hash_password(password) if self.hash_passwords else password
            record = self.store.create_user(email, stored_password, full_name)
        except StoreError as e:
            logger.error("Registration of %s failed: %s", email, e)
            raise AuthError(AuthErrorKind.server_error) from e
        if record is None:
            raise AuthError(AuthErrorKind.server_error)
        user = record.public()
        self._start_session(user)
        return user

    def logout(self) -> None:
        if self.current_user is not None:
            logger.info("User %s logged out", self.current_user.email)
        self.is_authenticated = False
        self.current_user = None

    def session(self) -> SessionRead:
        return SessionRead(is_authenticated=self.is_authenticated, user=self.current_user)
