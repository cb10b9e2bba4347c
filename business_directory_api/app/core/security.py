"""
Password helpers.

Passwords are kept exactly as entered unless hashing is switched on
through the ``HASH_PASSWORDS`` setting.  Plain-text storage matches the
mobile client's behaviour and is unsafe for any real deployment; the
PBKDF2 helpers below are what a deployment should enable.
"""

import hashlib
import hmac
import os

ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by a
    ``$`` (salt in hex, then hash in hex).

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        Salt and hash concatenated with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Returns ``False`` for malformed stored values instead of raising.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


def check_password(plain_password: str, stored_password: str, hashed: bool) -> bool:
    """Compare a login attempt with the stored password.

    ``hashed`` selects PBKDF2 verification; otherwise the values are
    compared directly (constant time either way).
    """
    if hashed:
        return verify_password(plain_password, stored_password)
    return hmac.compare_digest(plain_password.encode("utf-8"), stored_password.encode("utf-8"))
