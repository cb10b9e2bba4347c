"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via
environment variables in a deployment.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Business Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db``; ``:memory:`` keeps the
    # data for the lifetime of the process only.
    database_url: str = os.getenv("DATABASE_URL", "business_directory.db")

    # Language used when a request carries no usable Accept-Language
    # header.  The mobile app defaulted to Spanish.
    default_language: str = os.getenv("DEFAULT_LANGUAGE", "es")

    # Artificial latency applied before login and registration.  Zero
    # in production; the mobile client simulated 1.5 seconds.
    auth_delay_seconds: float = float(os.getenv("AUTH_DELAY_SECONDS", "0"))

    # Passwords are stored as given unless this is enabled, in which
    # case PBKDF2 digests from ``core.security`` are stored instead.
    hash_passwords: bool = _env_flag("HASH_PASSWORDS")

    # Load the sample catalog on startup (guarded, runs at most once
    # per database).
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
