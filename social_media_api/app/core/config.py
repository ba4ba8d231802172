"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the API can be started
without any setup, but the signing secret in particular must be overridden
via ``JWT_SECRET`` outside of local development.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


DEFAULT_SECRET_KEY = "change_me"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Social Media Platform API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a file that receives a copy of the console log.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Token signing.  Tokens are valid for 24 hours unless overridden.
    secret_key: str = os.getenv("JWT_SECRET", DEFAULT_SECRET_KEY)
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # PBKDF2 work factor for password hashes.  Tests lower this to keep
    # registration fast.
    password_hash_iterations: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "100000"))

    # Start with the two demo users and posts in memory.
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
