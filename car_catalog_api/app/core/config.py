"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A local ``.env`` file is loaded first with
``python-dotenv``; variables already present in the process
environment win over values from the file.  Defaults are provided for
every field except the LINE channel credentials (``KEYPATH`` and
``CHID``), which must be supplied when the access token is fetched.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(os.getenv("ENV_FILE", ".env"))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Car Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "1323"))

    # Storage backend for car records: ``sqlite`` (embedded database file)
    # or ``memory`` (process‑local dict, reseeded on startup).
    car_storage: str = os.getenv("CAR_STORAGE", "sqlite").lower()

    # Path to the SQLite database file.  Relative paths are resolved
    # against the current working directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "cars.db")

    # Directory served at ``/``.  Ignored when it does not exist.
    static_dir: str = os.getenv("STATIC_DIR", "static")

    # LINE Messaging API channel access token (v2.1) settings.
    key_path: str = os.getenv("KEYPATH", "")
    channel_id: str = os.getenv("CHID", "")
    jwt_expire_minutes: int = int(os.getenv("EXPJWT", "30"))
    access_token_expire_days: int = int(os.getenv("EXPACC", "30"))
    line_token_url: str = os.getenv("LINE_TOKEN_URL", "https://api.line.me/oauth2/v2.1/token")
    line_audience: str = os.getenv("LINE_AUDIENCE", "https://api.line.me/")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
