"""
Configuration management.
Loads entry-point settings from environment variables.

Values are parsed leniently so a bad variable never breaks import;
Config.validate() reports what was rejected.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from transcript_ingestor.extraction.schema import DEFAULT_WATCH_URL, IngestorConfig

# Load .env file
load_dotenv()

# Timeout values that mean "keep the HTTP client's own default"
TRANSPORT_DEFAULT_TIMEOUT = ("", "none", "0", "default")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_timeout(raw: Optional[str], default: Optional[float]) -> Optional[float]:
    if raw is None:
        return default
    if raw.strip().lower() in TRANSPORT_DEFAULT_TIMEOUT:
        return None
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_port(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if 0 < value < 65536 else default


class Config:
    """Application configuration from environment variables."""

    # Transport
    VERIFY_TLS: bool = _env_bool("TRANSCRIPT_VERIFY_TLS", True)
    TIMEOUT_RAW: Optional[str] = os.getenv("TRANSCRIPT_TIMEOUT")
    TIMEOUT: Optional[float] = _parse_timeout(TIMEOUT_RAW, 30.0)
    WATCH_URL: str = os.getenv("TRANSCRIPT_WATCH_URL", DEFAULT_WATCH_URL)

    # Caption selection
    DEFAULT_LANG: str = os.getenv("TRANSCRIPT_DEFAULT_LANG", "en")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Server settings
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT_RAW: Optional[str] = os.getenv("PORT")
    PORT: int = _parse_port(PORT_RAW, 8080)

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate settings.
        Returns list of invalid config keys with a reason.
        """
        errors = []

        if "{video_id}" not in cls.WATCH_URL:
            errors.append("TRANSCRIPT_WATCH_URL must contain '{video_id}'")
        if cls.TIMEOUT_RAW is not None and cls.TIMEOUT_RAW.strip().lower() not in TRANSPORT_DEFAULT_TIMEOUT:
            if _parse_timeout(cls.TIMEOUT_RAW, None) is None:
                errors.append(f"TRANSCRIPT_TIMEOUT must be a positive number, got {cls.TIMEOUT_RAW!r}; using {cls.TIMEOUT}")
        if cls.TIMEOUT is not None and cls.TIMEOUT <= 0:
            errors.append(f"TRANSCRIPT_TIMEOUT must be positive, got {cls.TIMEOUT}")
        if cls.PORT_RAW is not None and _parse_port(cls.PORT_RAW, 0) == 0:
            errors.append(f"PORT must be an integer between 1 and 65535, got {cls.PORT_RAW!r}; using {cls.PORT}")
        if not cls.DEFAULT_LANG:
            errors.append("TRANSCRIPT_DEFAULT_LANG is empty")
        if not cls.VERIFY_TLS:
            errors.append("TRANSCRIPT_VERIFY_TLS is off; TLS certificates will not be checked")

        return errors

    @classmethod
    def ingestor_config(
        cls,
        verify_tls: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> IngestorConfig:
        """
        Build the core config, letting explicit arguments override the environment.

        timeout=None keeps the environment value; timeout=0 keeps the HTTP
        client's own default, same as TRANSCRIPT_TIMEOUT=0.
        """
        return IngestorConfig(
            verify_tls=cls.VERIFY_TLS if verify_tls is None else verify_tls,
            timeout=cls.TIMEOUT if timeout is None else (timeout or None),
            watch_url=cls.WATCH_URL,
        )
