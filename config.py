"""
Configuration module for service client settings.

This module reads client settings from environment variables and
provides a type-safe configuration object shared by every service client.
"""
import os
from dataclasses import dataclass
from typing import Optional


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_SCHEMES = {"http", "https"}


def _read_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got: {raw}")
    return value


def _read_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}")
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got: {raw}")
    return value


def _read_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes"):
        return True
    if lowered in ("0", "false", "no"):
        return False
    raise ValueError(f"{name} must be true or false, got: {raw}")


@dataclass
class ClientConfig:
    """Type-safe client configuration."""

    region: str = "us-east-1"
    endpoint_override: Optional[str] = None
    scheme: str = "https"
    connect_timeout: float = 1.0
    request_timeout: float = 3.0
    max_connections: int = 25
    verify_ssl: bool = True
    profile_name: Optional[str] = None
    user_agent: str = "aws-service-models-python/0.1.0"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create ClientConfig instance from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        region = os.environ.get("AWS_REGION") or os.environ.get(
            "AWS_DEFAULT_REGION", "us-east-1"
        )
        endpoint_override = os.environ.get("AWS_ENDPOINT_URL") or None

        scheme = os.environ.get("AWS_SDK_SCHEME", "https").lower()
        if scheme not in VALID_SCHEMES:
            raise ValueError(
                f"AWS_SDK_SCHEME must be one of {VALID_SCHEMES}, got: {scheme}"
            )

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {log_level}"
            )

        return cls(
            region=region,
            endpoint_override=endpoint_override,
            scheme=scheme,
            connect_timeout=_read_float("AWS_SDK_CONNECT_TIMEOUT", 1.0),
            request_timeout=_read_float("AWS_SDK_REQUEST_TIMEOUT", 3.0),
            max_connections=_read_int("AWS_SDK_MAX_CONNECTIONS", 25),
            verify_ssl=_read_bool("AWS_SDK_VERIFY_SSL", True),
            profile_name=os.environ.get("AWS_PROFILE") or None,
            log_level=log_level,
        )


_config: Optional[ClientConfig] = None


def get_config() -> ClientConfig:
    """
    Get the global configuration instance.

    Returns:
        ClientConfig: The validated configuration object

    Raises:
        ValueError: If environment variables are invalid.
    """
    global _config
    if _config is None:
        _config = ClientConfig.from_env()
    return _config
