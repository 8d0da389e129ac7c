"""
Environment variable loader for the Lavalink client configuration.

Values are read from the process environment, optionally seeded from a
``.env`` file, converted to their target types and fall back to defaults
when missing or malformed.
"""

import os
from typing import Optional, Type, TypeVar, cast

from dotenv import find_dotenv, load_dotenv

from lavalink_client.config.constants import DEFAULT_CLIENT_NAME, DEFAULT_TIMEOUT
from lavalink_client.config.models import ClientConfig

T = TypeVar("T")


def load_env_file(env_file: Optional[str] = None) -> None:
    """Load environment variables from a .env file.

    Args:
        env_file: Path to the .env file. If None, searches upwards from the
            current working directory.
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))


def safe_convert(value: Optional[str], target_type: Type[T], default: T) -> T:
    """Safely convert environment variable string to target type."""
    if value is None or value.strip() == "":
        return default

    try:
        if target_type == bool:
            return cast(T, value.strip().lower() in ("true", "1", "yes", "on"))
        elif target_type == int:
            return cast(T, int(value))
        elif target_type == float:
            return cast(T, float(value))
        elif target_type == str:
            return cast(T, value)
        else:
            return default
    except (ValueError, TypeError):
        return default


def load_client_config(env_file: Optional[str] = None) -> ClientConfig:
    """Load the node connection configuration from environment variables.

    Recognised variables: LAVALINK_HOST, LAVALINK_PASSWORD, LAVALINK_CLIENT_ID,
    LAVALINK_TLS, LAVALINK_TIMEOUT and LAVALINK_CLIENT_NAME.

    The result is not validated here; ``LavalinkClient`` validates it.
    """
    load_env_file(env_file)

    return ClientConfig(
        host=os.getenv("LAVALINK_HOST", ""),
        password=os.getenv("LAVALINK_PASSWORD", ""),
        client_id=os.getenv("LAVALINK_CLIENT_ID", ""),
        tls=safe_convert(os.getenv("LAVALINK_TLS"), bool, False),
        timeout=safe_convert(os.getenv("LAVALINK_TIMEOUT"), float, DEFAULT_TIMEOUT),
        client_name=os.getenv("LAVALINK_CLIENT_NAME") or DEFAULT_CLIENT_NAME,
    )
