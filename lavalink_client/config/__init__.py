"""
Configuration for the Lavalink client.

```python
from lavalink_client.config import ClientConfig, configure_logging

config = ClientConfig(host="127.0.0.1:2333", password="youshallnotpass", client_id="1234")
logger = configure_logging()
```

Use ``load_client_config()`` to build the same configuration from
``LAVALINK_*`` environment variables or a ``.env`` file.
"""

from .constants import DEFAULT_CLIENT_NAME, DEFAULT_TIMEOUT, LOGGER_NAME
from .env_loader import load_client_config, load_env_file
from .logging_config import configure_logging
from .models import ClientConfig, is_valid_host, validate_config

__all__ = [
    "ClientConfig",
    "DEFAULT_CLIENT_NAME",
    "DEFAULT_TIMEOUT",
    "LOGGER_NAME",
    "configure_logging",
    "is_valid_host",
    "load_client_config",
    "load_env_file",
    "validate_config",
]
