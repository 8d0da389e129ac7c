"""
Connect to a Lavalink node and log the events it sends.

Usage:
    python -m lavalink_client [--host HOST] [--password PASSWORD] [--client-id ID] [--tls]

Environment Variables:
    LAVALINK_HOST=host[:port]        - Node address
    LAVALINK_PASSWORD=password       - Node password
    LAVALINK_CLIENT_ID=id            - Bot user id sent as User-Id
    LAVALINK_TLS=true                - Use wss:// (default: false)
    LAVALINK_TIMEOUT=seconds         - Handshake timeout (default: 30)
    LOG_LEVEL=level                  - Logging level (default: INFO)

Command line flags override the environment.
"""

import argparse
import asyncio
import dataclasses
import sys

from lavalink_client.client import LavalinkClient
from lavalink_client.config.env_loader import load_client_config
from lavalink_client.config.logging_config import configure_logging
from lavalink_client.exceptions import LavalinkClientError
from lavalink_client.models.lavalink_api import (
    EventMessage,
    EventType,
    MessageOp,
    PlayerUpdateMessage,
    StatsMessage,
)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Connect to a Lavalink node and log its events"
    )
    parser.add_argument("--host", help="Node address as host[:port]")
    parser.add_argument("--password", help="Node password")
    parser.add_argument("--client-id", help="Bot user id sent as User-Id")
    parser.add_argument(
        "--tls", action="store_true", default=None, help="Connect with wss://"
    )
    parser.add_argument("--timeout", type=float, help="Handshake timeout in seconds")
    parser.add_argument("--env-file", help="Path to a .env file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--color", action="store_true", help="Colour console output by level"
    )
    return parser.parse_args(argv)


def build_handlers(logger):
    """Build handlers that log a one-line summary of each known operation."""

    def on_player_update(payload: bytes) -> None:
        update = PlayerUpdateMessage.model_validate_json(payload)
        logger.info(
            f"player {update.guildId}: position={update.state.position}ms "
            f"connected={update.state.connected} ping={update.state.ping}ms"
        )

    def on_stats(payload: bytes) -> None:
        stats = StatsMessage.model_validate_json(payload)
        logger.info(
            f"stats: players={stats.players} playing={stats.playingPlayers} "
            f"uptime={stats.uptime // 1000}s load={stats.cpu.lavalinkLoad:.2f}"
        )

    def on_event(payload: bytes) -> None:
        event = EventMessage.model_validate_json(payload)
        event_type = event.type.value if isinstance(event.type, EventType) else event.type
        logger.info(f"event {event_type} for guild {event.guildId}")

    return {
        MessageOp.PLAYER_UPDATE: on_player_update,
        MessageOp.STATS: on_stats,
        MessageOp.EVENT: on_event,
        # The client records the session id itself before calling this
        MessageOp.READY: lambda payload: None,
    }


async def run(client: LavalinkClient) -> None:
    dispatch_task = await client.connect()
    try:
        await dispatch_task
    finally:
        if client.is_connected:
            await client.disconnect()
            await client.wait_closed()


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load .env first so LOG_LEVEL set there applies
    config = load_client_config(args.env_file)
    logger = configure_logging(file_path=None, level=args.log_level, colorized=args.color)

    overrides = {
        "host": args.host,
        "password": args.password,
        "client_id": args.client_id,
        "tls": args.tls,
        "timeout": args.timeout,
    }
    config = dataclasses.replace(
        config, **{key: value for key, value in overrides.items() if value is not None}
    )

    try:
        client = LavalinkClient(config, build_handlers(logger), logger)
        asyncio.run(run(client))
    except LavalinkClientError as e:
        logger.error(str(e))
        return 1
    except (OSError, asyncio.TimeoutError) as e:
        logger.error(f"client: could not connect to {config.host}: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
