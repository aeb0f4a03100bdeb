"""
Entry point for the counter plugin process.

The host launches the plugin executable as:

    deckcounter -port 28196 -pluginUUID <uuid> -registerEvent registerPlugin -info '<json>'
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from deckcounter.config.env_loader import load_env_file, load_plugin_config
from deckcounter.config.logging_config import configure_logging
from deckcounter.exceptions import ConnectError
from deckcounter.plugin import CounterPlugin


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the arguments the host passes on launch."""
    parser = argparse.ArgumentParser(
        prog="deckcounter", description="Counter plugin for the host application"
    )
    parser.add_argument("-port", required=True, help="Host WebSocket port")
    parser.add_argument(
        "-pluginUUID", dest="plugin_uuid", required=True, help="Plugin UUID"
    )
    parser.add_argument(
        "-registerEvent",
        dest="register_event",
        required=True,
        help="Name of the registration event",
    )
    parser.add_argument("-info", default=None, help="Host and device information")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the plugin until the host closes the connection."""
    args = parse_args(argv)
    load_env_file()

    try:
        config = load_plugin_config(
            args.port, args.plugin_uuid, args.register_event, args.info
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger = configure_logging(log_config=config.logging)
    logger.info("=== Plugin Configuration ===")
    logger.info(f"Endpoint: {config.get_websocket_url()}")
    logger.info(f"Plugin UUID: {config.plugin_uuid}")
    logger.info(f"Counter action: {config.counter_action}")
    logger.info(f"Info supplied: {config.info is not None}")
    logger.info("============================")

    plugin = CounterPlugin(config, logger=logger)
    try:
        asyncio.run(plugin.run())
    except ConnectError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
