#!/usr/bin/env python3
"""
Command line entry point: ``slimbot path/to/config.json``
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence

from .bot.core import Bot
from .bot.plugins import PluginFactory
from .config import load_config
from .errors.handling import log_error
from .errors.internal import BotError
from .logging_config import LoggerConfigurator, error_aggregator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slimbot", description="Run a pattern-dispatching IRC bot."
    )
    parser.add_argument("config", help="path to the JSON configuration file")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="show DEBUG records on the console",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    plugins: Iterable[PluginFactory] = (),
) -> None:
    """Load the configuration, build the bot, load ``plugins`` and run it.

    Host programs embedding slimbot call this with their own plugin
    factories; the bare command line runs a bot that only answers PINGs.

    Raises:
        BotError: setup failed or the server could not be reached.
    """
    args = build_parser().parse_args(argv)
    LoggerConfigurator().configure(debug=True if args.verbose else None)

    config = load_config(args.config)
    with Bot(config) as bot:
        if args.verbose:
            # Wire trace and DEBUG events are emitted on the bot's own logger
            bot.logger.set_level(logging.DEBUG)
        bot.load_plugins(plugins)
        logging.info(f"Starting slimbot as {config.nick} on {config.hostname}:{config.port}")
        bot.run()


def run(argv: Sequence[str] | None = None, plugins: Iterable[PluginFactory] = ()) -> None:
    """Synchronous entry point mapping failures to exit codes.

    Raises:
        SystemExit: 0 on interrupt, 1 when setup or the connection failed.
    """
    try:
        main(argv, plugins)
    except KeyboardInterrupt:
        sys.exit(0)
    except BotError as e:
        log_error("Fatal error", e)
        sys.exit(1)
    finally:
        error_aggregator.log_summary_report()
        logging.info("Shutdown complete")


if __name__ == "__main__":
    run()
