#!/usr/bin/env python3
"""
Fantasy basketball chat bot CLI

Reads chat messages from stdin, one per line, and answers !commands against a
league snapshot. Replies go to stdout, or to a webhook when one is configured.

Usage:
    python bot.py --config data/bot_config.json
    echo '!standings' | python bot.py --snapshot data/league.json --league-key 428.l.12345
"""

import argparse
import logging
import sys
from pathlib import Path

from ninecat.commands import CommandDispatcher
from ninecat.config import DEFAULT_CONFIG_PATH, get_config
from ninecat.logging_config import setup_logging
from ninecat.schemas import BotConfig
from ninecat.snapshot import SnapshotSource
from ninecat.transport import ConsoleTransport, WebhookTransport

CONSOLE_CHANNEL = 'console'


def load_config(args: argparse.Namespace) -> BotConfig:
    """Build the bot config from the config file, with command-line overrides."""
    if args.snapshot and args.league_key and not Path(args.config).exists():
        config = BotConfig(league_key=args.league_key, snapshot_path=args.snapshot)
    else:
        config = get_config(args.config)

    overrides = {}
    if args.snapshot:
        overrides['snapshot_path'] = args.snapshot
    if args.league_key:
        overrides['league_key'] = args.league_key
    if args.webhook_url:
        overrides['webhook_url'] = args.webhook_url
    return config.model_copy(update=overrides)


def main():
    parser = argparse.ArgumentParser(description="Yahoo fantasy basketball 9-category chat bot")
    parser.add_argument(
        "--config", default=str(DEFAULT_CONFIG_PATH), help="Path to bot config JSON"
    )
    parser.add_argument("--snapshot", help="Path to league snapshot JSON (overrides config)")
    parser.add_argument("--league-key", help="League key (overrides config)")
    parser.add_argument("--webhook-url", help="Post replies to this webhook instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-dir", default="logs", help="Directory for log files")
    parser.add_argument("--no-log-file", action="store_true", help="Only log to the console")
    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(level, log_dir=None)
    logger = logging.getLogger('ninecat.bot')

    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f'Could not load configuration: {e}')
        sys.exit(1)

    if not args.no_log_file:
        setup_logging(level, log_dir=Path(args.log_dir), league_key=config.league_key)

    if config.webhook_url:
        transport = WebhookTransport(config.webhook_url)
    else:
        transport = ConsoleTransport(sys.stdout)

    source = SnapshotSource(config.snapshot_path)
    dispatcher = CommandDispatcher.from_config(config, source, transport)

    logger.info(f'Listening for commands for league {config.league_key}')
    for line in sys.stdin:
        line = line.strip()
        if not line:
            continue
        dispatcher.on_text_message(False, CONSOLE_CHANNEL, line)


if __name__ == "__main__":
    main()
