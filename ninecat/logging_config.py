"""Logging setup for the long-running chat bot."""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'
LOG_BACKUP_DAYS = 14


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[Path] = Path('logs'),
    league_key: Optional[str] = None,
    console: bool = True,
) -> logging.Logger:
    """
    Configure the 'ninecat' logger.

    The bot runs for days, so the log file rolls over at midnight and keeps
    LOG_BACKUP_DAYS old files. Console output goes to stderr so replies
    written to stdout stay clean. Calling this again replaces the handlers.

    Args:
        level: Logging level for every handler
        log_dir: Directory for log files, or None to skip file logging
        league_key: Included in the log file name so bots for different
            leagues don't share a file
        console: Whether to log to stderr

    Returns:
        The configured 'ninecat' logger
    """
    logger = logging.getLogger('ninecat')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = []
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        name = f'ninecat_{league_key}.log' if league_key else 'ninecat.log'
        file_handler = TimedRotatingFileHandler(
            log_dir / name, when='midnight', backupCount=LOG_BACKUP_DAYS, encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        handlers.append(file_handler)
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handlers.append(console_handler)

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger
