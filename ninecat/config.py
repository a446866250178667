"""Bot configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import BotConfig
from .utils import load_json

DEFAULT_CONFIG_PATH = Path('data') / 'bot_config.json'


@lru_cache(maxsize=4)
def get_config(path: Path | str = DEFAULT_CONFIG_PATH) -> BotConfig:
    """
    Load bot configuration from a JSON file (default: data/bot_config.json).

    Configuration is cached per path after first load.

    Returns:
        BotConfig object with validated settings

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from ninecat.config import get_config
        config = get_config()
        print(f"League: {config.league_key}")
    """
    return load_json(Path(path), schema=BotConfig)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
