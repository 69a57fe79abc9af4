"""Ranker configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import RankerConfig
from .utils import load_model

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'ranker_config.json'


@lru_cache(maxsize=1)
def get_config() -> RankerConfig:
    """
    Load ranker configuration from data/ranker_config.json.

    Configuration is cached after first load. A missing or invalid file
    falls back to the built-in defaults.

    Returns:
        RankerConfig object with validated settings

    Example:
        from leaderboard.config import get_config
        config = get_config()
        print(f"Header scan window: {config.header_scan_rows} rows")
    """
    return load_model(CONFIG_PATH, RankerConfig, default=RankerConfig())


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
