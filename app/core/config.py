"""
Configuration loading following kkb_fastapi pattern.

Each environment has its own TOML file under ``app/cfg``.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import toml

from app.utils.constants import ConfigFile, DEFAULT_DAILY_THRESHOLD_KG

__all__ = ["Config", "ConfigFile", "get_config"]

CONFIG_DIR = Path(__file__).resolve().parent.parent / "cfg"

logger = logging.getLogger(__name__)


class Config:
    """Parsed TOML configuration."""

    def __init__(self, file_name: str, data: dict[str, Any]):
        self.file_name = file_name
        self.data = data

    @property
    def daily_threshold_kg(self) -> float:
        """Daily emissions threshold used for reward points."""
        return float(
            self.data.get("rewards", {}).get(
                "daily_threshold_kg", DEFAULT_DAILY_THRESHOLD_KG
            )
        )

    def __repr__(self):
        return f"<Config: {self.file_name}>"


@lru_cache
def get_config(config_file: str = ConfigFile.DEVELOPMENT) -> Config:
    """
    Load configuration from a TOML file.

    Args:
        config_file: File name inside ``app/cfg`` (e.g., "test.toml")

    Returns:
        Config instance
    """
    path = CONFIG_DIR / config_file
    logger.debug(f"Loading config from {path}")
    return Config(config_file, toml.load(path))
