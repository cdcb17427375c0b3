"""
Configuration for the toolkit catalog

Values come from environment variables, with a .env file loaded first for
local development.

Usage:
    from bellingcat_toolkit.config.toolkit_config import get_config

    config = get_config()
    config.tools_url
    config.output_dir
"""

import os
import logging
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TOOLS_URL = "https://raw.githubusercontent.com/bellingcat/toolkit/main/data/tools.json"
DEFAULT_OUTPUT_DIR = "exports"


class ToolkitConfig:
    """Runtime configuration for catalog retrieval and exports"""

    def __init__(
        self,
        tools_url: str = DEFAULT_TOOLS_URL,
        output_dir: Optional[str] = None,
        fetch_timeout: Optional[float] = None,
        log_level: str = "INFO",
    ):
        """
        Initialize configuration

        Args:
            tools_url: Location of the remote JSON tool list
            output_dir: Directory export files are saved into (default: ./exports)
            fetch_timeout: Seconds to wait for the remote list; None waits indefinitely
            log_level: Logging level name
        """
        self.tools_url = tools_url
        self.output_dir = Path(output_dir) if output_dir else Path(os.getcwd()) / DEFAULT_OUTPUT_DIR
        self.fetch_timeout = fetch_timeout
        self.log_level = log_level

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "ToolkitConfig":
        """Build configuration from environment variables (and .env)"""
        if load_dotenv_file:
            load_dotenv()

        timeout_raw = os.getenv("TOOLKIT_FETCH_TIMEOUT", "").strip()
        fetch_timeout = None
        if timeout_raw:
            try:
                fetch_timeout = float(timeout_raw)
            except ValueError:
                logger.warning(f"Ignoring invalid TOOLKIT_FETCH_TIMEOUT: {timeout_raw!r}")

        return cls(
            tools_url=os.getenv("TOOLKIT_TOOLS_URL") or DEFAULT_TOOLS_URL,
            output_dir=os.getenv("TOOLKIT_OUTPUT_DIR") or None,
            fetch_timeout=fetch_timeout,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "tools_url": self.tools_url,
            "output_dir": str(self.output_dir),
            "fetch_timeout": None if self.fetch_timeout is None else str(self.fetch_timeout),
            "log_level": self.log_level,
        }


# Global instance for easy access
_config: Optional[ToolkitConfig] = None


def get_config(force_reload: bool = False) -> ToolkitConfig:
    """
    Get configuration (singleton pattern)

    Args:
        force_reload: Re-read the environment

    Returns:
        ToolkitConfig instance
    """
    global _config

    if _config is None or force_reload:
        _config = ToolkitConfig.from_env()
        logger.debug(f"Configuration loaded: {_config.to_dict()}")

    return _config


def reset_config():
    """Reset global configuration (useful for testing)"""
    global _config
    _config = None
