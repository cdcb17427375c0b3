"""Runtime configuration"""
from bellingcat_toolkit.config.toolkit_config import (
    DEFAULT_TOOLS_URL,
    ToolkitConfig,
    get_config,
    reset_config,
)

__all__ = [
    'DEFAULT_TOOLS_URL',
    'ToolkitConfig',
    'get_config',
    'reset_config',
]
