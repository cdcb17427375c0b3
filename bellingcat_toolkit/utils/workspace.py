"""Output directory management for export files"""

from pathlib import Path
from typing import Optional, Union


class Workspace:
    """Directory that export files are saved into"""

    def __init__(self, base_path: Union[str, Path]):
        self.base_path = Path(base_path)

    def ensure(self) -> Path:
        """Create the output directory if needed and return it"""
        self.base_path.mkdir(parents=True, exist_ok=True)
        return self.base_path

    def get_export_path(self, filename: str) -> Path:
        """
        Get path for an export file.

        Args:
            filename: Fixed export filename (e.g. bellingcat_tools.xlsx)

        Returns:
            Full path inside the output directory
        """
        return self.ensure() / filename


def get_workspace(base_path: Optional[Union[str, Path]] = None) -> Workspace:
    """
    Get workspace for the given directory, or the configured output directory.

    Args:
        base_path: Optional directory override

    Returns:
        Workspace instance
    """
    if base_path is None:
        from bellingcat_toolkit.config.toolkit_config import get_config
        base_path = get_config().output_dir
    return Workspace(base_path)
