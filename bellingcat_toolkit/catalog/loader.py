"""
Catalog loader
Fetches the remote tool list and appends the built-in tools
"""
import asyncio
from typing import Any, List, Optional
import logging

import requests

from bellingcat_toolkit.catalog.record import RecordOrigin, ToolRecord
from bellingcat_toolkit.catalog.supplemental import supplemental_records
from bellingcat_toolkit.utils.error_handler import CatalogFetchError

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Builds the full collection: remote records first, then the built-in ones,
    each group in its original order. No retry and no partial results.
    """

    def __init__(self, tools_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Args:
            tools_url: Remote JSON tool list (default: configured URL)
            timeout: Seconds to wait for the response; None waits indefinitely
        """
        if tools_url is None:
            from bellingcat_toolkit.config.toolkit_config import get_config
            config = get_config()
            tools_url = config.tools_url
            timeout = config.fetch_timeout if timeout is None else timeout

        self.tools_url = tools_url
        self.timeout = timeout

    def fetch_remote(self) -> List[Any]:
        """
        Retrieve and decode the remote JSON array (blocking).

        Raises:
            CatalogFetchError: On network failure, non-success status,
                invalid JSON or a payload that is not an array
        """
        logger.debug(f"Fetching tool list from {self.tools_url}")

        try:
            response = requests.get(self.tools_url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.JSONDecodeError as e:
            # Also a RequestException, so it is caught first
            raise CatalogFetchError(f"Tool list is not valid JSON: {e}", url=self.tools_url) from e
        except requests.exceptions.RequestException as e:
            raise CatalogFetchError(f"Failed to fetch tool list: {e}", url=self.tools_url) from e

        if not isinstance(data, list):
            raise CatalogFetchError(
                f"Tool list must be a JSON array, got {type(data).__name__}",
                url=self.tools_url
            )

        return data

    @staticmethod
    def parse_records(entries: List[Any]) -> List[ToolRecord]:
        """Convert decoded JSON entries to records, skipping non-objects"""
        records = []
        for idx, entry in enumerate(entries):
            if not isinstance(entry, dict):
                logger.warning(f"Skipping tool entry {idx}: expected object, got {type(entry).__name__}")
                continue
            records.append(ToolRecord.from_dict(entry, origin=RecordOrigin.REMOTE))
        return records

    async def load(self) -> List[ToolRecord]:
        """
        Fetch the remote list and merge the built-in tools after it.

        The blocking request runs in the default executor so the event loop
        stays free while it is outstanding.

        Returns:
            Combined list of records

        Raises:
            CatalogFetchError: If the remote list cannot be retrieved
        """
        loop = asyncio.get_running_loop()
        entries = await loop.run_in_executor(None, self.fetch_remote)

        remote = self.parse_records(entries)
        extra = supplemental_records()

        logger.info(f"📦 Loaded {len(remote)} remote tools + {len(extra)} built-in tools")
        return remote + extra
