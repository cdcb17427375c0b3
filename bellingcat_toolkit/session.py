"""
Catalog session
Dispatches user actions against the application state and recomputes the
filtered view after every input change
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

from bellingcat_toolkit.catalog.loader import CatalogLoader
from bellingcat_toolkit.catalog.record import ToolRecord
from bellingcat_toolkit.export.document import export_document
from bellingcat_toolkit.export.spreadsheet import export_spreadsheet
from bellingcat_toolkit.state import AppState, ToolDetail
from bellingcat_toolkit.utils.error_handler import (
    CatalogFetchError,
    ExportError,
    get_user_friendly_error_message,
)

logger = logging.getLogger(__name__)


class ToolkitSession:
    """One user session over the merged tool catalog"""

    def __init__(
        self,
        loader: Optional[CatalogLoader] = None,
        output_dir: Optional[Union[str, Path]] = None
    ):
        """
        Args:
            loader: Catalog loader (default: configured remote source)
            output_dir: Export directory override
        """
        self.loader = loader or CatalogLoader()
        self.output_dir = output_dir
        self.state = AppState()
        self._started = False

    async def start(self) -> AppState:
        """
        Load the catalog once.

        A failed fetch leaves the catalog empty and marks it unavailable;
        it is not raised. Later calls return the existing state.
        """
        if self._started:
            logger.warning("Catalog already loaded for this session; ignoring reload")
            return self.state
        self._started = True

        try:
            tools = await self.loader.load()
        except CatalogFetchError as e:
            message = get_user_friendly_error_message(e)
            logger.error(f"Catalog unavailable: {e}")
            self.state.mark_unavailable(message)
            return self.state

        self.state.publish_tools(tools)
        logger.info(f"Catalog ready: {len(self.state.tools)} tools in {len(self.state.categories)} categories")
        return self.state

    @property
    def filtered(self) -> List[ToolRecord]:
        return self.state.filtered

    @property
    def categories(self) -> List[str]:
        return self.state.categories

    def set_search(self, search: str) -> List[ToolRecord]:
        self.state.search = search or ""
        self.state.recompute()
        return self.state.filtered

    def set_category(self, category: str) -> List[ToolRecord]:
        self.state.category = category
        self.state.recompute()
        return self.state.filtered

    def select(self, tool: ToolRecord) -> ToolDetail:
        """Open a record from the filtered view for detail display"""
        self.state.selection.select(tool)
        return self.state.selection.detail()

    def find(self, name: str) -> Optional[ToolRecord]:
        """First record in the filtered view with this name (case-insensitive)"""
        needle = name.lower()
        return next((t for t in self.state.filtered if t.name.lower() == needle), None)

    def clear_selection(self):
        self.state.selection.clear()

    def detail(self) -> ToolDetail:
        return self.state.selection.detail()

    def toggle_theme(self) -> bool:
        """Flip dark mode; display only"""
        self.state.dark_mode = not self.state.dark_mode
        return self.state.dark_mode

    def export_spreadsheet(self) -> Path:
        """Export the current filtered view to the spreadsheet file"""
        return self._export("Spreadsheet", export_spreadsheet)

    def export_document(self) -> Path:
        """Export the current filtered view to the PDF file"""
        return self._export("PDF", export_document)

    def _export(self, format_name: str, writer) -> Path:
        # Snapshot of the view at invocation time
        view = list(self.state.filtered)
        try:
            path = writer(view, self.output_dir)
        except ExportError as e:
            self.state.notices[format_name] = get_user_friendly_error_message(e)
            raise
        self.state.notices.pop(format_name, None)
        return path
