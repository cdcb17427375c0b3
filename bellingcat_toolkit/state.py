"""State definitions for a catalog session"""

from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum

from bellingcat_toolkit.catalog.categories import ALL_CATEGORIES, categories_of
from bellingcat_toolkit.catalog.filters import filter_tools
from bellingcat_toolkit.catalog.record import ToolRecord
from bellingcat_toolkit.utils.error_handler import CatalogStateError


class CatalogStatus(Enum):
    """Lifecycle of the full collection"""
    LOADING = "loading"            # Fetch outstanding, catalog shows as empty
    READY = "ready"                # Collection published
    UNAVAILABLE = "unavailable"    # Fetch failed, collection stays empty


@dataclass(frozen=True)
class ToolDetail:
    """Fields shown in the detail view; all None when nothing is selected"""
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    url: Optional[str] = None


class SelectionState:
    """Holds a reference to at most one open record"""

    def __init__(self):
        self._current: Optional[ToolRecord] = None

    def select(self, tool: ToolRecord):
        """Open a record, replacing any previous selection"""
        self._current = tool

    def current(self) -> Optional[ToolRecord]:
        return self._current

    def clear(self):
        self._current = None

    def detail(self) -> ToolDetail:
        """Detail fields for the open record (safe before any selection)"""
        tool = self._current
        if tool is None:
            return ToolDetail()
        return ToolDetail(
            name=tool.name,
            description=tool.description,
            category=tool.category,
            url=tool.url if tool.has_link else None,
        )


@dataclass
class AppState:
    """
    Explicit application state for one session.

    The full collection is written once by ``publish_tools``; the filtered
    view and category list are derived values refreshed by ``recompute``.
    """
    tools: Tuple[ToolRecord, ...] = ()
    search: str = ""
    category: str = ALL_CATEGORIES
    filtered: List[ToolRecord] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    status: CatalogStatus = CatalogStatus.LOADING
    status_message: Optional[str] = None
    selection: SelectionState = field(default_factory=SelectionState)
    dark_mode: bool = False
    notices: Dict[str, str] = field(default_factory=dict)  # Export format -> last failure

    def publish_tools(self, tools: List[ToolRecord]):
        """
        Store the full collection and mark the catalog ready.

        Raises:
            CatalogStateError: If the collection was already published
        """
        if self.status is not CatalogStatus.LOADING:
            raise CatalogStateError(f"Catalog already {self.status.value}; it is written once per session")
        self.tools = tuple(tools)
        self.status = CatalogStatus.READY
        self.categories = categories_of(self.tools)
        self.recompute()

    def mark_unavailable(self, message: str):
        """Record a failed load; the collection stays empty"""
        if self.status is not CatalogStatus.LOADING:
            raise CatalogStateError(f"Catalog already {self.status.value}; it is written once per session")
        self.status = CatalogStatus.UNAVAILABLE
        self.status_message = message
        self.recompute()

    def recompute(self):
        """Refresh the filtered view from the collection and filter inputs"""
        self.filtered = filter_tools(self.tools, self.category, self.search)

    @property
    def is_unavailable(self) -> bool:
        return self.status is CatalogStatus.UNAVAILABLE
