"""
Filtering for the catalog view

Both predicates are conjunctive and the result keeps the order of the input.
"""
from typing import List, Sequence

from bellingcat_toolkit.catalog.categories import ALL_CATEGORIES
from bellingcat_toolkit.catalog.record import ToolRecord


def matches_category(tool: ToolRecord, category: str) -> bool:
    """Exact, case-sensitive match; the "all" selector matches everything.

    Records without a category (None or "") never match a concrete selector.
    """
    if category == ALL_CATEGORIES:
        return True
    return bool(tool.category) and tool.category == category


def matches_search(tool: ToolRecord, search: str) -> bool:
    """Case-insensitive substring match against name or description"""
    if not search:
        return True
    needle = search.lower()
    if needle in tool.name.lower():
        return True
    return tool.description is not None and needle in tool.description.lower()


def filter_tools(
    tools: Sequence[ToolRecord],
    category: str = ALL_CATEGORIES,
    search: str = ""
) -> List[ToolRecord]:
    """
    Derive the filtered view.

    Args:
        tools: Full collection
        category: Category selector, or "all"
        search: Free-text search; empty keeps everything

    Returns:
        Subsequence of ``tools`` matching both predicates
    """
    result = list(tools)

    if category != ALL_CATEGORIES:
        result = [t for t in result if matches_category(t, category)]

    if search:
        result = [t for t in result if matches_search(t, search)]

    return result
