"""Category index for the category selector"""
from typing import Dict, Iterable, List

from bellingcat_toolkit.catalog.record import ToolRecord

ALL_CATEGORIES = "all"


def categories_of(tools: Iterable[ToolRecord]) -> List[str]:
    """
    Distinct categories in order of first occurrence.

    Records without a category (None or "") contribute nothing.
    """
    seen: Dict[str, None] = {}
    for tool in tools:
        if tool.category:
            seen.setdefault(tool.category, None)
    return list(seen)


def category_counts(tools: Iterable[ToolRecord]) -> Dict[str, int]:
    """Number of tools per category, same order as categories_of"""
    counts: Dict[str, int] = {}
    for tool in tools:
        if tool.category:
            counts[tool.category] = counts.get(tool.category, 0) + 1
    return counts
