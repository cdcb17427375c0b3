"""
Tool catalog: record model, loading, category index and filtering
"""
from bellingcat_toolkit.catalog.record import RECORD_FIELDS, RecordOrigin, ToolRecord
from bellingcat_toolkit.catalog.supplemental import EXTRA_TOOLS, supplemental_records
from bellingcat_toolkit.catalog.loader import CatalogLoader
from bellingcat_toolkit.catalog.categories import ALL_CATEGORIES, categories_of, category_counts
from bellingcat_toolkit.catalog.filters import filter_tools, matches_category, matches_search

__all__ = [
    'RECORD_FIELDS',
    'RecordOrigin',
    'ToolRecord',
    'EXTRA_TOOLS',
    'supplemental_records',
    'CatalogLoader',
    'ALL_CATEGORIES',
    'categories_of',
    'category_counts',
    'filter_tools',
    'matches_category',
    'matches_search',
]
