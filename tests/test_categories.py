"""Tests for the category index"""

from bellingcat_toolkit.catalog.categories import categories_of, category_counts
from bellingcat_toolkit.catalog.record import ToolRecord


def test_categories_in_first_occurrence_order():
    tools = [
        ToolRecord(name="a", category="Maps"),
        ToolRecord(name="b", category="Archiving"),
        ToolRecord(name="c", category="Maps"),
        ToolRecord(name="d", category="Social Media"),
    ]
    assert categories_of(tools) == ["Maps", "Archiving", "Social Media"]


def test_absent_categories_are_excluded():
    tools = [
        ToolRecord(name="a"),
        ToolRecord(name="b", category=""),
        ToolRecord(name="c", category="Maps"),
    ]

    categories = categories_of(tools)

    assert categories == ["Maps"]
    assert None not in categories
    assert len(categories) == len(set(categories))


def test_categories_are_case_sensitive():
    tools = [ToolRecord(name="a", category="Maps"), ToolRecord(name="b", category="maps")]
    assert categories_of(tools) == ["Maps", "maps"]


def test_empty_collection_has_no_categories():
    assert categories_of([]) == []


def test_category_counts():
    tools = [
        ToolRecord(name="a", category="Maps"),
        ToolRecord(name="b"),
        ToolRecord(name="c", category="Maps"),
        ToolRecord(name="d", category="Archiving"),
    ]
    assert category_counts(tools) == {"Maps": 2, "Archiving": 1}
