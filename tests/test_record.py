"""Tests for the tool record model"""

from bellingcat_toolkit.catalog.record import RecordOrigin, ToolRecord
from bellingcat_toolkit.catalog.supplemental import EXTRA_TOOLS, supplemental_records


def test_from_dict_tolerates_missing_optional_fields():
    tool = ToolRecord.from_dict({"name": "Untitled helper"})

    assert tool.name == "Untitled helper"
    assert tool.description is None
    assert tool.url is None
    assert tool.category is None
    assert tool.has_link is False


def test_from_dict_missing_name_becomes_empty_string():
    tool = ToolRecord.from_dict({"description": "no name here"})
    assert tool.name == ""


def test_from_dict_keeps_unknown_keys_in_order():
    tool = ToolRecord.from_dict({"name": "X", "tags": ["a"], "cost": "free", "category": "C"})

    assert tool.extra == {"tags": ["a"], "cost": "free"}
    assert list(tool.to_dict()) == ["name", "category", "tags", "cost"]


def test_to_dict_only_has_present_fields():
    tool = ToolRecord(name="Shodan", category="Network Intelligence")
    assert tool.to_dict() == {"name": "Shodan", "category": "Network Intelligence"}


def test_empty_url_is_not_a_link():
    assert ToolRecord(name="X", url="").has_link is False
    assert ToolRecord(name="X", url="https://x.test").has_link is True


def test_records_with_same_name_stay_distinct():
    a = ToolRecord(name="Shodan")
    b = ToolRecord(name="Shodan")
    assert a != b
    assert len({id(a), id(b)}) == 2


def test_supplemental_records_fixed_order():
    records = supplemental_records()

    assert [r.name for r in records] == ["WHOIS Lookup", "Shodan"]
    assert all(r.origin is RecordOrigin.SUPPLEMENTAL for r in records)
    assert records[0].url == "https://whois.domaintools.com/"
    assert records[1].category == "Network Intelligence"
    assert len(records) == len(EXTRA_TOOLS)


def test_from_dict_empty_category_is_absent():
    tool = ToolRecord.from_dict({"name": "X", "category": ""})

    assert tool.category is None
    assert tool.to_dict() == {"name": "X"}
