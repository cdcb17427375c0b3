"""Tests for PDF export"""

import io
from unittest.mock import patch

import pytest

from bellingcat_toolkit.catalog.record import ToolRecord
from bellingcat_toolkit.export.document import (
    DOCUMENT_FILENAME,
    build_document,
    document_rows,
    export_document,
)
from bellingcat_toolkit.utils.error_handler import ExportError


def test_scenario_rows(scenario_tools):
    assert document_rows(scenario_tools) == [
        ["Name", "Description", "Category"],
        ["Shodan", "", "Network Intelligence"],
        ["WHOIS Lookup", "Check domain registration info.", "Domain Investigation"],
    ]


def test_rows_omit_url():
    rows = document_rows([ToolRecord(name="Shodan", url="https://www.shodan.io/")])

    assert rows[1] == ["Shodan", "", ""]
    assert all("https://www.shodan.io/" not in cell for row in rows for cell in row)


def test_row_count_matches_view():
    tools = [ToolRecord(name=f"Tool {i}") for i in range(40)]

    rows = document_rows(tools)

    assert len(rows) == 41
    assert [row[0] for row in rows[1:]] == [t.name for t in tools]


def test_build_document_writes_pdf_to_stream(scenario_tools):
    buffer = io.BytesIO()

    build_document(scenario_tools, buffer)

    assert buffer.getvalue().startswith(b"%PDF")


def test_long_view_spans_pages():
    tools = [
        ToolRecord(name=f"Tool {i}", description="A fairly long description <with> markup & symbols. " * 4)
        for i in range(120)
    ]

    pages = build_document(tools, io.BytesIO())

    assert pages > 1


def test_export_document_fixed_filename(tmp_path, scenario_tools):
    path = export_document(scenario_tools, tmp_path)

    assert path == tmp_path / DOCUMENT_FILENAME
    assert path.exists()


def test_empty_view_still_renders(tmp_path):
    path = export_document([], tmp_path)
    assert path.read_bytes().startswith(b"%PDF")


def test_render_failure_raises_export_error(tmp_path, scenario_tools):
    with patch("bellingcat_toolkit.export.document.build_document", side_effect=RuntimeError("layout")):
        with pytest.raises(ExportError) as info:
            export_document(scenario_tools, tmp_path)

    assert info.value.format_name == "PDF"
    assert "layout" in str(info.value)


def test_row_taller_than_a_page_is_split(tmp_path):
    tools = [ToolRecord(name="Long", description="word " * 2500, category="C")]

    path = export_document(tools, tmp_path)

    assert path.read_bytes().startswith(b"%PDF")
    assert build_document(tools, io.BytesIO()) > 1
