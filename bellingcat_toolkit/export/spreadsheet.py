"""Spreadsheet export using openpyxl

One sheet, one header row of field names, one row per tool in view order.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from bellingcat_toolkit.catalog.record import RECORD_FIELDS, ToolRecord
from bellingcat_toolkit.utils.error_handler import ExportError
from bellingcat_toolkit.utils.workspace import get_workspace

logger = logging.getLogger(__name__)

SPREADSHEET_FILENAME = "bellingcat_tools.xlsx"
SHEET_NAME = "Tools"
MAX_COLUMN_WIDTH = 60


def spreadsheet_columns(rows: Sequence[Dict[str, Any]]) -> List[str]:
    """Union of row keys in order of first appearance"""
    if not rows:
        return list(RECORD_FIELDS)

    columns: Dict[str, None] = {}
    for row in rows:
        for key in row:
            columns.setdefault(key, None)
    return list(columns)


def build_workbook(tools: Sequence[ToolRecord]) -> Workbook:
    """
    Build the workbook for a view.

    Fields a record does not have are left as empty cells.

    Args:
        tools: Records to export, in display order

    Returns:
        openpyxl Workbook with a single "Tools" sheet
    """
    rows = [tool.to_dict() for tool in tools]
    columns = spreadsheet_columns(rows)

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_NAME

    sheet.append(columns)
    for row_idx, row in enumerate(rows, 2):
        for col_idx, column in enumerate(columns, 1):
            _write_cell(sheet, row_idx, col_idx, row.get(column))

    _fit_columns(sheet, columns, rows)
    return workbook


def _write_cell(sheet, row: int, column: int, value: Any):
    if value is None:
        return
    # Non-scalar extras (lists, objects) are written as text
    if not isinstance(value, (str, int, float, bool)):
        value = str(value)
    if isinstance(value, str):
        value = ILLEGAL_CHARACTERS_RE.sub("", value)
    cell = sheet.cell(row=row, column=column, value=value)
    # Text that looks like a formula stays text
    if isinstance(value, str) and value.startswith("="):
        cell.data_type = "s"


def _fit_columns(sheet, columns: List[str], rows: List[Dict[str, Any]]):
    for idx, column in enumerate(columns, 1):
        longest = max([len(column)] + [len(str(row.get(column) or "")) for row in rows])
        sheet.column_dimensions[get_column_letter(idx)].width = min(longest + 2, MAX_COLUMN_WIDTH)


def export_spreadsheet(
    tools: Sequence[ToolRecord],
    output_dir: Optional[Union[str, Path]] = None
) -> Path:
    """
    Write the view to ``bellingcat_tools.xlsx``.

    Args:
        tools: Records to export (the current filtered view)
        output_dir: Directory override (default: configured output directory)

    Returns:
        Path of the saved workbook

    Raises:
        ExportError: If the workbook cannot be built or saved
    """
    try:
        path = get_workspace(output_dir).get_export_path(SPREADSHEET_FILENAME)
        workbook = build_workbook(tools)
        workbook.save(path)
    except Exception as e:
        logger.error(f"Spreadsheet export failed: {e}", exc_info=True)
        raise ExportError("Spreadsheet", str(e)) from e

    logger.info(f"📊 Exported {len(tools)} tools to {path}")
    return path
