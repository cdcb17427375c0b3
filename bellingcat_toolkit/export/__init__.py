"""
Export of the filtered view to spreadsheet and PDF
"""
from bellingcat_toolkit.export.spreadsheet import (
    SHEET_NAME,
    SPREADSHEET_FILENAME,
    build_workbook,
    export_spreadsheet,
)
from bellingcat_toolkit.export.document import (
    DOCUMENT_FILENAME,
    DOCUMENT_HEADER,
    DOCUMENT_TITLE,
    build_document,
    document_rows,
    export_document,
)

__all__ = [
    'SHEET_NAME',
    'SPREADSHEET_FILENAME',
    'build_workbook',
    'export_spreadsheet',
    'DOCUMENT_FILENAME',
    'DOCUMENT_HEADER',
    'DOCUMENT_TITLE',
    'build_document',
    'document_rows',
    'export_document',
]
