"""PDF export using reportlab

Title line followed by a single table (Name, Description, Category). The URL
column is deliberately not part of this format. Page breaks are left to the
table layout; the header row repeats on each page.
"""

import logging
from pathlib import Path
from typing import IO, List, Optional, Sequence, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import LongTable, Paragraph, SimpleDocTemplate, Spacer, TableStyle

from bellingcat_toolkit.catalog.record import ToolRecord
from bellingcat_toolkit.utils.error_handler import ExportError
from bellingcat_toolkit.utils.workspace import get_workspace

logger = logging.getLogger(__name__)

DOCUMENT_FILENAME = "bellingcat_tools.pdf"
DOCUMENT_TITLE = "Bellingcat Tools List"
DOCUMENT_HEADER = ["Name", "Description", "Category"]

# Fractions of the usable page width
COLUMN_WIDTHS = (0.25, 0.5, 0.25)


def document_rows(tools: Sequence[ToolRecord]) -> List[List[str]]:
    """
    Table content for a view: header row, then one row per tool.

    Absent description or category become "".
    """
    rows = [list(DOCUMENT_HEADER)]
    for tool in tools:
        rows.append([tool.name, tool.description or "", tool.category or ""])
    return rows


def build_document(tools: Sequence[ToolRecord], target: Union[str, Path, IO[bytes]]) -> int:
    """
    Render the view as a PDF into a path or binary file object.

    Args:
        tools: Records to export, in display order
        target: Output filename or writable binary stream

    Returns:
        Number of pages rendered
    """
    styles = getSampleStyleSheet()
    cell_style = styles["BodyText"]
    header_style = styles["Heading5"]

    doc = SimpleDocTemplate(
        target if not isinstance(target, Path) else str(target),
        pagesize=A4,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=16 * mm,
        bottomMargin=16 * mm,
        title=DOCUMENT_TITLE,
    )

    rows = document_rows(tools)
    # Paragraph cells wrap long descriptions instead of overflowing the page
    data = [[Paragraph(escape(text), header_style) for text in rows[0]]]
    data += [[Paragraph(escape(text), cell_style) for text in row] for row in rows[1:]]

    table = LongTable(
        data,
        colWidths=[doc.width * fraction for fraction in COLUMN_WIDTHS],
        repeatRows=1,
        splitInRow=1,
    )
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2980ba")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f5f5f5")]),
    ]))

    story = [
        Paragraph(escape(DOCUMENT_TITLE), styles["Title"]),
        Spacer(1, 4 * mm),
        table,
    ]
    doc.build(story)
    return doc.page


def export_document(
    tools: Sequence[ToolRecord],
    output_dir: Optional[Union[str, Path]] = None
) -> Path:
    """
    Write the view to ``bellingcat_tools.pdf``.

    Args:
        tools: Records to export (the current filtered view)
        output_dir: Directory override (default: configured output directory)

    Returns:
        Path of the saved PDF

    Raises:
        ExportError: If the document cannot be rendered or saved
    """
    try:
        path = get_workspace(output_dir).get_export_path(DOCUMENT_FILENAME)
        build_document(tools, path)
    except Exception as e:
        logger.error(f"PDF export failed: {e}", exc_info=True)
        raise ExportError("PDF", str(e)) from e

    logger.info(f"📄 Exported {len(tools)} tools to {path}")
    return path
