"""
Zoo Console - Census Reports
Word and Excel listings of who lives in which enclosure.
"""

from pathlib import Path
from typing import List, Sequence, Tuple, Union
import logging

from docx import Document
from docx.shared import Pt, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.oxml import OxmlElement
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter

from .core.animal import Gender
from .core.zoo import Zoo

logger = logging.getLogger(__name__)

HEADER_COLOR = "1F4E79"

INHABITANT_HEADERS = ["Enclosure", "Name", "Gender", "Sound"]
SUMMARY_HEADERS = ["Enclosure", "Species", "Occupants", "Male", "Female"]


def census_rows(zoo: Zoo) -> List[Tuple[int, str, str, str]]:
    """One row per animal: (enclosure number, name, gender word, sound)."""
    rows = []
    for number, enclosure in enumerate(zoo.enclosures, 1):
        for animal in enclosure:
            rows.append((number, animal.name, zoo.gender_word(animal.gender), animal.sound))
    return rows


def summary_rows(zoo: Zoo) -> List[Tuple[int, str, int, int, int]]:
    return [
        (
            number,
            enclosure.species or "",
            len(enclosure),
            enclosure.count(Gender.MALE),
            enclosure.count(Gender.FEMALE),
        )
        for number, enclosure in enumerate(zoo.enclosures, 1)
    ]


def _shade_header(cell, color: str = HEADER_COLOR):
    """Fill a census header cell and set its label in bold white."""
    run = cell.paragraphs[0].runs[0]
    run.bold = True
    run.font.color.rgb = RGBColor(0xFF, 0xFF, 0xFF)

    fill = OxmlElement('w:shd')
    fill.set(qn('w:fill'), color)
    cell._tc.get_or_add_tcPr().append(fill)


def add_census_table(doc, headers: List[str], rows: Sequence[Tuple]):
    """Append a census table: one shaded header row, then a row per record."""
    table = doc.add_table(rows=len(rows) + 1, cols=len(headers))
    table.style = 'Table Grid'

    for cell, header in zip(table.rows[0].cells, headers):
        cell.text = header
        _shade_header(cell)

    for table_row, record in zip(table.rows[1:], rows):
        for cell, value in zip(table_row.cells, record):
            cell.text = str(value)

    return table


def create_census_docx(zoo: Zoo, path: Union[str, Path]) -> Path:
    """Write the census as a Word document."""
    path = Path(path)
    doc = Document()

    style = doc.styles['Normal']
    style.font.name = 'Calibri'
    style.font.size = Pt(11)

    title = doc.add_heading('ZOO CENSUS', 0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    rows = census_rows(zoo)
    info = doc.add_paragraph()
    info.add_run('Enclosures: ').bold = True
    info.add_run(f'{len(zoo.enclosures)}\n')
    info.add_run('Animals: ').bold = True
    info.add_run(f'{len(rows)}')

    doc.add_heading('Enclosures', level=1)
    add_census_table(doc, SUMMARY_HEADERS, summary_rows(zoo))

    doc.add_heading('Inhabitants', level=1)
    add_census_table(doc, INHABITANT_HEADERS, rows)

    doc.save(str(path))
    logger.info(f"Census document saved to: {path}")

    return path


def _write_sheet(ws, headers, rows):
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color=HEADER_COLOR, end_color=HEADER_COLOR, fill_type="solid")

    ws.append(headers)
    for cell in ws[1]:
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center")

    for row in rows:
        ws.append(list(row))

    for col, header in enumerate(headers, 1):
        width = max([len(str(header))] + [len(str(row[col - 1])) for row in rows])
        ws.column_dimensions[get_column_letter(col)].width = width + 4


def create_census_xlsx(zoo: Zoo, path: Union[str, Path]) -> Path:
    """Write the census as an Excel workbook."""
    path = Path(path)
    wb = Workbook()

    ws = wb.active
    ws.title = "Inhabitants"
    _write_sheet(ws, INHABITANT_HEADERS, census_rows(zoo))

    summary = wb.create_sheet("Summary")
    _write_sheet(summary, SUMMARY_HEADERS, summary_rows(zoo))

    wb.save(str(path))
    logger.info(f"Census workbook saved to: {path}")

    return path
