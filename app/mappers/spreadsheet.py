from io import BytesIO

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from app.schemas.business import BusinessInfo

HEADERS = ["S.No.", "Business Name", "Address", "Contact Number"]
SHEET_TITLE = "Google Maps Data"
DEFAULT_FILENAME = "google_maps_data.xlsx"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_COLUMN_PADDING = 2


def _clean(value: str) -> str:
    # Control characters are not allowed in worksheet XML
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def build_rows(businesses: list[BusinessInfo]) -> list[list[int | str]]:
    return [
        [index, _clean(b.name), _clean(b.address), _clean(b.phone)]
        for index, b in enumerate(businesses, start=1)
    ]


def build_workbook(businesses: list[BusinessInfo]) -> Workbook:
    """One header row plus one numbered row per business, columns sized to fit.

    Text cells are always stored as literal strings, so model output that
    starts with ``=`` never becomes a formula.
    """
    rows = build_rows(businesses)

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(HEADERS)
    for row in rows:
        sheet.append(row)
        for cell in sheet[sheet.max_row]:
            if isinstance(cell.value, str):
                cell.data_type = "s"

    for col_idx, header in enumerate(HEADERS):
        values = [header, *(row[col_idx] for row in rows)]
        width = max(len(str(v)) for v in values) + _COLUMN_PADDING
        sheet.column_dimensions[get_column_letter(col_idx + 1)].width = width

    return workbook


def workbook_to_bytes(businesses: list[BusinessInfo]) -> bytes:
    buffer = BytesIO()
    build_workbook(businesses).save(buffer)
    return buffer.getvalue()
