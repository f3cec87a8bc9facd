from __future__ import annotations

import logging

from ..core.constants import ATTENDANCE_HEADER, ATTENDANCE_SHEET, STUDENTS_HEADER, STUDENTS_SHEET
from .sheets_client import SpreadsheetClient, a1_range

logger = logging.getLogger(__name__)

SHEET_LAYOUT = {
    STUDENTS_SHEET: STUDENTS_HEADER,
    ATTENDANCE_SHEET: ATTENDANCE_HEADER,
}


def _column_letter(count: int) -> str:
    return chr(ord("A") + count - 1)


def ensure_sheet_headers(client: SpreadsheetClient) -> list[str]:
    """Create missing sheets and write missing header rows.

    Idempotent: a sheet whose first row already has values is left alone.
    Returns the titles that were touched.
    """
    touched: list[str] = []
    existing = client.sheet_titles()

    for title, header in SHEET_LAYOUT.items():
        if title not in existing:
            client.add_sheet(title)

        header_range = a1_range(title, f"A1:{_column_letter(len(header))}1")
        first_row = client.get_values(header_range)
        if first_row and any(str(cell).strip() for cell in first_row[0]):
            continue

        client.update_row(header_range, header)
        touched.append(title)
        logger.info("Wrote header row for sheet %s", title)

    return touched
