from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence

from ..core.exceptions import ConfigurationError
from .google_base import google_call

logger = logging.getLogger(__name__)

VALUE_INPUT_OPTION = "USER_ENTERED"


def quote_sheet(title: str) -> str:
    """A1 notation needs sheet titles with spaces or non-ASCII chars quoted."""
    return "'" + title.replace("'", "''") + "'"


def a1_range(title: str, cells: str) -> str:
    return f"{quote_sheet(title)}!{cells}"


class SpreadsheetClient:
    """Thin wrapper over the Sheets v4 `spreadsheets` resource for one spreadsheet.

    `service` is called on each request so credentials are only needed once
    the sheet is actually used.
    """

    def __init__(self, service: Callable[[], Any], spreadsheet_id: str):
        self._service = service
        self._spreadsheet_id = spreadsheet_id

    def _spreadsheet(self) -> str:
        if not self._spreadsheet_id:
            raise ConfigurationError("Spreadsheet ID not configured")
        return self._spreadsheet_id

    def get_values(self, range_: str) -> List[List[str]]:
        spreadsheet_id = self._spreadsheet()
        with google_call(f"read {range_}"):
            result = (
                self._service().spreadsheets()
                .values()
                .get(spreadsheetId=spreadsheet_id, range=range_)
                .execute()
            )
        return [list(row) for row in result.get("values", []) or []]

    def append_row(self, range_: str, row: Sequence[Any]) -> None:
        spreadsheet_id = self._spreadsheet()
        with google_call(f"append to {range_}"):
            (
                self._service().spreadsheets()
                .values()
                .append(
                    spreadsheetId=spreadsheet_id,
                    range=range_,
                    valueInputOption=VALUE_INPUT_OPTION,
                    body={"values": [list(row)]},
                )
                .execute()
            )
        logger.debug("Appended row to %s", range_)

    def update_row(self, range_: str, row: Sequence[Any]) -> None:
        spreadsheet_id = self._spreadsheet()
        with google_call(f"update {range_}"):
            (
                self._service().spreadsheets()
                .values()
                .update(
                    spreadsheetId=spreadsheet_id,
                    range=range_,
                    valueInputOption=VALUE_INPUT_OPTION,
                    body={"values": [list(row)]},
                )
                .execute()
            )
        logger.debug("Updated %s", range_)

    def sheet_titles(self) -> dict[str, int]:
        """Map of sheet title -> numeric sheet id (gid)."""
        spreadsheet_id = self._spreadsheet()
        with google_call("read spreadsheet metadata"):
            meta = (
                self._service().spreadsheets()
                .get(spreadsheetId=spreadsheet_id, fields="sheets(properties(sheetId,title))")
                .execute()
            )
        titles: dict[str, int] = {}
        for sheet in meta.get("sheets", []) or []:
            props = sheet.get("properties", {}) or {}
            if "title" in props:
                titles[props["title"]] = int(props.get("sheetId", 0))
        return titles

    def sheet_id(self, title: str) -> Optional[int]:
        return self.sheet_titles().get(title)

    def _batch_update(self, requests: list[dict], action: str) -> None:
        spreadsheet_id = self._spreadsheet()
        with google_call(action):
            (
                self._service().spreadsheets()
                .batchUpdate(spreadsheetId=spreadsheet_id, body={"requests": requests})
                .execute()
            )

    def delete_row(self, sheet_id: int, row_index: int) -> None:
        """Delete one row; `row_index` is 0-based like the deleteDimension API."""
        self._batch_update(
            [
                {
                    "deleteDimension": {
                        "range": {
                            "sheetId": sheet_id,
                            "dimension": "ROWS",
                            "startIndex": row_index,
                            "endIndex": row_index + 1,
                        }
                    }
                }
            ],
            f"delete row {row_index} of sheet {sheet_id}",
        )
        logger.info("Deleted row %d of sheet %d", row_index, sheet_id)

    def add_sheet(self, title: str) -> None:
        self._batch_update([{"addSheet": {"properties": {"title": title}}}], f"add sheet {title}")
        logger.info("Created sheet %s", title)
