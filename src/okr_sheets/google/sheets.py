"""Spreadsheet range reads and the `okr-sheets sheet` subcommand."""

import argparse
import logging
from typing import Any

from google.oauth2.credentials import Credentials
from googleapiclient.errors import HttpError

from okr_sheets.google.auth import get_service, get_session
from okr_sheets.google.errors import NotFoundError

DEFAULT_RANGE = "Sheet1!A1:F7"

log = logging.getLogger(__name__)


def _get_sheets_service(session: Credentials) -> Any:
    return get_service(session, "sheets", "v4")


def get_rows(
    session: Credentials, spreadsheet_id: str, cell_range: str = DEFAULT_RANGE
) -> list[list[str]]:
    """Every row of `cell_range`. An empty range raises NotFoundError."""
    service = _get_sheets_service(session)
    try:
        result = (
            service.spreadsheets()
            .values()
            .get(spreadsheetId=spreadsheet_id, range=cell_range)
            .execute()
        )
    except HttpError as e:
        log.error("The API returned an error: %s", e)
        raise NotFoundError(f"range {cell_range} of {spreadsheet_id} failed: {e}") from e

    rows = result.get("values") or []
    if not rows:
        log.info("No data found.")
        raise NotFoundError("No data found.")
    return [[str(cell) for cell in row] for row in rows]


def get_content(session: Credentials, spreadsheet_id: str) -> list[str]:
    """First row of Sheet1!A1:F7 only; later rows are dropped.

    Callers that need the whole range should use get_rows().
    """
    rows = get_rows(session, spreadsheet_id)
    if len(rows) > 1:
        log.debug("get_content dropping %d row(s) after the first", len(rows) - 1)
    return rows[0]


def run_sheet_command(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="okr-sheets sheet")
    parser.add_argument("spreadsheet_id", help="Spreadsheet ID")
    parser.add_argument("--all", action="store_true", help=f"Print every row of {DEFAULT_RANGE}")
    args = parser.parse_args(argv)

    session = get_session()
    if args.all:
        rows = get_rows(session, args.spreadsheet_id)
    else:
        rows = [get_content(session, args.spreadsheet_id)]
    for row in rows:
        print("  " + "\t".join(row))
