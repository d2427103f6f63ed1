"""Drive folder/file listing and the `okr-sheets files` subcommand."""

import argparse
import logging
from dataclasses import dataclass
from typing import Any

from google.oauth2.credentials import Credentials
from googleapiclient.errors import HttpError

from okr_sheets.google.auth import get_service, get_session
from okr_sheets.google.errors import NotFoundError

PAGE_SIZE = 20
DEFAULT_QUERY = "name = 'okrs' and mimeType = 'application/vnd.google-apps.folder'"

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileRef:
    id: str
    name: str


def _get_drive_service(session: Credentials) -> Any:
    return get_service(session, "drive", "v3")


def list_files(session: Credentials, query: str | None = None) -> list[FileRef]:
    """Up to PAGE_SIZE matches. An empty result raises NotFoundError."""
    service = _get_drive_service(session)
    try:
        result = (
            service.files()
            .list(
                fields="nextPageToken, files(id, name)",
                pageSize=PAGE_SIZE,
                q=query or DEFAULT_QUERY,
            )
            .execute()
        )
    except HttpError as e:
        log.error("The API returned an error: %s", e)
        raise NotFoundError(f"file listing failed: {e}") from e

    files = result.get("files") or []
    if not files:
        log.info("No files found.")
        raise NotFoundError("No files found.")

    refs = [FileRef(id=f["id"], name=f["name"]) for f in files]
    for ref in refs:
        log.info("%s (%s)", ref.name, ref.id)
    return refs


def run_files_command(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="okr-sheets files")
    parser.add_argument("--query", "-q", help=f"Drive query (default: {DEFAULT_QUERY})")
    args = parser.parse_args(argv)

    for ref in list_files(get_session(), args.query):
        print(f"  {ref.id}  {ref.name}")
