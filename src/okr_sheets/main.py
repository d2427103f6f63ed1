"""Entry point for okr-sheets."""

import argparse
import logging
import sys
from importlib import import_module

from okr_sheets.config import LOG_LEVEL
from okr_sheets.google.errors import GoogleClientError

HELP = """\
okr-sheets -- read OKR folders and spreadsheets from Google Drive

commands:
  okr-sheets auth            Authorize (prompts for a code on first run)
  okr-sheets auth --reset    Forget the stored token and re-consent
  okr-sheets files           List folders named 'okrs'
  okr-sheets files -q QUERY  List Drive objects matching a Drive query
  okr-sheets sheet ID        Show the first row of Sheet1!A1:F7
  okr-sheets sheet ID --all  Show every row of Sheet1!A1:F7
  okr-sheets help            Show this help message

examples:
  okr-sheets files -q "name contains '2026' and trashed = false"
  okr-sheets sheet 1BxiMVs0XRA5nFMdKvBdBZjgmUUqptlbs74OgvE2upms --all
"""

log = logging.getLogger(__name__)


def run_auth_command(argv: list[str]) -> None:
    from okr_sheets.google.auth import get_session, reset_token

    parser = argparse.ArgumentParser(prog="okr-sheets auth")
    parser.add_argument("--reset", action="store_true", help="Delete the stored token first")
    args = parser.parse_args(argv)

    if args.reset and reset_token():
        print("stored token removed")
    session = get_session()
    print("authorized" + (" (offline access)" if session.refresh_token else ""))


def _dispatch_subcommand(argv: list[str]) -> bool:
    """Route CLI subcommands. Returns True if handled."""
    if not argv:
        return False
    cmd, rest = argv[0], argv[1:]
    if cmd in ("help", "--help", "-h"):
        print(HELP)
        return True
    routes: dict[str, tuple[str, str]] = {
        "auth": ("okr_sheets.main", "run_auth_command"),
        "files": ("okr_sheets.google.drive", "run_files_command"),
        "sheet": ("okr_sheets.google.sheets", "run_sheet_command"),
    }
    if cmd in routes:
        mod_path, func_name = routes[cmd]
        getattr(import_module(mod_path), func_name)(rest)
        return True
    return False


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        handled = _dispatch_subcommand(sys.argv[1:])
    except GoogleClientError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1) from e
    if not handled:
        print(HELP)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
