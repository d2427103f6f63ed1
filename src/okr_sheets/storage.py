"""Local file locations and JSON I/O for the credential and token files."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from okr_sheets.config import CREDENTIALS_FILE as CREDENTIALS_FILE
from okr_sheets.config import TOKEN_FILE as TOKEN_FILE

log = logging.getLogger(__name__)


def read_json(filepath: Path) -> dict[str, Any]:
    """Raises OSError if unreadable, ValueError if not a JSON object."""
    data = json.loads(filepath.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{filepath} does not hold a JSON object")
    return data


def write_json(filepath: Path, data: dict[str, Any]) -> None:
    """Atomic write (temp file + rename) so a crash never leaves half a file."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data)
    fd, tmp = tempfile.mkstemp(dir=filepath.parent, suffix=".tmp")
    try:
        try:
            os.write(fd, content.encode())
        finally:
            os.close(fd)
        os.replace(tmp, filepath)
    except OSError:
        Path(tmp).unlink(missing_ok=True)
        raise
    log.debug("wrote %s", filepath)


def remove_file(filepath: Path) -> bool:
    if not filepath.exists():
        return False
    filepath.unlink()
    return True
