"""User-configurable values loaded from environment variables."""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

CONFIG_DIR: Path = Path(os.environ.get("OKR_SHEETS_CONFIG_DIR") or "config")
CREDENTIALS_FILE: Path = Path(
    os.environ.get("OKR_SHEETS_CREDENTIALS_FILE") or CONFIG_DIR / "credentials.json"
)
TOKEN_FILE: Path = Path(os.environ.get("OKR_SHEETS_TOKEN_FILE") or CONFIG_DIR / "token.json")

LOG_LEVEL: str = (os.environ.get("OKR_SHEETS_LOG_LEVEL") or "WARNING").upper()
if LOG_LEVEL not in logging.getLevelNamesMapping():
    print(f"Unknown OKR_SHEETS_LOG_LEVEL {LOG_LEVEL!r}, using WARNING", file=sys.stderr)
    LOG_LEVEL = "WARNING"
