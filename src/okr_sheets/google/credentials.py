"""Client-secret descriptor loading.

The descriptor is the JSON file downloaded from Google Cloud Console:
``{"installed": {"client_id": ..., "client_secret": ..., "redirect_uris": [...]}}``.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from okr_sheets.google.errors import CredentialsIOError, ParseError
from okr_sheets.storage import CREDENTIALS_FILE

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClientCredentials:
    client_id: str
    client_secret: str
    redirect_uri: str
    auth_uri: str = AUTH_URI
    token_uri: str = TOKEN_URI

    def to_client_config(self) -> dict[str, Any]:
        """Shape expected by google_auth_oauthlib's Flow.from_client_config."""
        return {
            "installed": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uris": [self.redirect_uri],
                "auth_uri": self.auth_uri,
                "token_uri": self.token_uri,
            }
        }


def parse_client_credentials(data: Any) -> ClientCredentials:
    if not isinstance(data, dict):
        raise ParseError("client secret descriptor is not a JSON object")
    section = data.get("installed") or data.get("web")
    if not isinstance(section, dict):
        raise ParseError("client secret descriptor has no 'installed' section")

    missing = [key for key in ("client_id", "client_secret") if not section.get(key)]
    if missing:
        raise ParseError(f"client secret descriptor missing: {', '.join(missing)}")

    redirect_uris = section.get("redirect_uris")
    if not isinstance(redirect_uris, list) or not redirect_uris:
        raise ParseError("client secret descriptor has no redirect_uris")

    return ClientCredentials(
        client_id=str(section["client_id"]),
        client_secret=str(section["client_secret"]),
        redirect_uri=str(redirect_uris[0]),
        auth_uri=section.get("auth_uri") or AUTH_URI,
        token_uri=section.get("token_uri") or TOKEN_URI,
    )


def load_client_credentials(path: Path | None = None) -> ClientCredentials:
    """Raises CredentialsIOError if unreadable, ParseError if malformed."""
    path = path or CREDENTIALS_FILE
    try:
        content = path.read_bytes()
    except OSError as e:
        log.error("Error loading client secret file %s: %s", path, e)
        raise CredentialsIOError(
            f"cannot read {path} -- download OAuth client credentials "
            "from Google Cloud Console and save at that path"
        ) from e

    try:
        data = json.loads(content.decode("utf-8"))
    except ValueError as e:
        # UnicodeDecodeError and JSONDecodeError both land here
        raise ParseError(f"{path} is not valid UTF-8 JSON: {e}") from e
    return parse_client_credentials(data)
