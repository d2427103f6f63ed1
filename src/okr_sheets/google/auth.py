"""Google OAuth2 authorization for the Sheets + Drive read-only APIs.

A stored token is attached to a new session as-is; otherwise the operator is
asked to visit an authorization URL and paste back the code. If SCOPES change,
delete the token file (``okr-sheets auth --reset``) to re-consent.
"""

import json
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import Resource
from googleapiclient.discovery import build as _build
from oauthlib.oauth2.rfc6749.errors import OAuth2Error
from requests import RequestException

from okr_sheets.google.credentials import ClientCredentials, load_client_credentials
from okr_sheets.google.errors import AuthError
from okr_sheets.storage import TOKEN_FILE, read_json, remove_file, write_json

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
]

CodeProvider = Callable[[str], str]

log = logging.getLogger(__name__)


class TokenStore(Protocol):
    def load(self) -> dict[str, Any]: ...

    def save(self, token: dict[str, Any]) -> None: ...

    def clear(self) -> bool: ...


class FileTokenStore:
    """Token persisted as a single JSON file; its presence skips the prompt."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or TOKEN_FILE

    def load(self) -> dict[str, Any]:
        return read_json(self.path)

    def save(self, token: dict[str, Any]) -> None:
        write_json(self.path, token)
        log.info("Token stored to %s", self.path)

    def clear(self) -> bool:
        return remove_file(self.path)


class MemoryTokenStore:
    def __init__(self, token: dict[str, Any] | None = None) -> None:
        self.token = dict(token) if token is not None else None

    def load(self) -> dict[str, Any]:
        if self.token is None:
            raise FileNotFoundError("no token stored")
        return dict(self.token)

    def save(self, token: dict[str, Any]) -> None:
        self.token = dict(token)

    def clear(self) -> bool:
        had_token = self.token is not None
        self.token = None
        return had_token


def prompt_for_code(auth_url: str) -> str:
    """Blocks until the operator pastes the code shown after consent."""
    print(f"Authorize this app by visiting this url:\n\n  {auth_url}\n")
    try:
        return input("Enter the code from that page here: ")
    except EOFError as e:
        raise AuthError("no authorization code entered") from e


def _naive_utc(value: str) -> datetime:
    """google-auth compares expiry against naive UTC."""
    expiry = datetime.fromisoformat(value)
    if expiry.tzinfo is not None:
        expiry = expiry.astimezone(timezone.utc).replace(tzinfo=None)
    return expiry


def credentials_from_token(token: dict[str, Any], client: ClientCredentials) -> Credentials:
    """Attach a stored token to a session for `client`. No expiry check."""
    expiry = _naive_utc(token["expiry"]) if token.get("expiry") else None
    access_token = token.get("token") or token.get("access_token")
    token_uri = token.get("token_uri") or client.token_uri

    if token.get("refresh_token"):
        info = {
            **token,
            "token": access_token,
            "token_uri": token_uri,
            "client_id": client.client_id,
            "client_secret": client.client_secret,
        }
        info.pop("expiry", None)
        creds = Credentials.from_authorized_user_info(info, SCOPES)
    elif access_token:
        creds = Credentials(
            token=access_token,
            token_uri=token_uri,
            client_id=client.client_id,
            client_secret=client.client_secret,
            scopes=SCOPES,
        )
    else:
        raise ValueError("stored token has neither an access nor a refresh token")

    creds.expiry = expiry
    return creds


def build_flow(client: ClientCredentials) -> Flow:
    return Flow.from_client_config(
        client.to_client_config(), scopes=SCOPES, redirect_uri=client.redirect_uri
    )


def authorization_url(flow: Flow) -> str:
    """Offline access so the token response carries a refresh token."""
    url, _state = flow.authorization_url(access_type="offline")
    return url


def _exchange_code(flow: Flow, code: str) -> Credentials:
    flow.fetch_token(code=code)
    return flow.credentials


def _load_stored(store: TokenStore, client: ClientCredentials) -> Credentials | None:
    """Any failure reading the stored token counts as no token."""
    try:
        return credentials_from_token(store.load(), client)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        log.debug("No usable stored token: %s", e)
        return None


def authorize(
    client: ClientCredentials,
    store: TokenStore | None = None,
    code_provider: CodeProvider | None = None,
) -> Credentials:
    """First run asks for an authorization code. Subsequent runs use the stored token."""
    store = store if store is not None else FileTokenStore()
    code_provider = code_provider or prompt_for_code

    creds = _load_stored(store, client)
    if creds is not None:
        return creds

    flow = build_flow(client)
    auth_url = authorization_url(flow)
    log.info("Authorize this app by visiting this url: %s", auth_url)
    code = code_provider(auth_url).strip()
    if not code:
        raise AuthError("no authorization code entered")

    try:
        creds = _exchange_code(flow, code)
    except (OAuth2Error, RequestException, ValueError, Warning) as e:
        # oauthlib raises Warning when the operator unticks a scope on the consent screen
        log.error("Error while trying to retrieve access token: %s", e)
        raise AuthError(f"token exchange failed: {e}") from e

    # The session is valid even if the token could not be persisted
    try:
        store.save(json.loads(creds.to_json()))
    except OSError:
        log.warning("Could not store token", exc_info=True)
    return creds


def get_session(code_provider: CodeProvider | None = None) -> Credentials:
    """Credential loader followed by the authorizer, using configured paths."""
    return authorize(load_client_credentials(), FileTokenStore(), code_provider)


def reset_token(store: TokenStore | None = None) -> bool:
    """Forget the stored token so the next authorize() prompts again."""
    store = store if store is not None else FileTokenStore()
    return store.clear()


def get_service(session: Credentials, api: str, version: str) -> Resource:
    return _build(api, version, credentials=session, cache_discovery=False)
