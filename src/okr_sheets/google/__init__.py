"""Google API integration: OAuth2 session plus Drive and Sheets queries."""

from okr_sheets.google.auth import authorize, get_service, get_session
from okr_sheets.google.credentials import ClientCredentials, load_client_credentials
from okr_sheets.google.drive import FileRef, list_files
from okr_sheets.google.errors import AuthError, CredentialsIOError, NotFoundError, ParseError
from okr_sheets.google.sheets import get_content, get_rows

__all__ = [
    "AuthError",
    "ClientCredentials",
    "CredentialsIOError",
    "FileRef",
    "NotFoundError",
    "ParseError",
    "authorize",
    "get_content",
    "get_rows",
    "get_service",
    "get_session",
    "list_files",
    "load_client_credentials",
]
