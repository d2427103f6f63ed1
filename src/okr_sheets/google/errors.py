"""Failures surfaced by the credential loader, authorizer and queries.

Each component raises its own type; nothing is retried.
"""


class GoogleClientError(Exception):
    """Base class for every okr-sheets failure."""


class CredentialsIOError(GoogleClientError, OSError):
    """The client-secret descriptor could not be read."""


class ParseError(GoogleClientError, ValueError):
    """A local file was read but its content is malformed."""


class AuthError(GoogleClientError):
    """Exchanging the authorization code for a token failed."""


class NotFoundError(GoogleClientError, LookupError):
    """A remote query errored or matched nothing."""
