"""Shared fixtures for okr-sheets tests."""

import json

import pytest

from okr_sheets.google.credentials import ClientCredentials

OOB_REDIRECT = "urn:ietf:wg:oauth:2.0:oob"


@pytest.fixture()
def config_dir(tmp_path, monkeypatch):
    """Redirect the credential and token file paths to a temp directory."""
    import okr_sheets.google.auth as auth_mod
    import okr_sheets.google.credentials as credentials_mod

    monkeypatch.setattr(credentials_mod, "CREDENTIALS_FILE", tmp_path / "credentials.json")
    monkeypatch.setattr(auth_mod, "TOKEN_FILE", tmp_path / "token.json")
    return tmp_path


@pytest.fixture()
def client():
    return ClientCredentials(client_id="abc", client_secret="xyz", redirect_uri=OOB_REDIRECT)


@pytest.fixture()
def credentials_file(config_dir):
    path = config_dir / "credentials.json"
    path.write_text(
        json.dumps(
            {
                "installed": {
                    "client_id": "abc",
                    "client_secret": "xyz",
                    "redirect_uris": [OOB_REDIRECT],
                }
            }
        )
    )
    return path
