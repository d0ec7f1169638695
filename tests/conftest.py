import json
from datetime import datetime, timedelta, timezone

import pytest
from google.oauth2.credentials import Credentials

SCOPES = ["https://www.googleapis.com/auth/youtube.readonly"]


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def make_credentials(scopes=None, token="access-token", expires_in=timedelta(hours=1)):
    return Credentials(
        token=token,
        refresh_token="refresh-token",
        token_uri="https://oauth2.googleapis.com/token",
        client_id="1234.apps.googleusercontent.com",
        client_secret="s3cret",
        scopes=scopes or SCOPES,
        expiry=utcnow() + expires_in,
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_CONFIG", str(tmp_path / "missing-config.yaml"))
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def client_secret(tmp_path):
    path = tmp_path / "client_secrets.json"
    path.write_text(
        json.dumps(
            {
                "installed": {
                    "client_id": "1234.apps.googleusercontent.com",
                    "client_secret": "s3cret",
                    "auth_uri": "https://accounts.google.com/o/oauth2/auth",
                    "token_uri": "https://oauth2.googleapis.com/token",
                    "redirect_uris": ["http://localhost"],
                }
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def credentials_dir(tmp_path):
    return tmp_path / "oauth-credentials"
