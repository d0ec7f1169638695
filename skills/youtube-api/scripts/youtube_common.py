#!/usr/bin/env python3
"""Shared helpers for the YouTube API samples.

Authorizes a user with OAuth 2.0 and caches the credential in a file-backed
store, one JSON file per sample (the "datastore name").
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import httplib2
import yaml
from google.auth.exceptions import GoogleAuthError, RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config/youtube-api/config.yaml"
DEFAULT_CREDENTIALS_DIR = Path.home() / ".oauth-credentials"
REDIRECT_PORT = 8080
USER_KEY = "user"
PLACEHOLDER_PREFIX = "Enter"
CONSOLE_URL = "https://console.developers.google.com/project/_/apiui/credential"

YOUTUBE = "https://www.googleapis.com/auth/youtube"
YOUTUBE_READONLY = "https://www.googleapis.com/auth/youtube.readonly"
YOUTUBE_UPLOAD = "https://www.googleapis.com/auth/youtube.upload"
YOUTUBE_FORCE_SSL = "https://www.googleapis.com/auth/youtube.force-ssl"
YT_ANALYTICS_READONLY = "https://www.googleapis.com/auth/yt-analytics.readonly"
YT_ANALYTICS_MONETARY_READONLY = "https://www.googleapis.com/auth/yt-analytics-monetary.readonly"


class SampleError(Exception):
    """Base class for errors raised by the samples themselves."""


class ConfigurationError(SampleError):
    """Client secrets or other local configuration are missing or invalid."""


class AuthorizationError(SampleError):
    """The OAuth provider rejected the consent or the token exchange."""


# Failures of a single API request: remote errors, DNS and socket errors, token refresh.
REQUEST_ERRORS = (HttpError, httplib2.HttpLib2Error, GoogleAuthError, OSError)
SAMPLE_ERRORS = (SampleError,) + REQUEST_ERRORS


def config_path() -> Path:
    env_path = os.environ.get("YOUTUBE_API_CONFIG", "").strip()
    return Path(env_path).expanduser() if env_path else DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> dict:
    p = path or config_path()
    if not p.exists():
        return {}
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid config file {p}: {exc}") from exc
    return data if isinstance(data, dict) else {}


def default_client_secret_path(config: dict | None = None) -> Path:
    config = load_config() if config is None else config
    if config.get("client_secret"):
        return Path(config["client_secret"]).expanduser()
    primary = Path.home() / ".config/youtube-api/client_secrets.json"
    if primary.exists():
        return primary
    fallback = Path(__file__).resolve().parents[1] / "assets" / "client_secrets.json"
    if fallback.exists():
        return fallback
    return primary


def default_credentials_dir(config: dict | None = None) -> Path:
    config = load_config() if config is None else config
    if config.get("credentials_dir"):
        return Path(config["credentials_dir"]).expanduser()
    return DEFAULT_CREDENTIALS_DIR


def setup_logging(verbose: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def add_auth_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "--client-secret",
        type=Path,
        help="Path to OAuth client_secrets.json (default: config or ~/.config/youtube-api/client_secrets.json)",
    )
    parser.add_argument(
        "--credentials-dir",
        type=Path,
        help="Directory holding cached OAuth tokens (default: ~/.oauth-credentials)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=REDIRECT_PORT,
        help=f"Local port for the OAuth redirect (default: {REDIRECT_PORT})",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Print the authorization URL instead of opening a browser.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_client_secrets(path: Path) -> dict:
    """Return the ``installed`` (or ``web``) section of a client secrets file."""
    if not path.exists():
        raise ConfigurationError(f"OAuth client secret not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in client secret {path}: {exc}") from exc

    details = None
    if isinstance(data, dict):
        details = data.get("installed") or data.get("web")
    if not details:
        raise ConfigurationError(f"Invalid OAuth client format in {path}")

    client_id = details.get("client_id") or ""
    client_secret = details.get("client_secret") or ""
    if (
        not client_id
        or not client_secret
        or client_id.startswith(PLACEHOLDER_PREFIX)
        or client_secret.startswith(PLACEHOLDER_PREFIX)
    ):
        raise ConfigurationError(
            f"Enter Client ID and Secret from {CONSOLE_URL} into {path}"
        )
    return details


class FileCredentialStore:
    """Key/value store of credential records kept in ``<directory>/<name>.json``."""

    def __init__(self, directory: Path, name: str):
        self.directory = Path(directory).expanduser()
        self.name = name

    @property
    def path(self) -> Path:
        return self.directory / f"{self.name}.json"

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable credential store %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        # O_CREAT only applies the mode to new files
        tmp.unlink(missing_ok=True)
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)
        tmp.replace(self.path)

    def get(self, key: str) -> dict | None:
        return self._load().get(key)

    def set(self, key: str, value: dict) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> bool:
        data = self._load()
        if key not in data:
            return False
        del data[key]
        self._save(data)
        return True


def _store_credentials(store: FileCredentialStore, creds: Credentials) -> None:
    store.set(USER_KEY, json.loads(creds.to_json()))
    logger.debug("Stored credential in %s", store.path)


def _cached_credentials(store: FileCredentialStore, scopes: list[str]) -> Credentials | None:
    record = store.get(USER_KEY)
    if not record:
        return None

    granted = record.get("scopes") or []
    if isinstance(granted, str):
        granted = granted.split(" ")
    if not set(scopes).issubset(set(granted)):
        logger.info("Cached credential lacks requested scopes; re-authorizing.")
        return None

    try:
        creds = Credentials.from_authorized_user_info(record)
    except ValueError as exc:
        logger.warning("Ignoring malformed cached credential in %s: %s", store.path, exc)
        return None

    if creds.valid:
        return creds

    if creds.expired and creds.refresh_token:
        logger.debug("Refreshing expired credentials.")
        try:
            creds.refresh(Request())
        except RefreshError as exc:
            logger.warning("Token refresh failed: %s", exc)
            return None
        _store_credentials(store, creds)
        return creds

    return None


def authorize(
    scopes: list[str],
    datastore_name: str,
    *,
    client_secret_path: Path | None = None,
    credentials_dir: Path | None = None,
    port: int = REDIRECT_PORT,
    open_browser: bool = True,
) -> Credentials:
    """Return a credential for ``scopes``, cached under ``datastore_name``.

    A cached credential is reused (refreshed when expired). Otherwise a local
    server on ``port`` receives the OAuth redirect after the user consents in
    a browser; the call blocks until that happens.
    """
    config = load_config()
    client_secret_path = Path(client_secret_path or default_client_secret_path(config)).expanduser()
    credentials_dir = Path(credentials_dir or default_credentials_dir(config)).expanduser()

    load_client_secrets(client_secret_path)

    store = FileCredentialStore(credentials_dir, datastore_name)
    creds = _cached_credentials(store, scopes)
    if creds:
        logger.debug("Using cached credential from %s", store.path)
        return creds

    logger.info("No valid credentials found; starting OAuth flow.")
    flow = InstalledAppFlow.from_client_secrets_file(str(client_secret_path), scopes=scopes)
    try:
        creds = flow.run_local_server(
            port=port,
            open_browser=open_browser,
            authorization_prompt_message="Please visit this URL to authorize this application: {url}",
            access_type="offline",
            prompt="consent",
        )
    except OAuth2Error as exc:
        raise AuthorizationError(f"OAuth authorization failed: {exc.description or exc.error}") from exc

    _store_credentials(store, creds)
    logger.info("Saved new credentials to %s", store.path)
    return creds


def forget(datastore_name: str, credentials_dir: Path | None = None) -> bool:
    credentials_dir = Path(credentials_dir or default_credentials_dir()).expanduser()
    return FileCredentialStore(credentials_dir, datastore_name).delete(USER_KEY)


def authorize_from_args(args: argparse.Namespace, scopes: list[str], datastore_name: str) -> Credentials:
    return authorize(
        scopes,
        datastore_name,
        client_secret_path=args.client_secret,
        credentials_dir=args.credentials_dir,
        port=args.port,
        open_browser=not args.no_browser,
    )


def build_service(api: str, version: str, credentials: Credentials):
    return build(api, version, credentials=credentials, cache_discovery=False)


def report_error(exc: BaseException) -> int:
    if isinstance(exc, HttpError):
        logger.error(
            "HttpError code: %s : %s", exc.resp.status, exc.reason, exc_info=exc
        )
    elif isinstance(exc, ConfigurationError):
        logger.error("%s", exc)
    elif isinstance(exc, AuthorizationError):
        logger.error("AuthorizationError: %s", exc, exc_info=exc)
    else:
        logger.error("%s: %s", type(exc).__name__, exc, exc_info=exc)
    return 1


def print_header(title: str) -> None:
    print(f"\n================== {title} ==================\n")


def print_separator() -> None:
    print("\n-------------------------------------------------------------\n")


def prompt(message: str, default: str | None = None) -> str:
    value = input(message).strip()
    return value or (default or "")
