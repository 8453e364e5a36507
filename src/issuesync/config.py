"""Environment configuration for a sync run."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_SHEET_NAME = "Sheet1"
DEFAULT_GITHUB_API_URL = "https://api.github.com"

# Fields the service-account JSON must carry to build Sheets credentials
CREDENTIAL_FIELDS = ("client_email", "private_key")


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


def _normalise_private_key(key: str) -> str:
    key = key.replace("\r\n", "\n").replace("\\n", "\n")
    if not key.endswith("\n"):
        key += "\n"
    return key


def parse_credentials(raw: str) -> dict[str, Any]:
    """Parse service-account credentials from a JSON string.

    Args:
        raw: JSON document as stored in GCP_SHEETS_CREDENTIALS.

    Returns:
        Credential info suitable for ``Credentials.from_service_account_info``.

    Raises:
        ConfigError: If the JSON is malformed or misses required fields.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"GCP_SHEETS_CREDENTIALS is not valid JSON: {e.msg}") from e

    if not isinstance(payload, dict):
        raise ConfigError("GCP_SHEETS_CREDENTIALS must be a JSON object")

    missing = [
        name
        for name in CREDENTIAL_FIELDS
        if not isinstance(payload.get(name), str) or not payload[name].strip()
    ]
    if missing:
        raise ConfigError(f"GCP_SHEETS_CREDENTIALS is missing fields: {', '.join(missing)}")

    payload["private_key"] = _normalise_private_key(payload["private_key"])
    return payload


@dataclass
class SyncConfig:
    """Settings for one reconciliation pass.

    Attributes:
        sheets_credentials: Service-account info for the Sheets API.
        spreadsheet_id: Google Sheets document ID.
        github_token: Token used for the GitHub REST API.
        repo_owner: Owner of the issue repository.
        repo_name: Name of the issue repository.
        sheet_name: Tab holding the rows.
        default_assignee: Login assigned when a row names nobody.
        github_api_url: GitHub REST API base URL.
    """

    sheets_credentials: dict[str, Any] = field(repr=False)
    spreadsheet_id: str
    github_token: str = field(repr=False)
    repo_owner: str
    repo_name: str
    sheet_name: str = DEFAULT_SHEET_NAME
    default_assignee: str = ""
    github_api_url: str = DEFAULT_GITHUB_API_URL

    @property
    def repo(self) -> str:
        """Repository in "owner/name" format."""
        return f"{self.repo_owner}/{self.repo_name}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SyncConfig:
        """Build the configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Populated SyncConfig.

        Raises:
            ConfigError: If required variables are missing or credentials are invalid.
        """
        env = os.environ if environ is None else environ

        required = (
            "GCP_SHEETS_CREDENTIALS",
            "GSHEET_ID",
            "GITHUB_TOKEN",
            "REPO_OWNER",
            "REPO_NAME",
        )
        missing = [name for name in required if not env.get(name, "").strip()]
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

        return cls(
            sheets_credentials=parse_credentials(env["GCP_SHEETS_CREDENTIALS"]),
            spreadsheet_id=env["GSHEET_ID"].strip(),
            github_token=env["GITHUB_TOKEN"].strip(),
            repo_owner=env["REPO_OWNER"].strip(),
            repo_name=env["REPO_NAME"].strip(),
            sheet_name=env.get("SHEET_NAME") or DEFAULT_SHEET_NAME,
            default_assignee=env.get("DEFAULT_ASSIGNEE", "").strip(),
            github_api_url=env.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL,
        )
