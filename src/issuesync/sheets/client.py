"""Google Sheets client helpers.

Wraps the ``spreadsheets().values()`` resource of a Sheets v4 service so the
reader and writer deal with plain lists of strings and A1 ranges only.
Every API failure surfaces as :class:`SheetsApiError`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from issuesync.sheets.exceptions import SheetsApiError, SheetsCredentialsError

logger = logging.getLogger(__name__)

SCOPES: Sequence[str] = ("https://www.googleapis.com/auth/spreadsheets",)

_PLAIN_TITLE = re.compile(r"^[A-Za-z0-9_]+$")


def _quote_title(title: str) -> str:
    """Return a sheet title usable in A1 notation."""
    if _PLAIN_TITLE.match(title):
        return title
    return "'" + title.replace("'", "''") + "'"


def column_range(sheet_name: str, first: str, last: str) -> str:
    """Return an A1 range spanning whole columns, e.g. ``Sheet1!A:G``."""
    return f"{_quote_title(sheet_name)}!{first}:{last}"


def cell_range(sheet_name: str, column: str, row: int) -> str:
    """Return an A1 reference to a single cell, e.g. ``Sheet1!F2``."""
    if row < 1:
        raise ValueError("Row number must be >= 1")
    return f"{_quote_title(sheet_name)}!{column}{row}"


def build_sheets_service(credentials_info: Mapping[str, Any]) -> Any:
    """Build a Sheets v4 service from service-account info.

    Raises:
        SheetsCredentialsError: If the credentials cannot be loaded.
    """
    try:
        credentials = service_account.Credentials.from_service_account_info(
            dict(credentials_info), scopes=list(SCOPES)
        )
    except (ValueError, GoogleAuthError) as e:
        raise SheetsCredentialsError(f"Invalid service account credentials: {e}") from e

    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


class SheetsClient:
    """Reads and writes cell values of one spreadsheet."""

    def __init__(self, spreadsheet_id: str, service: Any) -> None:
        """Initialize the client.

        Args:
            spreadsheet_id: Google Sheets document ID
            service: Sheets v4 service (see :func:`build_sheets_service`)
        """
        self.spreadsheet_id = spreadsheet_id
        self._service = service

    @classmethod
    def from_credentials(
        cls, spreadsheet_id: str, credentials_info: Mapping[str, Any]
    ) -> SheetsClient:
        """Create a client backed by a freshly built service."""
        return cls(spreadsheet_id, build_sheets_service(credentials_info))

    def get_values(self, a1_range: str) -> list[list[str]]:
        """Return the rows in ``a1_range`` with every cell converted to ``str``.

        Trailing empty cells are omitted by the API, so rows may be ragged.
        An empty range yields an empty list.
        """
        try:
            response = (
                self._service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=a1_range)
                .execute()
            )
        except HttpError as e:
            raise SheetsApiError(f"Failed to read {a1_range}: {e}") from e

        values = response.get("values") or []
        return [[str(cell) for cell in row] for row in values]

    def batch_update_values(
        self,
        data: Sequence[Mapping[str, Any]],
        value_input_option: str = "RAW",
    ) -> None:
        """Write several ranges in a single ``batchUpdate`` request.

        Args:
            data: Entries of the form ``{"range": ..., "values": [[...]]}``
            value_input_option: How the API interprets the values
        """
        if not data:
            return

        body = {"valueInputOption": value_input_option, "data": [dict(d) for d in data]}
        try:
            (
                self._service.spreadsheets()
                .values()
                .batchUpdate(spreadsheetId=self.spreadsheet_id, body=body)
                .execute()
            )
        except HttpError as e:
            raise SheetsApiError(f"Failed to write {len(data)} range(s): {e}") from e
        logger.debug("Wrote %d range(s) to spreadsheet %s", len(data), self.spreadsheet_id)
