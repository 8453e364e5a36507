"""Sheets - Reads rows from and writes ticket numbers to Google Sheets."""

from issuesync.sheets.client import (
    SCOPES,
    SheetsClient,
    build_sheets_service,
    cell_range,
    column_range,
)
from issuesync.sheets.exceptions import SheetsApiError, SheetsCredentialsError, SheetsError
from issuesync.sheets.models import RowRecord, WriteBack
from issuesync.sheets.reader import RowReader, parse_row
from issuesync.sheets.writer import SheetWriter

__all__ = [
    "SCOPES",
    "RowReader",
    "RowRecord",
    "SheetWriter",
    "SheetsApiError",
    "SheetsClient",
    "SheetsCredentialsError",
    "SheetsError",
    "WriteBack",
    "build_sheets_service",
    "cell_range",
    "column_range",
    "parse_row",
]
