"""Custom exceptions for the Google Sheets layer."""


class SheetsError(Exception):
    """Base exception for spreadsheet errors."""


class SheetsCredentialsError(SheetsError):
    """Service-account credentials were rejected."""


class SheetsApiError(SheetsError):
    """The Sheets API returned an error response."""
