"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: calls the live GitHub API (local only)")


class FakeRequest:
    """Mimics a googleapiclient request object."""

    def __init__(self, callback: Any) -> None:
        self._callback = callback

    def execute(self) -> Any:
        return self._callback()


class FakeValues:
    def __init__(self, service: FakeSheetsService) -> None:
        self._service = service

    def get(self, spreadsheetId: str, range: str) -> FakeRequest:  # noqa: N803, A002
        self._service.get_calls.append((spreadsheetId, range))
        return FakeRequest(lambda: self._service.get_response)

    def batchUpdate(self, spreadsheetId: str, body: dict[str, Any]) -> FakeRequest:  # noqa: N802, N803
        self._service.batch_requests.append((spreadsheetId, body))
        return FakeRequest(dict)


class FakeSpreadsheets:
    def __init__(self, service: FakeSheetsService) -> None:
        self._service = service

    def values(self) -> FakeValues:
        return FakeValues(self._service)


class FakeSheetsService:
    """In-memory stand-in for a Sheets v4 service.

    ``rows`` is what ``values().get`` returns; ``batchUpdate`` bodies are recorded.
    """

    def __init__(self, rows: list[list[Any]] | None = None) -> None:
        self.get_response: dict[str, Any] = {"values": rows} if rows is not None else {}
        self.get_calls: list[tuple[str, str]] = []
        self.batch_requests: list[tuple[str, dict[str, Any]]] = []

    def spreadsheets(self) -> FakeSpreadsheets:
        return FakeSpreadsheets(self)


HEADER = ["ID", "Title", "Description", "Priority", "Status", "Issue Number", "Assignee"]


@pytest.fixture
def sheet_header() -> list[str]:
    """Header row of the sync sheet."""
    return list(HEADER)


@pytest.fixture
def fake_service_factory() -> type[FakeSheetsService]:
    """Factory for fake Sheets services."""
    return FakeSheetsService
