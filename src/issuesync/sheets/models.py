"""Data models for spreadsheet rows and write-backs."""

from dataclasses import dataclass

# Header row plus 1-based sheet rows
SHEET_ROW_OFFSET = 2


@dataclass(frozen=True)
class RowRecord:
    """One parsed data row (columns A-G).

    Attributes:
        row_index: Zero-based position after the header row.
        id: External identifier (A).
        title: Ticket title (B).
        description: Free text (C).
        priority: Priority name (D), empty when unset.
        status: Row status (E), "Open" when unset.
        ticket_number: Synced ticket number (F), None when never synced.
        assignee: Login overriding the default assignee (G), trimmed.
    """

    row_index: int
    id: str = ""
    title: str = ""
    description: str = ""
    priority: str = ""
    status: str = "Open"
    ticket_number: int | None = None
    assignee: str = ""

    @property
    def sheet_row(self) -> int:
        """1-based row number of this record in the sheet."""
        return self.row_index + SHEET_ROW_OFFSET


@dataclass(frozen=True)
class WriteBack:
    """A newly created ticket number waiting to be written to the sheet."""

    row_index: int
    ticket_number: int

    @property
    def sheet_row(self) -> int:
        """1-based row number of the target cell."""
        return self.row_index + SHEET_ROW_OFFSET
