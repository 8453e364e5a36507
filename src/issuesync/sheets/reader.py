"""RowReader - Loads row records from the sync sheet."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from issuesync.sheets.client import column_range
from issuesync.sheets.models import RowRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

    from issuesync.sheets.client import SheetsClient

logger = logging.getLogger(__name__)

FIRST_COLUMN = "A"
LAST_COLUMN = "G"

_LEADING_INT = re.compile(r"^\s*\+?(\d+)")


def parse_ticket_number(cell: str) -> int | None:
    """Parse the ticket-number cell.

    Uses the leading digits of the cell. Empty, non-numeric, zero and
    negative values mean the row was never synced.
    """
    match = _LEADING_INT.match(cell)
    if not match:
        return None
    return int(match.group(1)) or None


def parse_row(row_index: int, cells: Sequence[str]) -> RowRecord:
    """Convert raw cells (A-G) into a RowRecord; missing cells are empty."""
    padded = [*cells, *[""] * (7 - len(cells))]
    ident, title, description, priority, status, number, assignee = padded[:7]
    return RowRecord(
        row_index=row_index,
        id=ident,
        title=title,
        description=description,
        priority=priority,
        status=status or "Open",
        ticket_number=parse_ticket_number(number),
        assignee=assignee.strip(),
    )


class RowReader:
    """Reads the data rows of one sheet tab."""

    def __init__(self, client: SheetsClient, sheet_name: str = "Sheet1") -> None:
        self.client = client
        self.sheet_name = sheet_name

    @property
    def range(self) -> str:
        return column_range(self.sheet_name, FIRST_COLUMN, LAST_COLUMN)

    def read_rows(self) -> list[RowRecord]:
        """Fetch all rows, drop the header and parse the rest in sheet order."""
        values = self.client.get_values(self.range)
        if not values:
            logger.info("No data found in the sheet.")
            return []

        records = [parse_row(index, cells) for index, cells in enumerate(values[1:])]
        logger.info("Read %d row(s) from %s", len(records), self.range)
        return records
