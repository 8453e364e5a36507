"""SheetWriter - Writes newly created ticket numbers back to the sheet."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from issuesync.sheets.client import cell_range

if TYPE_CHECKING:
    from collections.abc import Sequence

    from issuesync.sheets.client import SheetsClient
    from issuesync.sheets.models import WriteBack

logger = logging.getLogger(__name__)

TICKET_NUMBER_COLUMN = "F"


class SheetWriter:
    """Persists ticket numbers into the ticket-number column."""

    def __init__(self, client: SheetsClient, sheet_name: str = "Sheet1") -> None:
        self.client = client
        self.sheet_name = sheet_name

    def write_ticket_numbers(self, write_backs: Sequence[WriteBack]) -> None:
        """Write every pending ticket number in one batched request.

        Cells are overwritten without checking their current content.
        Nothing is sent when ``write_backs`` is empty.
        """
        if not write_backs:
            return

        data = [
            {
                "range": cell_range(self.sheet_name, TICKET_NUMBER_COLUMN, item.sheet_row),
                "values": [[str(item.ticket_number)]],
            }
            for item in write_backs
        ]
        self.client.batch_update_values(data, value_input_option="RAW")
        logger.info("Wrote %d new issue number(s) back to the sheet.", len(data))
