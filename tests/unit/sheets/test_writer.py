"""Unit tests for SheetWriter."""

from unittest.mock import MagicMock

import pytest

from issuesync.sheets import SheetsClient, SheetWriter, WriteBack


@pytest.mark.unit
class TestWriteTicketNumbers:
    """Tests for SheetWriter.write_ticket_numbers."""

    def test_batches_all_write_backs(self, fake_service_factory) -> None:
        """One request, column F, row_index + 2, values as strings."""
        service = fake_service_factory()
        writer = SheetWriter(SheetsClient("sheet-123", service), "Sheet1")

        writer.write_ticket_numbers(
            [
                WriteBack(row_index=0, ticket_number=101),
                WriteBack(row_index=3, ticket_number=102),
            ]
        )

        assert len(service.batch_requests) == 1
        spreadsheet_id, body = service.batch_requests[0]
        assert spreadsheet_id == "sheet-123"
        assert body == {
            "valueInputOption": "RAW",
            "data": [
                {"range": "Sheet1!F2", "values": [["101"]]},
                {"range": "Sheet1!F5", "values": [["102"]]},
            ],
        }

    def test_empty_mapping_is_noop(self) -> None:
        client = MagicMock()
        writer = SheetWriter(client)

        writer.write_ticket_numbers([])

        client.batch_update_values.assert_not_called()

    def test_uses_sheet_name(self) -> None:
        client = MagicMock()
        writer = SheetWriter(client, "Q3 Plan")

        writer.write_ticket_numbers([WriteBack(row_index=1, ticket_number=5)])

        client.batch_update_values.assert_called_once_with(
            [{"range": "'Q3 Plan'!F3", "values": [["5"]]}],
            value_input_option="RAW",
        )
