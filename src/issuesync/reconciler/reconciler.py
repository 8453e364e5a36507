"""Reconciler - Brings GitHub issues in line with sheet rows."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from issuesync.reconciler.models import SyncResult, TicketUpdate, UpdateKind
from issuesync.sheets.models import WriteBack
from issuesync.tracker.models import TicketState

if TYPE_CHECKING:
    from collections.abc import Sequence

    from issuesync.sheets.models import RowRecord
    from issuesync.tracker.models import Ticket

logger = logging.getLogger(__name__)


class RowSource(Protocol):
    """Interface for the component that supplies row records."""

    def read_rows(self) -> list[RowRecord]:
        """Return the data rows in sheet order."""
        ...


class TicketClient(Protocol):
    """Interface for the issue tracker adapter."""

    def create_ticket(
        self,
        title: str,
        body: str,
        labels: Sequence[str] = ...,
        assignees: Sequence[str] = ...,
    ) -> int:
        """Create a ticket and return its number."""
        ...

    def get_ticket(self, number: int) -> Ticket:
        """Fetch a ticket by number."""
        ...

    def update_ticket(
        self,
        number: int,
        *,
        title: str | None = ...,
        body: str | None = ...,
        state: TicketState | str | None = ...,
        assignees: Sequence[str] | None = ...,
    ) -> None:
        """Update only the given fields of a ticket."""
        ...


class RowSink(Protocol):
    """Interface for the component that persists new ticket numbers."""

    def write_ticket_numbers(self, write_backs: Sequence[WriteBack]) -> None:
        """Write ticket numbers back to their rows."""
        ...


def compose_body(row: RowRecord) -> str:
    """Return the ticket body for a row."""
    return f"ID: {row.id}\nPriority: {row.priority}\n\n{row.description}"


def priority_labels(priority: str) -> list[str]:
    """Return the label set for a priority; empty when no priority is set."""
    if not priority:
        return []
    return [f"priority:{priority.lower()}"]


def desired_state(status: str) -> TicketState:
    """Map a row status to a ticket state. Only "closed" (any case) closes."""
    return TicketState.CLOSED if status.lower() == "closed" else TicketState.OPEN


def desired_assignee(row: RowRecord, default_assignee: str = "") -> str | None:
    """Return the row assignee, else the default, else None."""
    if row.assignee:
        return row.assignee
    if default_assignee:
        return default_assignee
    return None


class Reconciler:
    """Reconciles sheet rows with tracker tickets, one row at a time.

    Rows without a ticket number create a ticket. Rows with one update the
    existing ticket's state, content and assignees, each with its own call
    and only when the observed value differs. Errors are not caught: the
    first failure stops the pass.
    """

    def __init__(self, tracker: TicketClient, default_assignee: str = "") -> None:
        """Initialize the Reconciler.

        Args:
            tracker: Issue tracker adapter.
            default_assignee: Login used when a row names no assignee.
        """
        self.tracker = tracker
        self.default_assignee = default_assignee.strip()

    def sync(self, reader: RowSource, writer: RowSink) -> SyncResult:
        """Run one reconciliation pass.

        Args:
            reader: Supplies the rows to reconcile.
            writer: Receives the numbers of newly created tickets.

        Returns:
            SyncResult with created tickets and issued updates.
        """
        rows = reader.read_rows()
        result = SyncResult()
        if not rows:
            return result

        for row in rows:
            if row.ticket_number is None:
                result.created.append(self.create_ticket(row))
            else:
                result.updated.extend(self.update_ticket(row, row.ticket_number))
            result.rows_processed += 1

        if result.created:
            writer.write_ticket_numbers(result.created)
        logger.info(
            "Reconciled %d row(s): created %d, updated %d",
            result.rows_processed,
            len(result.created),
            len(result.updated),
        )
        return result

    def create_ticket(self, row: RowRecord) -> WriteBack:
        """Create the ticket for a row that has never been synced.

        Returns:
            WriteBack carrying the new number and the row it belongs to.
        """
        assignee = desired_assignee(row, self.default_assignee)
        assignees = [assignee] if assignee else []

        number = self.tracker.create_ticket(
            title=row.title,
            body=compose_body(row),
            labels=priority_labels(row.priority),
            assignees=assignees,
        )
        logger.info(
            "Created new issue: #%d - %s (assigned to: %s)",
            number,
            row.title,
            ", ".join(assignees) or "none",
        )
        return WriteBack(row_index=row.row_index, ticket_number=number)

    def update_ticket(self, row: RowRecord, number: int) -> list[TicketUpdate]:
        """Bring an existing ticket in line with its row.

        Returns:
            The update calls issued, in order (state, content, assignees).
        """
        ticket = self.tracker.get_ticket(number)
        updates: list[TicketUpdate] = []

        state = desired_state(row.status)
        if ticket.state != state:
            self.tracker.update_ticket(number, state=state)
            logger.info("Updated issue #%d state to %s", number, state)
            updates.append(TicketUpdate(number, UpdateKind.STATE))

        # Title and body are always rewritten together
        if ticket.title != row.title or row.description not in ticket.body:
            self.tracker.update_ticket(number, title=row.title, body=compose_body(row))
            logger.info("Updated issue #%d content.", number)
            updates.append(TicketUpdate(number, UpdateKind.CONTENT))

        # Extra assignees next to the desired one are left alone
        assignee = desired_assignee(row, self.default_assignee)
        if (assignee and assignee not in ticket.assignees) or (
            not assignee and ticket.assignees
        ):
            self.tracker.update_ticket(number, assignees=[assignee] if assignee else [])
            logger.info("Updated issue #%d assignee to: %s", number, assignee or "none")
            updates.append(TicketUpdate(number, UpdateKind.ASSIGNEES))

        return updates


def run_sync(
    reader: RowSource,
    tracker: TicketClient,
    writer: RowSink,
    default_assignee: str = "",
) -> SyncResult:
    """Run one reconciliation pass with the given clients."""
    return Reconciler(tracker, default_assignee=default_assignee).sync(reader, writer)
