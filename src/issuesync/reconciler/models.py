"""Data models for the Reconciler module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from issuesync.sheets import WriteBack


class UpdateKind(StrEnum):
    """Field group changed by a single update call."""

    STATE = "state"
    CONTENT = "content"
    ASSIGNEES = "assignees"


@dataclass(frozen=True)
class TicketUpdate:
    """One update call issued against an existing ticket."""

    ticket_number: int
    kind: UpdateKind


@dataclass
class SyncResult:
    """Result of a reconciliation pass.

    Attributes:
        created: Tickets created during this pass, with their target rows.
        updated: Update calls issued against existing tickets, in order.
        rows_processed: Number of data rows reconciled.
    """

    created: list[WriteBack] = field(default_factory=list)
    updated: list[TicketUpdate] = field(default_factory=list)
    rows_processed: int = 0
