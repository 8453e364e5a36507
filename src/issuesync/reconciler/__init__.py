"""Reconciler - Turns sheet rows into GitHub issue mutations."""

from issuesync.reconciler.models import SyncResult, TicketUpdate, UpdateKind
from issuesync.reconciler.reconciler import (
    Reconciler,
    compose_body,
    desired_assignee,
    desired_state,
    priority_labels,
    run_sync,
)

__all__ = [
    "Reconciler",
    "SyncResult",
    "TicketUpdate",
    "UpdateKind",
    "compose_body",
    "desired_assignee",
    "desired_state",
    "priority_labels",
    "run_sync",
]
