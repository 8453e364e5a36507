"""Tracker - GitHub issue client used by the reconciler."""

from issuesync.tracker.client import GitHubIssueClient
from issuesync.tracker.exceptions import TicketNotFoundError, TrackerError
from issuesync.tracker.models import Ticket, TicketState

__all__ = [
    "GitHubIssueClient",
    "Ticket",
    "TicketNotFoundError",
    "TicketState",
    "TrackerError",
]
