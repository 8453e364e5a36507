"""Data models for the issue tracker client."""

from dataclasses import dataclass, field
from enum import StrEnum


class TicketState(StrEnum):
    """Issue state as reported by GitHub."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass
class Ticket:
    """Represents a GitHub issue."""

    number: int
    title: str
    body: str
    state: TicketState
    assignees: list[str] = field(default_factory=list)  # GitHub logins
    labels: list[str] = field(default_factory=list)
