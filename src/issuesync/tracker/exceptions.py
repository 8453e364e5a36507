"""Custom exceptions for the issue tracker client."""


class TrackerError(Exception):
    """Base exception for issue tracker errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TicketNotFoundError(TrackerError):
    """Ticket with given number does not exist."""
