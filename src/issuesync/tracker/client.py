"""GitHubIssueClient - Creates, reads and updates GitHub issues."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from issuesync.tracker.exceptions import TicketNotFoundError, TrackerError
from issuesync.tracker.models import Ticket, TicketState

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

logger = logging.getLogger(__name__)


class GitHubIssueClient:
    """Thin adapter over the GitHub REST issues API.

    Every call is a single request. Failures are raised to the caller
    without retries.
    """

    def __init__(
        self,
        repo: str,
        token: str,
        base_url: str = "https://api.github.com",
    ) -> None:
        """Initialize the issue client.

        Args:
            repo: GitHub repo in "owner/repo" format
            token: GitHub personal access token with issues scope
            base_url: GitHub API base URL (for testing/enterprise)
        """
        self.repo = repo
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GitHub API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": "2022-11-28",
                },
                timeout=30.0,
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> GitHubIssueClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def create_ticket(
        self,
        title: str,
        body: str,
        labels: Sequence[str] = (),
        assignees: Sequence[str] = (),
    ) -> int:
        """Create a new issue.

        Args:
            title: Issue title
            body: Issue body text
            labels: Label names to attach
            assignees: Logins to assign (zero or more)

        Returns:
            The number GitHub assigned to the new issue

        Raises:
            TrackerError: If the issue could not be created
        """
        logger.debug("Creating issue in %s: %s", self.repo, title)
        response = self.client.post(
            f"/repos/{self.repo}/issues",
            json={
                "title": title,
                "body": body,
                "labels": list(labels),
                "assignees": list(assignees),
            },
        )

        if response.status_code != 201:
            logger.error("Failed to create issue: %s", response.text)
            raise TrackerError(
                f"Failed to create issue: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        number = int(response.json()["number"])
        logger.debug("Created issue #%d", number)
        return number

    def get_ticket(self, number: int) -> Ticket:
        """Get issue details by number.

        Args:
            number: GitHub issue number

        Returns:
            Ticket with title, body, state and assignee logins

        Raises:
            TicketNotFoundError: If the issue doesn't exist
            TrackerError: If the request fails
        """
        response = self.client.get(f"/repos/{self.repo}/issues/{number}")

        if response.status_code == 404:
            raise TicketNotFoundError(
                f"Ticket #{number} not found in {self.repo}", status_code=404
            )
        if response.status_code != 200:
            raise TrackerError(
                f"Failed to get issue {number}: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        return self._to_ticket(response.json())

    def update_ticket(
        self,
        number: int,
        *,
        title: str | None = None,
        body: str | None = None,
        state: TicketState | str | None = None,
        assignees: Sequence[str] | None = None,
    ) -> None:
        """Update the given fields of an issue, leaving the others untouched.

        An empty ``assignees`` sequence is sent and clears all assignees;
        ``None`` leaves a field out of the request.

        Args:
            number: GitHub issue number
            title: New title
            body: New body text
            state: New state ("open" or "closed")
            assignees: New assignee logins

        Raises:
            ValueError: If no field was given
            TrackerError: If the update fails
        """
        payload: dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        if body is not None:
            payload["body"] = body
        if state is not None:
            payload["state"] = TicketState(state).value
        if assignees is not None:
            payload["assignees"] = list(assignees)
        if not payload:
            raise ValueError("update_ticket requires at least one field")

        logger.debug("Updating issue #%d fields: %s", number, sorted(payload))
        response = self.client.patch(f"/repos/{self.repo}/issues/{number}", json=payload)

        if response.status_code == 404:
            raise TicketNotFoundError(
                f"Ticket #{number} not found in {self.repo}", status_code=404
            )
        if response.status_code != 200:
            logger.error("Failed to update issue #%d: %s", number, response.text)
            raise TrackerError(
                f"Failed to update issue {number}: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

    @staticmethod
    def _to_ticket(data: dict[str, Any]) -> Ticket:
        assignees = [user["login"] for user in data.get("assignees") or []]
        labels = [label["name"] for label in data.get("labels") or []]
        return Ticket(
            number=int(data["number"]),
            title=data.get("title") or "",
            body=data.get("body") or "",
            state=TicketState(data["state"]),
            assignees=assignees,
            labels=labels,
        )
