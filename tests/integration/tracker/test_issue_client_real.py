"""Integration tests for GitHubIssueClient.

These tests require:
- GITHUB_TOKEN environment variable
- GITHUB_TEST_REPO environment variable (e.g., "owner/test-repo")

They create and close a throwaway issue in the test repo.

Run with: pytest tests/integration/tracker/ -m real
"""

import os

import pytest

from issuesync.tracker import GitHubIssueClient, TicketNotFoundError, TicketState

# Skip all tests in this module if credentials not available
pytestmark = [
    pytest.mark.integration,
    pytest.mark.real,
    pytest.mark.skipif(
        not os.environ.get("GITHUB_TOKEN") or not os.environ.get("GITHUB_TEST_REPO"),
        reason="GITHUB_TOKEN and GITHUB_TEST_REPO required",
    ),
]


@pytest.fixture
def tracker():
    """Create a GitHubIssueClient against the test repo."""
    client = GitHubIssueClient(
        repo=os.environ["GITHUB_TEST_REPO"],
        token=os.environ["GITHUB_TOKEN"],
    )
    yield client
    client.close()


def test_create_update_and_close(tracker: GitHubIssueClient) -> None:
    """Issue lifecycle: create, edit content, close."""
    number = tracker.create_ticket("issuesync test", "ID: test\nPriority: \n\nfirst")
    try:
        ticket = tracker.get_ticket(number)
        assert ticket.state == TicketState.OPEN
        assert "first" in ticket.body

        tracker.update_ticket(number, title="issuesync test (edited)", body="second")
        ticket = tracker.get_ticket(number)
        assert ticket.title == "issuesync test (edited)"
        assert ticket.body == "second"
    finally:
        tracker.update_ticket(number, state=TicketState.CLOSED)

    assert tracker.get_ticket(number).state == TicketState.CLOSED


def test_missing_issue_raises(tracker: GitHubIssueClient) -> None:
    with pytest.raises(TicketNotFoundError):
        tracker.get_ticket(999_999_999)
