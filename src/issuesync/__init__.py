"""IssueSync - Reconcile spreadsheet rows with GitHub issues."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the installed IssueSync version."""
    return __version__
