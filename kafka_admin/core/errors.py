"""Failure types raised at the admin-client boundary and their user-facing text."""
from __future__ import annotations


class ClientError(Exception):
    """Raised by an admin client when a cluster call fails.

    Attributes
    ----------
    message : str
        Human-readable description, always present.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownClusterError(ClientError):
    """Raised when a cluster id has no configured bootstrap servers."""

    def __init__(self, cluster_id: str) -> None:
        super().__init__(f"Unknown cluster '{cluster_id}'")
        self.cluster_id = cluster_id


def error_message(exc: BaseException) -> str:
    """Return the text shown to the user for *exc*.

    Uses the failure's ``message`` when it carries one, falling back to the
    raw failure value rendered as text.
    """
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or repr(exc)
