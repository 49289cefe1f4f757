"""Jira client exceptions."""


class JiraError(Exception):
    """Base exception for Jira client errors."""


class InvalidURLError(JiraError, ValueError):
    """Raised when the service URL is not an absolute URL."""

    def __init__(self, url: str, reason: str = "not an absolute URL"):
        self.url = url
        super().__init__(f"invalid Jira URL {url!r}: {reason}")


class JiraTransportError(JiraError):
    """Raised when the request never produced a response (DNS, connect, timeout, reset)."""


class StatusError(JiraError):
    """Raised when Jira answers with an error status code."""

    def __init__(self, status_code: int, status: str, message: str):
        self.status_code = status_code
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}")


class NotFoundError(StatusError):
    """Raised on HTTP 404."""

    def __init__(self, status: str = "404 Not Found"):
        super().__init__(404, status, "Not found")


class DecodeError(JiraError):
    """Raised when a response body is not valid JSON."""


class ShapeError(DecodeError):
    """Raised when decoded JSON lacks a required member or has the wrong type."""
