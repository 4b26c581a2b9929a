"""Exceptions raised by the Nexus Hub client."""

from typing import Optional


class NexusHubError(Exception):
    """Base exception for all Nexus Hub client failures."""

    pass


class EncodingError(NexusHubError):
    """Raised when a query parameter cannot be encoded into the request."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"Cannot encode query parameter {name!r}: {type(value).__name__} {value!r}")


class DecodeError(NexusHubError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, status_code: int, body: str, url: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"Malformed JSON in {status_code} response from {url or 'Nexus Hub'}")


class UnexpectedResponseError(NexusHubError):
    """Raised for statuses other than 200/404, or a 404 without a reason."""

    def __init__(self, status_code: int, body: str, url: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"Unexpected {status_code} response from {url or 'Nexus Hub'}: {body[:200]}")


class NotFoundError(NexusHubError):
    """Raised on request when a NotFound result should abort the caller."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
