"""Exception hierarchy for babylai.

All exceptions inherit from :class:`BabylAIError`, so callers can handle
every failure raised by the package with a single ``except`` clause.
Nothing is retried or suppressed internally: each error reaches the caller
of :meth:`~babylai.client.BabylAIAuthClient.get_client_token` with enough
context (status code, raw body) to be logged or displayed as-is.

Subclass hierarchy::

    BabylAIError
    +-- InvalidRequestError
    +-- TransportError
    +-- ResponseError
        +-- HttpStatusError
        +-- MalformedResponseError
        +-- MissingFieldError
"""

from __future__ import annotations

from typing import Sequence


class BabylAIError(Exception):
    """Base exception for all babylai errors."""


class InvalidRequestError(BabylAIError):
    """Raised when the token request cannot be built from the given arguments.

    The originating :class:`pydantic.ValidationError` is available as
    ``__cause__``.
    """


class TransportError(BabylAIError):
    """Raised on network-level failures (timeout, DNS, refused connection, broken HTTP).

    The originating :class:`httpx.HTTPError` is available as ``__cause__``.
    """


class ResponseError(BabylAIError):
    """Base for errors detected after a response was received.

    Args:
        message: Human-readable error description.
        body: The raw response body text, kept verbatim for diagnostics.
    """

    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body


class HttpStatusError(ResponseError):
    """Raised when the Auth API answers with a status outside ``[200, 300)``."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"Failed to fetch token. Status code: {status_code}. Response: {body}",
            body,
        )
        self.status_code = status_code


class MalformedResponseError(ResponseError):
    """Raised when a successful response body is not a JSON object."""

    def __init__(self, body: str):
        super().__init__(f"Invalid JSON in BabylAI response: {body}", body)


class MissingFieldError(ResponseError):
    """Raised when the JSON object lacks ``token`` or ``expiresIn``."""

    def __init__(self, body: str, missing_fields: Sequence[str] = ()):
        super().__init__(f"Missing fields in BabylAI response: {body}", body)
        self.missing_fields = list(missing_fields)
