"""Validation of Auth API responses.

Shared by :class:`~babylai.client.sync_client.BabylAIAuthClient` and
:class:`~babylai.client.async_client.AsyncBabylAIAuthClient`: once an
:class:`httpx.Response` has been received, :func:`parse_token_response`
either returns a :class:`~babylai.models.ClientTokenResponse` or raises the
matching :class:`~babylai.exceptions.ResponseError` subclass.

Checks run in a fixed order, and the first failure wins:

1. status in ``[200, 300)`` -- else :class:`HttpStatusError`
2. body is a JSON object -- else :class:`MalformedResponseError`
3. ``token`` and ``expiresIn`` present and not ``null`` -- else
   :class:`MissingFieldError`
4. ``token`` a string or number and ``expiresIn`` interpretable as
   seconds -- else :class:`MalformedResponseError`
"""

from __future__ import annotations

from typing import Any

import httpx

from babylai.exceptions import HttpStatusError, MalformedResponseError, MissingFieldError
from babylai.models import ClientTokenResponse, coerce_seconds, coerce_token

TOKEN_PATH = "Auth/client/get-token"

REQUIRED_FIELDS = ("token", "expiresIn")


def parse_token_response(response: httpx.Response) -> ClientTokenResponse:
    """Validate *response* and map it to a :class:`ClientTokenResponse`.

    Args:
        response: A fully read response from the token endpoint.

    Returns:
        The token and its lifetime in seconds.

    Raises:
        HttpStatusError: Status code outside ``[200, 300)``.
        MalformedResponseError: Body is not a JSON object, ``token`` is not
            a string or number, or ``expiresIn`` is not numeric.
        MissingFieldError: ``token`` or ``expiresIn`` is absent.
    """
    status = response.status_code
    body = response.text

    if status < 200 or status >= 300:
        raise HttpStatusError(status, body)

    try:
        decoded: Any = response.json()
    except ValueError as exc:
        raise MalformedResponseError(body) from exc
    if not isinstance(decoded, dict):
        raise MalformedResponseError(body)

    missing = [name for name in REQUIRED_FIELDS if decoded.get(name) is None]
    if missing:
        raise MissingFieldError(body, missing)

    try:
        token = coerce_token(decoded["token"])
        expires_in = coerce_seconds(decoded["expiresIn"])
    except (TypeError, ValueError, OverflowError) as exc:
        raise MalformedResponseError(body) from exc

    return ClientTokenResponse(token=token, expires_in=expires_in)
