"""babylai -- fetch short-lived client tokens from the BabylAI Auth API.

One request, one response: :class:`~babylai.client.BabylAIAuthClient`
posts a tenant id and API key to ``Auth/client/get-token`` and returns a
:class:`~babylai.models.ClientTokenResponse`, or raises one of the
exceptions in :mod:`babylai.exceptions`.

Example::

    from babylai import BabylAIAuthClient

    with BabylAIAuthClient() as client:
        token = client.get_client_token(tenant_id, api_key)
        print(token.token, token.expires_in)

Modules:
    client: Sync and async auth clients backed by :mod:`httpx`.
    models: Pydantic request/response models.
    config: Base URL normalisation.
    exceptions: Exception hierarchy raised by the clients.
"""

from babylai.client import AsyncBabylAIAuthClient, BabylAIAuthClient
from babylai.exceptions import (
    BabylAIError,
    HttpStatusError,
    InvalidRequestError,
    MalformedResponseError,
    MissingFieldError,
    ResponseError,
    TransportError,
)
from babylai.models import ClientConfig, ClientTokenRequest, ClientTokenResponse

__version__ = "0.1.0"

__all__ = [
    "AsyncBabylAIAuthClient",
    "BabylAIAuthClient",
    "BabylAIError",
    "ClientConfig",
    "ClientTokenRequest",
    "ClientTokenResponse",
    "HttpStatusError",
    "InvalidRequestError",
    "MalformedResponseError",
    "MissingFieldError",
    "ResponseError",
    "TransportError",
]
