"""HTTP clients for the BabylAI Auth API.

Classes:
    :class:`BabylAIAuthClient` -- blocking client backed by :class:`httpx.Client`.
    :class:`AsyncBabylAIAuthClient` -- non-blocking client backed by
    :class:`httpx.AsyncClient`.

Both accept the same parameters (an optional base URL, an optional
pre-configured ``httpx`` client and an optional
:class:`~babylai.models.ClientConfig`) and can be used as context managers.

Example::

    from babylai.client import BabylAIAuthClient

    with BabylAIAuthClient() as client:
        result = client.get_client_token(tenant_id, api_key)
"""

from babylai.client.async_client import AsyncBabylAIAuthClient
from babylai.client.sync_client import BabylAIAuthClient

__all__ = ["BabylAIAuthClient", "AsyncBabylAIAuthClient"]
