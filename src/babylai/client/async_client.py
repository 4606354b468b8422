"""Asynchronous BabylAI auth client.

Provides :class:`AsyncBabylAIAuthClient`, the non-blocking counterpart of
:class:`~babylai.client.sync_client.BabylAIAuthClient`, backed by
:class:`httpx.AsyncClient`. Request construction and response validation
are identical; only the I/O is awaited.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from babylai.client.response import TOKEN_PATH, parse_token_response
from babylai.config import normalize_base_url
from babylai.exceptions import InvalidRequestError, TransportError
from babylai.models import ClientConfig, ClientTokenRequest, ClientTokenResponse

logger = logging.getLogger(__name__)


class AsyncBabylAIAuthClient:
    """Non-blocking client for the BabylAI Auth API.

    Args:
        base_url: API base URL. Defaults to ``config.base_url``.
        http_client: Optional pre-configured :class:`httpx.AsyncClient`.
            It is never closed by this object.
        config: Transport settings used when *http_client* is not given.

    Example::

        async with AsyncBabylAIAuthClient() as client:
            result = await client.get_client_token(tenant_id, api_key)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._base_url = normalize_base_url(
            base_url if base_url is not None else self._config.base_url
        )
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._config.timeout,
                verify=self._config.verify_ssl,
            )
        self._client = http_client

    @property
    def base_url(self) -> str:
        """The normalised base URL, always ending with ``/``."""
        return self._base_url

    @property
    def token_url(self) -> str:
        """Absolute URL of the token endpoint."""
        return self._base_url + TOKEN_PATH

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncBabylAIAuthClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this object created it."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def get_client_token(self, tenant_id: str, api_key: str) -> ClientTokenResponse:
        """Fetch a client token for *tenant_id* using *api_key*.

        See :meth:`BabylAIAuthClient.get_client_token
        <babylai.client.sync_client.BabylAIAuthClient.get_client_token>`
        for the request format and the exceptions raised.
        """
        try:
            request = ClientTokenRequest(tenant_id=tenant_id, api_key=api_key)
        except ValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
            raise InvalidRequestError(
                f"Cannot build BabylAI token request, invalid fields: {fields}"
            ) from exc
        payload = request.to_dict()
        url = self.token_url

        logger.debug("Requesting client token for tenant %s from %s", tenant_id, url)
        try:
            response = await self._client.post(
                url,
                json=payload,
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise TransportError(
                f"HTTP error when fetching BabylAI client token: {exc}"
            ) from exc

        logger.debug("Token endpoint answered HTTP %s", response.status_code)
        return parse_token_response(response)
