"""Synchronous BabylAI auth client.

This module provides :class:`BabylAIAuthClient`, a blocking client that
exchanges a tenant id and API key for a client token. It wraps an
:class:`httpx.Client` and adds:

- **Base URL normalisation** -- the configured URL always ends with one ``/``.
- **Error mapping** -- transport failures become
  :class:`~babylai.exceptions.TransportError`; bad responses become one of
  the :class:`~babylai.exceptions.ResponseError` subclasses.

There is no retry, caching or token refresh: each call performs exactly one
request and its outcome is returned or raised to the caller.

See Also:
    :class:`~babylai.client.async_client.AsyncBabylAIAuthClient` for the
    equivalent non-blocking implementation.
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


class BabylAIAuthClient:
    """Blocking client for the BabylAI Auth API.

    Holds no per-call state, so one instance can serve concurrent callers
    as long as the underlying :class:`httpx.Client` can.

    Args:
        base_url: API base URL. Defaults to ``config.base_url``
            (``https://babylai.net/api/`` unless configured otherwise).
        http_client: Optional pre-configured :class:`httpx.Client` (custom
            TLS, proxies, or a mock transport in tests). It is never closed
            by this object.
        config: Transport settings used when *http_client* is not given.

    Example::

        with BabylAIAuthClient("https://staging.babylai.net/api") as client:
            result = client.get_client_token(tenant_id, api_key)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._base_url = normalize_base_url(
            base_url if base_url is not None else self._config.base_url
        )
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
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
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> BabylAIAuthClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this object created it."""
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def get_client_token(self, tenant_id: str, api_key: str) -> ClientTokenResponse:
        """Fetch a client token for *tenant_id* using *api_key*.

        Sends ``POST {base_url}Auth/client/get-token`` with the JSON body
        ``{"TenantId": ..., "ApiKey": ...}``.

        Args:
            tenant_id: Tenant GUID string.
            api_key: API key issued by BabylAI.

        Returns:
            The token and its lifetime in seconds.

        Raises:
            InvalidRequestError: *tenant_id* or *api_key* is not a string.
            TransportError: The request could not be sent or the response
                could not be read.
            HttpStatusError: Status code outside ``[200, 300)``.
            MalformedResponseError: The body is not a JSON object.
            MissingFieldError: ``token`` or ``expiresIn`` is absent.
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
            response = self._client.post(
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
