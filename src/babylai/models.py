"""Pydantic models shared across babylai.

**Wire models** -- the payloads exchanged with the Auth API:
    :class:`ClientTokenRequest` and :class:`ClientTokenResponse`.

**Configuration models** -- settings for the HTTP transport created by the
clients: :class:`ClientConfig`.

Wire field names are fixed by the remote contract and differ in casing
between request (``TenantId``, ``ApiKey``) and response (``token``,
``expiresIn``). Python attribute names stay snake_case; the mapping to
wire names happens only in :meth:`ClientTokenRequest.to_dict`,
:meth:`ClientTokenResponse.from_mapping` and the client's response parser.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://babylai.net/api/"


def coerce_seconds(value: Any) -> int:
    """Interpret a decoded JSON value as a whole number of seconds.

    Integers pass through, floats are truncated and numeric strings are
    parsed (``"3600"`` and ``"3600.5"`` both give ``3600``).

    Raises:
        TypeError: If *value* is not a number or string.
        ValueError: If a string is not numeric, or a float is NaN.
        OverflowError: If a float is infinite.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return int(float(text))
    raise TypeError(f"Cannot interpret {type(value).__name__} as seconds")


def coerce_token(value: Any) -> str:
    """Interpret a decoded JSON value as a token string.

    Strings pass through and numbers are stringified. Booleans, ``null``,
    objects and arrays are not tokens.

    Raises:
        TypeError: If *value* is not a string or a number.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a token")


# --- Configuration ---


class ClientConfig(BaseModel):
    """Settings for the HTTP client an auth client creates for itself.

    Ignored for transport settings when a pre-configured ``httpx`` client
    is injected; ``base_url`` still applies.
    """

    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Auth API base URL"
    )
    timeout: float = Field(
        default=30.0, gt=0, description="Request timeout in seconds"
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")


# --- Wire models ---


class ClientTokenRequest(BaseModel):
    """Request payload for ``POST Auth/client/get-token``.

    Example::

        >>> ClientTokenRequest(tenant_id="4f1c...", api_key="secret").to_dict()
        {'TenantId': '4f1c...', 'ApiKey': 'secret'}
    """

    model_config = ConfigDict(frozen=True, strict=True)

    tenant_id: str = Field(
        serialization_alias="TenantId",
        description="Tenant GUID (format is not checked)",
    )
    api_key: str = Field(
        serialization_alias="ApiKey",
        repr=False,
        description="API key issued by BabylAI",
    )

    def to_dict(self) -> dict[str, str]:
        """Return the JSON body expected by the Auth API."""
        return self.model_dump(by_alias=True)


class ClientTokenResponse(BaseModel):
    """A client token and its lifetime.

    Construct directly when both values are known to be well-formed
    (no coercion is applied), or use :meth:`from_mapping` for best-effort
    decoding of arbitrary data.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    token: str = Field(description="The JWT or token string")
    expires_in: int = Field(description="Seconds until the token expires, from issuance")

    @classmethod
    def from_mapping(cls, data: Any) -> ClientTokenResponse:
        """Build a response from a decoded mapping without ever raising.

        Reads the ``Token`` and ``ExpiresIn`` keys, substituting ``""`` and
        ``0`` when a key is absent, ``null``, or holds a value that cannot
        be interpreted. Non-mapping input yields the defaults.

        Args:
            data: Typically the result of :func:`json.loads`.

        Returns:
            A :class:`ClientTokenResponse`; never raises.
        """
        if not isinstance(data, Mapping):
            data = {}

        try:
            token = coerce_token(data.get("Token", ""))
        except TypeError:
            token = ""

        try:
            expires_in = coerce_seconds(data.get("ExpiresIn", 0))
        except (TypeError, ValueError, OverflowError):
            expires_in = 0

        return cls(token=token, expires_in=expires_in)
