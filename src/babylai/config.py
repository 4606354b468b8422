"""Base URL handling for the auth clients.

The configuration surface is deliberately small: a base URL passed to the
client constructor and, optionally, a pre-configured ``httpx`` client.
Transport settings for a client the auth client creates itself live in
:class:`~babylai.models.ClientConfig`.
"""

from __future__ import annotations


def normalize_base_url(url: str) -> str:
    """Return *url* with exactly one trailing ``/``.

    ``"https://x.test/api"`` and ``"https://x.test/api///"`` both become
    ``"https://x.test/api/"``.
    """
    return url.rstrip("/") + "/"
