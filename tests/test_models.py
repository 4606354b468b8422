"""Tests for babylai.models -- wire models and config model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from babylai.models import (
    DEFAULT_BASE_URL,
    ClientConfig,
    ClientTokenRequest,
    ClientTokenResponse,
    coerce_seconds,
    coerce_token,
)


# ---------------------------------------------------------------------------
# ClientTokenRequest
# ---------------------------------------------------------------------------


class TestClientTokenRequest:
    def test_to_dict_uses_wire_names(self) -> None:
        req = ClientTokenRequest(tenant_id="tenant-1", api_key="key-1")
        assert req.to_dict() == {"TenantId": "tenant-1", "ApiKey": "key-1"}

    def test_to_dict_has_exactly_two_keys(self) -> None:
        req = ClientTokenRequest(tenant_id="", api_key="")
        assert list(req.to_dict()) == ["TenantId", "ApiKey"]

    def test_is_immutable(self) -> None:
        req = ClientTokenRequest(tenant_id="tenant-1", api_key="key-1")
        with pytest.raises(ValidationError):
            req.tenant_id = "other"  # type: ignore[misc]

    def test_api_key_hidden_from_repr(self) -> None:
        req = ClientTokenRequest(tenant_id="tenant-1", api_key="super-secret")
        assert "super-secret" not in repr(req)
        assert "tenant-1" in repr(req)

    def test_rejects_non_string_values(self) -> None:
        with pytest.raises(ValidationError):
            ClientTokenRequest(tenant_id=123, api_key="key")  # type: ignore[arg-type]

    def test_both_fields_required(self) -> None:
        with pytest.raises(ValidationError):
            ClientTokenRequest(tenant_id="tenant-1")  # type: ignore[call-arg]


# ---------------------------------------------------------------------------
# ClientTokenResponse -- strict construction
# ---------------------------------------------------------------------------


class TestClientTokenResponseStrict:
    def test_accessors_return_constructed_values(self) -> None:
        resp = ClientTokenResponse(token="abc", expires_in=3600)
        assert resp.token == "abc"
        assert resp.expires_in == 3600

    def test_is_immutable(self) -> None:
        resp = ClientTokenResponse(token="abc", expires_in=3600)
        with pytest.raises(ValidationError):
            resp.expires_in = 1  # type: ignore[misc]

    def test_fields_required(self) -> None:
        with pytest.raises(ValidationError):
            ClientTokenResponse(token="abc")  # type: ignore[call-arg]

    def test_no_coercion(self) -> None:
        with pytest.raises(ValidationError):
            ClientTokenResponse(token="abc", expires_in="3600")  # type: ignore[arg-type]

    def test_equality_by_value(self) -> None:
        assert ClientTokenResponse(token="a", expires_in=1) == ClientTokenResponse(
            token="a", expires_in=1
        )


# ---------------------------------------------------------------------------
# ClientTokenResponse -- tolerant construction
# ---------------------------------------------------------------------------


class TestClientTokenResponseFromMapping:
    def test_empty_mapping_gives_defaults(self) -> None:
        resp = ClientTokenResponse.from_mapping({})
        assert resp.token == ""
        assert resp.expires_in == 0

    def test_missing_expires_in(self) -> None:
        resp = ClientTokenResponse.from_mapping({"Token": "xyz"})
        assert resp.token == "xyz"
        assert resp.expires_in == 0

    def test_reads_capitalised_keys(self) -> None:
        resp = ClientTokenResponse.from_mapping({"Token": "xyz", "ExpiresIn": 120})
        assert resp == ClientTokenResponse(token="xyz", expires_in=120)

    def test_ignores_lowercase_keys(self) -> None:
        resp = ClientTokenResponse.from_mapping({"token": "xyz", "expiresIn": 120})
        assert resp.token == ""
        assert resp.expires_in == 0

    def test_numeric_string_expiry(self) -> None:
        resp = ClientTokenResponse.from_mapping({"Token": "t", "ExpiresIn": "90"})
        assert resp.expires_in == 90

    def test_null_values_give_defaults(self) -> None:
        resp = ClientTokenResponse.from_mapping({"Token": None, "ExpiresIn": None})
        assert resp.token == ""
        assert resp.expires_in == 0

    @pytest.mark.parametrize("data", [None, "text", 42, ["Token", "x"], object()])
    def test_non_mapping_input_never_raises(self, data: object) -> None:
        resp = ClientTokenResponse.from_mapping(data)
        assert resp.token == ""
        assert resp.expires_in == 0

    def test_unusable_values_fall_back(self) -> None:
        resp = ClientTokenResponse.from_mapping(
            {"Token": {"nested": True}, "ExpiresIn": "soon"}
        )
        assert resp.token == ""
        assert resp.expires_in == 0

    def test_numeric_token_stringified(self) -> None:
        resp = ClientTokenResponse.from_mapping({"Token": 12345})
        assert resp.token == "12345"

    def test_boolean_token_falls_back(self) -> None:
        resp = ClientTokenResponse.from_mapping({"Token": True, "ExpiresIn": 5})
        assert resp.token == ""
        assert resp.expires_in == 5


# ---------------------------------------------------------------------------
# coerce_seconds
# ---------------------------------------------------------------------------


class TestCoerceSeconds:
    @pytest.mark.parametrize(
        "value, expected",
        [(3600, 3600), (3600.9, 3600), ("3600", 3600), (" 60 ", 60), ("59.99", 59), (True, 1)],
    )
    def test_coerces(self, value: object, expected: int) -> None:
        assert coerce_seconds(value) == expected

    def test_rejects_non_numeric_string(self) -> None:
        with pytest.raises(ValueError):
            coerce_seconds("an hour")

    def test_rejects_containers(self) -> None:
        with pytest.raises(TypeError):
            coerce_seconds([3600])

    def test_rejects_infinity(self) -> None:
        with pytest.raises(OverflowError):
            coerce_seconds(float("inf"))


# ---------------------------------------------------------------------------
# coerce_token
# ---------------------------------------------------------------------------


class TestCoerceToken:
    @pytest.mark.parametrize("value, expected", [("abc", "abc"), ("", ""), (42, "42"), (1.5, "1.5")])
    def test_coerces(self, value: object, expected: str) -> None:
        assert coerce_token(value) == expected

    @pytest.mark.parametrize("value", [True, False, None, {"a": 1}, [1, 2]])
    def test_rejects_non_scalars(self, value: object) -> None:
        with pytest.raises(TypeError):
            coerce_token(value)


# ---------------------------------------------------------------------------
# ClientConfig
# ---------------------------------------------------------------------------


class TestClientConfig:
    def test_defaults(self) -> None:
        config = ClientConfig()
        assert config.base_url == DEFAULT_BASE_URL == "https://babylai.net/api/"
        assert config.timeout == 30.0
        assert config.verify_ssl is True

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)
