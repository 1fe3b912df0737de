"""Tests for vaultkey.vault.request."""

from __future__ import annotations

import json

from vaultkey.config import ClientConfig
from vaultkey.vault.request import (
    TOKEN_HEADER,
    Operation,
    build_read_request,
    build_write_request,
)


class TestBuildReadRequest:
    """Tests for build_read_request."""

    def test_https_url_without_version(self, client_config):
        """Test latest-version read has no query string."""
        request = build_read_request(client_config, "secret/data/db-key", "tok")
        assert request.method == "GET"
        assert request.url == "https://vault.local:8200/v1/secret/data/db-key"
        assert request.body is None

    def test_version_query(self, client_config):
        """Test non-zero version is added as a query parameter."""
        request = build_read_request(client_config, "secret/data/db-key", "tok", 5)
        assert request.url == "https://vault.local:8200/v1/secret/data/db-key?version=5"

    def test_http_when_tls_disabled(self):
        """Test disabling TLS switches the scheme to http."""
        config = ClientConfig(server_name="127.0.0.1", port=8300, disable_tls=True)
        request = build_read_request(config, "secret/data/k", "tok")
        assert request.url == "http://127.0.0.1:8300/v1/secret/data/k"

    def test_token_header(self, client_config):
        """Test the token travels in the X-Vault-Token header."""
        request = build_read_request(client_config, "secret/data/k", "s.abc")
        assert request.headers[TOKEN_HEADER] == "s.abc"

    def test_path_passed_through(self, client_config):
        """Test the secret path is not rewritten."""
        request = build_read_request(client_config, "kv/data/team a/key", "tok")
        assert request.target == "/v1/kv/data/team a/key"

    def test_repr_hides_token(self, client_config):
        """Test the token does not leak through repr."""
        request = build_read_request(client_config, "secret/data/k", "s.very-secret")
        assert "s.very-secret" not in repr(request)


class TestBuildWriteRequest:
    """Tests for build_write_request."""

    def test_post_with_json_body(self, client_config):
        """Test write is a POST with the value wrapped in data."""
        request = build_write_request(client_config, "secret/data/db-key", "tok", "abc")
        assert request.operation is Operation.WRITE
        assert request.method == "POST"
        assert request.url == "https://vault.local:8200/v1/secret/data/db-key"
        assert json.loads(request.body) == {"data": {"value": "abc"}}
        assert request.headers[TOKEN_HEADER] == "tok"

    def test_value_with_quotes_and_control_chars(self, client_config):
        """Test special characters survive serialization intact."""
        value = 'a"b\\c\n\td}'
        request = build_write_request(client_config, "secret/data/k", "tok", value)
        assert json.loads(request.body)["data"]["value"] == value

    def test_write_never_has_version_query(self, client_config):
        """Test write URL carries no query string."""
        request = build_write_request(client_config, "secret/data/k", "tok", "v")
        assert "?" not in request.url
