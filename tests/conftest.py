"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
import os
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from vaultkey.config import ClientConfig


def _make_response(status_code: int = 200, payload=None, body: bytes | None = None):
    """Fake requests.Response as returned by the hvac raw adapter."""
    if body is None:
        body = json.dumps(payload).encode("utf-8") if payload is not None else b""
    return SimpleNamespace(status_code=status_code, content=body)


def _read_payload(value="k3y", version=3):
    """KV v2 read response body."""
    return {
        "data": {
            "metadata": {"version": version, "created_time": "2024-01-01T00:00:00Z"},
            "data": {"value": value},
        }
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep VAULTKEY_* variables from the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("VAULTKEY_"):
            monkeypatch.delenv(name)


@pytest.fixture
def client_config():
    """Config with a literal token."""
    return ClientConfig(server_name="vault.local", port=8200, token="s.test-token")


@pytest.fixture
def token_file(tmp_path):
    """Token file holding a token with a trailing newline."""
    path = tmp_path / "vault-token"
    path.write_text("s.file-token\n")
    return path


@pytest.fixture
def mock_adapter():
    """Patch the hvac raw adapter and yield the instance used per call."""
    adapter = MagicMock()
    adapter.request.return_value = _make_response(200, _read_payload())
    with patch("hvac.adapters.RawAdapter", return_value=adapter) as adapter_cls:
        adapter.cls = adapter_cls
        yield adapter


@pytest.fixture
def make_response():
    """Factory for fake adapter responses."""
    return _make_response


@pytest.fixture
def read_payload():
    """Factory for KV v2 read response bodies."""
    return _read_payload
