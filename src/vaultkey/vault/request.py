"""Build HTTP requests against the Vault KV API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum

from vaultkey.config import ClientConfig

TOKEN_HEADER = "X-Vault-Token"
API_PREFIX = "/v1/"


class Operation(Enum):
    """Kind of request sent to the vault."""

    READ = "read"
    WRITE = "write"

    @property
    def method(self) -> str:
        return "GET" if self is Operation.READ else "POST"

    @property
    def action(self) -> str:
        """Phrase used in error messages."""
        return "reading key from" if self is Operation.READ else "writing key to"


@dataclass(frozen=True)
class VaultRequest:
    """Fully-formed request, ready to hand to the transport."""

    operation: Operation
    base_uri: str
    target: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None

    @property
    def method(self) -> str:
        return self.operation.method

    @property
    def url(self) -> str:
        return f"{self.base_uri}{self.target}"

    def __repr__(self) -> str:
        # keep the token out of logs and tracebacks
        return f"VaultRequest(method={self.method}, url={self.url})"


def base_uri(config: ClientConfig) -> str:
    """Return ``<scheme>://<host>:<port>`` for the configured server."""
    return f"{config.scheme}://{config.server_name}:{config.port}"


def build_read_request(
    config: ClientConfig, path: str, token: str, version: int = 0
) -> VaultRequest:
    """Build a GET for a secret, pinned to ``version`` when it is non-zero."""
    target = f"{API_PREFIX}{path}"
    if version > 0:
        target += f"?version={version}"
    return VaultRequest(
        operation=Operation.READ,
        base_uri=base_uri(config),
        target=target,
        headers={TOKEN_HEADER: token},
    )


def build_write_request(
    config: ClientConfig, path: str, token: str, value: str
) -> VaultRequest:
    """Build a POST storing ``value`` as a new version of the secret."""
    body = json.dumps({"data": {"value": value}}).encode("utf-8")
    return VaultRequest(
        operation=Operation.WRITE,
        base_uri=base_uri(config),
        target=f"{API_PREFIX}{path}",
        headers={TOKEN_HEADER: token, "Content-Type": "application/json"},
        body=body,
    )
