"""Abstract base class and error types for vault clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


class VaultError(Exception):
    """Base exception for vault operations."""

    pass


class ConfigurationError(VaultError):
    """Required configuration is missing, invalid, or unreadable."""

    pass


class TransportError(VaultError):
    """The HTTP round trip to the vault failed (DNS, TLS, refused, timeout)."""

    pass


class RemoteError(VaultError):
    """The vault answered with a non-success HTTP status."""

    def __init__(self, status_code: int, action: str = "accessing key in"):
        self.status_code = status_code
        super().__init__(f"Error {action} the Vault; HTTP code: {status_code}")


class ResponseFormatError(VaultError):
    """The response body does not match the expected envelope."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid Vault response: {reason}")


class VersionError(VaultError):
    """The version field of a response is missing or invalid."""

    def __init__(self, reason: str, path: str = "version"):
        self.reason = reason
        self.path = path
        super().__init__(
            f"Invalid Vault response: '{path}' {reason}. "
            "Please make sure the secret is stored in the engine of the `kv-v2` type."
        )


class VersionMismatchError(VaultError):
    """The vault returned a different version than the one requested."""

    def __init__(self, requested: int, got: int):
        self.requested = requested
        self.got = got
        super().__init__(
            f"Invalid Vault response: requested the key of version {requested} "
            f"but got version {got}"
        )


@dataclass
class SecretValue:
    """Value retrieved from or written to the vault.

    A secret that does not exist is represented by an empty value with
    version 0. Unpacks as ``value, version``.
    """

    path: str
    value: str
    version: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        """Check if the vault actually holds this secret."""
        return self.version > 0

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.version

    def __str__(self) -> str:
        """Return masked representation."""
        return f"SecretValue(path={self.path}, value=****, version={self.version})"


class VaultClient(ABC):
    """Abstract interface for vault backends.

    Implementations must provide:
    - get_secret: Retrieve a secret, optionally pinned to a version
    - set_secret: Store a new secret version
    - is_initialized: Check whether the transport checks have run
    - initialize: Run the one-time transport checks
    """

    @abstractmethod
    def get_secret(self, path: str, version: int = 0) -> SecretValue:
        """Retrieve a secret by path.

        Args:
            path: The path of the secret, e.g. ``secret/data/db-key``
            version: The version to fetch, 0 for the latest one

        Returns:
            SecretValue with the secret data; empty value and version 0
            when the secret does not exist

        Raises:
            TransportError: If the vault cannot be reached
            RemoteError: If the vault answers with an error status
            ResponseFormatError: If the response envelope is malformed
            VersionError: If the version field is missing or invalid
            VersionMismatchError: If a different version came back
        """
        ...

    @abstractmethod
    def set_secret(self, path: str, value: str) -> SecretValue:
        """Store a new version of a secret.

        Args:
            path: The path of the secret
            value: The secret value

        Returns:
            SecretValue carrying the version assigned by the vault
        """
        ...

    @abstractmethod
    def is_initialized(self) -> bool:
        """Check if the client is ready to talk to the vault.

        Returns:
            True if initialized, False otherwise
        """
        ...

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the client for use.

        Raises:
            ConfigurationError: If the client cannot be used as configured
        """
        ...

    def close(self) -> None:
        """Release anything acquired by initialize()."""

    def get_secret_value(self, path: str, version: int = 0) -> str:
        """Convenience method to get just the secret value.

        Args:
            path: The path of the secret
            version: The version to fetch, 0 for the latest one

        Returns:
            The secret value as a string
        """
        return self.get_secret(path, version).value

    def ensure_initialized(self) -> None:
        """Ensure client is initialized, initializing if needed.

        Raises:
            ConfigurationError: If initialization fails
        """
        if not self.is_initialized():
            self.initialize()

    def __enter__(self) -> VaultClient:
        self.ensure_initialized()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
