"""HashiCorp Vault client implementation."""

from __future__ import annotations

import logging
import os
import ssl
import threading

from vaultkey.config import ClientConfig
from vaultkey.vault import envelope, transport
from vaultkey.vault.base import ConfigurationError, SecretValue, VaultClient
from vaultkey.vault.request import build_read_request, build_write_request
from vaultkey.vault.token import resolve_token
from vaultkey.vault.version import LATEST, parse_version, reconcile_version

logger = logging.getLogger(__name__)


class HashiCorpVaultClient(VaultClient):
    """HashiCorp Vault implementation.

    Talks to a KV v2 secrets engine, storing each secret under a single
    ``value`` key. Every call is one fresh round trip: nothing is cached
    and no connection outlives the call, so one instance may be shared
    between threads.

    Authentication is by token only, either given literally or read
    from a token file on every call.
    """

    def __init__(self, config: ClientConfig):
        """Initialize HashiCorp Vault client.

        Args:
            config: Connection settings for the vault server
        """
        self.config = config
        self._initialized = False
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """Check that the client can make TLS-verified requests.

        Safe to call more than once; only the first call does the work.

        Raises:
            ConfigurationError: If TLS support is missing or the CA file
                cannot be read
        """
        with self._lock:
            if self._initialized:
                return
            self._check_tls_support()
            self._check_ca_file()
            self._initialized = True
        logger.debug("Vault client ready for %s", self.config.server_name)

    def _check_tls_support(self) -> None:
        if not ssl.HAS_SNI or not ssl.OPENSSL_VERSION:
            raise ConfigurationError("Python ssl module lacks TLS support, cannot continue")

    def _check_ca_file(self) -> None:
        ca_file = self.config.server_ca_file
        if ca_file is None:
            return
        if not ca_file.is_file() or not os.access(ca_file, os.R_OK):
            raise ConfigurationError(f"Vault CA file {ca_file} is missing or unreadable")

    def is_initialized(self) -> bool:
        """Check if initialize() has completed."""
        return self._initialized

    def close(self) -> None:
        """Reset the client; the next call initializes it again."""
        with self._lock:
            self._initialized = False

    def get_secret(self, path: str, version: int = LATEST) -> SecretValue:
        """Retrieve a secret from HashiCorp Vault.

        Args:
            path: The secret path, e.g. ``secret/data/db-key``
            version: The version to fetch, 0 for the latest one

        Returns:
            SecretValue with the secret data. A secret that does not
            exist comes back with an empty value and version 0.
        """
        if version < 0:
            raise ValueError(f"Secret version must not be negative: {version}")
        self.ensure_initialized()

        token = resolve_token(self.config)
        request = build_read_request(self.config, path, token, version)
        logger.debug("Reading secret from %s", request.url)

        validated = envelope.validate_read_response(transport.send(request, self.config))
        if validated is None:
            logger.debug("Secret '%s' not found in Vault", path)
            return SecretValue(path=path, value="", version=LATEST)

        got = parse_version(validated.metadata, "data.metadata.version")
        reconcile_version(version, got)

        return SecretValue(
            path=path,
            value=validated.value,
            version=got,
            metadata={
                "created_time": validated.metadata.get("created_time"),
                "deletion_time": validated.metadata.get("deletion_time"),
                "destroyed": validated.metadata.get("destroyed", False),
            },
        )

    def set_secret(self, path: str, value: str) -> SecretValue:
        """Store ``value`` as a new version of the secret.

        Args:
            path: The secret path
            value: The secret value

        Returns:
            SecretValue carrying the version assigned by the vault
        """
        self.ensure_initialized()

        token = resolve_token(self.config)
        request = build_write_request(self.config, path, token, value)
        logger.debug("Writing secret to %s", request.url)

        data = envelope.validate_write_response(transport.send(request, self.config))
        version = parse_version(data, "data.version")

        return SecretValue(
            path=path,
            value=value,
            version=version,
            metadata={"created_time": data.get("created_time")},
        )
