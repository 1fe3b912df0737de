"""Vault client interfaces."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from vaultkey.vault.base import (
    ConfigurationError,
    RemoteError,
    ResponseFormatError,
    SecretValue,
    TransportError,
    VaultClient,
    VaultError,
    VersionError,
    VersionMismatchError,
)

if TYPE_CHECKING:
    from vaultkey.config import ClientConfig


class VaultProvider(Enum):
    """Supported vault providers."""

    HASHICORP = "hashicorp"


def get_vault_client(
    provider: VaultProvider | str, config: ClientConfig
) -> VaultClient:
    """Factory to create vault client.

    Args:
        provider: The vault provider to use
        config: Connection settings

    Returns:
        Configured VaultClient instance

    Raises:
        ValueError: If provider is not supported
    """
    if isinstance(provider, str):
        provider = VaultProvider(provider)

    if provider == VaultProvider.HASHICORP:
        from vaultkey.vault.hashicorp import HashiCorpVaultClient

        return HashiCorpVaultClient(config)

    raise ValueError(f"Unsupported vault provider: {provider}")


__all__ = [
    "ConfigurationError",
    "RemoteError",
    "ResponseFormatError",
    "SecretValue",
    "TransportError",
    "VaultClient",
    "VaultError",
    "VaultProvider",
    "VersionError",
    "VersionMismatchError",
    "get_vault_client",
]
