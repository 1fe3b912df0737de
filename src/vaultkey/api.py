"""Key retrieval and rotation entry points for embedding processes."""

from __future__ import annotations

from vaultkey.config import ClientConfig, config_from_env
from vaultkey.vault.hashicorp import HashiCorpVaultClient


def read_key(
    path: str, version: int = 0, config: ClientConfig | None = None
) -> tuple[str, int]:
    """Read an encryption key from the vault.

    Args:
        path: The secret path, e.g. ``secret/data/db-key``
        version: The version to fetch, 0 for the latest one
        config: Connection settings (default: from VAULTKEY_* variables)

    Returns:
        ``(value, version)``; ``("", 0)`` when the secret does not exist
    """
    with HashiCorpVaultClient(config or config_from_env()) as client:
        value, got = client.get_secret(path, version)
    return value, got


def write_key(path: str, value: str, config: ClientConfig | None = None) -> int:
    """Store a new version of an encryption key and return that version."""
    with HashiCorpVaultClient(config or config_from_env()) as client:
        return client.set_secret(path, value).version
