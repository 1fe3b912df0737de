"""Resolve the Vault token for a request."""

from __future__ import annotations

from vaultkey.config import ClientConfig
from vaultkey.vault.base import ConfigurationError


def resolve_token(config: ClientConfig) -> str:
    """Return the token to send in the X-Vault-Token header.

    A non-empty literal token wins; otherwise the token file is read.
    The file is read again on every call.

    Raises:
        ConfigurationError: If no token is configured, or the token file
            is missing, unreadable, or empty
    """
    if config.token is not None:
        token = config.token.get_secret_value()
        if token:
            return token

    if config.token_file is None:
        raise ConfigurationError("No Vault token configured. Set token or token_file.")

    try:
        token = config.token_file.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read Vault token from {config.token_file}: {e}"
        ) from e

    if not token:
        raise ConfigurationError(f"Vault token file {config.token_file} is empty")
    return token
