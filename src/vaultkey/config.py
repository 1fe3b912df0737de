"""Configuration for the vault client.

Values come from a ``vaultkey.toml`` file (``[vault]`` table) and from
``VAULTKEY_*`` environment variables. Example::

    [vault]
    server_name = "vault.local"
    port = 8200
    server_ca_file = "/etc/ssl/vault-ca.pem"
    token_file = "/run/secrets/vault-token"
    timeout = 15
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from vaultkey.vault.base import ConfigurationError

CONFIG_FILENAME = "vaultkey.toml"


class ConfigNotFoundError(ConfigurationError):
    """Configuration file does not exist."""

    pass


class ClientConfig(BaseSettings):
    """Connection settings for the secret store."""

    model_config = SettingsConfigDict(
        env_prefix="VAULTKEY_",
        extra="forbid",
        frozen=True,
    )

    server_name: str = Field(min_length=1)
    port: int = Field(default=8200, ge=1, le=65535)
    disable_tls: bool = False
    server_ca_file: Path | None = None
    token: SecretStr | None = None
    token_file: Path | None = None
    timeout: int = Field(default=15, gt=0)

    @property
    def scheme(self) -> str:
        """URL scheme implied by the TLS toggle."""
        return "http" if self.disable_tls else "https"


def _build(**values: Any) -> ClientConfig:
    try:
        return ClientConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid vault configuration: {e}") from e


def config_from_env() -> ClientConfig:
    """Build the configuration from ``VAULTKEY_*`` environment variables."""
    return _build()


def find_config(start: Path | None = None) -> Path | None:
    """Find vaultkey.toml in start or any of its parents.

    Args:
        start: Directory to start searching from (default: cwd)

    Returns:
        Path to the config file, or None if there is none
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path) -> ClientConfig:
    """Load configuration from a TOML file.

    Keys missing from the ``[vault]`` table are taken from the environment.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigurationError: If the file cannot be parsed or is invalid
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

    section = data.get("vault", {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"'vault' in {path} must be a table")

    return _build(**section)
