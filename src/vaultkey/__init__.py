"""Versioned secret client for HashiCorp Vault.

vaultkey helps a server process:
- Fetch an encryption key at startup, optionally pinned to a version
- Rotate a key by writing a new version
- Tell a missing secret apart from transport, format and version failures
"""

__version__ = "0.1.0"

from vaultkey.api import read_key, write_key

__all__ = ["__version__", "read_key", "write_key"]
