"""Extract and check secret versions from Vault responses."""

from __future__ import annotations

from typing import Any

from vaultkey.vault.base import VersionError, VersionMismatchError

# 0 asks the vault for the latest version
LATEST = 0


def parse_version(node: dict[str, Any], path: str, key: str = "version") -> int:
    """Return ``node[key]`` as a validated secret version.

    Args:
        node: The envelope object holding the version field
        path: Dotted envelope path of the field, for error messages
        key: Name of the field inside ``node``

    Raises:
        VersionError: If the field is missing, not an integer, or not positive
    """
    if key not in node:
        raise VersionError("is missing", path)
    version = node[key]
    # bool is an int subclass but never a valid version
    if isinstance(version, bool) or not isinstance(version, int):
        raise VersionError("is not an integer", path)
    if version <= 0:
        raise VersionError("does not have a positive value", path)
    return version


def reconcile_version(requested: int, got: int) -> int:
    """Check ``got`` against an explicitly requested version."""
    if requested != LATEST and got != requested:
        raise VersionMismatchError(requested, got)
    return got
