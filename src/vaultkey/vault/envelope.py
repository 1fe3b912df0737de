"""Validate Vault KV v2 response envelopes.

Read responses look like::

    {"data": {"metadata": {"version": 3}, "data": {"value": "k3y"}}}

while write responses carry the version directly under ``data``::

    {"data": {"version": 4}}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from vaultkey.vault.base import RemoteError, ResponseFormatError
from vaultkey.vault.request import Operation
from vaultkey.vault.transport import RawResponse

NOT_FOUND = 404


@dataclass(frozen=True)
class ReadEnvelope:
    """Validated parts of a read response."""

    metadata: dict[str, Any]
    value: str


def is_success(status_code: int) -> bool:
    return status_code // 100 == 2


def _check_status(response: RawResponse, operation: Operation) -> None:
    if not is_success(response.status_code):
        raise RemoteError(response.status_code, operation.action)


def _decode(body: bytes) -> Any:
    try:
        return json.loads(body)
    except ValueError as e:
        raise ResponseFormatError("malformed body") from e


def _object(node: Any, key: str) -> dict[str, Any] | None:
    value = node.get(key) if isinstance(node, dict) else None
    return value if isinstance(value, dict) else None


def _data(document: Any) -> dict[str, Any]:
    data = _object(document, "data")
    if data is None:
        raise ResponseFormatError("missing data")
    return data


def validate_read_response(response: RawResponse) -> ReadEnvelope | None:
    """Validate a read response.

    Returns:
        The envelope parts, or None when the secret does not exist (404)

    Raises:
        RemoteError: For any other non-2xx status
        ResponseFormatError: If the body does not have the read shape
    """
    if response.status_code == NOT_FOUND:
        return None
    _check_status(response, Operation.READ)

    data = _data(_decode(response.body))

    metadata = _object(data, "metadata")
    if metadata is None:
        raise ResponseFormatError("'data.metadata' is missing or is not an object")

    inner = _object(data, "data")
    value = inner.get("value") if inner is not None else None
    if not isinstance(value, str):
        raise ResponseFormatError("missing or invalid value")

    return ReadEnvelope(metadata=metadata, value=value)


def validate_write_response(response: RawResponse) -> dict[str, Any]:
    """Validate a write response and return its ``data`` object.

    Raises:
        RemoteError: For any non-2xx status, 404 included
        ResponseFormatError: If the body does not have the write shape
    """
    _check_status(response, Operation.WRITE)
    return _data(_decode(response.body))
