"""Perform Vault requests over TLS-verified HTTP."""

from __future__ import annotations

import logging
from contextlib import closing
from dataclasses import dataclass

import hvac.adapters
import requests

from vaultkey.config import ClientConfig
from vaultkey.vault.base import TransportError
from vaultkey.vault.request import VaultRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of a Vault response."""

    status_code: int
    body: bytes


def tls_verify(config: ClientConfig) -> bool | str:
    """Return the ``verify`` argument for requests.

    Peer and host verification always stay on; a CA file only replaces
    the system trust store.
    """
    if config.server_ca_file is not None:
        return str(config.server_ca_file)
    return True


def send(request: VaultRequest, config: ClientConfig) -> RawResponse:
    """Send ``request`` and collect the raw response.

    A fresh adapter (and HTTP session) is used for every call and closed
    on the way out, whatever happens.

    Raises:
        TransportError: On DNS, TLS, connection or timeout failures
    """
    adapter = hvac.adapters.RawAdapter(
        base_uri=request.base_uri,
        verify=tls_verify(config),
        timeout=(config.timeout, config.timeout),
    )
    with closing(adapter):
        try:
            response = adapter.request(
                request.method,
                request.target,
                headers=dict(request.headers),
                raise_exception=False,
                data=request.body,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Error {request.operation.action} the Vault: {e}"
            ) from e

    logger.debug("HTTP code (%s): %s", request.method, response.status_code)
    return RawResponse(status_code=response.status_code, body=response.content)
