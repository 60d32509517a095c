"""
JSON-RPC invocation capability.

The client facade depends only on `Caller`: invoke a method name with
positional params, get the JSON-RPC `result` back.  `HttpCaller` is the
httpx implementation used in production; tests substitute a fake.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Optional, Protocol

import httpx

from ..config import get_rpc_timeout, get_rpc_url, load_env
from ..utils import bytes_to_hex
from .abi import CallArgs

package_logger = logging.getLogger("oraculum")
logger = package_logger.getChild("rpc")


class InvocationError(RuntimeError):
    def __init__(self, message: str, code: Optional[int] = None, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.data = data


class Caller(Protocol):
    """Anything that can invoke a JSON-RPC method and return its result."""

    def call(self, method: str, *args: Any) -> Any:
        ...


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, CallArgs):
        return value.to_params()
    if isinstance(value, (bytes, bytearray)):
        return bytes_to_hex(bytes(value))
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    return value


class HttpCaller:
    """
    JSON-RPC 2.0 over HTTP POST.

    Args:
        url: RPC endpoint URL (default: ETH_URL or localhost; missing
            settings are first loaded from ~/.oraculum/.env)
        timeout: Per-request timeout in seconds (default: ETH_RPC_TIMEOUT or 30)
        transport: Optional httpx transport (e.g. httpx.MockTransport)
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if url is None or timeout is None:
            load_env()
        self.url = url or get_rpc_url()
        self.timeout = timeout if timeout is not None else get_rpc_timeout()
        self.transport = transport
        self._ids = itertools.count(1)

    def call(self, method: str, *args: Any) -> Any:
        """
        Make a JSON-RPC call.

        Returns:
            Result field from the RPC response

        Raises:
            InvocationError: On transport failure or an RPC error response
        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": _to_jsonable(list(args)),
            "id": next(self._ids),
        }
        logger.debug("-> %s %s", method, payload["params"])

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.url, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            raise InvocationError(f"{method} failed: {exc}") from exc
        except ValueError as exc:
            raise InvocationError(f"{method} returned invalid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise InvocationError(f"{method} returned a non-object response: {data!r}")

        error = data.get("error")
        if error is not None:
            logger.warning("RPC error from %s: %s", method, error)
            if isinstance(error, dict):
                raise InvocationError(
                    f"RPC error: {error.get('message', error)}",
                    code=error.get("code"),
                    data=error.get("data"),
                )
            raise InvocationError(f"RPC error: {error}")

        return data.get("result")
