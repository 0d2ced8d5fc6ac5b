"""
HTTP access to the MOTU datastore.

Every property lives at <address>/<property path>. Reads return
{"value": <number>}; writes are PATCHed form-encoded.
"""

from __future__ import annotations

import json
import logging
import math
from typing import TYPE_CHECKING, Self

import aiohttp

from .const import DEFAULT_TIMEOUT
from .errors import DecodeError, TransportError

if TYPE_CHECKING:
    from types import TracebackType

_LOGGER = logging.getLogger(__name__)


def _describe(err: BaseException) -> str:
    # Timeouts stringify to an empty message
    return str(err) or type(err).__name__


def normalize_address(address: str) -> str:
    """Return the base URL for a host, IP or URL, without a trailing slash."""
    address = address.strip()
    if "://" not in address:
        address = f"http://{address}"
    return address.rstrip("/")


def encode_value(value: float) -> dict[str, str]:
    """
    Build the form body for a property write.

    The API wants the value formatted as JSON under the key "value", and then
    form-encoded under the key "json".
    """
    return {"json": f'{{"value": {value:f}}}'}


def decode_value(body: str | bytes) -> float:
    """Extract the numeric value from a datastore GET response body."""
    try:
        parsed = json.loads(body)
    except ValueError as err:
        msg = f"failed to unmarshal response: {err}"
        raise DecodeError(msg) from err
    if not isinstance(parsed, dict):
        msg = f"unexpected response payload: {body!r}"
        raise DecodeError(msg)
    value = parsed.get("value")
    # bool is an int subclass but never a valid property value
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"response has no numeric value: {body!r}"
        raise DecodeError(msg)
    # json.loads accepts NaN and Infinity, and overflows 1e999 to inf
    if not math.isfinite(value):
        msg = f"response value is not finite: {body!r}"
        raise DecodeError(msg)
    return float(value)


class MotuConnection:
    """Read and write single numeric properties on a MOTU interface."""

    def __init__(
        self,
        address: str,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize a connection to the MOTU interface at address."""
        self.address = normalize_address(address)
        self._session = session
        self._owns_session = session is None
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def __aenter__(self) -> Self:
        """Enter the async context."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close the owned session on exit."""
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this connection created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def url_for(self, prop: str) -> str:
        """Return the URL of a datastore property."""
        return f"{self.address}/{prop.lstrip('/')}"

    async def get(self, prop: str) -> float:
        """Return the current value of a property."""
        url = self.url_for(prop)
        _LOGGER.debug("GET %s", url)
        try:
            async with self._get_session().get(
                url, timeout=self._timeout
            ) as response:
                response.raise_for_status()
                body = await response.read()
        except (aiohttp.ClientError, TimeoutError) as err:
            msg = f"failed to get property value: {_describe(err)}"
            raise TransportError(msg) from err

        _LOGGER.debug("Raw response for %s: %r", prop, body)
        return decode_value(body)

    async def patch(self, prop: str, value: float) -> None:
        """Write a new value to a property; the range is not checked here."""
        url = self.url_for(prop)
        data = encode_value(value)
        _LOGGER.debug("PATCH %s %s", url, data)
        try:
            async with self._get_session().patch(
                url, data=data, timeout=self._timeout
            ) as response:
                response.raise_for_status()
        except (aiohttp.ClientError, TimeoutError) as err:
            msg = f"failed to make request: {_describe(err)}"
            raise TransportError(msg) from err

        _LOGGER.info("Set %s to %f", prop, value)
