"""HTTP transport for the Pioneer web control interface."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import json
import logging
from typing import Any

from aiohttp import ClientError, ClientSession, ClientTimeout

from .const import DEFAULT_TIMEOUT
from .exceptions import TransportError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Outcome of one HTTP request."""

    ok: bool
    status: int
    text: str = ""
    body: Any = None  # decoded JSON, None if empty or not JSON

    @property
    def has_json(self) -> bool:
        return self.body is not None


def decode_json(text: str) -> Any:
    """Decode a JSON body; empty or invalid bodies give None."""
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        _LOGGER.debug("Response is not JSON: %s", text[:200])
        return None


def decode_body(data: bytes, charset: str | None = None) -> tuple[str, Any]:
    """Decode raw body bytes to text and JSON.

    Bytes that do not decode give a replacement-character text and no JSON.
    """
    try:
        text = data.decode(charset or "utf-8")
    except (UnicodeDecodeError, LookupError):
        _LOGGER.debug("Response is not %s text", charset or "utf-8")
        return data.decode("utf-8", errors="replace"), None
    return text, decode_json(text)


class AiohttpTransport:
    """Performs GET requests with a shared aiohttp session."""

    def __init__(
        self, session: ClientSession, timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        """Initialize the transport."""
        self._session = session
        self._timeout = ClientTimeout(total=timeout)

    async def fetch(self, url: str) -> TransportResponse:
        """GET a URL.

        Connection errors and timeouts raise TransportError; any HTTP answer,
        successful or not, is returned as a TransportResponse.
        """
        try:
            async with self._session.get(url, timeout=self._timeout) as resp:
                # StatusHandler.asp does not send a JSON content type
                text, body = decode_body(await resp.read(), resp.charset)
                return TransportResponse(
                    ok=200 <= resp.status < 300,
                    status=resp.status,
                    text=text,
                    body=body,
                )
        except asyncio.TimeoutError as err:
            raise TransportError(f"Timeout requesting {url}") from err
        except ClientError as err:
            raise TransportError(f"Error requesting {url}: {err}") from err
