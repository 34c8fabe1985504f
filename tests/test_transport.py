"""Tests for the aiohttp transport."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from custom_components.pioneer_avr.exceptions import MalformedResponse, TransportError
from custom_components.pioneer_avr.pioneer_client import PioneerClient
from custom_components.pioneer_avr.transport import (
    AiohttpTransport,
    decode_body,
    decode_json,
)

URL = "http://192.168.1.50/StatusHandler.asp"


def _mock_session(
    status: int = 200, text: str | bytes = "", enter_error=None, charset=None
) -> MagicMock:
    """Session whose get() yields a response with the given status and body."""
    resp = MagicMock()
    resp.status = status
    resp.charset = charset
    resp.read = AsyncMock(
        return_value=text if isinstance(text, bytes) else text.encode("utf-8")
    )

    ctx = MagicMock()
    if enter_error is not None:
        ctx.__aenter__ = AsyncMock(side_effect=enter_error)
    else:
        ctx.__aenter__ = AsyncMock(return_value=resp)
    ctx.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.get = MagicMock(return_value=ctx)
    return session


@pytest.mark.asyncio
async def test_fetch_json_body():
    session = _mock_session(text='{"Z": [{"P": 1, "V": 10, "M": 0}]}')
    response = await AiohttpTransport(session).fetch(URL)

    assert response.ok
    assert response.status == 200
    assert response.body == {"Z": [{"P": 1, "V": 10, "M": 0}]}
    session.get.assert_called_once()
    assert session.get.call_args.args == (URL,)
    assert isinstance(session.get.call_args.kwargs["timeout"], aiohttp.ClientTimeout)


@pytest.mark.asyncio
async def test_fetch_empty_body_is_success_without_json():
    response = await AiohttpTransport(_mock_session(text="")).fetch(URL)

    assert response.ok
    assert not response.has_json


@pytest.mark.asyncio
async def test_fetch_http_error_is_returned_not_raised():
    response = await AiohttpTransport(_mock_session(status=503, text="busy")).fetch(URL)

    assert not response.ok
    assert response.status == 503
    assert response.text == "busy"


@pytest.mark.asyncio
async def test_fetch_connection_error():
    session = MagicMock()
    session.get = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))

    with pytest.raises(TransportError) as exc_info:
        await AiohttpTransport(session).fetch(URL)
    assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)


@pytest.mark.asyncio
async def test_fetch_timeout():
    session = _mock_session(enter_error=asyncio.TimeoutError())

    with pytest.raises(TransportError):
        await AiohttpTransport(session, timeout=1).fetch(URL)


def test_decode_json():
    assert decode_json('{"a": 1}') == {"a": 1}
    assert decode_json("  ") is None
    assert decode_json("<html></html>") is None


@pytest.mark.asyncio
async def test_fetch_undecodable_body_has_no_json():
    session = _mock_session(text=b'{"Z": [{"P": 1, "V": 10, "M": 0, "X": "\xff\xfe"}]}')
    response = await AiohttpTransport(session).fetch(URL)

    assert response.ok
    assert not response.has_json
    assert "\ufffd" in response.text


@pytest.mark.asyncio
async def test_fetch_uses_response_charset():
    session = _mock_session(text='{"LC": "caf\xe9"}'.encode("latin-1"), charset="iso-8859-1")
    response = await AiohttpTransport(session).fetch(URL)

    assert response.body == {"LC": "caf\xe9"}


@pytest.mark.asyncio
async def test_status_with_undecodable_body_is_malformed():
    session = _mock_session(text=b"\xff\xfe garbage")
    client = PioneerClient("192.168.1.50", AiohttpTransport(session))

    with pytest.raises(MalformedResponse):
        await client.get_status()


def test_decode_body():
    assert decode_body(b'{"a": 1}') == ('{"a": 1}', {"a": 1})
    assert decode_body(b"\xff", "utf-8")[1] is None
    assert decode_body(b"{}", "no-such-charset")[1] is None
