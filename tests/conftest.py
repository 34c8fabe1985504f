"""Pytest configuration for Pioneer AVR tests."""
from __future__ import annotations

import copy

import pytest

from custom_components.pioneer_avr.exceptions import TransportError
from custom_components.pioneer_avr.pioneer_client import PioneerClient
from custom_components.pioneer_avr.transport import TransportResponse, decode_json

HOST = "192.168.1.50"

STATUS_PAYLOAD = {
    "S": 1,
    "B": 0,
    "Z": [
        {"P": 1, "V": 121, "M": 0, "I": [20, 19], "C": 0},
        {"P": 0, "V": 0, "M": 0, "I": [], "C": 0},
    ],
    "L": 0,
    "A": 0,
    "IL": ["BD", "HDMI 2"],
    "LC": "VSX-1021",
    "MA": 0,
    "MS": "STEREO",
    "MC": 0,
    "HP": 0,
    "HM": 0,
    "DM": [],
    "H": 0,
}


class FakeTransport:
    """In-memory transport recording every URL it is asked to fetch.

    Status requests are answered from ``status`` (a dict, a raw string, or a
    TransportResponse); command requests answer ``command_response``.
    Setting ``error`` makes every fetch raise it.
    """

    def __init__(self, status=None) -> None:
        self.status = copy.deepcopy(STATUS_PAYLOAD) if status is None else status
        self.command_response = TransportResponse(ok=True, status=200)
        self.error: Exception | None = None
        self.urls: list[str] = []

    @property
    def commands(self) -> list[str]:
        """Tokens of the commands sent, in order."""
        return [
            url.split("WebToHostItem=", 1)[1]
            for url in self.urls
            if "WebToHostItem=" in url
        ]

    @property
    def status_polls(self) -> int:
        return sum(1 for url in self.urls if url.endswith("/StatusHandler.asp"))

    async def fetch(self, url: str) -> TransportResponse:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        if "WebToHostItem=" in url:
            return self.command_response
        if isinstance(self.status, TransportResponse):
            return self.status
        if isinstance(self.status, str):
            return TransportResponse(
                ok=True, status=200, text=self.status, body=decode_json(self.status)
            )
        return TransportResponse(ok=True, status=200, text="", body=self.status)


@pytest.fixture
def status_payload() -> dict:
    return copy.deepcopy(STATUS_PAYLOAD)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> PioneerClient:
    return PioneerClient(HOST, transport)


@pytest.fixture
def unreachable(transport: FakeTransport) -> FakeTransport:
    transport.error = TransportError("Timeout requesting receiver")
    return transport
