"""Pioneer AVR web control client."""

from __future__ import annotations

import logging
from typing import Literal, Protocol

from . import commands
from .commands import Command, Direction, InputSelector, SoundSetting
from .const import COMMAND_PARAM, COMMAND_PATH, DEFAULT_PORT, STATUS_PATH
from .exceptions import MalformedResponse, TransportError, ValidationError
from .models import DeviceStatus
from .transport import TransportResponse
from .volume import volume_to_db

_LOGGER = logging.getLogger(__name__)


class Transport(Protocol):
    """Delivers one GET request to the receiver."""

    async def fetch(self, url: str) -> TransportResponse:
        ...


class PioneerClient:
    """Pioneer AVR client over the receiver's web control endpoints.

    The client keeps no device state: every operation that depends on the
    current state polls the receiver first. Toggles read then act, so a change
    made between the poll and the send (by a remote, or by another caller)
    is not detected. Callers that need stronger guarantees must serialize
    toggles per device themselves.
    """

    def __init__(
        self, host: str, transport: Transport, port: int = DEFAULT_PORT
    ) -> None:
        """Initialize the Pioneer client."""
        self.host = host
        self.port = port
        self._transport = transport
        netloc = host if port == DEFAULT_PORT else f"{host}:{port}"
        self._base_url = f"http://{netloc}"

    @property
    def status_url(self) -> str:
        return f"{self._base_url}{STATUS_PATH}"

    def command_url(self, command: Command) -> str:
        return f"{self._base_url}{COMMAND_PATH}?{COMMAND_PARAM}={command.token}"

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def send_command(self, command: Command) -> None:
        """Send a command to the Pioneer AVR."""
        _LOGGER.debug("Sending command to %s: %s", self.host, command.token)
        response = await self._transport.fetch(self.command_url(command))
        if not response.ok:
            raise TransportError(
                f"Command {command.token} rejected with HTTP {response.status}"
            )

    async def get_status(self) -> DeviceStatus:
        """Poll the receiver status."""
        response = await self._transport.fetch(self.status_url)
        if not response.ok:
            raise TransportError(f"Status request failed with HTTP {response.status}")
        if not response.has_json:
            raise MalformedResponse(
                f"Status response is not JSON: {response.text[:200]!r}"
            )
        status = DeviceStatus.from_json(response.body)
        _LOGGER.debug(
            "Status from %s: power=%s volume=%s mute=%s input=%s",
            self.host,
            status.power,
            status.volume,
            status.mute,
            status.input_code,
        )
        return status

    # ------------------------------------------------------------------
    # Power
    # ------------------------------------------------------------------

    async def power_on(self) -> None:
        await self.send_command(commands.encode_power(True))

    async def power_off(self) -> None:
        await self.send_command(commands.encode_power(False))

    async def toggle_power(self) -> None:
        """Turn off if the main zone is on, otherwise turn on."""
        status = await self.get_status()
        await self.send_command(commands.encode_power(not status.power))

    # ------------------------------------------------------------------
    # Volume
    # ------------------------------------------------------------------

    async def set_volume(self, raw: int) -> None:
        """Set the volume on the raw 0-185 scale.

        Raises OutOfRange (a ValidationError) without contacting the receiver
        when the value is outside the scale.
        """
        await self.send_command(commands.encode_volume_set(raw))

    async def get_volume(self, fmt: Literal["raw", "db"] = "raw") -> int | float:
        """Return the main zone volume, raw or in dB."""
        if fmt not in ("raw", "db"):
            raise ValidationError(f"Volume format must be 'raw' or 'db', got {fmt!r}")
        status = await self.get_status()
        if fmt == "db":
            return volume_to_db(status.volume)
        return status.volume

    async def _step_volume(self, direction: Direction, steps: int) -> None:
        if isinstance(steps, bool) or not isinstance(steps, int) or steps < 0:
            raise ValidationError(f"Steps must be a non-negative integer, got {steps!r}")
        command = commands.encode_volume_step(direction)
        # one unit per token, each send completes before the next
        for _ in range(steps):
            await self.send_command(command)

    async def volume_up(self, steps: int = 1) -> None:
        await self._step_volume(Direction.UP, steps)

    async def volume_down(self, steps: int = 1) -> None:
        await self._step_volume(Direction.DOWN, steps)

    async def mute(self) -> None:
        await self.send_command(commands.encode_mute(True))

    async def unmute(self) -> None:
        await self.send_command(commands.encode_mute(False))

    async def toggle_mute(self) -> None:
        """Unmute if the main zone is muted, otherwise mute."""
        status = await self.get_status()
        await self.send_command(commands.encode_mute(not status.mute))

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    async def set_input(self, selector: InputSelector | str) -> None:
        await self.send_command(commands.encode_input(selector))

    async def input_next(self) -> None:
        await self.send_command(commands.encode_input_next())

    async def input_prev(self) -> None:
        await self.send_command(commands.encode_input_prev())

    # ------------------------------------------------------------------
    # Tone
    # ------------------------------------------------------------------

    async def bass_up(self) -> None:
        await self.send_command(commands.encode_bass(Direction.UP))

    async def bass_down(self) -> None:
        await self.send_command(commands.encode_bass(Direction.DOWN))

    async def treble_up(self) -> None:
        await self.send_command(commands.encode_treble(Direction.UP))

    async def treble_down(self) -> None:
        await self.send_command(commands.encode_treble(Direction.DOWN))

    # ------------------------------------------------------------------
    # Sound modes
    # ------------------------------------------------------------------

    async def set_mode(self, setting: SoundSetting | str, mode: str) -> None:
        """Set any sound setting by name."""
        await self.send_command(commands.encode_mode(setting, mode))

    async def set_dialog_enhancement_mode(self, mode: str) -> None:
        await self.send_command(commands.encode_dialog_enhancement(mode))

    async def set_pqls_mode(self, mode: str) -> None:
        await self.send_command(commands.encode_pqls(mode))

    async def set_eq_mode(self, mode: str) -> None:
        await self.send_command(commands.encode_eq(mode))

    async def set_standing_wave_mode(self, mode: str) -> None:
        await self.send_command(commands.encode_standing_wave(mode))

    async def set_phase_control_mode(self, mode: str) -> None:
        await self.send_command(commands.encode_phase_control(mode))

    async def set_tone_mode(self, mode: str) -> None:
        await self.send_command(commands.encode_tone(mode))

    async def set_auto_sound_retriever_mode(self, mode: str) -> None:
        await self.send_command(commands.encode_auto_sound_retriever(mode))

    async def set_digital_noise_reduction_mode(self, mode: str) -> None:
        await self.send_command(commands.encode_digital_noise_reduction(mode))
