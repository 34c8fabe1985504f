"""Media player platform for Pioneer AVR."""

from collections.abc import Awaitable
from datetime import timedelta
import logging
from typing import Any

import voluptuous as vol

from homeassistant.components.media_player import (
    MediaPlayerEntity,
    MediaPlayerEntityFeature,
    MediaPlayerState,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST, CONF_NAME
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import entity_platform
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import (
    ATTR_INPUT_CODE,
    ATTR_STEPS,
    ATTR_VOLUME_DB,
    ATTR_VOLUME_DISPLAY,
    ATTR_VOLUME_RAW,
    DOMAIN,
    SCAN_INTERVAL as SCAN_INTERVAL_SECONDS,
    SERVICE_TOGGLE_MUTE,
    SERVICE_VOLUME_STEP_DOWN,
    SERVICE_VOLUME_STEP_UP,
    SOURCE_NAMES,
    SOURCES,
)
from .exceptions import PioneerError
from .models import DeviceStatus
from .pioneer_client import PioneerClient
from .volume import format_volume, level_to_raw, raw_to_level, volume_to_db

_LOGGER = logging.getLogger(__name__)

SCAN_INTERVAL = timedelta(seconds=SCAN_INTERVAL_SECONDS)

STEPS_SCHEMA = {vol.Optional(ATTR_STEPS, default=1): vol.All(vol.Coerce(int), vol.Range(min=0))}


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the Pioneer AVR media player."""
    client = hass.data[DOMAIN][config_entry.entry_id]
    name = config_entry.data.get(CONF_NAME, f"Pioneer AVR {config_entry.data[CONF_HOST]}")
    host = config_entry.data[CONF_HOST]

    async_add_entities(
        [PioneerAVRMediaPlayer(client, name, host, config_entry.entry_id)], True
    )

    platform = entity_platform.async_get_current_platform()
    platform.async_register_entity_service(
        SERVICE_VOLUME_STEP_UP, STEPS_SCHEMA, "async_volume_step_up"
    )
    platform.async_register_entity_service(
        SERVICE_VOLUME_STEP_DOWN, STEPS_SCHEMA, "async_volume_step_down"
    )
    platform.async_register_entity_service(
        SERVICE_TOGGLE_MUTE, {}, "async_toggle_mute"
    )


class PioneerAVRMediaPlayer(MediaPlayerEntity):
    """Representation of a Pioneer AVR media player."""

    _attr_has_entity_name = True
    _attr_name = None
    _attr_supported_features = (
        MediaPlayerEntityFeature.TURN_ON
        | MediaPlayerEntityFeature.TURN_OFF
        | MediaPlayerEntityFeature.VOLUME_SET
        | MediaPlayerEntityFeature.VOLUME_STEP
        | MediaPlayerEntityFeature.VOLUME_MUTE
        | MediaPlayerEntityFeature.SELECT_SOURCE
    )

    def __init__(self, client: PioneerClient, name: str, host: str, entry_id: str) -> None:
        """Initialize the Pioneer AVR media player."""
        self._client = client
        self._host = host
        self._entry_id = entry_id
        self._device_name = name
        self._attr_unique_id = f"{entry_id}_media_player"
        self._attr_available = False
        self._attr_state = MediaPlayerState.OFF
        self._attr_is_volume_muted = False
        self._attr_volume_level = 0.0
        self._attr_source = None
        self._attr_source_list = list(SOURCES.values())
        self._status: DeviceStatus | None = None

    @property
    def device_info(self) -> dict[str, Any]:
        """Return device information."""
        return {
            "identifiers": {(DOMAIN, self._entry_id)},
            "name": self._device_name,
            "manufacturer": "Pioneer",
            "model": "AVR",
            "configuration_url": f"http://{self._host}/",
        }

    @property
    def extra_state_attributes(self) -> dict[str, Any] | None:
        """Return raw and dB volume of the last poll."""
        if self._status is None:
            return None
        volume_db = volume_to_db(self._status.volume)
        return {
            ATTR_VOLUME_RAW: self._status.volume,
            ATTR_VOLUME_DB: None if volume_db == float("-inf") else volume_db,
            ATTR_VOLUME_DISPLAY: format_volume(volume_db),
            ATTR_INPUT_CODE: self._status.input_code,
        }

    def _apply_status(self, status: DeviceStatus) -> None:
        """Update entity attributes from a status poll."""
        self._status = status
        self._attr_state = MediaPlayerState.ON if status.power else MediaPlayerState.OFF
        self._attr_volume_level = raw_to_level(status.volume)
        self._attr_is_volume_muted = status.mute

        selector = status.input
        if selector is not None:
            self._attr_source = SOURCES.get(selector.value, selector.value)
        elif status.input_code is not None:
            self._attr_source = f"Input {status.input_code:02d}"
        else:
            self._attr_source = None

    async def async_update(self) -> None:
        """Update the state of the media player."""
        try:
            status = await self._client.get_status()
        except PioneerError as err:
            if self._attr_available:
                _LOGGER.warning("Pioneer AVR %s is unavailable: %s", self._host, err)
            self._attr_available = False
            return

        if not self._attr_available:
            _LOGGER.info("Pioneer AVR %s is available", self._host)
        self._attr_available = True
        self._apply_status(status)

    async def _async_call(self, call: Awaitable[None]) -> None:
        """Await a client call, raising HomeAssistantError on failure."""
        try:
            await call
        except PioneerError as err:
            raise HomeAssistantError(f"Error communicating with Pioneer AVR: {err}") from err

    async def async_turn_on(self) -> None:
        """Turn the media player on."""
        await self._async_call(self._client.power_on())
        self._attr_state = MediaPlayerState.ON
        self.async_write_ha_state()

    async def async_turn_off(self) -> None:
        """Turn the media player off."""
        await self._async_call(self._client.power_off())
        self._attr_state = MediaPlayerState.OFF
        self.async_write_ha_state()

    async def async_toggle(self) -> None:
        """Toggle power based on a fresh poll."""
        await self._async_call(self._client.toggle_power())
        await self.async_update()
        self.async_write_ha_state()

    async def async_mute_volume(self, mute: bool) -> None:
        """Mute or unmute the volume."""
        if mute:
            await self._async_call(self._client.mute())
        else:
            await self._async_call(self._client.unmute())
        self._attr_is_volume_muted = mute
        self.async_write_ha_state()

    async def async_toggle_mute(self) -> None:
        """Toggle mute based on a fresh poll."""
        await self._async_call(self._client.toggle_mute())
        await self.async_update()
        self.async_write_ha_state()

    async def async_set_volume_level(self, volume: float) -> None:
        """Set volume level, range 0..1."""
        await self._async_call(self._client.set_volume(level_to_raw(volume)))
        self._attr_volume_level = volume
        self.async_write_ha_state()

    async def async_volume_up(self) -> None:
        """Increase volume."""
        await self._async_call(self._client.volume_up())

    async def async_volume_down(self) -> None:
        """Decrease volume."""
        await self._async_call(self._client.volume_down())

    async def async_volume_step_up(self, steps: int = 1) -> None:
        """Increase volume by a number of 0.5 dB steps."""
        await self._async_call(self._client.volume_up(steps))
        await self.async_update()
        self.async_write_ha_state()

    async def async_volume_step_down(self, steps: int = 1) -> None:
        """Decrease volume by a number of 0.5 dB steps."""
        await self._async_call(self._client.volume_down(steps))
        await self.async_update()
        self.async_write_ha_state()

    async def async_select_source(self, source: str) -> None:
        """Select input source."""
        selector = SOURCE_NAMES.get(source)
        if selector is None:
            raise HomeAssistantError(f"Unknown source: {source}")

        await self._async_call(self._client.set_input(selector))
        self._attr_source = source
        self.async_write_ha_state()
